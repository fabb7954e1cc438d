from dataclasses import dataclass, asdict
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Tuple, Union


class Emotion(str, Enum):
    NEUTRAL = "neutral"
    HAPPY = "happy"
    SAD = "sad"
    ANGRY = "angry"
    PEACEFUL = "peaceful"
    EXCITED = "excited"
    TIRED = "tired"


@dataclass(frozen=True)
class Music:
    title: str
    artist: str


@dataclass(frozen=True)
class EmotionStyle:
    name: str
    color: str
    bg_color: str
    music: Music

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "color": self.color,
            "bgColor": self.bg_color,
            "music": asdict(self.music),
        }


# Scanned in declaration order; on equal scores the emotion that reached
# the maximum first wins.
KEYWORDS: Tuple[Tuple[str, Emotion], ...] = (
    ("좋아", Emotion.HAPPY),
    ("기뻐", Emotion.HAPPY),
    ("행복", Emotion.HAPPY),
    ("최고", Emotion.HAPPY),
    ("웃음", Emotion.HAPPY),
    ("슬퍼", Emotion.SAD),
    ("울어", Emotion.SAD),
    ("우울", Emotion.SAD),
    ("힘들어", Emotion.SAD),
    ("속상", Emotion.SAD),
    ("화나", Emotion.ANGRY),
    ("짜증", Emotion.ANGRY),
    ("열받", Emotion.ANGRY),
    ("분해", Emotion.ANGRY),
    ("편안", Emotion.PEACEFUL),
    ("조용", Emotion.PEACEFUL),
    ("포근", Emotion.PEACEFUL),
    ("안정", Emotion.PEACEFUL),
    ("기대", Emotion.EXCITED),
    ("설레", Emotion.EXCITED),
    ("즐거", Emotion.EXCITED),
    ("대박", Emotion.EXCITED),
    ("졸려", Emotion.TIRED),
    ("피곤", Emotion.TIRED),
    ("지쳐", Emotion.TIRED),
    ("나른", Emotion.TIRED),
)


def _build_style_table(styles: Dict[Emotion, EmotionStyle]) -> Mapping[Emotion, EmotionStyle]:
    missing = [emotion.value for emotion in Emotion if emotion not in styles]
    if missing:
        raise ValueError(f"No style defined for emotion(s): {', '.join(missing)}")
    return MappingProxyType(dict(styles))


EMOTION_STYLES: Mapping[Emotion, EmotionStyle] = _build_style_table({
    Emotion.NEUTRAL: EmotionStyle(
        name="평온함",
        color="hsla(0, 0%, 100%, 0.8)",
        bg_color="hsla(0, 0%, 7%, 1)",
        music=Music(title="Weightless", artist="Marconi Union"),
    ),
    Emotion.HAPPY: EmotionStyle(
        name="행복",
        color="hsla(45, 100%, 70%, 0.8)",
        bg_color="hsla(45, 100%, 10%, 1)",
        music=Music(title="Happy", artist="Pharrell Williams"),
    ),
    Emotion.SAD: EmotionStyle(
        name="슬픔",
        color="hsla(210, 100%, 70%, 0.8)",
        bg_color="hsla(210, 100%, 10%, 1)",
        music=Music(title="Someone Like You", artist="Adele"),
    ),
    Emotion.ANGRY: EmotionStyle(
        name="분노",
        color="hsla(0, 100%, 70%, 0.8)",
        bg_color="hsla(0, 100%, 10%, 1)",
        music=Music(title="In the End", artist="Linkin Park"),
    ),
    Emotion.PEACEFUL: EmotionStyle(
        name="평화",
        color="hsla(150, 100%, 70%, 0.8)",
        bg_color="hsla(150, 100%, 10%, 1)",
        music=Music(title="River Flows in You", artist="Yiruma"),
    ),
    Emotion.EXCITED: EmotionStyle(
        name="신남",
        color="hsla(280, 100%, 70%, 0.8)",
        bg_color="hsla(280, 100%, 10%, 1)",
        music=Music(title="Can't Stop the Feeling!", artist="Justin Timberlake"),
    ),
    Emotion.TIRED: EmotionStyle(
        name="피곤",
        color="hsla(20, 20%, 60%, 0.8)",
        bg_color="hsla(20, 10%, 15%, 1)",
        music=Music(title="Coffee", artist="Beabadoobee"),
    ),
})

DEFAULT_STYLE = EMOTION_STYLES[Emotion.NEUTRAL]


def classify(text: str) -> Emotion:
    """Classify the dominant emotion of a piece of text.

    Each keyword found anywhere in the text adds one point to its emotion.
    The leader only changes on a strict increase, so ties go to whichever
    emotion got there first while scanning KEYWORDS. Returns NEUTRAL when
    nothing matches.
    """
    if not text.strip():
        return Emotion.NEUTRAL

    scores = {emotion: 0 for emotion in Emotion}
    max_score = 0
    detected = Emotion.NEUTRAL

    for keyword, emotion in KEYWORDS:
        if keyword in text:
            scores[emotion] += 1
            if scores[emotion] > max_score:
                max_score = scores[emotion]
                detected = emotion

    return detected


def style_for(emotion: Union[Emotion, str]) -> EmotionStyle:
    # Emotion() raises ValueError for tags outside the enumeration
    return EMOTION_STYLES[Emotion(emotion)]
