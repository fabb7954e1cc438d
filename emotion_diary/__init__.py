from .sentiment import (
    DEFAULT_STYLE,
    EMOTION_STYLES,
    KEYWORDS,
    Emotion,
    EmotionStyle,
    Music,
    classify,
    style_for,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_STYLE",
    "EMOTION_STYLES",
    "KEYWORDS",
    "Emotion",
    "EmotionStyle",
    "Music",
    "classify",
    "style_for",
]
