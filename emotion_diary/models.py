from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.orm import declarative_base

from .sentiment import Emotion, style_for

Base = declarative_base()

class DiaryEntry(Base):
    __tablename__ = "diary_entries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    text = Column(Text, nullable=False)
    emotion = Column(String(16), nullable=False, default=Emotion.NEUTRAL.value)  # Emotion tag value
    date = Column(DateTime, nullable=False, default=datetime.now)

    @property
    def style(self):
        return style_for(self.emotion)

    def to_dict(self):
        return {
            "id": self.id,
            "text": self.text,
            "emotion": self.emotion,
            "name": self.style.name,
            "date": self.date.isoformat(),
        }

    def __repr__(self):
        return f"<DiaryEntry(id={self.id}, date={self.date}, emotion={self.emotion})>"
