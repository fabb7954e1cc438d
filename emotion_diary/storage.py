import logging
from collections import Counter
from datetime import datetime

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from .config import DATABASE_URL, SQL_ECHO
from .models import Base, DiaryEntry
from .sentiment import Emotion

logger = logging.getLogger(__name__)

engine = create_engine(DATABASE_URL, echo=SQL_ECHO)
SessionLocal = sessionmaker(bind=engine, expire_on_commit=False)


def configure(database_url, echo=SQL_ECHO):
    """Point the session factory at another database, e.g. a test file."""
    global engine
    engine.dispose()
    engine = create_engine(database_url, echo=echo)
    SessionLocal.configure(bind=engine)
    return engine

def init_db():
    Base.metadata.create_all(bind=engine)

def add_diary_entry(entry_text, emotion, entry_date=None):
    session = SessionLocal()
    try:
        entry = DiaryEntry(
            text=entry_text,
            emotion=Emotion(emotion).value,
            date=entry_date or datetime.now()
        )
        session.add(entry)
        session.commit()
        logger.info("Saved diary entry %s (%s)", entry.id, entry.emotion)
        return entry
    except SQLAlchemyError as e:
        session.rollback()
        logger.error("Error adding diary entry: %s", e)
        return None
    finally:
        session.close()

def get_all_diaries():
    session = SessionLocal()
    try:
        return (
            session.query(DiaryEntry)
            .order_by(DiaryEntry.date.desc(), DiaryEntry.id.desc())
            .all()
        )
    except SQLAlchemyError as e:
        logger.error("Error fetching diaries: %s", e)
        return []
    finally:
        session.close()

def get_diary_by_id(diary_id):
    session = SessionLocal()
    try:
        return session.query(DiaryEntry).filter(DiaryEntry.id == diary_id).first()
    except SQLAlchemyError as e:
        logger.error("Error fetching diary %s: %s", diary_id, e)
        return None
    finally:
        session.close()

def get_emotion_stats():
    """Share of entries per emotion, in percent. Every emotion is present."""
    stats = {emotion: 0.0 for emotion in Emotion}
    session = SessionLocal()
    try:
        counts = Counter(row.emotion for row in session.query(DiaryEntry.emotion).all())
    except SQLAlchemyError as e:
        logger.error("Error fetching emotion stats: %s", e)
        return stats
    finally:
        session.close()

    total = sum(counts.values())
    if not total:
        return stats
    for tag, count in counts.items():
        stats[Emotion(tag)] = count / total * 100
    return stats
