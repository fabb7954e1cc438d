import logging
from datetime import datetime

import pytest

from emotion_diary import Emotion
from emotion_diary.models import Base


def test_add_and_fetch_entry(db):
    entry = db.add_diary_entry("오늘 정말 좋아", Emotion.HAPPY)

    assert entry is not None
    assert entry.id is not None
    assert entry.emotion == "happy"
    assert isinstance(entry.date, datetime)

    fetched = db.get_diary_by_id(entry.id)
    assert fetched.text == "오늘 정말 좋아"
    assert fetched.style.name == "행복"


def test_entries_are_newest_first(db):
    db.add_diary_entry("first", Emotion.NEUTRAL, entry_date=datetime(2024, 1, 1, 9, 0))
    db.add_diary_entry("second", Emotion.SAD, entry_date=datetime(2024, 1, 2, 9, 0))

    assert [d.text for d in db.get_all_diaries()] == ["second", "first"]


def test_missing_entry_is_none(db):
    assert db.get_diary_by_id(999) is None


def test_unknown_emotion_is_rejected(db):
    with pytest.raises(ValueError):
        db.add_diary_entry("text", "bored")


def test_emotion_stats(db):
    assert all(value == 0 for value in db.get_emotion_stats().values())

    db.add_diary_entry("좋아", Emotion.HAPPY)
    db.add_diary_entry("최고", Emotion.HAPPY)
    db.add_diary_entry("피곤", Emotion.TIRED)
    db.add_diary_entry("짜증", Emotion.ANGRY)

    stats = db.get_emotion_stats()
    assert set(stats) == set(Emotion)
    assert stats[Emotion.HAPPY] == pytest.approx(50.0)
    assert stats[Emotion.TIRED] == pytest.approx(25.0)
    assert stats[Emotion.SAD] == 0


def test_to_dict(db):
    entry = db.add_diary_entry("화나", Emotion.ANGRY, entry_date=datetime(2024, 5, 1, 12, 30))

    assert entry.to_dict() == {
        "id": entry.id,
        "text": "화나",
        "emotion": "angry",
        "name": "분노",
        "date": "2024-05-01T12:30:00",
    }


@pytest.fixture
def broken_db(db):
    db.add_diary_entry("좋아", Emotion.HAPPY)
    Base.metadata.drop_all(bind=db.engine)
    return db


def test_failed_insert_returns_none_and_logs(broken_db, caplog):
    with caplog.at_level(logging.ERROR, logger="emotion_diary.storage"):
        assert broken_db.add_diary_entry("슬퍼", Emotion.SAD) is None

    assert "Error adding diary entry" in caplog.text


def test_failed_reads_return_empty_results(broken_db):
    assert broken_db.get_all_diaries() == []
    assert broken_db.get_diary_by_id(1) is None

    stats = broken_db.get_emotion_stats()
    assert set(stats) == set(Emotion)
    assert all(value == 0 for value in stats.values())
