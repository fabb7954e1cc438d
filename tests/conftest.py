import os

# Keep imports of the app from touching a real database file
os.environ["DATABASE_URL"] = "sqlite://"

import pytest

from emotion_diary import storage


@pytest.fixture
def db(tmp_path):
    storage.configure(f"sqlite:///{tmp_path / 'test.db'}", echo=False)
    storage.init_db()
    yield storage
    storage.engine.dispose()


@pytest.fixture
def client(db):
    from emotion_diary.app import create_app

    app = create_app()
    app.config["TESTING"] = True
    return app.test_client()
