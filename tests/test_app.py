from emotion_diary.models import Base


def test_home_uses_default_style(client):
    response = client.get("/")

    assert response.status_code == 200
    body = response.get_data(as_text=True)
    assert "hsla(0, 0%, 7%, 1)" in body
    assert "Weightless" in body
    assert "No entries yet." in body


def test_classify_endpoint(client):
    response = client.post("/api/classify", json={"text": "오늘 정말 좋아"})

    assert response.status_code == 200
    data = response.get_json()
    assert data["emotion"] == "happy"
    assert data["style"]["bgColor"] == "hsla(45, 100%, 10%, 1)"
    assert data["style"]["music"] == {"title": "Happy", "artist": "Pharrell Williams"}


def test_classify_endpoint_blank_text(client):
    response = client.post("/api/classify", json={"text": "  "})

    assert response.get_json()["emotion"] == "neutral"


def test_classify_endpoint_rejects_bad_body(client):
    assert client.post("/api/classify", json={"body": "x"}).status_code == 400
    assert client.post("/api/classify", json={"text": 3}).status_code == 400
    assert client.post("/api/classify", data="not json").status_code == 400


def test_save_classifies_and_stores(client):
    response = client.post("/save", data={"diary": "너무 피곤하고 졸려"})

    assert response.status_code == 200
    body = response.get_data(as_text=True)
    assert "피곤" in body
    assert "Coffee" in body
    assert "Yes" in body

    entries = client.get("/api/entries").get_json()
    assert len(entries) == 1
    assert entries[0]["emotion"] == "tired"
    assert entries[0]["text"] == "너무 피곤하고 졸려"


def test_save_rejects_blank_entry(client):
    response = client.post("/save", data={"diary": "   "})

    assert response.status_code == 400
    assert client.get("/api/entries").get_json() == []


def test_history_and_detail(client):
    client.post("/save", data={"diary": "조용하고 편안한 밤"})
    entry = client.get("/api/entries").get_json()[0]

    home = client.get("/").get_data(as_text=True)
    assert "조용하고 편안한 밤" in home
    assert f"/diary/{entry['id']}" in home

    detail = client.get(f"/diary/{entry['id']}")
    assert detail.status_code == 200
    assert "River Flows in You" in detail.get_data(as_text=True)


def test_missing_detail_is_404(client):
    assert client.get("/diary/42").status_code == 404


def test_analysis_report(client):
    client.post("/save", data={"diary": "대박 설레"})

    response = client.get("/analysis")
    assert response.status_code == 200
    body = response.get_data(as_text=True)
    assert "hsla(280, 100%, 70%, 0.8)" in body
    assert "100.0" in body


def test_home_starts_with_music_and_history_hidden(client):
    body = client.get("/").get_data(as_text=True)

    assert 'id="music" style="display: none;"' in body
    assert 'id="history-list" class="scrollable" style="display: none;"' in body


def test_home_ignores_stale_classify_replies(client):
    body = client.get("/").get_data(as_text=True)

    assert "var requestId = ++latestRequest;" in body
    assert "if (requestId === latestRequest)" in body


def test_save_reports_unsaved_entry_when_storage_fails(client, db):
    Base.metadata.drop_all(bind=db.engine)

    response = client.post("/save", data={"diary": "오늘 정말 좋아"})

    assert response.status_code == 200
    body = response.get_data(as_text=True)
    assert "행복" in body
    assert "No" in body
    assert "Yes" not in body
