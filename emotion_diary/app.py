from flask import Flask, abort, jsonify, render_template_string, request

from . import storage
from .config import FLASK_DEBUG
from .sentiment import DEFAULT_STYLE, EMOTION_STYLES, classify, style_for

# HTML templates; every page is themed by the active EmotionStyle
HOME_TEMPLATE = """
<!doctype html>
<html lang="ko">
<head>
    <meta charset="UTF-8">
    <title>Emotion Diary</title>
    <style>
        body {
            background-color: {{ style.bg_color }};
            color: {{ style.color }};
            font-family: Georgia, serif;
            margin: 0;
            padding: 20px;
            display: flex;
            height: 100vh;
            box-sizing: border-box;
            transition: background-color 1s ease-in-out, color 1s ease-in-out;
        }
        .input-container {
            width: 70%;
            padding-right: 20px;
            text-align: center;
        }
        .history-container {
            width: 30%;
            padding-left: 20px;
            border-left: 1px solid rgba(255, 255, 255, 0.1);
            position: relative;
        }
        .scrollable {
            overflow-y: auto;
            max-height: 80vh;
            margin-top: 40px; /* Space for hide button */
        }
        ul {
            list-style-type: none;
            padding: 0;
        }
        li {
            margin: 10px 0;
            background-color: rgba(0, 0, 0, 0.4);
            padding: 10px;
            border-radius: 15px;
        }
        li .date {
            font-size: 10px;
            opacity: 0.5;
            margin-right: 10px;
        }
        li .emotion {
            font-size: 10px;
            opacity: 0.6;
        }
        a {
            color: inherit;
            text-decoration: none;
            display: block;
        }
        #emotion-name {
            font-size: 12px;
            letter-spacing: 0.3em;
            opacity: 0.4;
        }
        textarea {
            width: 100%;
            min-height: 50vh;
            background: transparent;
            border: none;
            outline: none;
            resize: none;
            color: inherit;
            font-size: 32px;
            text-align: center;
            font-family: inherit;
        }
        .music {
            margin-top: 20px;
        }
        .music .title {
            font-size: 20px;
            font-weight: bold;
            font-style: italic;
        }
        .music .artist {
            font-size: 12px;
            opacity: 0.5;
        }
        #save-btn {
            margin-top: 30px;
            padding: 15px 50px;
            border-radius: 30px;
            border: 2px solid rgba(255, 255, 255, 0.3);
            background: rgba(255, 255, 255, 0.05);
            color: inherit;
            cursor: pointer;
        }
        #hide-btn {
            position: absolute;
            top: 0;
            right: 0;
            background: transparent;
            color: inherit;
            border: none;
            cursor: pointer;
            opacity: 0.4;
        }
    </style>
</head>
<body>
    <div class="input-container">
        <div id="emotion-name">{{ style.name }}</div>
        <form method="POST" action="/save">
            <textarea id="diary" name="diary" placeholder="오늘의 감정을 기록해보세요..." autofocus required></textarea>
            <div class="music" id="music" style="display: none;">
                <div>Today's Recommended Music</div>
                <div class="title" id="music-title">{{ style.music.title }}</div>
                <div class="artist" id="music-artist">{{ style.music.artist }}</div>
            </div>
            <input type="submit" id="save-btn" value="저장하기">
        </form>
    </div>
    <div class="history-container">
        <button id="hide-btn" onclick="toggleHistory()">History</button>
        <div id="history-list" class="scrollable" style="display: none;">
            {% if diaries %}
            <ul>
                {% for diary in diaries %}
                <li>
                    <a href="/diary/{{ diary.id }}">
                        <span class="date">{{ diary.date.strftime('%Y-%m-%d %H:%M') }}</span>
                        <span class="emotion">{{ diary.style.name }}</span>
                        <p>{{ diary.text[:80] }}</p>
                    </a>
                </li>
                {% endfor %}
            </ul>
            {% else %}
            <p>No entries yet.</p>
            {% endif %}
        </div>
    </div>
    <script>
        function toggleHistory() {
            var history = document.getElementById('history-list');
            var btn = document.getElementById('hide-btn');
            if (history.style.display === 'none') {
                history.style.display = 'block';
                btn.textContent = 'Close History';
            } else {
                history.style.display = 'none';
                btn.textContent = 'History';
            }
        }
        function applyStyle(style) {
            document.body.style.backgroundColor = style.bgColor;
            document.body.style.color = style.color;
            document.getElementById('emotion-name').textContent = style.name;
            document.getElementById('music-title').textContent = style.music.title;
            document.getElementById('music-artist').textContent = style.music.artist;
        }
        // Replies can arrive out of order; only the latest request may restyle the page
        var latestRequest = 0;
        document.getElementById('diary').addEventListener('input', function() {
            var requestId = ++latestRequest;
            document.getElementById('music').style.display = this.value ? 'block' : 'none';
            fetch('/api/classify', {
                method: 'POST',
                headers: {'Content-Type': 'application/json'},
                body: JSON.stringify({text: this.value})
            })
                .then(function(response) { return response.json(); })
                .then(function(data) {
                    if (requestId === latestRequest) {
                        applyStyle(data.style);
                    }
                });
        });
    </script>
</body>
</html>
"""

RESULT_TEMPLATE = """
<!doctype html>
<html lang="ko">
<head>
    <meta charset="UTF-8">
    <title>저장 결과</title>
    <style>
        body {
            background-color: {{ style.bg_color }};
            color: {{ style.color }};
            font-family: Georgia, serif;
            margin: 20px;
            text-align: center;
        }
        .container {
            background-color: rgba(0, 0, 0, 0.4);
            border-radius: 20px;
            padding: 20px;
            width: 500px;
            margin: 0 auto;
        }
        p {
            margin: 10px 0;
        }
        a {
            color: inherit;
            margin: 10px;
        }
    </style>
</head>
<body>
    <div class="container">
        <h1>{{ style.name }}</h1>
        <p><strong>추천 음악:</strong> {{ style.music.title }} - {{ style.music.artist }}</p>
        <p><strong>저장 완료:</strong> {{ saved }}</p>
        <a href="/">돌아가기</a>
    </div>
</body>
</html>
"""

DETAIL_TEMPLATE = """
<!doctype html>
<html lang="ko">
<head>
    <meta charset="UTF-8">
    <title>일기 상세</title>
    <style>
        body {
            background-color: {{ diary.style.bg_color }};
            color: {{ diary.style.color }};
            font-family: Georgia, serif;
            margin: 20px;
            text-align: center;
        }
        .container {
            background-color: rgba(0, 0, 0, 0.4);
            border-radius: 20px;
            padding: 20px;
            width: 500px;
            margin: 0 auto;
        }
        pre {
            white-space: pre-wrap;
            padding: 10px;
            text-align: left;
        }
        a {
            color: inherit;
            margin: 10px;
        }
    </style>
</head>
<body>
    <div class="container">
        <h1>{{ diary.style.name }}</h1>
        <p><strong>날짜:</strong> {{ diary.date.strftime('%Y-%m-%d %H:%M') }}</p>
        <p><strong>추천 음악:</strong> {{ diary.style.music.title }} - {{ diary.style.music.artist }}</p>
        <pre>{{ diary.text }}</pre>
        <a href="/">돌아가기</a>
    </div>
</body>
</html>
"""

ANALYSIS_TEMPLATE = """
<!doctype html>
<html lang="ko">
<head>
    <meta charset="UTF-8">
    <title>감정 리포트</title>
    <script src="https://cdn.jsdelivr.net/npm/chart.js"></script>
    <style>
        body {
            background-color: {{ style.bg_color }};
            color: {{ style.color }};
            font-family: Georgia, serif;
            margin: 20px;
            text-align: center;
        }
        .container {
            border-radius: 20px;
            padding: 20px;
            width: 600px;
            margin: 0 auto;
        }
        a {
            color: inherit;
            margin: 10px;
        }
    </style>
</head>
<body>
    <div class="container">
        <h1>감정 통계</h1>
        <canvas id="emotionChart" width="400" height="200"></canvas>
        <script>
            new Chart(document.getElementById('emotionChart'), {
                type: 'pie',
                data: {
                    labels: {{ labels|tojson }},
                    datasets: [{
                        data: {{ values|tojson }},
                        backgroundColor: {{ colors|tojson }}
                    }]
                },
            });
        </script>
        <a href="/">돌아가기</a>
    </div>
</body>
</html>
"""


def create_app():
    app = Flask(__name__)
    storage.init_db()

    @app.route("/", methods=["GET"])
    def home():
        diaries = storage.get_all_diaries()
        return render_template_string(HOME_TEMPLATE, diaries=diaries, style=DEFAULT_STYLE)

    @app.route("/api/classify", methods=["POST"])
    def classify_text():
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not isinstance(data.get("text"), str):
            return jsonify({"error": "Expected a JSON body with a 'text' string"}), 400

        emotion = classify(data["text"])
        return jsonify({"emotion": emotion.value, "style": style_for(emotion).to_dict()})

    @app.route("/save", methods=["POST"])
    def save():
        diary = request.form.get("diary", "")
        if not diary.strip():
            return "Error: Diary entry is empty!", 400

        emotion = classify(diary)
        entry = storage.add_diary_entry(diary, emotion)
        if entry is None:
            app.logger.warning("Diary entry was classified as %s but not saved", emotion.value)
        return render_template_string(
            RESULT_TEMPLATE, style=style_for(emotion), saved="Yes" if entry else "No"
        )

    @app.route("/api/entries", methods=["GET"])
    def list_entries():
        return jsonify([diary.to_dict() for diary in storage.get_all_diaries()])

    @app.route("/diary/<int:diary_id>", methods=["GET"])
    def view_diary(diary_id):
        diary = storage.get_diary_by_id(diary_id)
        if diary is None:
            abort(404)
        return render_template_string(DETAIL_TEMPLATE, diary=diary)

    @app.route("/analysis", methods=["GET"])
    def analysis():
        stats = storage.get_emotion_stats()
        return render_template_string(
            ANALYSIS_TEMPLATE,
            style=DEFAULT_STYLE,
            labels=[EMOTION_STYLES[emotion].name for emotion in stats],
            values=[round(value, 2) for value in stats.values()],
            colors=[EMOTION_STYLES[emotion].color for emotion in stats],
        )

    return app


app = create_app()

if __name__ == "__main__":
    app.run(debug=FLASK_DEBUG)
