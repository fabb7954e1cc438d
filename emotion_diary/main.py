import sys

from . import storage
from .sentiment import classify, style_for


def view_diary_entries():
    diaries = storage.get_all_diaries()
    if not diaries:
        print("No diary entries found in the database.")
        return
    print("\nDiary Entries:")
    for diary in diaries:
        print(f"ID: {diary.id}")
        print(f"Date: {diary.date:%Y-%m-%d %H:%M}")
        print(f"Text: {diary.text[:100] + '...' if len(diary.text) > 100 else diary.text}")
        print(f"Emotion: {diary.style.name} ({diary.emotion})")
        print("-" * 50)

def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    path = argv[0] if argv else "diary.txt"

    storage.init_db()
    try:
        with open(path, "r", encoding="utf-8") as f:
            diary = f.read()
    except FileNotFoundError:
        print(f"Error: {path} not found!")
        return 1
    except OSError as e:
        print(f"Error reading {path}: {e}")
        return 1
    if not diary.strip():
        print(f"Error: {path} is empty!")
        return 1

    emotion = classify(diary)
    style = style_for(emotion)
    print("\nAnalysis:")
    print(f"Emotion: {style.name} ({emotion.value})")
    print(f"Colors: {style.color} on {style.bg_color}")
    print(f"Recommended music: {style.music.title} - {style.music.artist}")

    if storage.add_diary_entry(diary, emotion) is None:
        print("Error: diary entry was not saved.")
        return 1
    print("Diary entry saved.")

    view_diary_entries()
    return 0

if __name__ == "__main__":
    sys.exit(main())
