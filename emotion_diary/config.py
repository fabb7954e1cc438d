import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Database configuration
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///emotion_diary.db")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"

FLASK_DEBUG = os.getenv("FLASK_DEBUG", "false").lower() == "true"
