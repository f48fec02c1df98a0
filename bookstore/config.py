import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parents[1]
load_dotenv(BASE_DIR / ".env")

DEFAULT_DASHBOARD_MESSAGE = (
    "This is BookStore Dashboard. for getting all the Books goto /book.\n"
    " if you want specifc book /book/id ( id=1,2,3,4).\n"
    " you can add the book also /book route only but you need to use Post method"
)


def env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-change-me")

    BOOKS_DATA_FILE = os.getenv("BOOKS_DATA_FILE", str(BASE_DIR / "data" / "books.json")).strip()
    BOOKS_DASHBOARD_MESSAGE = os.getenv("BOOKS_DASHBOARD_MESSAGE", DEFAULT_DASHBOARD_MESSAGE)

    WRITE_RATE_LIMIT = os.getenv("WRITE_RATE_LIMIT", "60 per minute")
    RATELIMIT_ENABLED = env_bool("RATELIMIT_ENABLED", True)
    RATELIMIT_STORAGE_URI = os.getenv("RATELIMIT_STORAGE_URI", "memory://")

    MAX_CONTENT_LENGTH = int(os.getenv("MAX_CONTENT_LENGTH", str(1024 * 1024)))
    JSON_SORT_KEYS = False


class TestConfig(Config):
    TESTING = True
    RATELIMIT_ENABLED = False
