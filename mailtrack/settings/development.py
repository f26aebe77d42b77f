"""
Development Settings
"""

from dotenv import load_dotenv

load_dotenv()

from .base import *  # noqa: E402

DEBUG = True
ALLOWED_HOSTS = ["*"]

# SQLite unless DATABASE_URL points at PostgreSQL (needed for row-lock tests)
if config.database.is_sqlite:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",
        }
    }

# CORS - Allow all for local development
CORS_ALLOW_ALL_ORIGINS = True

# Full error detail in JSON error bodies
EXPOSE_ERROR_DETAILS = True
