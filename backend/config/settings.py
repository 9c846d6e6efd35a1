# backend/config/settings.py
import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str = "False") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./market.db").strip()
SQL_ECHO = _flag("SQL_ECHO")
DEBUG = _flag("DEBUG")
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG else "INFO").upper()

API_PREFIX = os.getenv("API_PREFIX", "/api")
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# create missing tables on startup (handy for sqlite / local runs)
CREATE_TABLES = _flag("CREATE_TABLES", "True")

APP_TITLE = "Farmer Market Orders API"
APP_VERSION = "1.0.0"
