import os
from pathlib import Path

# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent

# Database
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{BASE_DIR}/scrims.db")

# Sessions
SESSION_COOKIE_NAME = "session_token"
SESSION_EXPIRE_DAYS = int(os.getenv("SESSION_EXPIRE_DAYS", "7"))

# Lets a local client post identity claims directly instead of going
# through the identity provider. Never enable in production.
DEV_LOGIN_ENABLED = os.getenv("DEV_LOGIN_ENABLED", "false").lower() in ("1", "true", "yes")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Templates
TEMPLATES_DIR = BASE_DIR / "scrimfinder" / "templates"
