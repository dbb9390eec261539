import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Local JSON file next to the app: the tool runs for one person on their own machine.
STORAGE_CONFIG = {
    "backend": os.getenv("STORAGE_BACKEND", "file"),
    "directory": os.getenv("STORAGE_DIR", "data"),
    "max_bytes": int(os.getenv("SESSION_MAX_BYTES", "4000")),
}

SESSION_LIFETIME_DAYS = int(os.getenv("SESSION_LIFETIME_DAYS", "365"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
