import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

# Local JSON file; set STORAGE_BACKEND=session to keep data in the ~4KB client cookie instead.
STORAGE_CONFIG = {
    "backend": os.getenv("STORAGE_BACKEND", "file"),
    "directory": os.getenv("STORAGE_DIR", "data"),
    "max_bytes": int(os.getenv("SESSION_MAX_BYTES", "4000")),
}

SESSION_LIFETIME_DAYS = int(os.getenv("SESSION_LIFETIME_DAYS", "365"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
