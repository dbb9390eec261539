SECRET_KEY = "test-secret"

STORAGE_CONFIG = {
    "backend": "session",
    "max_bytes": 4000,
}

SESSION_LIFETIME_DAYS = 1

DEBUG = False
TESTING = True
LOG_LEVEL = "DEBUG"
