"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

STORAGE_KEY = "attendance-data"
ATTENDANCE_THRESHOLD_PERCENT = 75
ISO_DATE_FORMAT = "%Y-%m-%d"

DEFAULT_STORAGE_DIR = "data"
DEFAULT_SESSION_MAX_BYTES = 4000
DEFAULT_SESSION_LIFETIME_DAYS = 365
