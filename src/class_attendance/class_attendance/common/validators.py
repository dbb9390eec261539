from __future__ import annotations

from datetime import date

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .datetime_utils import format_iso_date, parse_iso_date


def require_subject(value: str | None) -> str:
    """Reject blank subject names.

    The name is returned untouched: subject identity is case- and
    whitespace-sensitive.
    """
    if not value or not value.strip():
        raise ValidationError("Subject name is required")
    return value


def require_iso_date(value: str | date | None) -> str:
    """Normalize a date or YYYY-MM-DD string into the stored key format."""
    if isinstance(value, date):
        return format_iso_date(value)
    if not value:
        raise ValidationError("Date is required")
    try:
        return format_iso_date(parse_iso_date(value.strip()))
    except ValueError:
        raise ValidationError(f"Invalid date {value!r}, expected YYYY-MM-DD") from None


def require_status(value: str | AttendanceStatus | None) -> AttendanceStatus:
    try:
        return AttendanceStatus(value)
    except ValueError:
        raise ValidationError(f"Unknown attendance status {value!r}") from None


def require_storable_status(value: str | AttendanceStatus | None) -> AttendanceStatus:
    status = require_status(value)
    if status == AttendanceStatus.UNMARKED:
        raise ValidationError("Unmarked is not a status that can be recorded")
    return status
