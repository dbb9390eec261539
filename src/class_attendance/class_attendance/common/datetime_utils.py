from __future__ import annotations

from datetime import date, datetime

from ..core.constants import ISO_DATE_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, ISO_DATE_FORMAT).date()


def format_iso_date(value: date) -> str:
    return value.strftime(ISO_DATE_FORMAT)


def today_local() -> date:
    """Current local calendar date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()
