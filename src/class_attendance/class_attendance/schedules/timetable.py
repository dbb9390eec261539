from __future__ import annotations

from datetime import date
from typing import Mapping, Optional, Sequence

from .repository import ScheduleProvider

WEEKLY_TIMETABLE: dict[str, tuple[str, ...]] = {
    "monday": ("EVS Lab", "AOA", "Maths", "DSGT", "COA"),
    "tuesday": ("OE", "Math", "COA Lab", "AOA", "DSGT", "Java"),
    "wednesday": ("AOA Lab", "COA", "Java", "ED", "EVS"),
    "thursday": ("COA", "EVS", "Java Lab", "AOA", "ED"),
    "friday": ("Math Tutorial", "ED Lab", "DSGT", "OE"),
}

# date.weekday(): Monday == 0
_WEEKDAY_NAMES = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


class WeeklyTimetable(ScheduleProvider):
    """Fixed weekly timetable; read-only and independent of attendance data."""

    def __init__(self, timetable: Mapping[str, Sequence[str]] | None = None):
        source = WEEKLY_TIMETABLE if timetable is None else timetable
        self._timetable = {day.lower(): [s.strip() for s in subjects] for day, subjects in source.items()}

    def weekday_name(self, on: date) -> Optional[str]:
        name = _WEEKDAY_NAMES[on.weekday()]
        return name if name in self._timetable else None

    def subjects_for_date(self, on: date) -> list[str]:
        weekday = self.weekday_name(on)
        return list(self._timetable[weekday]) if weekday else []

    def all_known_subjects(self) -> list[str]:
        subjects: set[str] = set()
        for day_subjects in self._timetable.values():
            subjects.update(day_subjects)
        return sorted(subjects)
