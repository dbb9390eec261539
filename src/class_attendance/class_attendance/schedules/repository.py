from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence


class ScheduleProvider(Protocol):
    def weekday_name(self, on: date) -> Optional[str]:
        """Lower-case weekday name if that day has a timetable, else None."""

        raise NotImplementedError

    def subjects_for_date(self, on: date) -> Sequence[str]:
        raise NotImplementedError

    def all_known_subjects(self) -> Sequence[str]:
        """Sorted union of the subjects on every scheduled day."""

        raise NotImplementedError
