from __future__ import annotations

from typing import Protocol

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def load(self) -> AttendanceRecord:
        """Return the persisted record, or an empty one if nothing usable is stored.

        Never raises.
        """

        raise NotImplementedError

    def save(self, record: AttendanceRecord) -> None:
        """Persist the full record, overwriting prior content.

        Failures are logged and swallowed.
        """

        raise NotImplementedError
