from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Status of one subject on one date.

    Only PRESENT and ABSENT are ever persisted; UNMARKED is reported for
    (subject, date) pairs that have no entry.
    """

    PRESENT = "present"
    ABSENT = "absent"
    UNMARKED = "unmarked"

    @classmethod
    def stored_values(cls) -> frozenset[str]:
        return frozenset({cls.PRESENT.value, cls.ABSENT.value})


class StorageBackend(str, Enum):
    """Key-value media the record store can be wired to."""

    FILE = "file"
    SESSION = "session"
    MEMORY = "memory"
