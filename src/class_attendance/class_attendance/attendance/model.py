from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from ..core.constants import ATTENDANCE_THRESHOLD_PERCENT
from ..core.enums import AttendanceStatus

# subject -> ISO date -> status
AttendanceRecord = Dict[str, Dict[str, AttendanceStatus]]


def copy_record(record: AttendanceRecord) -> AttendanceRecord:
    """Copy both mapping levels so updates never leak into the source."""
    return {subject: dict(entries) for subject, entries in record.items()}


@dataclass(frozen=True)
class SubjectStats:
    """Per-subject counts plus the sessions needed to reach the threshold."""

    attended: int
    total: int
    percentage: int
    needed: int

    @property
    def is_low(self) -> bool:
        return self.total > 0 and self.percentage < ATTENDANCE_THRESHOLD_PERCENT


@dataclass(frozen=True)
class OverallStats:
    """Pooled statistics over every (subject, date) entry."""

    overall: int
    needed: int
