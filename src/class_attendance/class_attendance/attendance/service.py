from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from ..common.datetime_utils import format_iso_date
from ..common.validators import require_status
from ..core.enums import AttendanceStatus
from ..schedules.repository import ScheduleProvider
from .calculator import mark_attendance, overall_stats, remove_attendance, status_of, subject_stats
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScheduledSubjectUI:
    subject: str
    status: str


@dataclass(frozen=True)
class SubjectStatsRowUI:
    subject: str
    attended: int
    total: int
    percentage: str
    needed: int
    is_low: bool


@dataclass(frozen=True)
class DashboardUI:
    selected_date: str
    weekday: str | None
    scheduled: list[ScheduledSubjectUI]
    stats_rows: list[SubjectStatsRowUI]
    overall: str
    overall_needed: int
    has_low_attendance: bool


class AttendanceService:
    """Read-modify-write orchestration over the record store.

    Each mutation loads the current record, applies a pure update, saves the
    result and returns it. A failed save is logged by the store; the caller
    still gets the updated record.
    """

    def __init__(self, records: AttendanceRepository, schedule: ScheduleProvider):
        self._records = records
        self._schedule = schedule

    def load(self) -> AttendanceRecord:
        return self._records.load()

    def mark(self, subject: str, on: str | date, status: str | AttendanceStatus) -> AttendanceRecord:
        if require_status(status) == AttendanceStatus.UNMARKED:
            return self.remove(subject, on)

        current = self._records.load()
        updated = mark_attendance(current, subject, on, status)
        self._records.save(updated)
        logger.debug("Marked %r on %s as %s", subject, on, status)
        return updated

    def remove(self, subject: str, on: str | date) -> AttendanceRecord:
        current = self._records.load()
        updated = remove_attendance(current, subject, on)
        self._records.save(updated)
        logger.debug("Cleared %r on %s", subject, on)
        return updated

    def get_dashboard(self, record: AttendanceRecord, selected: date) -> DashboardUI:
        scheduled = [
            ScheduledSubjectUI(subject=s, status=status_of(record, s, selected).value)
            for s in self._schedule.subjects_for_date(selected)
        ]

        rows = [self._to_ui(record, s) for s in self._schedule.all_known_subjects()]
        overall = overall_stats(record)

        return DashboardUI(
            selected_date=format_iso_date(selected),
            weekday=self._schedule.weekday_name(selected),
            scheduled=scheduled,
            stats_rows=rows,
            overall=f"{overall.overall}%" if overall.overall > 0 else "-",
            overall_needed=overall.needed,
            has_low_attendance=any(r.is_low for r in rows),
        )

    def _to_ui(self, record: AttendanceRecord, subject: str) -> SubjectStatsRowUI:
        stats = subject_stats(record, subject)
        return SubjectStatsRowUI(
            subject=subject,
            attended=stats.attended,
            total=stats.total,
            percentage=f"{stats.percentage}%" if stats.total > 0 else "-",
            needed=stats.needed,
            is_low=stats.is_low,
        )
