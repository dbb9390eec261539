"""Pure attendance rules.

Every function takes a record snapshot and returns a new value; none of them
touches storage or mutates its arguments.

The "needed" projection solves ``(attended + n) / (total + n) >= 0.75`` for the
smallest non-negative integer n, i.e. ``n >= 3*total - 4*attended``. Whether a
deficit exists at all is decided on the *rounded* percentage, so a subject at
74.6% shows 75% and needs nothing.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Mapping

from ..common.validators import require_iso_date, require_storable_status, require_subject
from ..core.constants import ATTENDANCE_THRESHOLD_PERCENT
from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, OverallStats, SubjectStats, copy_record


def mark_attendance(
    record: AttendanceRecord,
    subject: str,
    on: str | date,
    status: str | AttendanceStatus,
) -> AttendanceRecord:
    """Set the status for (subject, date), overwriting any previous one."""

    subject = require_subject(subject)
    day = require_iso_date(on)
    status = require_storable_status(status)

    updated = copy_record(record)
    updated.setdefault(subject, {})[day] = status
    return updated


def remove_attendance(record: AttendanceRecord, subject: str, on: str | date) -> AttendanceRecord:
    """Drop the (subject, date) entry; prune the subject once it has none left."""

    subject = require_subject(subject)
    day = require_iso_date(on)

    updated = copy_record(record)
    entries = updated.get(subject)
    if entries is None or day not in entries:
        return updated

    del entries[day]
    if not entries:
        del updated[subject]
    return updated


def status_of(record: AttendanceRecord, subject: str, on: str | date) -> AttendanceStatus:
    day = require_iso_date(on)
    stored = record.get(subject, {}).get(day)
    return AttendanceStatus(stored) if stored else AttendanceStatus.UNMARKED


def round_percentage(attended: int, total: int) -> int:
    """100 * attended / total rounded half away from zero; 0 when total is 0."""

    if total <= 0:
        return 0
    # Integer form of floor(x + 0.5); avoids float error and round()'s banker's rounding.
    return (200 * attended + total) // (2 * total)


def sessions_needed(attended: int, total: int) -> int:
    if round_percentage(attended, total) >= ATTENDANCE_THRESHOLD_PERCENT:
        return 0
    return max(0, 3 * total - 4 * attended)


def _tally(entries: Iterable[Mapping[str, AttendanceStatus]]) -> tuple[int, int]:
    attended = 0
    total = 0
    for dated in entries:
        total += len(dated)
        attended += sum(1 for status in dated.values() if status == AttendanceStatus.PRESENT)
    return attended, total


def subject_stats(record: AttendanceRecord, subject: str) -> SubjectStats:
    attended, total = _tally([record.get(subject, {})])
    return SubjectStats(
        attended=attended,
        total=total,
        percentage=round_percentage(attended, total),
        needed=sessions_needed(attended, total),
    )


def overall_stats(record: AttendanceRecord) -> OverallStats:
    attended, total = _tally(record.values())
    return OverallStats(
        overall=round_percentage(attended, total),
        needed=sessions_needed(attended, total),
    )
