from __future__ import annotations

from datetime import date

import pytest

from src.class_attendance.class_attendance.attendance.calculator import (
    mark_attendance,
    overall_stats,
    remove_attendance,
    round_percentage,
    sessions_needed,
    status_of,
    subject_stats,
)
from src.class_attendance.class_attendance.attendance.model import OverallStats, SubjectStats
from src.class_attendance.class_attendance.core.enums import AttendanceStatus
from src.class_attendance.class_attendance.core.exceptions import ValidationError

P = AttendanceStatus.PRESENT
A = AttendanceStatus.ABSENT


def _record_with(subject: str, statuses: list[AttendanceStatus]) -> dict:
    return {subject: {f"2024-06-{i + 1:02d}": s for i, s in enumerate(statuses)}}


def test_mark_creates_subject_and_entry():
    record = mark_attendance({}, "Maths", "2024-06-03", "present")
    assert record == {"Maths": {"2024-06-03": P}}


def test_mark_is_idempotent():
    once = mark_attendance({"Java": {"2024-06-01": A}}, "Maths", "2024-06-03", P)
    twice = mark_attendance(once, "Maths", "2024-06-03", P)
    assert twice == once


def test_mark_overwrites_previous_status():
    record = mark_attendance({}, "Maths", "2024-06-03", P)
    record = mark_attendance(record, "Maths", "2024-06-03", A)
    assert record == {"Maths": {"2024-06-03": A}}


def test_mark_does_not_mutate_input():
    original = {"Maths": {"2024-06-03": P}}
    mark_attendance(original, "Maths", "2024-06-04", A)
    remove_attendance(original, "Maths", "2024-06-03")
    assert original == {"Maths": {"2024-06-03": P}}


def test_mark_accepts_date_objects():
    record = mark_attendance({}, "Maths", date(2024, 6, 3), P)
    assert "2024-06-03" in record["Maths"]


def test_subject_identity_is_case_and_whitespace_sensitive():
    record = mark_attendance({}, "Maths", "2024-06-03", P)
    record = mark_attendance(record, "maths", "2024-06-03", A)
    record = mark_attendance(record, "Maths ", "2024-06-03", A)
    assert set(record) == {"Maths", "maths", "Maths "}


@pytest.mark.parametrize(
    "subject, day, status",
    [
        ("Maths", "2024-06-03", "unmarked"),
        ("Maths", "2024-06-03", "late"),
        ("  ", "2024-06-03", "present"),
        ("Maths", "03/06/2024", "present"),
        ("Maths", "", "present"),
    ],
)
def test_mark_rejects_invalid_input(subject, day, status):
    with pytest.raises(ValidationError):
        mark_attendance({}, subject, day, status)


def test_remove_after_mark_prunes_subject():
    record = mark_attendance({}, "Maths", "2024-06-03", P)
    assert remove_attendance(record, "Maths", "2024-06-03") == {}


def test_remove_keeps_other_dates():
    record = {"Maths": {"2024-06-03": P, "2024-06-04": A}}
    assert remove_attendance(record, "Maths", "2024-06-03") == {"Maths": {"2024-06-04": A}}


def test_remove_missing_entry_is_noop():
    record = {"Maths": {"2024-06-03": P}}
    assert remove_attendance(record, "Maths", "2024-06-05") == record
    assert remove_attendance(record, "Java", "2024-06-03") == record


def test_status_of_reports_unmarked_for_missing_entry():
    record = {"Maths": {"2024-06-03": P}}
    assert status_of(record, "Maths", "2024-06-03") == AttendanceStatus.PRESENT
    assert status_of(record, "Maths", "2024-06-04") == AttendanceStatus.UNMARKED
    assert status_of(record, "Java", "2024-06-03") == AttendanceStatus.UNMARKED


def test_three_of_four_is_at_threshold():
    stats = subject_stats(_record_with("Maths", [P, P, P, A]), "Maths")
    assert stats == SubjectStats(attended=3, total=4, percentage=75, needed=0)
    assert not stats.is_low


def test_two_of_four_needs_four_more():
    stats = subject_stats(_record_with("Maths", [P, A, P, A]), "Maths")
    assert stats == SubjectStats(attended=2, total=4, percentage=50, needed=4)
    assert stats.is_low


def test_unrecorded_subject_has_no_deficit():
    stats = subject_stats({}, "Maths")
    assert stats == SubjectStats(attended=0, total=0, percentage=0, needed=0)
    assert not stats.is_low


def test_present_then_absent_scenario():
    record = mark_attendance({}, "Maths", "2024-06-03", P)
    record = mark_attendance(record, "Maths", "2024-06-04", A)
    assert subject_stats(record, "Maths") == SubjectStats(attended=1, total=2, percentage=50, needed=2)


def test_total_counts_distinct_dates():
    record = {}
    for day in ["2024-06-03", "2024-06-03", "2024-06-04", "2024-06-05"]:
        record = mark_attendance(record, "Maths", day, P)
    assert subject_stats(record, "Maths").total == 3


def test_percentage_rounds_half_away_from_zero():
    # 12.5% would be 12 with round() and its half-to-even rule
    assert round_percentage(1, 8) == 13
    assert round_percentage(2, 3) == 67
    assert round_percentage(1, 3) == 33


def test_needed_is_zero_when_rounded_percentage_reaches_threshold():
    # 149/200 is 74.5% exactly, displayed as 75%
    assert round_percentage(149, 200) == 75
    assert sessions_needed(149, 200) == 0


def test_needed_matches_closed_form():
    assert sessions_needed(7, 10) == 2
    assert sessions_needed(0, 1) == 3
    assert sessions_needed(0, 5) == 15


@pytest.mark.parametrize("attended, total", [(0, 1), (1, 1), (5, 9), (9, 9), (0, 0), (13, 40)])
def test_percentage_within_bounds(attended, total):
    assert 0 <= round_percentage(attended, total) <= 100


def test_overall_empty_record():
    assert overall_stats({}) == OverallStats(overall=0, needed=0)


def test_overall_pools_every_subject():
    record = {
        "Maths": {"2024-06-03": P, "2024-06-04": P},
        "Java": {"2024-06-04": A, "2024-06-05": A},
    }
    assert overall_stats(record) == OverallStats(overall=50, needed=4)


@pytest.mark.parametrize(
    "record",
    [
        {},
        {"Maths": {"2024-06-03": A}},
        {"Maths": {"2024-06-03": P}, "Java": {"2024-06-04": P}},
        {"Maths": {"2024-06-03": P, "2024-06-04": A}, "Java": {"2024-06-04": A, "2024-06-05": A, "2024-06-06": P}},
    ],
)
def test_overall_percentage_within_bounds(record):
    assert 0 <= overall_stats(record).overall <= 100
