from __future__ import annotations

import pytest

from src.class_attendance.class_attendance.attendance.kv_attendance_repository import KeyValueAttendanceRepository
from src.class_attendance.class_attendance.attendance.service import AttendanceService
from src.class_attendance.class_attendance.schedules.timetable import WeeklyTimetable
from src.class_attendance.class_attendance.storage.medium import InMemoryMedium


@pytest.fixture
def medium() -> InMemoryMedium:
    return InMemoryMedium()


@pytest.fixture
def repo(medium) -> KeyValueAttendanceRepository:
    return KeyValueAttendanceRepository(medium)


@pytest.fixture
def service(repo) -> AttendanceService:
    return AttendanceService(repo, WeeklyTimetable())


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.class_attendance.class_attendance.main import create_app

    return create_app()


@pytest.fixture
def client(app):
    return app.test_client()
