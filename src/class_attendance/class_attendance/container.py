from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.kv_attendance_repository import KeyValueAttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_SESSION_MAX_BYTES, DEFAULT_STORAGE_DIR, STORAGE_KEY
from .core.enums import StorageBackend
from .schedules.timetable import WeeklyTimetable
from .storage.file_medium import JsonFileMedium
from .storage.medium import InMemoryMedium, KeyValueMedium
from .storage.session_medium import FlaskSessionMedium


@dataclass(frozen=True)
class Container:
    medium: Optional[KeyValueMedium]

    attendance_repo: KeyValueAttendanceRepository
    schedule: WeeklyTimetable

    attendance_service: AttendanceService


def build_medium(storage_config: dict) -> KeyValueMedium:
    try:
        backend = StorageBackend(str(storage_config.get("backend", StorageBackend.FILE.value)).lower())
    except ValueError:
        raise ValueError(f"Unknown storage backend: {storage_config.get('backend')!r}") from None

    if backend == StorageBackend.FILE:
        return JsonFileMedium(storage_config.get("directory") or DEFAULT_STORAGE_DIR)
    if backend == StorageBackend.SESSION:
        return FlaskSessionMedium(max_bytes=int(storage_config.get("max_bytes", DEFAULT_SESSION_MAX_BYTES)))
    return InMemoryMedium()


def build_container(*, storage_config: dict, medium: Optional[KeyValueMedium] = None) -> Container:
    if medium is None:
        medium = build_medium(storage_config)

    attendance_repo = KeyValueAttendanceRepository(medium, key=str(storage_config.get("key", STORAGE_KEY)))
    schedule = WeeklyTimetable()
    attendance_service = AttendanceService(attendance_repo, schedule)

    return Container(
        medium=medium,
        attendance_repo=attendance_repo,
        schedule=schedule,
        attendance_service=attendance_service,
    )
