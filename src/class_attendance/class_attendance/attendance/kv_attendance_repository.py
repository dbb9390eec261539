from __future__ import annotations

import json
import logging
from typing import Any, Optional

from ..common.datetime_utils import format_iso_date, parse_iso_date
from ..core.constants import STORAGE_KEY
from ..core.enums import AttendanceStatus
from ..core.exceptions import CorruptRecordError, StorageError, StorageUnavailableError
from ..storage.medium import KeyValueMedium
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def _is_iso_date_key(value: str) -> bool:
    try:
        return format_iso_date(parse_iso_date(value)) == value
    except (TypeError, ValueError):
        return False


def parse_record(text: str) -> AttendanceRecord:
    """Decode stored JSON text into an AttendanceRecord.

    Raises ValueError/TypeError for unparseable text and CorruptRecordError
    when the decoded value is not exactly subject -> date -> status.
    """

    data: Any = json.loads(text)
    if not isinstance(data, dict):
        raise CorruptRecordError(f"Expected an object at top level, got {type(data).__name__}")

    record: AttendanceRecord = {}
    for subject, entries in data.items():
        if not isinstance(entries, dict):
            raise CorruptRecordError(f"Entries for subject {subject!r} are not an object")

        parsed: dict[str, AttendanceStatus] = {}
        for day, status in entries.items():
            if not _is_iso_date_key(day):
                raise CorruptRecordError(f"Invalid date key {day!r} for subject {subject!r}")
            if not isinstance(status, str) or status not in AttendanceStatus.stored_values():
                raise CorruptRecordError(f"Invalid status {status!r} for {subject!r} on {day}")
            parsed[day] = AttendanceStatus(status)

        # Empty subjects are never written; drop any that slipped in.
        if parsed:
            record[subject] = parsed
    return record


def serialize_record(record: AttendanceRecord) -> str:
    payload = {
        subject: {day: AttendanceStatus(status).value for day, status in entries.items()}
        for subject, entries in record.items()
    }
    return json.dumps(payload, ensure_ascii=False, sort_keys=True)


class KeyValueAttendanceRepository(AttendanceRepository):
    """Record store over any KeyValueMedium, using one fixed key.

    Fail-open: an unavailable medium reads as empty and skips writes; corrupt
    content reads as empty; write failures are logged and dropped.
    """

    def __init__(self, medium: Optional[KeyValueMedium], *, key: str = STORAGE_KEY):
        self._medium = medium
        self._key = key

    def load(self) -> AttendanceRecord:
        if self._medium is None:
            return {}

        try:
            text = self._medium.get_item(self._key)
        except StorageUnavailableError as e:
            logger.debug("Attendance storage unavailable on load: %s", e)
            return {}
        except (CorruptRecordError, UnicodeDecodeError) as e:
            logger.warning("Discarding unreadable attendance data under %r: %s", self._key, e)
            return {}
        except (OSError, StorageError) as e:
            logger.error("Error reading attendance data under %r: %s", self._key, e)
            return {}

        if not text:
            return {}

        try:
            return parse_record(text)
        except (ValueError, TypeError, CorruptRecordError) as e:
            logger.warning("Discarding unreadable attendance data under %r: %s", self._key, e)
            return {}

    def save(self, record: AttendanceRecord) -> None:
        if self._medium is None:
            return

        try:
            self._medium.set_item(self._key, serialize_record(record))
        except StorageUnavailableError as e:
            logger.debug("Attendance storage unavailable on save: %s", e)
        except (OSError, StorageError, TypeError, ValueError) as e:
            logger.error("Error saving attendance data under %r: %s", self._key, e)
