"""Example: use the service layer without Flask.

Controllers are a thin layer; marking and statistics live in the service and
calculator, so they work the same from a plain script.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.class_attendance.class_attendance.attendance.calculator import overall_stats, subject_stats
from src.class_attendance.class_attendance.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    storage_config = dict(settings.STORAGE_CONFIG, backend="file")
    container = build_container(storage_config=storage_config)

    record = container.attendance_service.mark("Maths", date(2024, 6, 3), "present")
    record = container.attendance_service.mark("Maths", date(2024, 6, 4), "absent")

    print(subject_stats(record, "Maths"))
    print(overall_stats(record))


if __name__ == "__main__":
    main()
