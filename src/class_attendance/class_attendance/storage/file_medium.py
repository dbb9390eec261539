from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Optional

from ..core.exceptions import CorruptRecordError, StorageError

_KEY_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


class JsonFileMedium:
    """Stores each key as ``<directory>/<key>.json`` on the local disk.

    Writes go through a temp file and ``os.replace`` so a crash never leaves a
    half-written value behind.
    """

    def __init__(self, directory: str | Path):
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def _path_for(self, key: str) -> Path:
        if not _KEY_RE.match(key):
            raise StorageError(f"Invalid storage key: {key!r}")
        return self._directory / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self._path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise CorruptRecordError(f"{path} is not valid UTF-8: {e}") from e

    def set_item(self, key: str, value: str) -> None:
        path = self._path_for(key)
        self._directory.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_name(path.name + ".tmp")
        try:
            tmp_path.write_text(value, encoding="utf-8")
            os.replace(tmp_path, path)
        except Exception:
            tmp_path.unlink(missing_ok=True)
            raise
