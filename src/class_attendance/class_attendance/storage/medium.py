from __future__ import annotations

from typing import Optional, Protocol


class KeyValueMedium(Protocol):
    """Durable string storage addressed by key.

    Implementations raise StorageUnavailableError when there is no
    persistence context at all.
    """

    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError


class InMemoryMedium:
    """Process-local medium for unit tests and scripts."""

    def __init__(self, items: dict[str, str] | None = None):
        self._items: dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value
