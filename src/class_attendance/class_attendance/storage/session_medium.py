from __future__ import annotations

from typing import Optional

from flask import current_app, has_request_context, session

from ..core.constants import DEFAULT_SESSION_MAX_BYTES
from ..core.exceptions import StorageQuotaExceededError, StorageUnavailableError


class FlaskSessionMedium:
    """Keeps values in the signed Flask session cookie, i.e. on the client.

    Outside a request there is no session to talk to, so both operations raise
    StorageUnavailableError. Browsers drop cookies above ~4KB, so a write is
    refused when the resulting cookie payload (compressed and signed the way
    the session interface will send it) exceeds ``max_bytes``.
    """

    def __init__(self, *, max_bytes: int = DEFAULT_SESSION_MAX_BYTES, permanent: bool = True):
        self._max_bytes = int(max_bytes)
        self._permanent = permanent

    def _require_context(self) -> None:
        if not has_request_context():
            raise StorageUnavailableError("No request context, session storage is unavailable")

    def _cookie_size(self, key: str, value: str) -> int:
        candidate = dict(session)
        candidate[key] = value

        get_serializer = getattr(current_app.session_interface, "get_signing_serializer", None)
        serializer = get_serializer(current_app) if get_serializer else None
        if serializer is None:
            return len(value.encode("utf-8"))
        return len(serializer.dumps(candidate))

    def get_item(self, key: str) -> Optional[str]:
        self._require_context()
        return session.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._require_context()
        size = self._cookie_size(key, value)
        if size > self._max_bytes:
            raise StorageQuotaExceededError(f"Session cookie for {key!r} would be {size} bytes, limit is {self._max_bytes}")
        session.permanent = self._permanent
        session[key] = value
