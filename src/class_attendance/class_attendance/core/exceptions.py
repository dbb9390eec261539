class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class StorageError(Exception):
    """Base exception for key-value medium failures."""


class StorageUnavailableError(StorageError):
    """Raised when there is no persistence context to read from or write to."""


class StorageQuotaExceededError(StorageError):
    """Raised when a value is too large for the medium."""


class CorruptRecordError(StorageError):
    """Raised when stored content does not match the attendance record shape."""
