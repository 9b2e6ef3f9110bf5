"""Exception hierarchy for calendar operations."""


class CalendarError(Exception):
    """Base exception for calendar operations."""

    pass


class ValidationError(CalendarError):
    """Submitted event data failed validation."""

    def __init__(self, message: str, errors: dict[str, str] | None = None):
        super().__init__(message)
        self.errors = errors or {}


class EventNotFoundError(CalendarError):
    """No event with the given id."""

    pass


class StorageError(CalendarError):
    """Key-value storage could not be read or written."""

    pass


class StorageQuotaError(StorageError):
    """Write rejected because the storage quota would be exceeded."""

    pass
