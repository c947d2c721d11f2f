"""Exception types for Greppy Filters."""


class GreppyFiltersError(Exception):
    """Base class for all package errors."""


class StorageError(GreppyFiltersError):
    """Raised when durable local storage cannot be read or written."""


class BackendError(GreppyFiltersError):
    """Raised when the Greppy backend cannot be reached or returns an error."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
