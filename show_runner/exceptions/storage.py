"""Storage backend and roster source exceptions."""

from .base import ShowRunnerException


class StorageError(ShowRunnerException):
    """Raised when a storage backend operation fails."""

    pass


class RosterError(ShowRunnerException):
    """Raised when the episode roster cannot be read."""

    pass
