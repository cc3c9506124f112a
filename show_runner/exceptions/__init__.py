"""Custom exceptions for Show Runner."""

from .base import ShowRunnerException
from .generation import GenerationError
from .storage import RosterError, StorageError
from .validation import ConfigurationError, ValidationError

__all__ = [
    "ShowRunnerException",
    "ConfigurationError",
    "ValidationError",
    "StorageError",
    "RosterError",
    "GenerationError",
]
