"""Configuration and validation exceptions."""

from .base import ShowRunnerException


class ValidationError(ShowRunnerException):
    """Raised when validation fails."""

    pass


class ConfigurationError(ValidationError):
    """Raised when configuration is missing or invalid.

    Fatal at startup: a run never begins with an invalid configuration.
    """

    pass
