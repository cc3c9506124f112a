"""Base exception classes for Show Runner."""


class ShowRunnerException(Exception):
    """Base exception for all Show Runner errors.

    All custom exceptions in the show_runner package should inherit
    from this base class for consistent error handling.
    """

    pass
