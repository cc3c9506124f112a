"""Presenter protocol for output abstraction."""

from typing import Protocol

from show_runner.models import ItemResult, RosterEntry, ValidationResult


class PresenterProtocol(Protocol):
    """Interface for presenting output to the operator.

    Keeps the processors free of print statements so the same logic
    runs from the CLI, a scheduler, or tests.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        ...

    def show_success(self, message: str) -> None:
        """Display a success message."""
        ...

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        ...

    def show_error(self, message: str) -> None:
        """Display an error message."""
        ...

    def show_validation_result(self, result: ValidationResult) -> None:
        """Display the result of configuration validation.

        Args:
            result: The validation result to display
        """
        ...

    def show_batch_result(self, results: list[ItemResult]) -> None:
        """Display per-item outcomes of a drop folder run.

        Args:
            results: One result per object in the drop folder listing
        """
        ...

    def show_roster_matches(self, needle: str, matches: list[RosterEntry]) -> None:
        """Display roster entries matching a name.

        Args:
            needle: Name that was looked up
            matches: Matching entries in roster order
        """
        ...
