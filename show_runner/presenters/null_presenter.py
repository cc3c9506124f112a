"""Null presenter for testing (no output)."""

from show_runner.models import ItemResult, RosterEntry, ValidationResult


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message (no-op)."""
        pass

    def show_success(self, message: str) -> None:
        """Display a success message (no-op)."""
        pass

    def show_warning(self, message: str) -> None:
        """Display a warning message (no-op)."""
        pass

    def show_error(self, message: str) -> None:
        """Display an error message (no-op)."""
        pass

    def show_validation_result(self, result: ValidationResult) -> None:
        """Display the result of configuration validation (no-op)."""
        pass

    def show_batch_result(self, results: list[ItemResult]) -> None:
        """Display per-item outcomes of a drop folder run (no-op)."""
        pass

    def show_roster_matches(self, needle: str, matches: list[RosterEntry]) -> None:
        """Display roster entries matching a name (no-op)."""
        pass


class NullProgressCallback:
    """Null implementation of progress callback (testing)."""

    def on_start(self, total: int, description: str) -> None:
        """Called when an operation starts (no-op)."""
        pass

    def on_progress(self, current: int, item_description: str) -> None:
        """Called when an item is processed (no-op)."""
        pass

    def on_complete(self) -> None:
        """Called when an operation completes (no-op)."""
        pass

    def on_error(self, item_description: str, error_message: str) -> None:
        """Called when an item fails (no-op)."""
        pass
