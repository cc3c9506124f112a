"""Console presenter for CLI output."""

from collections import Counter

from show_runner.models import ItemResult, RosterEntry, ValidationResult


class ConsolePresenter:
    """Present output to console (CLI implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message)

    def show_success(self, message: str) -> None:
        """Display a success message."""
        print(f"[OK] {message}")

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARN] {message}")

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}")

    def show_validation_result(self, result: ValidationResult) -> None:
        """Display the result of configuration validation."""
        print("\nValidation Results:")
        print(f"  {'[OK]' if result.roster_ok else '[FAIL]'} Roster")
        print(f"  {'[OK]' if result.drop_folder_ok else '[FAIL]'} Drop Folder")
        print(f"  {'[OK]' if result.generation_ok else '[FAIL]'} Text Generation")

        if result.issues:
            print("\nIssues:")
            for issue in result.issues:
                print(f"  {issue}")

        if result.all_passed:
            print("\n[OK] All validations passed")
        else:
            print("\n[FAIL] Some validations failed")

    def show_batch_result(self, results: list[ItemResult]) -> None:
        """Display per-item outcomes of a drop folder run."""
        print(f"\nDrop Folder Results ({len(results)} items):")
        print("=" * 60)

        for result in results:
            print(f"  [{result.status.value.upper()}] {result.input.name}")
            if result.canonical_base_name:
                print(f"      -> {result.canonical_base_name}")
            if result.detail:
                print(f"      {result.detail}")

        counts = Counter(result.outcome for result in results)
        summary = ", ".join(f"{outcome.value}: {count}" for outcome, count in counts.items())
        if summary:
            print(f"\n  {summary}")

    def show_roster_matches(self, needle: str, matches: list[RosterEntry]) -> None:
        """Display roster entries matching a name."""
        if not matches:
            print(f"No roster entry matches '{needle}'")
            return

        print(f"\nRoster matches for '{needle}' ({len(matches)}):")
        for i, entry in enumerate(matches, 1):
            marker = " <- used" if i == 1 else ""
            print(f"  {i:2d}. Ep{entry.episode_number}  {entry.guest_name}{marker}")


class ConsoleProgressCallback:
    """Console implementation of progress callback."""

    def __init__(self):
        """Initialize the progress callback."""
        self.total = 0
        self.current = 0
        self.description = ""

    def on_start(self, total: int, description: str) -> None:
        """Called when an operation starts."""
        self.total = total
        self.current = 0
        self.description = description
        print(f"\n{description}...")

    def on_progress(self, current: int, item_description: str) -> None:
        """Called when an item is processed."""
        self.current = current
        print(f"  [{current}/{self.total}] {item_description}")

    def on_complete(self) -> None:
        """Called when an operation completes."""
        print(f"  [OK] Complete: {self.current}/{self.total}")

    def on_error(self, item_description: str, error_message: str) -> None:
        """Called when an item fails."""
        print(f"  [ERROR] {item_description}: {error_message}")
