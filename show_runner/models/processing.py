"""Data models for processing results and validation."""

from dataclasses import dataclass, field
from enum import Enum

from .drop import DroppedObject


class ItemStatus(Enum):
    """Terminal state reached by one dropped object."""

    ALREADY_PROCESSED = "already_processed"
    IGNORED = "ignored"
    NO_MATCH = "no_match"
    NO_TRANSCRIPT = "no_transcript"
    DONE = "done"
    GENERATION_FAILED = "generation_failed"
    FAILED = "failed"


class Outcome(Enum):
    """What was done to the item, coarser than ItemStatus."""

    SKIPPED = "skipped"
    ORGANIZED = "organized"
    ORGANIZED_AND_GENERATED = "organized_and_generated"


_STATUS_OUTCOMES = {
    ItemStatus.ALREADY_PROCESSED: Outcome.SKIPPED,
    ItemStatus.IGNORED: Outcome.SKIPPED,
    ItemStatus.NO_MATCH: Outcome.SKIPPED,
    ItemStatus.FAILED: Outcome.SKIPPED,
    ItemStatus.NO_TRANSCRIPT: Outcome.ORGANIZED,
    ItemStatus.DONE: Outcome.ORGANIZED_AND_GENERATED,
    # The sentinel text is still written, so the document exists
    ItemStatus.GENERATION_FAILED: Outcome.ORGANIZED_AND_GENERATED,
}


@dataclass
class ItemResult:
    """Result of processing one object from the drop folder."""

    input: DroppedObject
    status: ItemStatus
    detail: str = ""
    canonical_base_name: str | None = None
    companion: DroppedObject | None = None  # Transcript filed along with this item

    @property
    def outcome(self) -> Outcome:
        return _STATUS_OUTCOMES[self.status]

    @property
    def success(self) -> bool:
        """Check if the item ended without an unexpected error."""
        return self.status is not ItemStatus.FAILED

    def __str__(self) -> str:
        text = f"{self.input.name}: {self.status.value}"
        if self.detail:
            text += f" ({self.detail})"
        return text


@dataclass
class ValidationIssue:
    """A single validation issue."""

    component: str  # Setting or collaborator that failed (e.g., "Roster")
    severity: str  # "ERROR" or "WARNING"
    message: str  # Description of the issue

    def __str__(self) -> str:
        return f"[{self.severity}] {self.component}: {self.message}"


@dataclass
class ValidationResult:
    """Result of configuration validation."""

    roster_ok: bool
    drop_folder_ok: bool
    generation_ok: bool
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def all_passed(self) -> bool:
        """Check if all validation checks passed."""
        return all([self.roster_ok, self.drop_folder_ok, self.generation_ok])

    @property
    def has_errors(self) -> bool:
        """Check if there are any error-level issues."""
        return any(issue.severity == "ERROR" for issue in self.issues)

    @property
    def has_warnings(self) -> bool:
        """Check if there are any warning-level issues."""
        return any(issue.severity == "WARNING" for issue in self.issues)

    def get_errors(self) -> list[ValidationIssue]:
        """Get all error-level issues."""
        return [issue for issue in self.issues if issue.severity == "ERROR"]

    def get_warnings(self) -> list[ValidationIssue]:
        """Get all warning-level issues."""
        return [issue for issue in self.issues if issue.severity == "WARNING"]

    def __str__(self) -> str:
        status = "PASSED" if self.all_passed else "FAILED"
        error_count = len(self.get_errors())
        warning_count = len(self.get_warnings())
        return f"ValidationResult({status}, errors={error_count}, warnings={warning_count})"
