"""Service for validating configuration before a run."""

from show_runner.config import ShowRunnerConfig
from show_runner.exceptions import ConfigurationError
from show_runner.models import ValidationIssue, ValidationResult

from .csv_roster_source import CsvRosterSource


class ValidationService:
    """Validate configuration and local resources (stateless service)."""

    def __init__(self, config: ShowRunnerConfig):
        """Initialize the validation service.

        Args:
            config: Configuration to validate
        """
        self.config = config

    def validate_setup(self) -> ValidationResult:
        """Run all validation checks.

        Returns:
            ValidationResult with status of each check

        Note:
            This method never raises exceptions - all problems are captured
            in the ValidationResult.
        """
        issues: list[ValidationIssue] = []

        roster_ok = self._collect("Roster", self._check_roster(), issues)
        drop_ok = self._collect("Drop Folder", self._check_drop_folder(), issues)
        generation_ok = self._collect("Text Generation", self._check_generation(), issues)

        if not self.config.processed_prefix:
            issues.append(
                ValidationIssue(
                    component="Drop Folder",
                    severity="WARNING",
                    message="processed_prefix is empty; filed episodes cannot be recognized",
                )
            )

        return ValidationResult(
            roster_ok=roster_ok,
            drop_folder_ok=drop_ok,
            generation_ok=generation_ok,
            issues=issues,
        )

    def ensure_valid(self) -> ValidationResult:
        """Validate and raise if any error-level issue was found.

        Raises:
            ConfigurationError: Listing every error found
        """
        result = self.validate_setup()
        if result.has_errors:
            messages = "; ".join(f"{i.component}: {i.message}" for i in result.get_errors())
            raise ConfigurationError(f"Invalid configuration: {messages}")
        return result

    @staticmethod
    def _collect(component: str, problems: list[str], issues: list[ValidationIssue]) -> bool:
        for problem in problems:
            issues.append(ValidationIssue(component=component, severity="ERROR", message=problem))
        return not problems

    def _check_roster(self) -> list[str]:
        config = self.config
        problems = []
        if config.episode_number_column < 1 or config.guest_name_column < 1:
            problems.append("Roster column positions are 1-based and must be at least 1")
        if config.episode_number_column == config.guest_name_column:
            problems.append("Episode number and guest name columns must differ")
        if config.roster_header_rows < 0:
            problems.append("roster_header_rows cannot be negative")
        if not config.roster_sheet_name:
            problems.append("roster_sheet_name is not set")

        if not config.roster_id:
            problems.append("roster_id is not set")
        else:
            path = CsvRosterSource().resolve_path(config.roster_id, config.roster_sheet_name)
            if not path.is_file():
                problems.append(f"Roster sheet not found: {path}")
        return problems

    def _check_drop_folder(self) -> list[str]:
        if not self.config.drop_folder_id:
            return ["drop_folder_id is not set"]
        if not self.config.drop_folder_path.is_dir():
            return [f"Drop folder not found: {self.config.drop_folder_path}"]
        return []

    def _check_generation(self) -> list[str]:
        config = self.config
        problems = []
        if not config.gemini_api_key:
            problems.append("gemini_api_key is not set (or GEMINI_API_KEY in the environment)")
        if not config.gemini_model:
            problems.append("gemini_model is not set")
        if config.max_transcript_chars <= 0:
            problems.append("max_transcript_chars must be positive")
        if config.request_timeout <= 0:
            problems.append("request_timeout must be positive")
        return problems
