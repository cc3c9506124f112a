"""CLI command for validating configuration."""

from pathlib import Path

from show_runner.config import load_config
from show_runner.exceptions import ConfigurationError
from show_runner.presenters import ConsolePresenter
from show_runner.services import ValidationService


def validate_command(args) -> int:
    """Execute the validate subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = valid, 1 = invalid)
    """
    presenter = ConsolePresenter()

    try:
        config = load_config(Path(args.config))
    except ConfigurationError as e:
        presenter.show_error(f"Error: {e}")
        return 1

    result = ValidationService(config).validate_setup()
    presenter.show_validation_result(result)
    return 0 if not result.has_errors else 1
