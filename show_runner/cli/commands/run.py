"""CLI command for processing the drop folder."""

from pathlib import Path

from show_runner.config import load_config
from show_runner.exceptions import ShowRunnerException
from show_runner.models import ItemStatus
from show_runner.orchestration import create_processor
from show_runner.presenters import ConsolePresenter, ConsoleProgressCallback
from show_runner.services import ValidationService


def run_command(args) -> int:
    """Execute the run subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()
    progress = ConsoleProgressCallback()

    presenter.show_info("Show Runner - Drop Folder Processing")
    presenter.show_info("=" * 50)

    overrides = {}
    if args.drop_folder:
        overrides["drop_folder_id"] = args.drop_folder

    # Configuration problems abort before any file is touched
    try:
        config = load_config(Path(args.config), **overrides)
        validation_result = ValidationService(config).validate_setup()
        presenter.show_validation_result(validation_result)
        if validation_result.has_errors:
            presenter.show_error("\nValidation failed. Please fix the issues above.")
            return 1

        processor = create_processor(config, presenter)
    except ShowRunnerException as e:
        presenter.show_error(f"Error: {e}")
        return 1

    try:
        results = processor.run(config.drop_folder_path, progress_callback=progress)
    except ShowRunnerException as e:
        presenter.show_error(f"Error: {e}")
        return 1

    presenter.show_batch_result(results)
    return 1 if any(r.status is ItemStatus.FAILED for r in results) else 0
