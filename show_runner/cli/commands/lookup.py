"""CLI command for checking a name against the roster."""

from pathlib import Path

from show_runner.config import load_config
from show_runner.exceptions import ShowRunnerException
from show_runner.presenters import ConsolePresenter
from show_runner.services import CsvRosterSource, EpisodeDirectory
from show_runner.utils import canonical_base_name, derive_candidate_name


def lookup_command(args) -> int:
    """Execute the lookup subcommand.

    Useful when triaging media left in the drop folder with no match.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = matched, 1 = no match or error)
    """
    presenter = ConsolePresenter()

    try:
        config = load_config(Path(args.config))
        directory = EpisodeDirectory(config)
        directory.load(CsvRosterSource())
    except ShowRunnerException as e:
        presenter.show_error(f"Error: {e}")
        return 1

    needle = derive_candidate_name(args.name, config.media_extension)
    matches = directory.find_all_matches(needle)
    presenter.show_roster_matches(needle, matches)

    if not matches:
        return 1

    first = matches[0]
    base_name = canonical_base_name(first.episode_number, first.guest_name)
    presenter.show_info(f"Canonical name: {base_name}")
    return 0
