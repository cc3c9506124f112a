"""Main CLI entry point for show_runner."""

import argparse
import logging
import sys

from show_runner import __version__
from show_runner.cli.commands import lookup, run, validate


def main(argv=None):
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="show-runner",
        description="File podcast uploads from a drop folder and generate show notes",
        epilog="Use 'show-runner <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # show-runner run <config>
    run_parser = subparsers.add_parser(
        "run",
        help="Process the drop folder once",
        description="File new uploads into episode folders and write show notes",
    )
    run_parser.add_argument("config", help="Path to JSON configuration file")
    run_parser.add_argument(
        "--drop-folder",
        help="Override the configured drop folder",
    )

    # show-runner lookup <config> <name>
    lookup_parser = subparsers.add_parser(
        "lookup",
        help="Look a guest name up in the roster",
        description="Show every roster entry a name matches, in roster order",
    )
    lookup_parser.add_argument("config", help="Path to JSON configuration file")
    lookup_parser.add_argument("name", help="Guest name or media filename")

    # show-runner validate <config>
    validate_parser = subparsers.add_parser(
        "validate",
        help="Check configuration without processing anything",
    )
    validate_parser.add_argument("config", help="Path to JSON configuration file")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Dispatch to appropriate command
    if args.command == "run":
        return run.run_command(args)
    elif args.command == "lookup":
        return lookup.lookup_command(args)
    elif args.command == "validate":
        return validate.validate_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
