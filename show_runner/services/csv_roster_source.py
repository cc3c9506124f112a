"""Roster source backed by CSV exports of the episode spreadsheet."""

import csv
import logging
from pathlib import Path

from show_runner.exceptions import RosterError

logger = logging.getLogger(__name__)


class CsvRosterSource:
    """Read roster rows from CSV files.

    ``sheet_id`` is either a single CSV file (the tab name is then
    ignored) or a directory holding one ``<sheet_name>.csv`` per tab.

    Implements RosterSource protocol.
    """

    def __init__(self, encoding: str = "utf-8-sig"):
        """Initialize the roster source.

        Args:
            encoding: File encoding; the default strips a spreadsheet BOM.
        """
        self._encoding = encoding

    def resolve_path(self, sheet_id: str, sheet_name: str) -> Path:
        """Resolve the CSV file for a sheet and tab."""
        path = Path(sheet_id)
        if path.is_dir():
            return path / f"{sheet_name}.csv"
        return path

    def read_all_rows(self, sheet_id: str, sheet_name: str) -> list[list[str]]:
        """Read every row of the sheet, header included.

        Raises:
            RosterError: If the file is missing or cannot be parsed
        """
        path = self.resolve_path(sheet_id, sheet_name)
        if not path.is_file():
            raise RosterError(f"Roster sheet not found: {path}")

        try:
            with open(path, encoding=self._encoding, newline="") as f:
                rows = [row for row in csv.reader(f)]
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise RosterError(f"Error reading roster {path}: {e}") from e

        logger.info(f"Read {len(rows)} rows from roster {path}")
        return rows
