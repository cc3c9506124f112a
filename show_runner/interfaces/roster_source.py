"""Protocol for reading the episode roster."""

from typing import Protocol


class RosterSource(Protocol):
    """Interface for a tabular roster (spreadsheet, CSV export, etc)."""

    def read_all_rows(self, sheet_id: str, sheet_name: str) -> list[list[str]]:
        """Read every row of a sheet, header included.

        Args:
            sheet_id: Identifier of the spreadsheet
            sheet_name: Name of the tab within the spreadsheet

        Returns:
            Rows in sheet order, each a list of cell values

        Raises:
            RosterError: If the sheet cannot be read
        """
        ...
