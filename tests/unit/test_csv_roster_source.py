"""Tests for CsvRosterSource."""

import pytest

from show_runner.exceptions import RosterError
from show_runner.services.csv_roster_source import CsvRosterSource


class TestReadAllRows:
    """Tests for reading roster rows."""

    def test_reads_single_file(self, tmp_path):
        path = tmp_path / "roster.csv"
        path.write_text("Episode,Guest\n002,Fred Vogelstein\n", encoding="utf-8")

        rows = CsvRosterSource().read_all_rows(str(path), "Episodes")

        assert rows == [["Episode", "Guest"], ["002", "Fred Vogelstein"]]

    def test_reads_tab_from_directory(self, tmp_path):
        (tmp_path / "Episodes.csv").write_text("Episode,Guest\n1,Ann\n", encoding="utf-8")
        (tmp_path / "Other.csv").write_text("x,y\n", encoding="utf-8")

        rows = CsvRosterSource().read_all_rows(str(tmp_path), "Episodes")

        assert rows[1] == ["1", "Ann"]

    def test_keeps_zero_padding_and_quoted_commas(self, tmp_path):
        path = tmp_path / "roster.csv"
        path.write_text('Episode,Guest\n007,"Bond, James"\n', encoding="utf-8")

        rows = CsvRosterSource().read_all_rows(str(path), "Episodes")

        assert rows[1] == ["007", "Bond, James"]

    def test_strips_byte_order_mark(self, tmp_path):
        path = tmp_path / "roster.csv"
        path.write_bytes("\ufeffEpisode,Guest\n".encode())

        rows = CsvRosterSource().read_all_rows(str(path), "Episodes")

        assert rows[0][0] == "Episode"

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(RosterError, match="not found"):
            CsvRosterSource().read_all_rows(str(tmp_path / "missing.csv"), "Episodes")

    def test_missing_tab_raises(self, tmp_path):
        with pytest.raises(RosterError):
            CsvRosterSource().read_all_rows(str(tmp_path), "Episodes")
