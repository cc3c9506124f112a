"""Tests for the command-line interface."""

import json
from unittest.mock import MagicMock, patch

import pytest

from show_runner.cli.main import main


@pytest.fixture
def config_file(tmp_path, drop_dir, roster_file):
    """Write a JSON configuration pointing at the test roster and drop folder."""
    path = tmp_path / "show_runner.json"
    data = {
        "roster_id": str(roster_file),
        "drop_folder_id": str(drop_dir),
        "gemini_api_key": "test-key",
        "document_staging_folder": str(tmp_path / "staging"),
    }
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestValidateCommand:
    """Tests for 'show-runner validate'."""

    def test_valid(self, config_file, capsys):
        assert main(["validate", str(config_file)]) == 0
        assert "All validations passed" in capsys.readouterr().out

    def test_missing_config(self, tmp_path, capsys):
        assert main(["validate", str(tmp_path / "missing.json")]) == 1
        assert "not found" in capsys.readouterr().out


class TestLookupCommand:
    """Tests for 'show-runner lookup'."""

    def test_match_prints_canonical_name(self, config_file, capsys):
        assert main(["lookup", str(config_file), "Fred Vogelstein.mp4"]) == 0
        out = capsys.readouterr().out
        assert "Canonical name: Ep002_Fred Vogelstein" in out
        assert "<- used" in out

    def test_no_match(self, config_file, capsys):
        assert main(["lookup", str(config_file), "Unknown Person"]) == 1
        assert "No roster entry matches 'Unknown Person'" in capsys.readouterr().out


class TestRunCommand:
    """Tests for 'show-runner run'."""

    def test_run_files_episode(self, config_file, drop_dir, podcast_dir, capsys):
        (drop_dir / "Fred Vogelstein.mp4").write_bytes(b"video")
        (drop_dir / "Fred Vogelstein.txt").write_text("Transcript", encoding="utf-8")
        response = MagicMock()
        response.json.return_value = {"candidates": [{"content": {"parts": [{"text": "#tag"}]}}]}

        with patch("requests.post", return_value=response):
            assert main(["run", str(config_file)]) == 0

        out = capsys.readouterr().out
        assert "[DONE] Fred Vogelstein.mp4" in out
        assert (podcast_dir / "Ep002_Fred Vogelstein" / "Ep002_Fred Vogelstein.mp4").exists()

    def test_drop_folder_override(self, config_file, tmp_path):
        missing = tmp_path / "elsewhere"
        assert main(["run", str(config_file), "--drop-folder", str(missing)]) == 1

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "usage: show-runner" in capsys.readouterr().out
