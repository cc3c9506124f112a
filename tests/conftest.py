"""Pytest configuration and shared fixtures."""

import pytest

from show_runner.config import ShowRunnerConfig
from show_runner.interfaces.text_generator import NO_CANDIDATES_TEXT
from show_runner.models import StoredObject
from show_runner.presenters import NullPresenter, NullProgressCallback

ROSTER_CSV = "Episode,Guest\n001,Ada Lovelace\n002,Fred Vogelstein\n003,Grace Hopper\n"


@pytest.fixture
def podcast_dir(tmp_path):
    """Provide the folder that holds the drop folder and episode folders."""
    folder = tmp_path / "podcast"
    folder.mkdir()
    return folder


@pytest.fixture
def drop_dir(podcast_dir):
    """Provide an empty drop folder."""
    folder = podcast_dir / "drop"
    folder.mkdir()
    return folder


@pytest.fixture
def roster_file(tmp_path):
    """Create a roster CSV with a header row."""
    path = tmp_path / "roster.csv"
    path.write_text(ROSTER_CSV, encoding="utf-8")
    return path


@pytest.fixture
def test_config(tmp_path, drop_dir, roster_file):
    """Provide a test configuration with temporary paths."""
    return ShowRunnerConfig(
        roster_id=str(roster_file),
        drop_folder_id=str(drop_dir),
        gemini_api_key="test-key",
        show_name="Test Show",
        document_staging_folder=tmp_path / "staging",
    )


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


@pytest.fixture
def null_progress():
    """Provide a null progress callback for testing."""
    return NullProgressCallback()


@pytest.fixture
def make_stored():
    """Factory fixture for StoredObject listing entries."""

    def _make(name, mime_type="video/mp4", handle=None, is_folder=False):
        return StoredObject(
            handle=handle if handle is not None else name,
            name=name,
            mime_type=mime_type,
            is_folder=is_folder,
        )

    return _make


class RecordingProgress:
    """A real ProgressCallback implementation that records all calls for assertion."""

    def __init__(self):
        self.starts = []
        self.progresses = []
        self.completes = 0
        self.errors = []

    def on_start(self, total: int, description: str) -> None:
        self.starts.append((total, description))

    def on_progress(self, current: int, item_description: str) -> None:
        self.progresses.append((current, item_description))

    def on_complete(self) -> None:
        self.completes += 1

    def on_error(self, item_description: str, error_message: str) -> None:
        self.errors.append((item_description, error_message))


@pytest.fixture
def recording_progress():
    """Provide a progress callback that records all calls for assertion."""
    return RecordingProgress()


class RecordingGenerator:
    """A TextGenerator that records prompts and returns a fixed reply."""

    def __init__(self, reply="#podcast #interview"):
        self.reply = reply
        self.prompts = []

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.reply


@pytest.fixture
def recording_generator():
    """Provide a text generator that records every prompt."""
    return RecordingGenerator()


@pytest.fixture
def failing_generator():
    """Provide a text generator that always reports no candidates."""
    return RecordingGenerator(reply=NO_CANDIDATES_TEXT)
