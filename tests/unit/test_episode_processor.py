"""Tests for EpisodeProcessor."""

from unittest.mock import MagicMock

import pytest

from show_runner.config import ShowRunnerConfig
from show_runner.exceptions import StorageError
from show_runner.models import (
    Classification,
    DroppedObject,
    EpisodeBundle,
    ItemStatus,
    MatchResult,
    MediaKind,
)
from show_runner.orchestration import EpisodeProcessor
from show_runner.services import FileClassifier


def _media(name="Fred Vogelstein.mp4"):
    return DroppedObject(
        handle=name,
        name=name,
        mime_type="video/mp4",
        kind=MediaKind.VIDEO,
        tag=Classification.UNPROCESSED_MEDIA,
    )


def _transcript(name="Fred Vogelstein.txt"):
    return DroppedObject(
        handle=name,
        name=name,
        mime_type="text/plain",
        kind=MediaKind.PLAIN_TEXT,
        tag=Classification.CANDIDATE_TRANSCRIPT,
    )


@pytest.fixture
def mocks():
    """Mocked collaborators with a successful default path."""
    directory = MagicMock()
    directory.lookup.return_value = MatchResult(
        matched=True, episode_number="002", full_guest_name="Fred Vogelstein"
    )

    organizer = MagicMock()
    organizer.resolve_target_folder.return_value = "folder"

    def organize(media, transcript, folder, name):
        return EpisodeBundle(
            media_object=media,
            canonical_base_name=name,
            target_folder=folder,
            transcript_object=transcript,
            transcript_text="Hello" if transcript else None,
        )

    organizer.organize.side_effect = organize

    show_notes = MagicMock()
    show_notes.generate.return_value = ("#tags", False)
    show_notes.document_title.side_effect = lambda base: f"{base}_ShowNotes"

    return directory, organizer, show_notes


@pytest.fixture
def processor(mocks, null_presenter):
    directory, organizer, show_notes = mocks
    config = ShowRunnerConfig()
    return EpisodeProcessor(
        config=config,
        directory=directory,
        classifier=FileClassifier(config),
        organizer=organizer,
        show_notes=show_notes,
        presenter=null_presenter,
    )


class TestProcessEpisode:
    """Tests for EpisodeProcessor.process_episode."""

    def test_full_success(self, processor, mocks):
        directory, organizer, show_notes = mocks
        transcript = _transcript()

        result = processor.process_episode(_media(), [transcript], "base")

        assert result.status is ItemStatus.DONE
        assert result.canonical_base_name == "Ep002_Fred Vogelstein"
        assert result.companion is transcript
        directory.lookup.assert_called_once_with("Fred Vogelstein")
        organizer.resolve_target_folder.assert_called_once_with("base", "Ep002_Fred Vogelstein")
        show_notes.generate.assert_called_once_with("Hello")
        show_notes.write_document.assert_called_once_with(
            "folder", "Ep002_Fred Vogelstein", "#tags"
        )

    def test_no_match_touches_nothing(self, processor, mocks):
        directory, organizer, show_notes = mocks
        directory.lookup.return_value = MatchResult.miss()

        result = processor.process_episode(_media("Unknown Person.mp4"), [], "base")

        assert result.status is ItemStatus.NO_MATCH
        assert "Unknown Person" in result.detail
        organizer.resolve_target_folder.assert_not_called()
        organizer.organize.assert_not_called()
        show_notes.generate.assert_not_called()

    def test_no_transcript_skips_generation(self, processor, mocks):
        _directory, organizer, show_notes = mocks

        result = processor.process_episode(_media(), [], "base")

        assert result.status is ItemStatus.NO_TRANSCRIPT
        assert result.companion is None
        organizer.organize.assert_called_once()
        show_notes.generate.assert_not_called()
        show_notes.write_document.assert_not_called()

    def test_unrelated_transcript_not_paired(self, processor, mocks):
        _directory, organizer, _show_notes = mocks

        result = processor.process_episode(_media(), [_transcript("Ada Lovelace.txt")], "base")

        assert result.status is ItemStatus.NO_TRANSCRIPT
        assert organizer.organize.call_args.args[1] is None

    def test_empty_transcript_text(self, processor, mocks):
        _directory, organizer, show_notes = mocks
        organizer.organize.side_effect = None
        organizer.organize.return_value = EpisodeBundle(
            media_object=_media(), canonical_base_name="Ep002_Fred Vogelstein", transcript_text=""
        )
        transcript = _transcript()

        result = processor.process_episode(_media(), [transcript], "base")

        assert result.status is ItemStatus.NO_TRANSCRIPT
        assert result.companion is transcript
        assert "empty" in result.detail
        show_notes.generate.assert_not_called()

    def test_generation_failure_still_writes_document(self, processor, mocks):
        _directory, _organizer, show_notes = mocks
        show_notes.generate.return_value = ("Error generating content.", True)

        result = processor.process_episode(_media(), [_transcript()], "base")

        assert result.status is ItemStatus.GENERATION_FAILED
        show_notes.write_document.assert_called_once_with(
            "folder", "Ep002_Fred Vogelstein", "Error generating content."
        )

    def test_storage_error_propagates(self, processor, mocks):
        _directory, organizer, _show_notes = mocks
        organizer.organize.side_effect = StorageError("disk full")

        with pytest.raises(StorageError):
            processor.process_episode(_media(), [], "base")

    def test_document_failure_keeps_companion(self, processor, mocks):
        _directory, _organizer, show_notes = mocks
        show_notes.write_document.side_effect = OSError("disk full")
        transcript = _transcript()

        result = processor.process_episode(_media(), [transcript], "base")

        assert result.status is ItemStatus.FAILED
        assert result.detail == "disk full"
        assert result.companion is transcript
        assert result.canonical_base_name == "Ep002_Fred Vogelstein"

    def test_generation_exception_keeps_companion(self, processor, mocks):
        _directory, _organizer, show_notes = mocks
        show_notes.generate.side_effect = RuntimeError("unexpected")
        transcript = _transcript()

        result = processor.process_episode(_media(), [transcript], "base")

        assert result.status is ItemStatus.FAILED
        assert result.companion is transcript
        show_notes.write_document.assert_not_called()
