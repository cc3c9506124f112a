"""Orchestrator for filing a single episode's media."""

import logging
from typing import Any

from show_runner.config import ShowRunnerConfig
from show_runner.interfaces import PresenterProtocol
from show_runner.models import DroppedObject, ItemResult, ItemStatus
from show_runner.services import (
    EpisodeDirectory,
    EpisodeOrganizer,
    FileClassifier,
    ShowNotesService,
)
from show_runner.utils import canonical_base_name, derive_candidate_name

logger = logging.getLogger(__name__)


class EpisodeProcessor:
    """Resolve, file and annotate one media object."""

    def __init__(
        self,
        config: ShowRunnerConfig,
        directory: EpisodeDirectory,
        classifier: FileClassifier,
        organizer: EpisodeOrganizer,
        show_notes: ShowNotesService,
        presenter: PresenterProtocol,
    ):
        """Initialize the episode processor.

        Args:
            config: Configuration
            directory: Loaded episode directory
            classifier: Classifier used to find companion transcripts
            organizer: Organizer that files the episode
            show_notes: Show notes generation and document service
            presenter: Output presenter
        """
        self.config = config
        self.directory = directory
        self.classifier = classifier
        self.organizer = organizer
        self.show_notes = show_notes
        self.presenter = presenter

    def process_episode(
        self,
        media: DroppedObject,
        available: list[DroppedObject],
        base_folder: Any,
    ) -> ItemResult:
        """Process one unprocessed media object.

        This orchestrates:
        1. Deriving the guest name from the filename
        2. Looking up the episode in the roster
        3. Resolving the episode folder
        4. Finding the companion transcript
        5. Moving and renaming both files
        6. Generating and storing show notes

        Args:
            media: Media object tagged UNPROCESSED_MEDIA
            available: Drop folder objects not yet filed in this run
            base_folder: Folder episode folders are created in

        Returns:
            ItemResult for the media object

        Raises:
            ShowRunnerException: If filing the media or transcript fails
        """
        candidate = derive_candidate_name(media.name, self.config.media_extension)
        self.presenter.show_info(f"Processing file: {media.name}")

        # Step 1: roster lookup
        match = self.directory.lookup(candidate)
        if not match.matched:
            logger.info(f"Could not find episode data for guest: {candidate}")
            self.presenter.show_warning(f"No roster entry for '{candidate}', left in place")
            return ItemResult(
                input=media,
                status=ItemStatus.NO_MATCH,
                detail=f"No roster entry matches '{candidate}'",
            )

        base_name = canonical_base_name(match.episode_number, match.full_guest_name)
        self.presenter.show_info(
            f"Found Episode: {match.episode_number} for Guest: {match.full_guest_name}"
        )

        # Step 2: file media and transcript
        target_folder = self.organizer.resolve_target_folder(base_folder, base_name)
        transcript = self.classifier.find_companion_transcript(available, candidate)
        bundle = self.organizer.organize(media, transcript, target_folder, base_name)

        if not bundle.has_transcript:
            detail = (
                "No transcript file found, skipping show notes"
                if transcript is None
                else f"Transcript {transcript.name} is empty, skipping show notes"
            )
            self.presenter.show_warning(detail)
            return ItemResult(
                input=media,
                status=ItemStatus.NO_TRANSCRIPT,
                detail=detail,
                canonical_base_name=base_name,
                companion=transcript,
            )

        # Step 3: show notes (media and transcript are already filed)
        try:
            content, failed = self.show_notes.generate(bundle.transcript_text or "")
            self.show_notes.write_document(target_folder, base_name, content)
        except Exception as e:
            logger.exception(f"Error writing show notes for {base_name}")
            self.presenter.show_error(f"Show notes could not be written for {base_name}: {e}")
            return ItemResult(
                input=media,
                status=ItemStatus.FAILED,
                detail=str(e),
                canonical_base_name=base_name,
                companion=transcript,
            )

        if failed:
            self.presenter.show_error(f"Show notes generation failed for {base_name}: {content}")
            return ItemResult(
                input=media,
                status=ItemStatus.GENERATION_FAILED,
                detail=f"Generation failed: {content}",
                canonical_base_name=base_name,
                companion=transcript,
            )

        self.presenter.show_success(f"Filed {base_name} with show notes")
        return ItemResult(
            input=media,
            status=ItemStatus.DONE,
            detail=f"Show notes written to {self.show_notes.document_title(base_name)}",
            canonical_base_name=base_name,
            companion=transcript,
        )
