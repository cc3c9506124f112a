"""Orchestrator for processing everything in the drop folder."""

import logging
from typing import Any

from show_runner.interfaces import PresenterProtocol, ProgressCallback, StorageBackend
from show_runner.models import Classification, DroppedObject, ItemResult, ItemStatus
from show_runner.orchestration.episode_processor import EpisodeProcessor
from show_runner.services import FileClassifier

logger = logging.getLogger(__name__)


class DropFolderProcessor:
    """Run one batch over a snapshot of the drop folder.

    Objects are handled in listing order. Every object gets exactly one
    result, and an error on one media object never stops the batch.
    """

    def __init__(
        self,
        storage: StorageBackend,
        classifier: FileClassifier,
        episode_processor: EpisodeProcessor,
        presenter: PresenterProtocol,
    ):
        """Initialize the drop folder processor.

        Args:
            storage: Storage backend holding the drop folder
            classifier: Classifier for the folder listing
            episode_processor: Processor for individual media objects
            presenter: Output presenter
        """
        self.storage = storage
        self.classifier = classifier
        self.episode_processor = episode_processor
        self.presenter = presenter

    def run(
        self,
        drop_location: Any,
        progress_callback: ProgressCallback | None = None,
    ) -> list[ItemResult]:
        """Process the current contents of the drop folder.

        Episode folders are created next to the drop folder, under its
        parent.

        Args:
            drop_location: Drop folder handle
            progress_callback: Optional progress callback

        Returns:
            One ItemResult per object, in listing order
        """
        self.presenter.show_info(f"Scanning drop folder: {drop_location}")
        listing = self.classifier.classify(self.storage.list_children(drop_location))
        base_folder = self.storage.get_parent(drop_location)

        media = listing.unprocessed_media
        if not media:
            self.presenter.show_info("No new media files found")
        else:
            self.presenter.show_success(f"Found {len(media)} new media files")

        if progress_callback:
            progress_callback.on_start(len(media), "Filing episodes")

        results: dict[int, ItemResult] = {}
        filed: dict[int, DroppedObject] = {}  # id(transcript) -> media it was filed with

        for i, obj in enumerate(media, 1):
            available = [o for o in listing.candidate_transcripts if id(o) not in filed]
            try:
                result = self.episode_processor.process_episode(obj, available, base_folder)
            except Exception as e:
                logger.exception(f"Error processing {obj.name}")
                self.presenter.show_error(f"Error processing {obj.name}: {e}")
                result = ItemResult(input=obj, status=ItemStatus.FAILED, detail=str(e))
                if progress_callback:
                    progress_callback.on_error(obj.name, str(e))
            else:
                if progress_callback and result.status is ItemStatus.FAILED:
                    progress_callback.on_error(obj.name, result.detail)
                elif progress_callback:
                    progress_callback.on_progress(i, f"{obj.name}: {result.status.value}")

            if result.companion is not None:
                filed[id(result.companion)] = obj
            results[id(obj)] = result

        if progress_callback:
            progress_callback.on_complete()

        ordered = [
            results.get(id(obj)) or self._passive_result(obj, filed.get(id(obj)))
            for obj in listing.objects
        ]

        done = sum(1 for r in ordered if r.status is ItemStatus.DONE)
        self.presenter.show_success(f"Drop folder processing complete: {done} episodes with notes")
        return ordered

    @staticmethod
    def _passive_result(obj: DroppedObject, filed_with: DroppedObject | None) -> ItemResult:
        """Result for an object that is never the trigger of an episode."""
        if obj.tag is Classification.ALREADY_PROCESSED:
            return ItemResult(input=obj, status=ItemStatus.ALREADY_PROCESSED)
        if filed_with is not None:
            return ItemResult(
                input=obj,
                status=ItemStatus.IGNORED,
                detail=f"Filed as the transcript of {filed_with.name}",
            )
        if obj.tag is Classification.CANDIDATE_TRANSCRIPT:
            return ItemResult(
                input=obj,
                status=ItemStatus.IGNORED,
                detail="No matching media in this batch, left in place",
            )
        return ItemResult(input=obj, status=ItemStatus.IGNORED, detail="Not a primary media file")
