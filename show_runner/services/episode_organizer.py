"""Move and rename an episode's files into their canonical folder."""

import logging
from dataclasses import replace
from typing import Any

from show_runner.config import ShowRunnerConfig
from show_runner.exceptions import StorageError
from show_runner.interfaces import StorageBackend
from show_runner.models import DroppedObject, EpisodeBundle, MediaKind

logger = logging.getLogger(__name__)


class EpisodeOrganizer:
    """File matched episodes under ``<base>/<canonical name>/``."""

    def __init__(self, config: ShowRunnerConfig, storage: StorageBackend):
        """Initialize the organizer.

        Args:
            config: Configuration with canonical naming suffixes
            storage: Storage backend holding the drop folder
        """
        self.config = config
        self.storage = storage

    def resolve_target_folder(self, base_path: Any, canonical_name: str) -> Any:
        """Find or create the episode folder under ``base_path``.

        Reuses an existing folder of the same name, so repeated calls
        return the same folder. The check and the create are separate
        backend calls: two overlapping runs can still both create it.

        Args:
            base_path: Parent folder handle
            canonical_name: Folder name

        Returns:
            Handle of the episode folder
        """
        existing = self.storage.find_child_by_name(base_path, canonical_name)
        if existing is not None:
            logger.debug(f"Reusing folder {canonical_name}")
            return existing
        return self.storage.create_folder(base_path, canonical_name)

    def media_name(self, canonical_name: str) -> str:
        return f"{canonical_name}{self.config.media_extension}"

    def transcript_name(self, canonical_name: str) -> str:
        return f"{canonical_name}{self.config.transcript_suffix}"

    def _check_names_free(self, target_folder: Any, names: list[str]) -> None:
        """Raise before anything moves if a file would collide in the folder."""
        existing = {child.name for child in self.storage.list_children(target_folder)}
        taken = sorted(set(names) & existing)
        if taken:
            raise StorageError(
                f"Cannot file into {target_folder}: {', '.join(taken)} already exists"
            )

    def organize(
        self,
        media_object: DroppedObject,
        transcript_object: DroppedObject | None,
        target_folder: Any,
        canonical_name: str,
    ) -> EpisodeBundle:
        """Move and rename an episode's files into its folder.

        The media object always moves. The transcript, when present, moves
        too and its text is read into the bundle; without one the bundle
        carries no text and show notes generation is skipped.

        Name collisions in the target folder are checked before the first
        move, so a refused episode leaves its files in the drop folder.

        Args:
            media_object: Primary media object
            transcript_object: Companion transcript, or None
            target_folder: Folder from resolve_target_folder
            canonical_name: Canonical base name for the episode

        Returns:
            EpisodeBundle describing the filed episode

        Raises:
            StorageError: If a move, rename or read fails
        """
        media_name = self.media_name(canonical_name)
        names = [media_object.name, media_name]
        if transcript_object is not None:
            names += [transcript_object.name, self.transcript_name(canonical_name)]
        self._check_names_free(target_folder, names)

        moved = self.storage.move(media_object.handle, target_folder)
        filed_media = replace(
            media_object, handle=self.storage.rename(moved, media_name), name=media_name
        )
        logger.info(f"Filed {media_object.name} as {media_name}")

        bundle = EpisodeBundle(
            media_object=filed_media,
            canonical_base_name=canonical_name,
            target_folder=target_folder,
        )

        if transcript_object is None:
            logger.info(f"No transcript for {canonical_name}")
            return bundle

        transcript_name = self.transcript_name(canonical_name)
        moved = self.storage.move(transcript_object.handle, target_folder)
        filed_transcript = replace(
            transcript_object,
            handle=self.storage.rename(moved, transcript_name),
            name=transcript_name,
        )
        logger.info(f"Filed {transcript_object.name} as {transcript_name}")

        bundle.transcript_object = filed_transcript
        bundle.transcript_text = self.storage.read_text_content(filed_transcript.handle)
        if filed_transcript.kind is MediaKind.PDF:
            logger.warning(
                f"{transcript_name} is a PDF read as text; show notes may be poor quality"
            )
        return bundle
