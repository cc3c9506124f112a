"""Classify drop folder objects and pair media with transcripts."""

import logging

from show_runner.config import ShowRunnerConfig
from show_runner.models import (
    Classification,
    ClassifiedListing,
    DroppedObject,
    MediaKind,
    StoredObject,
)
from show_runner.utils import is_processed_name, normalize_name

logger = logging.getLogger(__name__)


class FileClassifier:
    """Tag each object in a drop folder listing (stateless service).

    An object whose name starts with the processed prefix is tagged
    ALREADY_PROCESSED whatever its type, so filed episodes are never
    picked up again.
    """

    def __init__(self, config: ShowRunnerConfig):
        """Initialize the classifier.

        Args:
            config: Configuration with mime types and the processed prefix
        """
        self.config = config

    def kind_for_mime(self, mime_type: str) -> MediaKind:
        """Map a mime type to a MediaKind.

        Args:
            mime_type: Mime type reported by the storage backend

        Returns:
            VIDEO for the configured video type, a transcript kind for the
            configured transcript types, OTHER for everything else
        """
        if mime_type == self.config.video_mime_type:
            return MediaKind.VIDEO
        if mime_type in self.config.transcript_mime_types:
            if mime_type == "text/plain":
                return MediaKind.PLAIN_TEXT
            if mime_type == "application/pdf":
                return MediaKind.PDF
            return MediaKind.RICH_DOC
        return MediaKind.OTHER

    def inspect(self, stored: StoredObject) -> DroppedObject:
        """Build a tagged DroppedObject from a backend listing entry."""
        kind = self.kind_for_mime(stored.mime_type)

        if is_processed_name(stored.name, self.config.processed_prefix):
            tag = Classification.ALREADY_PROCESSED
        elif kind is MediaKind.VIDEO:
            tag = Classification.UNPROCESSED_MEDIA
        elif kind.is_transcript:
            tag = Classification.CANDIDATE_TRANSCRIPT
        else:
            tag = Classification.IGNORED

        return DroppedObject(
            handle=stored.handle,
            name=stored.name,
            mime_type=stored.mime_type,
            kind=kind,
            tag=tag,
        )

    def classify(self, objects: list[StoredObject]) -> ClassifiedListing:
        """Classify a flat listing, keeping listing order.

        Args:
            objects: Entries from StorageBackend.list_children

        Returns:
            ClassifiedListing with every object tagged
        """
        listing = ClassifiedListing([self.inspect(obj) for obj in objects if not obj.is_folder])
        logger.info(
            f"Classified {len(listing.objects)} objects: "
            f"{len(listing.unprocessed_media)} media, "
            f"{len(listing.candidate_transcripts)} transcripts, "
            f"{len(listing.already_processed)} already processed"
        )
        return listing

    def find_companion_transcript(
        self, objects: list[DroppedObject], guest_name_candidate: str
    ) -> DroppedObject | None:
        """Find the transcript belonging to a media object.

        Scans ``objects`` in order for a candidate transcript whose
        normalized name contains the normalized guest name. This is a
        linear scan per media object, fine at drop folder scale.

        Args:
            objects: Objects still available in the drop folder
            guest_name_candidate: Name derived from the media filename

        Returns:
            First matching transcript, or None
        """
        needle = normalize_name(guest_name_candidate)
        if not needle:
            return None

        for obj in objects:
            if obj.tag is not Classification.CANDIDATE_TRANSCRIPT:
                continue
            if needle in normalize_name(obj.name):
                return obj
        return None
