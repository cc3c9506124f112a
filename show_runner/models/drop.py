"""Data models for objects found in the drop folder."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class MediaKind(Enum):
    """Coarse file type derived from an object's mime type."""

    VIDEO = "video"
    PLAIN_TEXT = "plain_text"
    PDF = "pdf"
    RICH_DOC = "rich_doc"
    OTHER = "other"

    @property
    def is_transcript(self) -> bool:
        """Whether objects of this kind can hold a transcript."""
        return self in (MediaKind.PLAIN_TEXT, MediaKind.PDF, MediaKind.RICH_DOC)


class Classification(Enum):
    """Tag attached to a dropped object after inspection."""

    UNINSPECTED = "uninspected"
    ALREADY_PROCESSED = "already_processed"
    UNPROCESSED_MEDIA = "unprocessed_media"
    CANDIDATE_TRANSCRIPT = "candidate_transcript"
    IGNORED = "ignored"


@dataclass(frozen=True)
class StoredObject:
    """A raw child entry as reported by a storage backend."""

    handle: Any  # Backend-specific reference (a Path for local storage)
    name: str
    mime_type: str
    is_folder: bool = False


@dataclass
class DroppedObject:
    """A file sitting in the drop folder.

    The storage backend owns the underlying file; this record only
    describes it and carries the classification tag assigned to it.
    """

    handle: Any
    name: str
    mime_type: str
    kind: MediaKind = MediaKind.OTHER
    tag: Classification = Classification.UNINSPECTED

    @property
    def stem(self) -> str:
        """Name without its final extension."""
        base, dot, _ext = self.name.rpartition(".")
        return base if dot and base else self.name

    def __str__(self) -> str:
        return self.name


@dataclass
class ClassifiedListing:
    """A drop folder snapshot partitioned by classification tag."""

    objects: list[DroppedObject] = field(default_factory=list)

    def _tagged(self, tag: Classification) -> list[DroppedObject]:
        return [obj for obj in self.objects if obj.tag is tag]

    @property
    def unprocessed_media(self) -> list[DroppedObject]:
        return self._tagged(Classification.UNPROCESSED_MEDIA)

    @property
    def candidate_transcripts(self) -> list[DroppedObject]:
        return self._tagged(Classification.CANDIDATE_TRANSCRIPT)

    @property
    def already_processed(self) -> list[DroppedObject]:
        return self._tagged(Classification.ALREADY_PROCESSED)

    @property
    def ignored(self) -> list[DroppedObject]:
        return self._tagged(Classification.IGNORED)
