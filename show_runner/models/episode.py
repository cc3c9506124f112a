"""Data models for organized episodes."""

from dataclasses import dataclass
from typing import Any

from .drop import DroppedObject


@dataclass
class EpisodeBundle:
    """A matched media object, its companion transcript, and resolved naming.

    Built per episode by the organizer and discarded once the episode
    has been filed and its show notes written.
    """

    media_object: DroppedObject
    canonical_base_name: str
    target_folder: Any = None
    transcript_object: DroppedObject | None = None
    transcript_text: str | None = None

    @property
    def has_transcript(self) -> bool:
        """Check if transcript text is available for generation."""
        return bool(self.transcript_text)

    def __str__(self) -> str:
        transcript = self.transcript_object.name if self.transcript_object else "no transcript"
        return f"{self.canonical_base_name} ({self.media_object.name}, {transcript})"
