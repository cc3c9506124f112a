"""Configuration classes for Show Runner."""

import tempfile
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class ShowRunnerConfig:
    """Immutable configuration for a drop-folder run.

    Supplied once at startup and passed into the processors; nothing
    reads configuration from process-wide state during a run.
    """

    # Roster settings
    roster_id: str = ""  # CSV file, or directory of per-tab CSV exports
    roster_sheet_name: str = "Episodes"
    episode_number_column: int = 1  # 1-based
    guest_name_column: int = 2  # 1-based
    roster_header_rows: int = 1

    # Drop folder settings
    drop_folder_id: str = ""
    processed_prefix: str = "Ep"
    video_mime_type: str = "video/mp4"
    transcript_mime_types: tuple[str, ...] = (
        "text/plain",
        "application/pdf",
        "application/vnd.google-apps.document",
    )

    # Canonical naming
    media_extension: str = ".mp4"
    transcript_suffix: str = "_Transcript.txt"
    show_notes_suffix: str = "_ShowNotes"

    # Text generation settings
    gemini_api_key: str = ""
    gemini_model: str = "gemini-1.5-flash"
    gemini_api_url: str = "https://generativelanguage.googleapis.com/v1beta"
    request_timeout: float = 120.0  # Seconds
    max_transcript_chars: int = 30000

    # Show notes document settings
    show_name: str = "Crazy Wisdom"
    document_staging_folder: Path = field(
        default_factory=lambda: Path(tempfile.gettempdir()) / "show_runner_docs"
    )

    def __post_init__(self):
        """Normalize field types coming from JSON or keyword overrides."""
        if isinstance(self.document_staging_folder, str):
            object.__setattr__(self, "document_staging_folder", Path(self.document_staging_folder))
        if isinstance(self.transcript_mime_types, list):
            object.__setattr__(self, "transcript_mime_types", tuple(self.transcript_mime_types))

    @property
    def roster_path(self) -> Path:
        """Roster identifier as a filesystem path."""
        return Path(self.roster_id)

    @property
    def drop_folder_path(self) -> Path:
        """Drop folder identifier as a filesystem path."""
        return Path(self.drop_folder_id)
