"""Business logic services for Show Runner."""

from .csv_roster_source import CsvRosterSource
from .document_store import MarkdownDocument, MarkdownDocumentStore
from .episode_directory import EpisodeDirectory
from .episode_organizer import EpisodeOrganizer
from .file_classifier import FileClassifier
from .gemini_service import GeminiService
from .local_storage import LocalFolderStorage
from .show_notes_service import ShowNotesService
from .validation_service import ValidationService

__all__ = [
    "CsvRosterSource",
    "EpisodeDirectory",
    "EpisodeOrganizer",
    "FileClassifier",
    "GeminiService",
    "LocalFolderStorage",
    "MarkdownDocument",
    "MarkdownDocumentStore",
    "ShowNotesService",
    "ValidationService",
]
