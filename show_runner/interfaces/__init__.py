"""Interface protocols for Show Runner."""

from .document_store import DocumentStore
from .presenter import PresenterProtocol
from .progress import ProgressCallback
from .roster_source import RosterSource
from .storage import StorageBackend
from .text_generator import TextGenerator

__all__ = [
    "DocumentStore",
    "PresenterProtocol",
    "ProgressCallback",
    "RosterSource",
    "StorageBackend",
    "TextGenerator",
]
