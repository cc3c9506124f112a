"""Data models for Show Runner."""

from .drop import Classification, ClassifiedListing, DroppedObject, MediaKind, StoredObject
from .episode import EpisodeBundle
from .processing import ItemResult, ItemStatus, Outcome, ValidationIssue, ValidationResult
from .roster import MatchResult, RosterEntry

__all__ = [
    "RosterEntry",
    "MatchResult",
    "StoredObject",
    "DroppedObject",
    "MediaKind",
    "Classification",
    "ClassifiedListing",
    "EpisodeBundle",
    "ItemResult",
    "ItemStatus",
    "Outcome",
    "ValidationIssue",
    "ValidationResult",
]
