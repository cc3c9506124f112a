"""Utility functions for Show Runner."""

from .file_utils import ensure_directory, safe_filename
from .name_matcher import (
    canonical_base_name,
    derive_candidate_name,
    is_processed_name,
    normalize_name,
)
from .sort_utils import natural_sort_key

__all__ = [
    "ensure_directory",
    "safe_filename",
    "canonical_base_name",
    "derive_candidate_name",
    "is_processed_name",
    "normalize_name",
    "natural_sort_key",
]
