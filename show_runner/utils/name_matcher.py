"""Candidate-name derivation and canonical episode naming."""

import re

DEFAULT_MEDIA_EXTENSION = ".mp4"


def normalize_name(name: str) -> str:
    """Normalize a name for comparison (lower-case, trimmed).

    Args:
        name: Raw name

    Returns:
        Normalized name
    """
    return str(name).strip().lower()


def derive_candidate_name(media_name: str, extension: str = DEFAULT_MEDIA_EXTENSION) -> str:
    """Derive the roster search key from a media filename.

    Strips one trailing media extension (case-insensitive) and the
    surrounding whitespace. Nothing else is removed, so a filename such as
    "Interview with Fred Vogelstein.mp4" yields the whole phrase and relies
    on the roster's containment match.

    Args:
        media_name: Filename of the media object
        extension: Media extension to strip, including the dot

    Returns:
        Candidate guest name

    Example:
        >>> derive_candidate_name("  Fred Vogelstein.MP4 ")
        'Fred Vogelstein'
    """
    name = media_name.strip()
    if extension:
        name = re.sub(re.escape(extension) + r"$", "", name, flags=re.IGNORECASE)
    return name.strip()


def canonical_base_name(episode_number: str | int, guest_name: str) -> str:
    """Build the canonical folder/file base name for an episode.

    Args:
        episode_number: Episode number as it appears in the roster
        guest_name: Guest display name from the roster

    Returns:
        Name of the form ``Ep<episode_number>_<guest_name>``
    """
    return f"Ep{episode_number}_{guest_name}"


def is_processed_name(name: str, prefix: str) -> bool:
    """Check if a filename already carries the processed marker prefix."""
    return bool(prefix) and name.startswith(prefix)
