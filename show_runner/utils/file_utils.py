"""File system utilities."""

import re
from pathlib import Path


def ensure_directory(path: Path) -> Path:
    """Ensure a directory exists, creating it if necessary.

    Args:
        path: Directory path to ensure exists

    Returns:
        The directory path
    """
    path.mkdir(parents=True, exist_ok=True)
    return path


def safe_filename(filename: str) -> str:
    """Make a filename safe for the file system.

    Spaces are kept, so canonical names like "Ep002_Fred Vogelstein"
    pass through unchanged.

    Args:
        filename: Original filename

    Returns:
        Safe filename with invalid characters removed
    """
    invalid_chars = '<>:"/\\|?*'
    safe_name = filename
    for char in invalid_chars:
        safe_name = safe_name.replace(char, "_")

    # Remove control characters
    safe_name = re.sub(r"[\x00-\x1f\x7f]", "", safe_name)

    # Truncate to 255 bytes (filesystem limit)
    if len(safe_name.encode("utf-8")) > 255:
        ext = Path(safe_name).suffix
        name = Path(safe_name).stem
        while len((name + ext).encode("utf-8")) > 255:
            name = name[:-1]
        safe_name = name + ext

    if not safe_name or not safe_name.strip():
        safe_name = "unnamed"

    return safe_name
