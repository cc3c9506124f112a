"""Storage backend over a local (or mounted) directory tree."""

import logging
import mimetypes
import shutil
from pathlib import Path

from show_runner.exceptions import StorageError
from show_runner.models import StoredObject
from show_runner.utils import natural_sort_key, safe_filename

logger = logging.getLogger(__name__)

GOOGLE_DOC_MIME_TYPE = "application/vnd.google-apps.document"
DEFAULT_MIME_TYPE = "application/octet-stream"

# Extensions the platform mime table may not know about
EXTRA_MIME_TYPES = {
    ".gdoc": GOOGLE_DOC_MIME_TYPE,
    ".md": "text/plain",
    ".txt": "text/plain",
    ".mp4": "video/mp4",
    ".pdf": "application/pdf",
}


class LocalFolderStorage:
    """Folder/file operations on the local file system.

    Handles are ``Path`` objects. Listings contain files only and are
    naturally sorted by name, since directory iteration order is
    platform dependent.

    Implements StorageBackend protocol.
    """

    @staticmethod
    def guess_mime_type(path: Path) -> str:
        """Guess a file's mime type from its extension."""
        extra = EXTRA_MIME_TYPES.get(path.suffix.lower())
        if extra:
            return extra
        mime_type, _ = mimetypes.guess_type(path.name)
        return mime_type or DEFAULT_MIME_TYPE

    def list_children(self, folder: Path) -> list[StoredObject]:
        """List files directly inside a folder."""
        try:
            files = [f for f in Path(folder).iterdir() if f.is_file()]
        except OSError as e:
            raise StorageError(f"Cannot list folder {folder}: {e}") from e

        files.sort(key=lambda f: natural_sort_key(f.name))
        return [
            StoredObject(handle=f, name=f.name, mime_type=self.guess_mime_type(f)) for f in files
        ]

    def get_parent(self, folder: Path) -> Path:
        return Path(folder).resolve().parent

    def find_child_by_name(self, parent: Path, name: str) -> Path | None:
        candidate = Path(parent) / safe_filename(name)
        return candidate if candidate.is_dir() else None

    def create_folder(self, parent: Path, name: str) -> Path:
        folder = Path(parent) / safe_filename(name)
        try:
            folder.mkdir()
        except OSError as e:
            raise StorageError(f"Cannot create folder {folder}: {e}") from e
        logger.info(f"Created folder {folder}")
        return folder

    def move(self, obj: Path, dest_folder: Path) -> Path:
        """Move a file into a folder, refusing to overwrite."""
        source = Path(obj)
        target = Path(dest_folder) / source.name
        if target.exists():
            raise StorageError(f"Cannot move {source.name}: {target} already exists")
        try:
            shutil.move(str(source), str(target))
        except OSError as e:
            raise StorageError(f"Cannot move {source} to {dest_folder}: {e}") from e
        logger.debug(f"Moved {source} -> {target}")
        return target

    def rename(self, obj: Path, new_name: str) -> Path:
        """Rename a file in place, refusing to overwrite."""
        source = Path(obj)
        target = source.with_name(safe_filename(new_name))
        if target == source:
            return source
        if target.exists():
            raise StorageError(f"Cannot rename {source.name}: {target} already exists")
        try:
            source.rename(target)
        except OSError as e:
            raise StorageError(f"Cannot rename {source} to {target.name}: {e}") from e
        logger.debug(f"Renamed {source.name} -> {target.name}")
        return target

    def read_text_content(self, obj: Path) -> str:
        """Read a file as UTF-8 text, replacing undecodable bytes."""
        try:
            return Path(obj).read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise StorageError(f"Cannot read {obj}: {e}") from e
