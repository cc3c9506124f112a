"""Document store writing show notes as Markdown files."""

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

from show_runner.exceptions import StorageError
from show_runner.utils import ensure_directory, safe_filename

logger = logging.getLogger(__name__)


@dataclass
class MarkdownDocument:
    """Handle for a Markdown document being written."""

    title: str
    path: Path


class MarkdownDocumentStore:
    """Create Markdown documents in a staging folder, then file them.

    Documents start life in the staging folder (like a new document in a
    drive root) and are moved into an episode folder when complete.

    Implements DocumentStore protocol.
    """

    def __init__(self, staging_folder: Path):
        """Initialize with the folder new documents are created in.

        Args:
            staging_folder: Folder for documents not yet filed
        """
        self.staging_folder = staging_folder

    def create_document(self, title: str) -> MarkdownDocument:
        try:
            ensure_directory(self.staging_folder)
            path = self.staging_folder / f"{safe_filename(title)}.md"
            path.write_text("", encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Cannot create document {title}: {e}") from e
        return MarkdownDocument(title=title, path=path)

    def _append(self, doc: MarkdownDocument, text: str) -> None:
        try:
            with doc.path.open("a", encoding="utf-8") as f:
                f.write(text.rstrip("\n") + "\n\n")
        except OSError as e:
            raise StorageError(f"Cannot write document {doc.title}: {e}") from e

    def append_heading(self, doc: MarkdownDocument, text: str) -> None:
        self._append(doc, f"# {text}")

    def append_paragraph(self, doc: MarkdownDocument, text: str) -> None:
        self._append(doc, text)

    def append_divider(self, doc: MarkdownDocument) -> None:
        self._append(doc, "---")

    def move_to_folder(self, doc: MarkdownDocument, folder: Path) -> None:
        """Move a document into a folder, replacing an older copy."""
        target = Path(folder) / doc.path.name
        try:
            if target.exists():
                logger.warning(f"Replacing existing document {target}")
                target.unlink()
            shutil.move(str(doc.path), str(target))
        except OSError as e:
            raise StorageError(f"Cannot move document {doc.title} to {folder}: {e}") from e
        doc.path = target
