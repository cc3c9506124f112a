"""Protocol for the document store receiving generated show notes."""

from typing import Any, Protocol


class DocumentStore(Protocol):
    """Interface for creating simple structured documents."""

    def create_document(self, title: str) -> Any:
        """Create an empty document and return its handle."""
        ...

    def append_heading(self, doc: Any, text: str) -> None:
        """Append a top-level heading."""
        ...

    def append_paragraph(self, doc: Any, text: str) -> None:
        """Append a paragraph of text."""
        ...

    def append_divider(self, doc: Any) -> None:
        """Append a horizontal rule."""
        ...

    def move_to_folder(self, doc: Any, folder: Any) -> None:
        """Move the document into a storage folder."""
        ...
