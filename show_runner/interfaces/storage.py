"""Protocol for the hierarchical object store holding the drop folder."""

from typing import Any, Protocol

from show_runner.models import StoredObject


class StorageBackend(Protocol):
    """Interface for a folder/file store (local disk, cloud drive, etc).

    Handles are opaque to the rest of the package: whatever a backend
    returns from one call is what it expects back in the next.
    """

    def list_children(self, folder: Any) -> list[StoredObject]:
        """List the files directly inside a folder, in backend order."""
        ...

    def get_parent(self, folder: Any) -> Any:
        """Return the handle of a folder's parent."""
        ...

    def create_folder(self, parent: Any, name: str) -> Any:
        """Create a child folder and return its handle."""
        ...

    def find_child_by_name(self, parent: Any, name: str) -> Any | None:
        """Return the first child folder called ``name``, or None."""
        ...

    def move(self, obj: Any, dest_folder: Any) -> Any:
        """Move an object into ``dest_folder`` and return its new handle."""
        ...

    def rename(self, obj: Any, new_name: str) -> Any:
        """Rename an object in place and return its new handle."""
        ...

    def read_text_content(self, obj: Any) -> str:
        """Read an object's content as text."""
        ...
