"""Protocol for the generative text service."""

from typing import Protocol

# Returned instead of raising, so the failure still reaches the document
NO_CANDIDATES_TEXT = "Error generating content."
REQUEST_FAILED_TEXT = "API Request Failed."
SENTINEL_TEXTS = frozenset({NO_CANDIDATES_TEXT, REQUEST_FAILED_TEXT})


class TextGenerator(Protocol):
    """Interface for a text-in/text-out generation backend."""

    def generate(self, prompt: str) -> str:
        """Generate text for a prompt.

        Never raises for service failures: implementations return one of
        the sentinel texts instead so the caller can still record it.
        """
        ...
