"""Generate show notes from a transcript and store them as a document."""

import logging
from typing import Any

from show_runner.config import ShowRunnerConfig
from show_runner.interfaces import DocumentStore, TextGenerator
from show_runner.interfaces.text_generator import REQUEST_FAILED_TEXT, SENTINEL_TEXTS

from .prompts import show_notes_prompt

logger = logging.getLogger(__name__)


class ShowNotesService:
    """Turn a transcript into a show notes document."""

    def __init__(
        self,
        config: ShowRunnerConfig,
        text_generator: TextGenerator,
        document_store: DocumentStore,
    ):
        """Initialize the show notes service.

        Args:
            config: Configuration with show name and prompt limits
            text_generator: Generation backend
            document_store: Store receiving the document
        """
        self.config = config
        self.text_generator = text_generator
        self.document_store = document_store

    def build_prompt(self, transcript: str) -> str:
        return show_notes_prompt(
            transcript, self.config.show_name, self.config.max_transcript_chars
        )

    def generate(self, transcript: str) -> tuple[str, bool]:
        """Generate show notes content.

        Args:
            transcript: Transcript text

        Returns:
            Tuple of (content, failed). On failure the content is the
            sentinel text, which is still meant to be written. A generator
            that raises is treated as a failed request.
        """
        try:
            content = self.text_generator.generate(self.build_prompt(transcript))
        except Exception:
            logger.exception("Text generation raised, recording the failure")
            return REQUEST_FAILED_TEXT, True
        return content, content in SENTINEL_TEXTS

    def document_title(self, base_name: str) -> str:
        return f"{base_name}{self.config.show_notes_suffix}"

    def write_document(self, folder: Any, base_name: str, content: str) -> Any:
        """Write generated content to a document in the episode folder.

        Args:
            folder: Episode folder handle
            base_name: Canonical base name of the episode
            content: Generated content, passed through unmodified

        Returns:
            Handle of the created document
        """
        store = self.document_store
        doc = store.create_document(self.document_title(base_name))
        store.append_heading(doc, f"{self.config.show_name} - Episode Automation Output")
        store.append_paragraph(doc, f"Generated for: {base_name}")
        store.append_divider(doc)
        store.append_paragraph(doc, content)
        store.move_to_folder(doc, folder)
        logger.info(f"Wrote show notes {self.document_title(base_name)}")
        return doc
