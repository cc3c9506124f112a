"""Text generation exceptions."""

from .base import ShowRunnerException


class GenerationError(ShowRunnerException):
    """Raised when the text generation service fails or returns no candidates.

    Never escapes the generation service: it is converted into a sentinel
    string so the failure still reaches the show notes document.
    """

    def __init__(self, message: str, sentinel: str):
        super().__init__(message)
        self.sentinel = sentinel
