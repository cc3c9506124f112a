"""Text generation via the Gemini generateContent REST endpoint."""

import json
import logging

import requests
from pydantic import BaseModel, Field, ValidationError

from show_runner.config import ShowRunnerConfig
from show_runner.exceptions import GenerationError
from show_runner.interfaces.text_generator import NO_CANDIDATES_TEXT, REQUEST_FAILED_TEXT

logger = logging.getLogger(__name__)


class GeminiPart(BaseModel):
    text: str


class GeminiContent(BaseModel):
    parts: list[GeminiPart] = Field(min_length=1)


class GeminiCandidate(BaseModel):
    content: GeminiContent


class GeminiResponse(BaseModel):
    """Subset of the generateContent response that is read."""

    candidates: list[GeminiCandidate] = Field(default_factory=list)


class GeminiService:
    """Generate text with a Gemini model (stateless service).

    Implements TextGenerator protocol. Failures never raise: a response
    without candidates, or of an unexpected shape, yields
    NO_CANDIDATES_TEXT; a failed request or unparseable body yields
    REQUEST_FAILED_TEXT. Requests are not retried.
    """

    def __init__(self, config: ShowRunnerConfig):
        """Initialize the Gemini service.

        Args:
            config: Configuration with API key, model and endpoint
        """
        self.config = config

    @property
    def endpoint(self) -> str:
        base = self.config.gemini_api_url.rstrip("/")
        return f"{base}/models/{self.config.gemini_model}:generateContent"

    @staticmethod
    def build_payload(prompt: str) -> dict:
        return {"contents": [{"parts": [{"text": prompt}]}]}

    def generate(self, prompt: str) -> str:
        """Generate text for a prompt.

        Args:
            prompt: Prompt text

        Returns:
            Text of the first candidate, or a sentinel error text
        """
        try:
            return self._generate(prompt)
        except GenerationError as e:
            logger.error(str(e))
            return e.sentinel

    def _generate(self, prompt: str) -> str:
        try:
            response = requests.post(
                self.endpoint,
                params={"key": self.config.gemini_api_key},
                json=self.build_payload(prompt),
                timeout=self.config.request_timeout,
            )
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            raise GenerationError(f"API Request Failed: {e}", REQUEST_FAILED_TEXT) from e

        return self.parse_response(data)

    @staticmethod
    def parse_response(data) -> str:
        """Extract the first candidate's text from a response body.

        Raises:
            GenerationError: If the body has no usable candidate
        """
        try:
            parsed = GeminiResponse.model_validate(data)
        except ValidationError as e:
            raise GenerationError(
                f"Gemini API Error: unexpected response shape: {e}", NO_CANDIDATES_TEXT
            ) from e

        if not parsed.candidates:
            raise GenerationError(
                f"Gemini API Error: {json.dumps(data, default=str)}", NO_CANDIDATES_TEXT
            )

        return parsed.candidates[0].content.parts[0].text
