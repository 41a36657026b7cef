"""Google Gemini API wrapper with error handling."""

import logging
from typing import Protocol

from google import genai
from google.genai import types

from config import Settings
from services.errors import ConfigurationMissing, ExternalServiceError

logger = logging.getLogger(__name__)

PLACEHOLDER_API_KEY = "your-gemini-api-key-here"


class TextGenerationService(Protocol):
    """Anything that turns a prompt into raw response text."""

    @property
    def is_configured(self) -> bool: ...

    async def generate_text(self, prompt: str) -> str: ...


class GeminiClient:
    """Single-shot Gemini text generation. No retries; failures are reported, not hidden."""

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash",
        temperature: float = 0.3,
        max_output_tokens: int = 4096,
        client: genai.Client | None = None,
    ) -> None:
        self.model = model
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens
        self._client = client
        if self._client is None and _usable_key(api_key):
            self._client = genai.Client(api_key=api_key)

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiClient":
        try:
            return cls(
                api_key=settings.gemini_api_key,
                model=settings.gemini_model,
                temperature=settings.gemini_temperature,
                max_output_tokens=settings.gemini_max_output_tokens,
            )
        except Exception as e:
            logger.warning("Gemini client setup failed, AI analysis disabled: %s", e)
            return cls(api_key="")

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    async def generate_text(self, prompt: str) -> str:
        """Send a prompt to Gemini and return the raw response text."""
        if self._client is None:
            raise ConfigurationMissing("No GEMINI_API_KEY set")

        try:
            response = await self._client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    temperature=self.temperature,
                    max_output_tokens=self.max_output_tokens,
                ),
            )
        except Exception as e:
            raise ExternalServiceError(f"Gemini API error: {e}") from e

        text = response.text
        if not text:
            raise ExternalServiceError("Gemini returned an empty response")
        return text


def _usable_key(api_key: str) -> bool:
    return bool(api_key) and api_key != PLACEHOLDER_API_KEY
