"""Google Gemini API wrapper."""

import logging

from google import genai
from google.genai import types

from config import settings
from services.llm_client import LLMClient, LLMUnavailableError

logger = logging.getLogger(__name__)

_client: "GeminiClient | None" = None


class GeminiClient(LLMClient):
    def __init__(
        self,
        api_key: str,
        model_name: str,
        temperature: float = 0.2,
        max_output_tokens: int = 2048,
    ):
        self.api_key = api_key
        self.model_name = model_name
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens
        self._sdk: genai.Client | None = None

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _get_sdk(self) -> genai.Client:
        if not self.api_key:
            raise LLMUnavailableError("GEMINI_API_KEY is not configured")
        if self._sdk is None:
            self._sdk = genai.Client(api_key=self.api_key)
        return self._sdk

    async def generate(self, prompt: str) -> str:
        """Send a prompt to Gemini and return the response text."""
        sdk = self._get_sdk()
        logger.debug("Calling %s with %d-char prompt", self.model_name, len(prompt))
        response = await sdk.aio.models.generate_content(
            model=self.model_name,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=self.temperature,
                max_output_tokens=self.max_output_tokens,
            ),
        )
        # Blocked or empty candidates leave text unset
        return response.text or ""


def get_client() -> GeminiClient:
    global _client
    if _client is None:
        if not settings.gemini_api_key:
            logger.warning("No GEMINI_API_KEY set - analysis will return diagnostics only")
        _client = GeminiClient(
            api_key=settings.gemini_api_key,
            model_name=settings.gemini_model,
            temperature=settings.gemini_temperature,
            max_output_tokens=settings.gemini_max_output_tokens,
        )
    return _client
