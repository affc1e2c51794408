import asyncio
from typing import Any, Dict, Optional

import requests

from poper.domain.exceptions import ConfigurationError, UpstreamError
from poper.domain.ports.services.title_generator import TitleGeneratorPort
from poper.infrastructure.config.settings import Settings
from poper.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)

REQUEST_FAILED_MESSAGE = "Failed to get suggestions from the AI service."
EMPTY_RESPONSE_MESSAGE = "The AI returned an empty response. Please try again."


class GeminiTitleGenerator(TitleGeneratorPort):
    """Calls the Gemini generateContent endpoint and returns the first candidate's text"""

    def __init__(self, settings: Settings):
        if not settings.GEMINI_API_KEY:
            raise ConfigurationError(
                "Gemini API key is missing. Please check your environment variables.", missing=["GEMINI_API_KEY"]
            )
        self.api_key = settings.GEMINI_API_KEY
        self.url = f"{settings.GEMINI_BASE_URL.rstrip('/')}/models/{settings.GEMINI_MODEL}:generateContent"
        self.max_output_tokens = settings.MAX_OUTPUT_TOKENS
        self.temperature = settings.TEMPERATURE
        self.timeout = settings.HTTP_TIMEOUT

    def _payload(self, prompt: str) -> Dict[str, Any]:
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {"maxOutputTokens": self.max_output_tokens, "temperature": self.temperature},
        }

    @staticmethod
    def _extract_text(data: Any) -> Optional[str]:
        # candidates[0].content.parts[0].text
        try:
            return data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            return None

    async def generate(self, prompt: str) -> str:
        logger.info("gemini POST %s", self.url)
        try:
            resp = await asyncio.to_thread(
                requests.request,
                "POST",
                self.url,
                params={"key": self.api_key},
                json=self._payload(prompt),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.exception("gemini request error")
            raise UpstreamError("suggestion", REQUEST_FAILED_MESSAGE) from e

        logger.info("gemini done status=%s", resp.status_code)
        if not resp.ok:
            raise UpstreamError("suggestion", REQUEST_FAILED_MESSAGE)

        try:
            data = resp.json()
        except ValueError as e:
            raise UpstreamError("suggestion", EMPTY_RESPONSE_MESSAGE) from e

        text = self._extract_text(data)
        if not isinstance(text, str) or not text.strip():
            raise UpstreamError("suggestion", EMPTY_RESPONSE_MESSAGE)
        return text
