import asyncio
import logging
from typing import Optional

from google import genai as google_genai_module

from ..config import Settings
from ..exceptions import GatewayError

logger = logging.getLogger(__name__)


class GeminiGateway:
    """One Gemini client shared by every request; one call per prompt."""

    def __init__(self, settings: Settings, client: Optional[object] = None):
        self.model = settings.gemini_model
        self.client = client
        if self.client is None and settings.gemini_api_key:
            self.client = google_genai_module.Client(api_key=settings.gemini_api_key)
            logger.info("Gemini client initialized for model %s", self.model)
        elif self.client is None:
            logger.warning("GEMINI_API_KEY not set; AI endpoints will fail.")

    @property
    def configured(self) -> bool:
        return self.client is not None

    async def generate(self, prompt: str) -> str:
        if not self.configured:
            raise GatewayError("Gemini not configured.")

        try:
            response = await asyncio.to_thread(
                self.client.models.generate_content,
                model=self.model,
                contents=prompt,
            )
        except Exception as e:
            raise GatewayError("Gemini request failed", cause=e) from e

        text = getattr(response, "text", None)
        if text is None:
            raise GatewayError("Gemini returned no text.")
        logger.debug("Gemini response:\n%s", text)
        return text
