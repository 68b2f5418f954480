"""Google Gemini client for workout plan generation."""

import asyncio
import base64
import binascii
import logging
from typing import Any

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from ..errors import ConfigurationError, UpstreamError, ValidationError
from .base import ImagePart, PlanGenerationClient

logger = logging.getLogger(__name__)


class GeminiPlanClient(PlanGenerationClient):
    """Calls a Gemini vision model in JSON response mode."""

    def __init__(
        self,
        api_key: str | None,
        model: str = "gemini-2.5-flash",
        timeout: float = 60.0,
        client: Any = None,
    ):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self._client = client

    @property
    def provider_name(self) -> str:
        return "gemini"

    def ensure_configured(self) -> None:
        if not self.api_key:
            raise ConfigurationError("GEMINI_API_KEY is not set")

    def _get_client(self) -> Any:
        """Create the SDK client on first use."""
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    @staticmethod
    def _to_part(image: ImagePart) -> types.Part:
        try:
            data = base64.b64decode(image.data)
        except (binascii.Error, ValueError) as e:
            raise ValidationError("Images must be valid base64 data.") from e
        return types.Part.from_bytes(data=data, mime_type=image.mime_type)

    async def generate(self, prompt: str, images: list[ImagePart]) -> str:
        """Send the prompt and both images to Gemini and return its text."""
        self.ensure_configured()

        if len(images) != 2 or not all(image.data for image in images):
            raise ValidationError("Exactly two non-empty images are required.")

        contents = [prompt, *(self._to_part(image) for image in images)]
        config = types.GenerateContentConfig(response_mime_type="application/json")
        client = self._get_client()

        logger.info("Requesting workout plan from %s (%s)", self.provider_name, self.model)
        try:
            response = await asyncio.wait_for(
                client.aio.models.generate_content(
                    model=self.model,
                    contents=contents,
                    config=config,
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            raise UpstreamError(f"Gemini call timed out after {self.timeout}s") from e
        except genai_errors.APIError as e:
            raise UpstreamError(f"Gemini API error {e.code}: {e.message}") from e
        except Exception as e:
            raise UpstreamError(f"Gemini call failed: {e}") from e

        text = response.text
        if not text:
            # Blocked prompts come back without candidates
            raise UpstreamError("Gemini returned an empty response")
        return text
