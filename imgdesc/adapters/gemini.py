"""Gemini adapter for image descriptions."""

import logging

from imgdesc.adapters.base import DescriptionAdapter
from imgdesc.config import MAX_OUTPUT_TOKENS
from imgdesc.errors import MissingCredentialError
from imgdesc.resolver import ImagePayload

logger = logging.getLogger(__name__)


class GeminiAdapter(DescriptionAdapter):
    """Google Gemini multimodal adapter built on the google-genai SDK."""

    name = "gemini"

    def __init__(self, model: str, api_key: str | None = None):
        from google import genai

        super().__init__(model)
        if not api_key:
            raise MissingCredentialError(
                "Gemini API key not provided. Use -k or set GEMINI_API_KEY/GOOGLE_API_KEY."
            )

        self.max_tokens = MAX_OUTPUT_TOKENS
        self.client = genai.Client(api_key=api_key)

    async def describe(self, prompt: str, image: ImagePayload) -> str:
        """Describe an image with a single generate_content call."""
        from google.genai import types

        logger.debug(f"Requesting {self.model} ({len(prompt)} prompt chars)")

        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=[
                types.Part.from_text(text=prompt),
                types.Part.from_bytes(data=image.data, mime_type=image.mime_type),
            ],
            config=types.GenerateContentConfig(max_output_tokens=self.max_tokens),
        )
        return response.text or ""
