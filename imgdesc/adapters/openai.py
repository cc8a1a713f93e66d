"""OpenAI adapter for image descriptions."""

import logging

from imgdesc.adapters.base import DescriptionAdapter
from imgdesc.config import MAX_OUTPUT_TOKENS, OPENAI_BASE_URL
from imgdesc.errors import MissingCredentialError
from imgdesc.resolver import ImagePayload

logger = logging.getLogger(__name__)


class OpenAIAdapter(DescriptionAdapter):
    """GPT vision adapter for any OpenAI-compatible chat completions API."""

    name = "openai"

    def __init__(self, model: str, api_key: str | None = None, base_url: str | None = None):
        from openai import AsyncOpenAI

        super().__init__(model)
        if not api_key:
            raise MissingCredentialError(
                "OpenAI API key not provided. Use -k or set OPENAI_API_KEY."
            )

        self.base_url = base_url or OPENAI_BASE_URL
        self.max_tokens = MAX_OUTPUT_TOKENS
        self.client = AsyncOpenAI(api_key=api_key, base_url=self.base_url)

    async def describe(self, prompt: str, image: ImagePayload) -> str:
        """Describe an image using a chat completion with an inline image part."""
        logger.debug(f"Requesting {self.model} at {self.base_url} ({len(prompt)} prompt chars)")

        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": prompt},
                        {
                            "type": "image_url",
                            "image_url": {"url": image.data_uri()},
                        },
                    ],
                }
            ],
            max_tokens=self.max_tokens,
        )

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""
