"""Base interface for description providers."""

from abc import ABC, abstractmethod

from imgdesc.resolver import ImagePayload


class DescriptionAdapter(ABC):
    """A multimodal model that answers a prompt about one image."""

    name: str = ""

    def __init__(self, model: str):
        self.model = model

    @abstractmethod
    async def describe(self, prompt: str, image: ImagePayload) -> str:
        """Send the prompt and image to the provider and return its raw text reply.

        Provider errors are not caught here; callers decide how a failed
        image is reported.
        """
