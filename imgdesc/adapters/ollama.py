"""Ollama adapter implemented via OpenAI-compatible chat completions."""

from imgdesc.adapters.openai import OpenAIAdapter
from imgdesc.config import OLLAMA_URL


def _normalize_ollama_base_url(url: str) -> str:
    """Return an OpenAI-compatible Ollama base URL ending with /v1."""
    stripped = url.rstrip("/")
    if stripped.endswith("/v1"):
        return stripped
    return f"{stripped}/v1"


class OllamaAdapter(OpenAIAdapter):
    """Local vision model served by Ollama through its OpenAI-compatible API."""

    name = "ollama"

    def __init__(self, model: str, api_key: str | None = None, base_url: str | None = None):
        super().__init__(
            model,
            api_key=api_key or "not-required",
            base_url=_normalize_ollama_base_url(base_url or OLLAMA_URL),
        )
