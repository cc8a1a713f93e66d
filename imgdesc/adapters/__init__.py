"""Description provider adapters."""

import logging

from imgdesc.adapters.base import DescriptionAdapter
from imgdesc.config import IMGDESC_PROVIDER, default_model, resolve_api_key
from imgdesc.errors import ImgdescError, ProviderInitError

logger = logging.getLogger(__name__)


def get_adapter(
    provider: str | None = None,
    model: str | None = None,
    api_key: str | None = None,
) -> DescriptionAdapter:
    """Build the adapter for a provider.

    Args:
        provider: gemini, openai or ollama; defaults to IMGDESC_PROVIDER
        model: model identifier; defaults to the provider's configured model
        api_key: explicit credential; falls back to the provider's env vars

    Raises:
        ValueError: unknown provider
        MissingCredentialError: the provider needs a key and none was found
        ProviderInitError: the SDK client could not be constructed
    """
    provider = (provider or IMGDESC_PROVIDER).strip().lower()
    model = model or default_model(provider)
    api_key = resolve_api_key(provider, api_key)

    if provider == "gemini":
        from imgdesc.adapters.gemini import GeminiAdapter as adapter_cls
    elif provider == "openai":
        from imgdesc.adapters.openai import OpenAIAdapter as adapter_cls
    elif provider == "ollama":
        from imgdesc.adapters.ollama import OllamaAdapter as adapter_cls
    else:
        raise ValueError(f"Unknown provider: {provider}")

    try:
        adapter = adapter_cls(model, api_key=api_key)
    except ImgdescError:
        raise
    except Exception as e:
        raise ProviderInitError(f"Failed to initialize {provider} client: {e}") from e

    logger.debug(f"Using {provider} provider with model {model}")
    return adapter


__all__ = ["DescriptionAdapter", "get_adapter"]
