"""Tests for description provider adapters."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from imgdesc.adapters import get_adapter
from imgdesc.adapters.gemini import GeminiAdapter
from imgdesc.adapters.ollama import OllamaAdapter, _normalize_ollama_base_url
from imgdesc.adapters.openai import OpenAIAdapter
from imgdesc.errors import MissingCredentialError, ProviderInitError
from imgdesc.resolver import ImagePayload

PAYLOAD = ImagePayload(data=b"fake-bytes", mime_type="image/png")


def _mock_completion_response(content: str | None) -> SimpleNamespace:
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))]
    )


@pytest.fixture
def no_keys(monkeypatch):
    for key in ("GEMINI_API_KEY", "GOOGLE_API_KEY", "OPENAI_API_KEY", "OLLAMA_API_KEY"):
        monkeypatch.delenv(key, raising=False)


@pytest.mark.asyncio
async def test_gemini_adapter_describe():
    """Gemini adapter sends prompt and inline image bytes."""
    with patch("google.genai.Client") as mock_genai:
        mock_client = MagicMock()
        mock_client.aio.models.generate_content = AsyncMock(
            return_value=SimpleNamespace(text='{"description": "A cat"}')
        )
        mock_genai.return_value = mock_client

        adapter = GeminiAdapter("gemini-2.5-flash", api_key="test-key")
        result = await adapter.describe("Describe this", PAYLOAD)

        assert result == '{"description": "A cat"}'
        assert mock_genai.call_args.kwargs["api_key"] == "test-key"
        request_kwargs = mock_client.aio.models.generate_content.call_args.kwargs
        assert request_kwargs["model"] == "gemini-2.5-flash"
        text_part, image_part = request_kwargs["contents"]
        assert text_part.text == "Describe this"
        assert image_part.inline_data.data == b"fake-bytes"
        assert image_part.inline_data.mime_type == "image/png"


@pytest.mark.asyncio
async def test_gemini_adapter_empty_text():
    with patch("google.genai.Client") as mock_genai:
        mock_client = MagicMock()
        mock_client.aio.models.generate_content = AsyncMock(
            return_value=SimpleNamespace(text=None)
        )
        mock_genai.return_value = mock_client

        adapter = GeminiAdapter("gemini-2.5-flash", api_key="test-key")
        assert await adapter.describe("Describe this", PAYLOAD) == ""


@pytest.mark.asyncio
async def test_gemini_adapter_propagates_provider_errors():
    """Provider failures reach the caller unchanged."""
    with patch("google.genai.Client") as mock_genai:
        mock_client = MagicMock()
        mock_client.aio.models.generate_content = AsyncMock(
            side_effect=RuntimeError("quota exceeded")
        )
        mock_genai.return_value = mock_client

        adapter = GeminiAdapter("gemini-2.5-flash", api_key="test-key")
        with pytest.raises(RuntimeError, match="quota exceeded"):
            await adapter.describe("Describe this", PAYLOAD)


def test_gemini_adapter_requires_key():
    with patch("google.genai.Client") as mock_genai:
        with pytest.raises(MissingCredentialError, match="GEMINI_API_KEY"):
            GeminiAdapter("gemini-2.5-flash", api_key="")
        assert not mock_genai.called


@pytest.mark.asyncio
async def test_openai_adapter_describe():
    """OpenAI adapter sends a text part and a data URI image part."""
    with patch("openai.AsyncOpenAI") as mock_openai:
        mock_client = MagicMock()
        mock_client.chat.completions.create = AsyncMock(
            return_value=_mock_completion_response('{"category": "pets"}')
        )
        mock_openai.return_value = mock_client

        adapter = OpenAIAdapter("gpt-4.1-mini", api_key="test-key")
        result = await adapter.describe("Describe this", PAYLOAD)

        assert result == '{"category": "pets"}'
        request_kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert request_kwargs["model"] == "gpt-4.1-mini"
        text_part, image_part = request_kwargs["messages"][0]["content"]
        assert text_part == {"type": "text", "text": "Describe this"}
        assert image_part["image_url"]["url"] == "data:image/png;base64,ZmFrZS1ieXRlcw=="


@pytest.mark.asyncio
async def test_openai_adapter_null_content():
    with patch("openai.AsyncOpenAI") as mock_openai:
        mock_client = MagicMock()
        mock_client.chat.completions.create = AsyncMock(
            return_value=_mock_completion_response(None)
        )
        mock_openai.return_value = mock_client

        adapter = OpenAIAdapter("gpt-4.1-mini", api_key="test-key")
        assert await adapter.describe("Describe this", PAYLOAD) == ""


def test_openai_adapter_requires_key():
    with patch("openai.AsyncOpenAI"):
        with pytest.raises(MissingCredentialError, match="OPENAI_API_KEY"):
            OpenAIAdapter("gpt-4.1-mini", api_key=None)


def test_ollama_adapter_normalizes_base_url():
    """Ollama base URL is always OpenAI-compatible (/v1)."""
    assert _normalize_ollama_base_url("http://localhost:11434") == "http://localhost:11434/v1"
    assert _normalize_ollama_base_url("http://localhost:11434/") == "http://localhost:11434/v1"
    assert _normalize_ollama_base_url("http://localhost:11434/v1") == "http://localhost:11434/v1"


def test_ollama_adapter_key_optional():
    """Ollama runs locally and does not need a real key."""
    with patch("openai.AsyncOpenAI") as mock_openai:
        adapter = OllamaAdapter("llava")

        assert mock_openai.call_args.kwargs["api_key"] == "not-required"
        assert mock_openai.call_args.kwargs["base_url"].endswith("/v1")
        assert adapter.model == "llava"


def test_ollama_adapter_prefers_explicit_key():
    with patch("openai.AsyncOpenAI") as mock_openai:
        OllamaAdapter("llava", api_key="ollama-token", base_url="http://gpu-box:11434")

        assert mock_openai.call_args.kwargs["api_key"] == "ollama-token"
        assert mock_openai.call_args.kwargs["base_url"] == "http://gpu-box:11434/v1"


def test_get_adapter_default_provider(monkeypatch):
    """Adapter factory falls back to the configured provider."""
    monkeypatch.setenv("GEMINI_API_KEY", "env-key")
    with patch("imgdesc.adapters.IMGDESC_PROVIDER", "gemini"):
        with patch("google.genai.Client") as mock_genai:
            adapter = get_adapter()

    assert isinstance(adapter, GeminiAdapter)
    assert mock_genai.call_args.kwargs["api_key"] == "env-key"


def test_get_adapter_google_key_fallback(monkeypatch, no_keys):
    monkeypatch.setenv("GOOGLE_API_KEY", "google-key")
    with patch("google.genai.Client") as mock_genai:
        get_adapter("gemini")

    assert mock_genai.call_args.kwargs["api_key"] == "google-key"


def test_get_adapter_explicit_key_wins(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "env-key")
    with patch("openai.AsyncOpenAI") as mock_openai:
        adapter = get_adapter("openai", model="gpt-4o", api_key="flag-key")

    assert isinstance(adapter, OpenAIAdapter)
    assert adapter.model == "gpt-4o"
    assert mock_openai.call_args.kwargs["api_key"] == "flag-key"


def test_get_adapter_ollama(no_keys):
    with patch("openai.AsyncOpenAI"):
        adapter = get_adapter("ollama")

    assert isinstance(adapter, OllamaAdapter)


def test_get_adapter_missing_key(no_keys):
    with patch("openai.AsyncOpenAI"):
        with pytest.raises(MissingCredentialError):
            get_adapter("openai")


def test_get_adapter_unknown_provider():
    with pytest.raises(ValueError, match="Unknown provider"):
        get_adapter("anthropic", model="claude", api_key="key")


def test_get_adapter_wraps_client_errors():
    with patch("openai.AsyncOpenAI", side_effect=RuntimeError("bad base url")):
        with pytest.raises(ProviderInitError, match="bad base url"):
            get_adapter("openai", api_key="key")
