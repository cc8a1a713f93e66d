import os

# Provider settings
GEMINI_MODEL = os.environ.get("GEMINI_MODEL", "gemini-2.5-flash")
OPENAI_MODEL = os.environ.get("OPENAI_MODEL", "gpt-4.1-mini")
OLLAMA_MODEL = os.environ.get("OLLAMA_MODEL", "llava")

OPENAI_BASE_URL = os.environ.get("OPENAI_BASE_URL", "https://api.openai.com/v1")
OLLAMA_URL = os.environ.get("OLLAMA_URL", "http://localhost:11434")

MAX_OUTPUT_TOKENS = int(os.environ.get("IMGDESC_MAX_OUTPUT_TOKENS", "1024"))

PROVIDERS = ("gemini", "openai", "ollama")

# Output settings
DEFAULT_OUTPUT_FILE = "descriptions.json"


def _gemini_key_from_env() -> str:
    return os.environ.get("GEMINI_API_KEY", "") or os.environ.get("GOOGLE_API_KEY", "")


def resolve_provider() -> str:
    """Resolve the description provider from environment.

    Resolution order:
    1. If IMGDESC_PROVIDER is explicitly set to gemini/openai/ollama, use it.
    2. If IMGDESC_PROVIDER is set to auto (or blank), choose based on available keys.
       - GEMINI_API_KEY / GOOGLE_API_KEY => gemini
       - OPENAI_API_KEY => openai
       - fallback => ollama
    """

    provider = os.environ.get("IMGDESC_PROVIDER", "gemini").strip().lower()

    if provider in {"", "auto"}:
        if _gemini_key_from_env():
            return "gemini"
        if os.environ.get("OPENAI_API_KEY", ""):
            return "openai"
        return "ollama"

    if provider not in PROVIDERS:
        raise ValueError(
            "Invalid IMGDESC_PROVIDER. Expected one of: "
            "auto, gemini, openai, ollama"
        )

    return provider


IMGDESC_PROVIDER = resolve_provider()


def default_model(provider: str) -> str:
    """Return the configured model identifier for a provider."""
    models = {
        "gemini": GEMINI_MODEL,
        "openai": OPENAI_MODEL,
        "ollama": OLLAMA_MODEL,
    }
    if provider not in models:
        raise ValueError(f"Unknown provider: {provider}")
    return models[provider]


def resolve_api_key(provider: str, explicit_key: str | None = None) -> str:
    """Return the credential for a provider, preferring an explicit value.

    Environment variables are read at call time so a key exported after
    import is still honoured.
    """
    if explicit_key:
        return explicit_key
    if provider == "gemini":
        return _gemini_key_from_env()
    if provider == "openai":
        return os.environ.get("OPENAI_API_KEY", "")
    if provider == "ollama":
        return os.environ.get("OLLAMA_API_KEY", "") or os.environ.get("OPENAI_API_KEY", "")
    return ""
