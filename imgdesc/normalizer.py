"""Turn free-form provider replies into complete ImageRecords."""

import json
import logging
from pathlib import Path

from imgdesc.resolver import SUPPORTED_EXTENSIONS
from imgdesc.schemas.image import (
    ALT_PLACEHOLDER,
    DEFAULT_CATEGORY,
    DESCRIPTION_PLACEHOLDER,
    ERROR_ALT,
    ERROR_CATEGORY,
    ERROR_DESCRIPTION,
    ImageRecord,
)
from imgdesc.utils import slugify

logger = logging.getLogger(__name__)


def parse_structured_output(text: str | None) -> dict | None:
    """Locate and parse the JSON object in a provider reply.

    Text that starts with "{" is parsed as a whole; otherwise the span from the
    first "{" to the last "}" is tried. Returns None when nothing parses to a
    JSON object.
    """
    if not isinstance(text, str):
        return None

    stripped = text.strip()
    if not stripped:
        return None

    if stripped.startswith("{"):
        candidate = stripped
    else:
        start = stripped.find("{")
        end = stripped.rfind("}")
        if start == -1 or end <= start:
            return None
        candidate = stripped[start : end + 1]

    try:
        parsed = json.loads(candidate)
    except json.JSONDecodeError as e:
        logger.debug(f"Failed to parse JSON: {e}")
        return None

    if not isinstance(parsed, dict):
        logger.debug(f"Expected a JSON object, got {type(parsed).__name__}")
        return None

    return parsed


def _coerce_text(value) -> str:
    if isinstance(value, str):
        return value.strip()
    return str(value or "").strip()


def _normalize_name(value, fallback: str) -> str:
    name = _coerce_text(value)
    suffix = Path(name).suffix.lower()
    if suffix in SUPPORTED_EXTENSIONS:
        name = name[: -len(suffix)]
    return slugify(name, fallback=fallback)


def normalize_fields(parsed: dict, image_path: str | Path) -> ImageRecord:
    """Validate and default every field of a parsed provider response."""
    path = Path(image_path)

    description = _coerce_text(parsed.get("description")) or DESCRIPTION_PLACEHOLDER

    alt_value = parsed.get("alt")
    if alt_value is None:
        alt_value = parsed.get("altText")
    alt = _coerce_text(alt_value) or description or ALT_PLACEHOLDER

    tags_value = parsed.get("tags")
    if isinstance(tags_value, list):
        tags = [str(tag).strip() for tag in tags_value if tag]
        tags = [tag for tag in tags if tag]
    else:
        tags = []

    category = _coerce_text(parsed.get("category") or parsed.get("type")) or DEFAULT_CATEGORY

    return ImageRecord(
        name=_normalize_name(parsed.get("name"), fallback=path.name),
        description=description,
        alt=alt,
        tags=tags,
        category=category,
        src=str(image_path),
    )


def error_record(image_path: str | Path) -> ImageRecord:
    """Build the sentinel record used when an image could not be described."""
    return ImageRecord(
        name=Path(image_path).name,
        description=ERROR_DESCRIPTION,
        alt=ERROR_ALT,
        tags=[],
        category=ERROR_CATEGORY,
        src=str(image_path),
    )


def normalize_response(text: str | None, image_path: str | Path) -> ImageRecord:
    """Convert raw provider text into an ImageRecord, never raising."""
    parsed = parse_structured_output(text)
    if parsed is None:
        logger.debug(f"Raw response for {Path(image_path).name}: {text}")
        return error_record(image_path)

    return normalize_fields(parsed, image_path)
