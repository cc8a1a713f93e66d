"""Input path resolution and image loading."""

import base64
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from imgdesc.errors import InputNotFoundError, UnsupportedFormatError

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".webp": "image/webp",
    ".gif": "image/gif",
    ".bmp": "image/bmp",
}


@dataclass(frozen=True)
class ImagePayload:
    """Raw image bytes plus the MIME type sent to a provider."""

    data: bytes
    mime_type: str

    def to_base64(self) -> str:
        return base64.b64encode(self.data).decode("ascii")

    def data_uri(self) -> str:
        return f"data:{self.mime_type};base64,{self.to_base64()}"


def is_supported(path: str | Path) -> bool:
    return Path(path).suffix.lower() in SUPPORTED_EXTENSIONS


def collect_image_files(input_path: str) -> list[str]:
    """Resolve an input path to the image files it refers to.

    Directories are scanned one level deep, keeping directory listing order.
    A single file must carry a supported extension and is returned as given.

    Raises:
        InputNotFoundError: the path does not exist
        UnsupportedFormatError: a single file has an unsupported extension
    """
    path = Path(input_path)
    if not path.exists():
        raise InputNotFoundError(f"Input path does not exist: {input_path}")

    if path.is_dir():
        files = [
            os.path.join(input_path, entry)
            for entry in os.listdir(path)
            if is_supported(entry) and (path / entry).is_file()
        ]
        logger.debug(f"Found {len(files)} supported image(s) in {input_path}")
        return files

    if not is_supported(path):
        raise UnsupportedFormatError(
            "Unsupported image format. Use jpg, jpeg, png, webp, gif, or bmp."
        )

    return [str(input_path)]


def load_image_payload(image_path: str | Path) -> ImagePayload:
    """Read an image from disk and pair it with its MIME type."""
    path = Path(image_path)
    mime_type = SUPPORTED_EXTENSIONS.get(path.suffix.lower())
    if not mime_type:
        raise UnsupportedFormatError(f"Unsupported image extension: {path.suffix}")

    return ImagePayload(data=path.read_bytes(), mime_type=mime_type)
