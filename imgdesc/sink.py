"""Serialization of description results."""

import json
import logging
import sys
from typing import TextIO

from imgdesc.schemas.image import ImageRecord

logger = logging.getLogger(__name__)


def serialize_records(records: list[ImageRecord]) -> str:
    """Render records as an indented JSON array."""
    return json.dumps([record.to_dict() for record in records], indent=2, ensure_ascii=False)


def write_output_file(records: list[ImageRecord], output_file: str) -> bool:
    """Write records to output_file, replacing any existing file.

    Returns False when the file could not be written; the error is logged
    rather than raised so already generated descriptions are not lost.
    """
    try:
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(serialize_records(records))
    except OSError as e:
        logger.error(f"Error writing output file: {e}")
        return False

    logger.info(f"Output file created: {output_file}")
    return True


def emit_stdout(records: list[ImageRecord], stream: TextIO | None = None) -> None:
    stream = stream or sys.stdout
    stream.write(serialize_records(records) + "\n")
    stream.flush()
