"""Sequential description pipeline for a batch of images."""

import logging
import os

from imgdesc.adapters.base import DescriptionAdapter
from imgdesc.errors import EmptyResponseError
from imgdesc.normalizer import error_record, normalize_response
from imgdesc.prompt import build_schema_prompt
from imgdesc.resolver import load_image_payload
from imgdesc.schemas.image import ImageRecord

logger = logging.getLogger(__name__)


async def describe_image(
    adapter: DescriptionAdapter,
    image_path: str,
    instruction: str | None = None,
) -> ImageRecord:
    """Describe a single image.

    Failures of any kind (unreadable file, provider error, empty reply,
    unparsable reply) are logged and produce the error record, so one bad
    image never stops a batch.

    Args:
        adapter: Provider used to describe the image
        image_path: Path of the image, copied verbatim into the record's src
        instruction: Optional instruction overriding the default prompt tone

    Returns:
        A fully populated ImageRecord
    """
    filename = os.path.basename(image_path)

    try:
        prompt = build_schema_prompt(filename, instruction)
        payload = load_image_payload(image_path)

        text = (await adapter.describe(prompt, payload) or "").strip()
        if not text:
            raise EmptyResponseError("Model returned an empty description.")

        record = normalize_response(text, image_path)
        if record.is_error:
            logger.error(
                f"Error generating description for {filename}: "
                "Structured JSON response missing or invalid."
            )
        return record

    except Exception as e:
        logger.error(f"Error generating description for {filename}: {e}")
        return error_record(image_path)


async def describe_images(
    adapter: DescriptionAdapter,
    image_paths: list[str],
    instruction: str | None = None,
) -> list[ImageRecord]:
    """Describe images one at a time, in input order.

    Args:
        adapter: Provider used for every image
        image_paths: Images to describe
        instruction: Optional instruction passed to every prompt

    Returns:
        One record per input path, in the same order
    """
    results = []
    for image_path in image_paths:
        logger.info(f"Processing: {os.path.basename(image_path)}...")
        results.append(await describe_image(adapter, image_path, instruction))

    failures = sum(1 for record in results if record.is_error)
    logger.info(
        f"{len(results) - failures}/{len(results)} described, {failures} failed"
    )
    return results
