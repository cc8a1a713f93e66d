"""Command-line entry point for imgdesc."""

import argparse
import asyncio
import logging
import sys
from typing import Sequence

from imgdesc.adapters import get_adapter
from imgdesc.config import DEFAULT_OUTPUT_FILE, IMGDESC_PROVIDER, PROVIDERS
from imgdesc.errors import ImgdescError
from imgdesc.pipeline import describe_images
from imgdesc.resolver import collect_image_files
from imgdesc.schemas.image import DEFAULT_INSTRUCTION
from imgdesc.sink import emit_stdout, write_output_file

logger = logging.getLogger("imgdesc.cli")


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit code 1."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="imgdesc",
        description="Generate custom image descriptions using multimodal models.",
    )
    parser.add_argument("input", help="Path to an image file or a folder of images")
    parser.add_argument(
        "-o",
        "--output",
        default=DEFAULT_OUTPUT_FILE,
        help="Output file name",
    )
    parser.add_argument(
        "-p",
        "--provider",
        choices=PROVIDERS,
        default=IMGDESC_PROVIDER,
        help="Description provider (default: %(default)s, or IMGDESC_PROVIDER)",
    )
    parser.add_argument(
        "-m",
        "--model",
        default=None,
        help="Model name (default depends on the provider)",
    )
    parser.add_argument(
        "-k",
        "--api-key",
        default=None,
        help="API key (or set GEMINI_API_KEY/GOOGLE_API_KEY, OPENAI_API_KEY, OLLAMA_API_KEY)",
    )
    parser.add_argument(
        "-i",
        "--instruction",
        default=DEFAULT_INSTRUCTION,
        help="Instruction that guides description style",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print JSON output to stdout instead of writing to a file",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging for debugging",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def run(args: argparse.Namespace) -> int:
    """Describe every image named by args and persist the results.

    Returns the process exit code.
    """
    logger.info("Starting image description generator...")

    try:
        image_files = collect_image_files(args.input)
        adapter = get_adapter(args.provider, args.model, args.api_key)
    except ImgdescError as e:
        logger.error(str(e))
        return 1

    if not image_files:
        logger.warning("No supported images found to process.")
        return 0

    logger.debug(f"Resolved {len(image_files)} image(s) from {args.input}")
    results = asyncio.run(describe_images(adapter, image_files, args.instruction))

    if args.json:
        emit_stdout(results)
    else:
        write_output_file(results, args.output)

    logger.info("Done! Descriptions generated successfully.")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
