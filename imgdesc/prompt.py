"""Prompt construction for image description requests."""

from imgdesc.schemas.image import DEFAULT_INSTRUCTION, STRUCTURE_DIRECTIVE


def build_schema_prompt(filename: str, instruction: str | None = None) -> str:
    """Combine the user instruction, filename and response schema into one prompt.

    A missing or blank instruction falls back to DEFAULT_INSTRUCTION.
    """
    base_instruction = (instruction or "").strip() or DEFAULT_INSTRUCTION

    return f"{base_instruction}\n\nImage filename: {filename}\n\n{STRUCTURE_DIRECTIVE}"
