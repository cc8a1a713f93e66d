"""Image description record schema."""

from pydantic import BaseModel, Field

DESCRIPTION_PLACEHOLDER = "Description unavailable."
ALT_PLACEHOLDER = "Alt text unavailable."
DEFAULT_CATEGORY = "uncategorized"

ERROR_DESCRIPTION = "Error generating description."
ERROR_ALT = "Alt text unavailable due to error."
ERROR_CATEGORY = "error"


class ImageRecord(BaseModel):
    """Normalized description of a single image."""

    name: str
    description: str
    alt: str
    tags: list[str] = Field(default_factory=list)
    category: str = DEFAULT_CATEGORY
    src: str

    @property
    def is_error(self) -> bool:
        return self.category == ERROR_CATEGORY

    def to_dict(self) -> dict:
        return self.model_dump()


DEFAULT_INSTRUCTION = (
    "Write a marketing-friendly description, concise alt text under 160 characters, "
    "five descriptive tags, a primary category label, and a short slug for a better filename."
)

# Response shape the provider is asked to follow
STRUCTURE_DIRECTIVE = """You must respond with a JSON object matching this TypeScript interface:
{
  "name": string; // new descriptive filename stem (no extension, lowercase, hyphen-separated)
  "description": string; // human-friendly description that blends context and detail
  "alt": string; // accessibility-focused alt text under 160 characters
  "tags": string[]; // 3-7 descriptive keywords in lowercase
  "category": string; // primary category label, e.g. product, lifestyle, nature
}

Requirements:
- Honor the user's instruction for tone, medium, or audience while populating the fields.
- Avoid markdown. Return raw JSON only without backticks or explanation.
- Ensure tags do not duplicate each other and omit the file extension.
- The description should be longer than the alt text, which should stay practical for screen readers.
- Generate the name as a concise lowercase slug using letters, numbers, and hyphens only. Do not include a file extension.
"""
