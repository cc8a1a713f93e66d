"""Shared fixtures for imgdesc tests."""

import pytest

from imgdesc.adapters.base import DescriptionAdapter

VALID_RESPONSE = (
    '{"name": "orange-cat", "description": "An orange cat on a sofa.", '
    '"alt": "Orange cat", "tags": ["cat", "sofa"], "category": "pets"}'
)


class FakeAdapter(DescriptionAdapter):
    """Scripted provider: replies come from a callable or a fixed value."""

    name = "fake"

    def __init__(self, reply=VALID_RESPONSE):
        super().__init__("fake-model")
        self.reply = reply
        self.calls = []

    async def describe(self, prompt, image):
        self.calls.append((prompt, image))
        reply = self.reply(prompt, image) if callable(self.reply) else self.reply
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def fake_adapter():
    """Factory for scripted adapters."""
    return FakeAdapter


@pytest.fixture
def image_dir(tmp_path):
    """Directory with two small images and one non-image file."""
    folder = tmp_path / "images"
    folder.mkdir()
    (folder / "cat.jpg").write_bytes(b"\xff\xd8\xff\xe0 fake jpeg")
    (folder / "dog.png").write_bytes(b"\x89PNG\r\n\x1a\n fake png")
    (folder / "notes.txt").write_text("not an image")
    return folder
