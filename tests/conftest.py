import pytest
from PIL import Image


@pytest.fixture
def save_image(tmp_path):
    """Write an in-memory image to a PNG under tmp_path and return the path."""

    def _save(image: Image.Image, name: str = "image.png"):
        path = tmp_path / name
        image.save(path)
        return path

    return _save


def split_pairs(text: str) -> list[tuple[tuple[int, int, int], str]]:
    """Parse emitted output into ((r, g, b), glyph) pairs, ignoring newlines and the reset."""
    pairs = []
    prefix = "\033[38;2;"
    i = 0
    while True:
        i = text.find(prefix, i)
        if i < 0:
            return pairs
        end = text.index("m", i)
        r, g, b = (int(v) for v in text[i + len(prefix) : end].split(";"))
        pairs.append(((r, g, b), text[end + 1]))
        i = end + 2
