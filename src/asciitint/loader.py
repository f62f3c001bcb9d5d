import logging
from pathlib import Path

import numpy as np
from PIL import Image

from asciitint.errors import DecodeError

logger = logging.getLogger(__name__)

# Integer modes Pillow uses for 16-bit grayscale data
WIDE_GRAY_MODES = ("I", "I;16", "I;16L", "I;16B", "I;16N")


def _to_8bit_gray(image: Image.Image) -> Image.Image:
    """Scale 16-bit samples down to 0-255 instead of letting convert() clip them."""
    arr = np.asarray(image).astype(np.int64)
    return Image.fromarray(np.clip(arr >> 8, 0, 255).astype(np.uint8))


def load_image(path: str | Path) -> Image.Image:
    """Open and fully decode an image, returning it in RGBA mode.

    Missing files, unreadable paths and undecodable data all raise
    DecodeError carrying the underlying message.
    """
    path = Path(path)
    try:
        with Image.open(path) as image:
            image.load()
            mode = image.mode
            source = _to_8bit_gray(image) if mode in WIDE_GRAY_MODES else image
            rgba = source.convert("RGBA")
    except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as exc:
        raise DecodeError(f"{path}: {exc}") from exc

    logger.debug("Loaded %s (%dx%d, mode %s)", path, rgba.width, rgba.height, mode)
    return rgba
