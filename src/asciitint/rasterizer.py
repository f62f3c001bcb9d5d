import logging

import numpy as np
from PIL import Image

from asciitint.charsets import CELL_ASPECT, DENSITY_RAMP
from asciitint.errors import InvalidWidthError
from asciitint.grid import AsciiGrid

logger = logging.getLogger(__name__)


def grid_size(image_size: tuple[int, int], width: int, cell_aspect: float = CELL_ASPECT) -> tuple[int, int]:
    """Return (columns, rows) of the character grid for an image of the given pixel size."""
    if isinstance(width, bool) or not isinstance(width, int) or width <= 0:
        raise InvalidWidthError(f"Width must be a positive integer, got {width!r}")
    orig_width, orig_height = image_size
    aspect_ratio = orig_height / orig_width
    # round() is half-to-even like np.rint below; very wide images still get one row
    height = max(1, round(width * aspect_ratio * cell_aspect))
    return width, height


def glyph_indices(gray: np.ndarray, ramp_length: int) -> np.ndarray:
    """Ramp index for each 8-bit luminance value, always within 0 .. ramp_length - 1."""
    intensity = gray.astype(np.float64) / 255.0
    indices = np.rint(intensity * (ramp_length - 1)).astype(np.intp)
    return np.clip(indices, 0, ramp_length - 1)


def rasterize(
    image: Image.Image,
    width: int,
    ramp: str = DENSITY_RAMP,
    cell_aspect: float = CELL_ASPECT,
) -> AsciiGrid:
    if not ramp:
        raise ValueError("Glyph ramp must not be empty")
    cols, rows = grid_size(image.size, width, cell_aspect)

    gray = image.resize((cols, rows), Image.NEAREST).convert("L")
    indices = glyph_indices(np.asarray(gray), len(ramp))

    glyphs = np.array(list(ramp))
    lines = ["".join(row) for row in glyphs[indices]]
    logger.debug("Rasterized %dx%d image to %dx%d grid", image.width, image.height, cols, rows)
    return AsciiGrid(rows=lines)
