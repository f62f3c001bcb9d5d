import logging
import sys
from pathlib import Path
from typing import TextIO

from PIL import Image

from asciitint.charsets import DEFAULT_WIDTH
from asciitint.colours import sample_colours
from asciitint.config import RenderConfig
from asciitint.emitter import emit, format_colour, format_plain
from asciitint.loader import load_image
from asciitint.rasterizer import rasterize

logger = logging.getLogger(__name__)


def image_to_ascii(
    image: Image.Image | str | Path,
    width: int = DEFAULT_WIDTH,
    colour: bool = True,
    sampling: str = "nearest",
) -> str:
    if not isinstance(image, Image.Image):
        image = load_image(image)

    grid = rasterize(image, width)
    if colour:
        colours = sample_colours(image, grid.width, grid.height, sampling)
        return format_colour(grid, colours)
    return format_plain(grid)


def render(path: str | Path, config: RenderConfig | None = None, stream: TextIO | None = None) -> None:
    """Load an image once, rasterize it and write it to the stream."""
    config = (config or RenderConfig()).validate()
    if stream is None:
        stream = sys.stdout

    image = load_image(path)
    grid = rasterize(image, config.width, ramp=config.ramp, cell_aspect=config.cell_aspect)
    if config.colour:
        emit(grid, image, stream=stream, sampling=config.sampling)
    else:
        stream.write(format_plain(grid) + "\n")
        stream.flush()
    logger.debug("Rendered %s", path)
