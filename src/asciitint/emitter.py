import logging
import sys
from contextlib import contextmanager
from typing import Iterator, TextIO

import numpy as np
from PIL import Image

from asciitint.colours import sample_colours
from asciitint.grid import AsciiGrid
from asciitint.terminal import RESET, foreground_rgb

logger = logging.getLogger(__name__)


def _format_rows(grid: AsciiGrid, colours: np.ndarray) -> Iterator[str]:
    for r, line in enumerate(grid.rows):
        parts = []
        for c, char in enumerate(line):
            fr, fg, fb = int(colours[r, c, 0]), int(colours[r, c, 1]), int(colours[r, c, 2])
            parts.append(f"{foreground_rgb(fr, fg, fb)}{char}")
        yield "".join(parts)


def _check_shape(grid: AsciiGrid, colours: np.ndarray) -> None:
    if colours.shape != (grid.height, grid.width, 3):
        raise ValueError(f"Colour array shape {colours.shape} does not match {grid.width}x{grid.height} grid")


def format_colour(grid: AsciiGrid, colours: np.ndarray) -> str:
    """Prefix each glyph with its truecolor escape and reset once at the end."""
    _check_shape(grid, colours)
    return "\n".join(_format_rows(grid, colours)) + RESET


def format_plain(grid: AsciiGrid) -> str:
    return grid.text


@contextmanager
def colour_session(stream: TextIO) -> Iterator[list[str]]:
    """Collect output chunks and write them in one go, always ending with a colour reset.

    The reset and the flush happen even if the body raises, so the terminal
    is never left painted.
    """
    chunks: list[str] = []
    try:
        yield chunks
    finally:
        chunks.append(RESET + "\n")
        stream.write("".join(chunks))
        stream.flush()


def emit(
    grid: AsciiGrid,
    image: Image.Image,
    stream: TextIO | None = None,
    sampling: str = "nearest",
) -> None:
    """Write the grid to a stream, painting every glyph with its source colour."""
    if stream is None:
        stream = sys.stdout
    colours = sample_colours(image, grid.width, grid.height, sampling)
    _check_shape(grid, colours)
    logger.debug("Emitting %dx%d grid with %s sampling", grid.width, grid.height, sampling)

    with colour_session(stream) as chunks:
        for i, row in enumerate(_format_rows(grid, colours)):
            if i:
                chunks.append("\n")
            chunks.append(row)
