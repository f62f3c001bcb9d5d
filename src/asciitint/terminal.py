import os
import sys
from typing import TextIO

RESET = "\033[0m"

FALLBACK_SIZE = (80, 24)


def foreground_rgb(r: int, g: int, b: int) -> str:
    """Escape sequence setting the truecolor foreground."""
    return f"\033[38;2;{r};{g};{b}m"


def get_terminal_size(stream: TextIO | None = None) -> tuple[int, int]:
    """Return (columns, rows) of the terminal behind stream (stdout by default).

    Falls back to FALLBACK_SIZE when the stream is not a tty or reports no size.
    """
    if stream is None:
        stream = sys.stdout
    if not stream.isatty():
        return FALLBACK_SIZE
    try:
        size = os.get_terminal_size(stream.fileno())
    except (OSError, ValueError):
        return FALLBACK_SIZE
    if size.columns <= 0:
        return FALLBACK_SIZE
    return (size.columns, size.lines)
