import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version

from asciitint.charsets import DEFAULT_WIDTH
from asciitint.colours import SAMPLING_POLICIES
from asciitint.config import RenderConfig
from asciitint.converter import render
from asciitint.errors import AsciiTintError
from asciitint.terminal import get_terminal_size


def _version() -> str:
    try:
        return version("asciitint")
    except PackageNotFoundError:
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="asciitint", description="Render an image as colourised ASCII art")
    parser.add_argument("-i", "--input", required=True, help="Path to input image")
    parser.add_argument(
        "-w", "--width", type=int, default=DEFAULT_WIDTH, help=f"Output width in columns (default: {DEFAULT_WIDTH})"
    )
    parser.add_argument(
        "--fit", action="store_true", default=False, help="Use the terminal width instead of --width"
    )
    parser.add_argument(
        "-s",
        "--sampling",
        default="nearest",
        choices=SAMPLING_POLICIES,
        help="How each glyph's colour is taken from the image (default: nearest)",
    )
    parser.add_argument("--no-colour", action="store_true", default=False, help="Disable truecolor ANSI output")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug output to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_version()}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)
    logging.getLogger("asciitint").setLevel(level)

    width = get_terminal_size()[0] if args.fit else args.width
    config = RenderConfig(width=width, colour=not args.no_colour, sampling=args.sampling)

    try:
        render(args.input, config)
    except AsciiTintError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
