class AsciiTintError(Exception):
    """Base class for errors reported to the user."""


class DecodeError(AsciiTintError):
    """The image could not be opened or decoded."""


class InvalidWidthError(AsciiTintError, ValueError):
    """The requested grid width is not a positive integer."""
