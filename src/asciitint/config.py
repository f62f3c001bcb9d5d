from dataclasses import dataclass

from asciitint.charsets import CELL_ASPECT, DEFAULT_WIDTH, DENSITY_RAMP
from asciitint.colours import SAMPLING_POLICIES
from asciitint.errors import InvalidWidthError


@dataclass
class RenderConfig:
    width: int = DEFAULT_WIDTH
    colour: bool = True
    sampling: str = "nearest"
    ramp: str = DENSITY_RAMP
    cell_aspect: float = CELL_ASPECT

    def validate(self) -> "RenderConfig":
        if isinstance(self.width, bool) or not isinstance(self.width, int) or self.width <= 0:
            raise InvalidWidthError(f"Width must be a positive integer, got {self.width!r}")
        if self.sampling not in SAMPLING_POLICIES:
            raise ValueError(f"Unknown sampling policy: {self.sampling!r}")
        if not self.ramp:
            raise ValueError("Glyph ramp must not be empty")
        if self.cell_aspect <= 0:
            raise ValueError(f"Cell aspect must be positive, got {self.cell_aspect!r}")
        return self
