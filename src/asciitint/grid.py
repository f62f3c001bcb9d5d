from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AsciiGrid:
    rows: list[str]  # one string per row, all the same length

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def text(self) -> str:
        return "\n".join(self.rows)

    def __str__(self) -> str:
        return self.text
