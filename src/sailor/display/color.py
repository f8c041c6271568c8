from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(slots=True, frozen=True)
class Color:
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for variant in self._as_tuple():
            assert 0 <= variant <= 255, (
                f"Expected all color values to be between 0 and 255. Found {self._as_tuple()}"
            )

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse ``#RRGGBB`` (the leading ``#`` is optional)."""

        digits = value.lstrip("#")
        if len(digits) != 6:
            raise ValueError(f"Expected a #RRGGBB colour, got {value!r}")
        return cls(
            r=int(digits[0:2], 16),
            g=int(digits[2:4], 16),
            b=int(digits[4:6], 16),
        )

    def tuple(self) -> tuple[int, int, int]:
        return self._as_tuple()

    def _as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def __iter__(self) -> Iterator[int]:
        return iter(self._as_tuple())

    def __getitem__(self, index: int) -> int:
        return self._as_tuple()[index]


WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
GRAY = Color(136, 136, 136)
DARK_GRAY = Color(68, 68, 68)
