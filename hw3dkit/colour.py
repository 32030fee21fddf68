"""RGBA colours as used by meshes and drawing routines."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Pixel:
    """An 8-bit-per-channel RGBA colour."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"channel {name} must be an integer in 0..255, got {value!r}")

    def packed(self) -> int:
        """The colour as one 32-bit integer, red in the lowest byte."""
        return self.r | (self.g << 8) | (self.b << 16) | (self.a << 24)


WHITE = Pixel(255, 255, 255)
GREY = Pixel(192, 192, 192)
RED = Pixel(255, 0, 0)
YELLOW = Pixel(255, 255, 0)
GREEN = Pixel(0, 255, 0)
BLUE = Pixel(0, 0, 255)
BLACK = Pixel(0, 0, 0)
BLANK = Pixel(0, 0, 0, 0)