from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

MAX_COLOR_INDEX = 0xFFFF


class InvalidDimensionsError(ValueError):
    """Raised when an image cannot be split into six-row strips."""


class ColorSpace(IntEnum):
    """Color space codes used by the sixel color introducer."""

    HLS = 1
    RGB = 2


@dataclass(frozen=True)
class SixelColor:
    """A color register value in one of the two sixel color spaces.

    RGB components are percents (0-100). For HLS, hue is given in degrees
    (0-360) while lightness and saturation are percents.
    """

    space: ColorSpace
    c1: int
    c2: int
    c3: int

    def __post_init__(self) -> None:
        self.validate()

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> "SixelColor":
        return cls(ColorSpace.RGB, r, g, b)

    @classmethod
    def hls(cls, h: int, l: int, s: int) -> "SixelColor":
        return cls(ColorSpace.HLS, h, l, s)

    def validate(self) -> None:
        """Validate component ranges for the color space."""
        if self.space == ColorSpace.HLS:
            if not 0 <= self.c1 <= 360:
                raise ValueError("Hue must be between 0 and 360")
            rest = (self.c2, self.c3)
        else:
            rest = (self.c1, self.c2, self.c3)
        for value in rest:
            if not 0 <= value <= 100:
                raise ValueError("Color percentages must be between 0 and 100")

    @property
    def components(self) -> tuple:
        return (self.c1, self.c2, self.c3)
