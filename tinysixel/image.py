from __future__ import annotations

import io
from typing import BinaryIO, List, Optional, Sequence

from .protocol.encoding import STRIP_HEIGHT, encode_strips, strip_colors
from .protocol.types import MAX_COLOR_INDEX, InvalidDimensionsError


class SixelImage:
    """Indexed pixel buffer that encodes itself as sixel strips.

    Every pixel holds a color register index (0-65535), not a color. The
    registers themselves are defined separately, see `tinysixel.palette`.
    """

    def __init__(self, width: int, height: int) -> None:
        self._validate_size(width, height)
        self._width = width
        self._height = height
        self._pixels: List[int] = [0] * (width * height)

    @classmethod
    def from_pixels(
        cls, pixels: Sequence[int], width: int, height: Optional[int] = None
    ) -> "SixelImage":
        """Build an image from a row-major list of color indices.

        The height is derived from the pixel count unless given; it has to be
        given for zero-width images.
        """
        if height is None:
            if width == 0:
                raise InvalidDimensionsError("Height is required for zero-width images")
            if width < 0 or len(pixels) % width != 0:
                raise InvalidDimensionsError("Pixels length must be a multiple of width")
            height = len(pixels) // width
        image = cls(width, height)
        if len(pixels) != width * height:
            raise InvalidDimensionsError("Pixels length must equal width * height")
        for color in pixels:
            cls._validate_color(color)
        image._pixels = list(pixels)
        return image

    @staticmethod
    def _validate_size(width: int, height: int) -> None:
        if width < 0:
            raise InvalidDimensionsError("Width must not be negative")
        if height <= 0 or height % STRIP_HEIGHT != 0:
            raise InvalidDimensionsError("Height must be a positive multiple of 6")

    @staticmethod
    def _validate_color(color: int) -> None:
        if not 0 <= color <= MAX_COLOR_INDEX:
            raise ValueError(f"Color index out of range: {color}")

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def strip_count(self) -> int:
        return self._height // STRIP_HEIGHT

    @property
    def pixels(self) -> List[int]:
        """Return a copy of the row-major pixel buffer."""
        return list(self._pixels)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self._width}x{self._height} image")
        return x + y * self._width

    def set(self, x: int, y: int, color: int) -> None:
        """Set pixel (x, y) to color register `color`."""
        self._validate_color(color)
        self._pixels[self._offset(x, y)] = color

    def get(self, x: int, y: int) -> int:
        """Return the color register of pixel (x, y)."""
        return self._pixels[self._offset(x, y)]

    def colors_in_strip(self, strip: int) -> List[int]:
        """Return the distinct colors of a strip in the order they are first seen."""
        if not 0 <= strip < self.strip_count:
            raise IndexError(f"Strip {strip} outside image with {self.strip_count} strips")
        return strip_colors(self._pixels, self._width, strip)

    def encode(self, output: BinaryIO) -> None:
        """Write the sixel data of the image to `output`.

        The terminal must already be in sixel mode with the palette defined.
        """
        encode_strips(output, self._pixels, self._width, self._height)

    def to_bytes(self) -> bytes:
        out = io.BytesIO()
        self.encode(out)
        return out.getvalue()

    def __repr__(self) -> str:
        return f"SixelImage(width={self._width}, height={self._height})"
