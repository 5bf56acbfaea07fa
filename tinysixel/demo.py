from __future__ import annotations

import io
import math
from typing import BinaryIO

from .image import SixelImage
from .palette import DEFAULT_HUE_REGISTERS, HueWheelPalette
from .protocol import write_job

DEFAULT_SIZE = 600


def radial_gradient(
    width: int = DEFAULT_SIZE,
    height: int = DEFAULT_SIZE,
    registers: int = DEFAULT_HUE_REGISTERS,
) -> SixelImage:
    """Draw concentric rings: the register grows with the distance from the center."""
    image = SixelImage(width, height)
    radius = math.hypot(width, height) / 2.0
    ox = width // 2
    oy = height // 2
    for y in range(height):
        for x in range(width):
            val = int(math.hypot(ox - x, oy - y) / radius * registers)
            image.set(x, y, min(val, registers - 1))
    return image


def write_demo(
    output: BinaryIO,
    width: int = DEFAULT_SIZE,
    height: int = DEFAULT_SIZE,
    registers: int = DEFAULT_HUE_REGISTERS,
    rescale_hue: bool = False,
    raster_attributes: bool = True,
) -> None:
    """Write the gradient with its hue wheel palette as a complete document."""
    image = radial_gradient(width, height, registers)
    palette = HueWheelPalette(registers, rescale=rescale_hue)
    write_job(output, image, palette, raster_attributes=raster_attributes)


def demo_job(
    width: int = DEFAULT_SIZE,
    height: int = DEFAULT_SIZE,
    registers: int = DEFAULT_HUE_REGISTERS,
    rescale_hue: bool = False,
    raster_attributes: bool = True,
) -> bytes:
    out = io.BytesIO()
    write_demo(out, width, height, registers, rescale_hue, raster_attributes)
    return out.getvalue()
