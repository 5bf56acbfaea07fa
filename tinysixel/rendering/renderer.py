from __future__ import annotations

import colorsys
from typing import List, Sequence, Tuple

from PIL import Image

from ..image import SixelImage
from ..protocol.types import ColorSpace, SixelColor

MAX_COLORS = 256
# DEC terminals put blue at 0 degrees, red at 120 and green at 240.
DEC_HUE_OFFSET = 120


def rgb_to_sixel_color(rgb: Sequence[int], space: ColorSpace = ColorSpace.RGB) -> SixelColor:
    """Convert an 8-bit RGB triple into a sixel register value."""
    r, g, b = rgb
    if space == ColorSpace.HLS:
        h, l, s = colorsys.rgb_to_hls(r / 255.0, g / 255.0, b / 255.0)
        hue = (int(round(h * 360)) + DEC_HUE_OFFSET) % 360
        return SixelColor.hls(hue, int(round(l * 100)), int(round(s * 100)))
    return SixelColor.rgb(*(int(round(c * 100 / 255.0)) for c in (r, g, b)))


def image_to_sixel(
    img: Image.Image,
    colors: int = MAX_COLORS,
    dither: bool = True,
    space: ColorSpace = ColorSpace.RGB,
) -> Tuple[SixelImage, List[SixelColor]]:
    """Quantize a Pillow image into an indexed sixel image and its palette."""
    if not 1 <= colors <= MAX_COLORS:
        raise ValueError(f"Colors must be between 1 and {MAX_COLORS}")
    method = Image.Dither.FLOYDSTEINBERG if dither else Image.Dither.NONE
    quantized = img.convert("RGB").quantize(colors=colors, dither=method)
    pixels = list(quantized.tobytes())
    image = SixelImage.from_pixels(pixels, quantized.width)
    raw = quantized.getpalette() or []
    used = max(pixels) + 1 if pixels else 0
    palette = [rgb_to_sixel_color(raw[i * 3 : i * 3 + 3], space) for i in range(used)]
    return image, palette
