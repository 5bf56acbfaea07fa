from .image import SixelImage
from .palette import FixedPalette, HueWheelPalette, PaletteInitializer, define_palette
from .protocol import (
    ColorSpace,
    InvalidDimensionsError,
    SixelColor,
    build_job,
    color_cmd,
    enter_cmd,
    exit_cmd,
    write_job,
)

__version__ = "0.2.0"

__all__ = [
    "build_job",
    "color_cmd",
    "ColorSpace",
    "define_palette",
    "enter_cmd",
    "exit_cmd",
    "FixedPalette",
    "HueWheelPalette",
    "InvalidDimensionsError",
    "PaletteInitializer",
    "SixelColor",
    "SixelImage",
    "write_job",
]
