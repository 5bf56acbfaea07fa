from __future__ import annotations

from .types import MAX_COLOR_INDEX, SixelColor

ESC = 0x1B


def enter_cmd() -> bytes:
    """Build the device control string that enters sixel mode (ESC P q)."""
    return bytes([ESC, ord("P"), ord("q")])


def exit_cmd() -> bytes:
    """Build the string terminator that leaves sixel mode (ESC \\)."""
    return bytes([ESC, ord("\\")])


def color_cmd(index: int, color: SixelColor) -> bytes:
    """Build the command that sets color register `index` to `color`."""
    if not 0 <= index <= MAX_COLOR_INDEX:
        raise ValueError(f"Color index out of range: {index}")
    c1, c2, c3 = color.components
    return f"#{index};{int(color.space)};{c1};{c2};{c3}".encode("ascii")


def raster_attributes_cmd(width: int, height: int) -> bytes:
    """Build the raster attributes command (1:1 aspect, image size)."""
    if width < 0 or height < 0:
        raise ValueError("Raster size must not be negative")
    return f'"1;1;{width};{height}'.encode("ascii")
