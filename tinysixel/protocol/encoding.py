from __future__ import annotations

import logging
from typing import BinaryIO, Iterable, Iterator, List, Optional, Sequence

from .types import InvalidDimensionsError

logger = logging.getLogger(__name__)

SIXEL_BASE = 63
STRIP_HEIGHT = 6
CARRIAGE_RETURN = ord("$")
NEXT_LINE = ord("-")


def write_all(output: BinaryIO, data: bytes) -> None:
    """Write every byte of `data`, looping over short writes.

    A `None` result is taken as a complete write, as buffered streams and
    most file-like wrappers return. A raw stream that accepts nothing raises
    `OSError`.
    """
    offset = 0
    while offset < len(data):
        written = output.write(data[offset:])
        if written is None:
            return
        if written <= 0:
            raise OSError("Output accepted no data")
        offset += written


def strip_rows(pixels: Sequence[int], width: int, strip: int) -> List[Sequence[int]]:
    """Return the six pixel rows that make up a strip."""
    base_y = strip * STRIP_HEIGHT
    return [
        pixels[(base_y + i) * width : (base_y + i + 1) * width]
        for i in range(STRIP_HEIGHT)
    ]


def strip_colors(pixels: Sequence[int], width: int, strip: int) -> List[int]:
    """List the color indices of a strip in first-seen (row-major) order."""
    start = strip * STRIP_HEIGHT * width
    seen = set()
    colors: List[int] = []
    for color in pixels[start : start + STRIP_HEIGHT * width]:
        if color not in seen:
            seen.add(color)
            colors.append(color)
    return colors


def column_chars(rows: Sequence[Sequence[int]], color: int) -> Iterator[int]:
    """Yield one sixel character per column: bit i is set where row i has `color`."""
    for column in zip(*rows):
        ch = SIXEL_BASE
        for bit, value in enumerate(column):
            if value == color:
                ch += 1 << bit
        yield ch


def encode_run(out: bytearray, char: int, count: int) -> None:
    """Append a single run of identical sixel characters."""
    if count > 2:
        out += b"!%d" % count
        out.append(char)
    elif count == 2:
        out.append(char)
        out.append(char)
    elif count == 1:
        out.append(char)


def rle_encode_line(line: Iterable[int], out: Optional[bytearray] = None) -> bytearray:
    """RLE-encode a line of sixel characters with the `!<count><char>` form."""
    if out is None:
        out = bytearray()
    last_char = 0
    last_count = 0
    for ch in line:
        if ch == last_char:
            last_count += 1
        else:
            encode_run(out, last_char, last_count)
            last_char = ch
            last_count = 1
    encode_run(out, last_char, last_count)
    return out


def encode_strip_color(out: bytearray, rows: Sequence[Sequence[int]], color: int) -> bytearray:
    """Append the `#<color><runs>$` block for one color of a strip."""
    out += b"#%d" % color
    rle_encode_line(column_chars(rows, color), out)
    out.append(CARRIAGE_RETURN)
    return out


def encode_strips(output: BinaryIO, pixels: Sequence[int], width: int, height: int) -> None:
    """Write every strip of a row-major indexed raster to `output`.

    Only the sixel data is written; entering sixel mode and defining the
    palette is up to the caller. Errors raised by `output.write` propagate.
    """
    if height <= 0 or height % STRIP_HEIGHT != 0:
        raise InvalidDimensionsError("Height must be a positive multiple of 6")
    if len(pixels) != width * height:
        raise InvalidDimensionsError("Pixels length must equal width * height")
    strips = height // STRIP_HEIGHT
    logger.debug("Encoding %dx%d raster in %d strips", width, height, strips)
    buf = bytearray()
    for strip in range(strips):
        rows = strip_rows(pixels, width, strip)
        for color in strip_colors(pixels, width, strip):
            buf.clear()
            encode_strip_color(buf, rows, color)
            write_all(output, bytes(buf))
        write_all(output, bytes([NEXT_LINE]))
