from .commands import color_cmd, enter_cmd, exit_cmd, raster_attributes_cmd
from .encoding import (
    column_chars,
    encode_run,
    encode_strip_color,
    encode_strips,
    rle_encode_line,
    strip_colors,
    strip_rows,
    write_all,
)
from .job import build_job, write_job
from .types import ColorSpace, InvalidDimensionsError, SixelColor

__all__ = [
    "build_job",
    "color_cmd",
    "ColorSpace",
    "column_chars",
    "encode_run",
    "encode_strip_color",
    "encode_strips",
    "enter_cmd",
    "exit_cmd",
    "InvalidDimensionsError",
    "raster_attributes_cmd",
    "rle_encode_line",
    "SixelColor",
    "strip_colors",
    "strip_rows",
    "write_all",
    "write_job",
]
