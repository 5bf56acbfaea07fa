from __future__ import annotations

import io
import logging
from typing import TYPE_CHECKING, BinaryIO, Optional

from .commands import enter_cmd, exit_cmd, raster_attributes_cmd
from .encoding import write_all

if TYPE_CHECKING:
    from ..image import SixelImage
    from ..palette import PaletteInitializer

logger = logging.getLogger(__name__)


def write_job(
    output: BinaryIO,
    image: "SixelImage",
    palette: Optional["PaletteInitializer"] = None,
    raster_attributes: bool = False,
) -> None:
    """Write a complete sixel document: enter, palette, image data, exit."""
    write_all(output, enter_cmd())
    if raster_attributes:
        write_all(output, raster_attributes_cmd(image.width, image.height))
    if palette is not None:
        palette.define(output)
    image.encode(output)
    write_all(output, exit_cmd())


def build_job(
    image: "SixelImage",
    palette: Optional["PaletteInitializer"] = None,
    raster_attributes: bool = False,
) -> bytes:
    """Build a complete sixel document in memory."""
    out = io.BytesIO()
    write_job(out, image, palette, raster_attributes)
    data = out.getvalue()
    logger.debug("Built sixel job for %r: %d bytes", image, len(data))
    return data
