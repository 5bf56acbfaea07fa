from __future__ import annotations

import io
import logging
import os
from dataclasses import dataclass
from typing import BinaryIO, Optional

from PIL import Image

from .palette import FixedPalette
from .protocol import ColorSpace, write_job
from .rendering import SUPPORTED_EXTENSIONS, Page, load_pages
from .rendering.converters.base import prepare_image
from .rendering.renderer import MAX_COLORS, image_to_sixel

logger = logging.getLogger(__name__)

DEFAULT_COLORS = MAX_COLORS


@dataclass
class RenderSettings:
    width: Optional[int] = None
    colors: Optional[int] = None
    dither: bool = True
    space: ColorSpace = ColorSpace.RGB
    raster_attributes: bool = True


class SixelJobBuilder:
    def __init__(self, settings: Optional[RenderSettings] = None) -> None:
        self.settings = settings or RenderSettings()

    def build_from_file(self, path: str) -> bytes:
        out = io.BytesIO()
        self.write_from_file(path, out)
        return out.getvalue()

    def write_from_file(self, path: str, output: BinaryIO) -> None:
        self._validate_input_path(path)
        for page in load_pages(path, self.settings.width):
            self._write_page(page, output)

    def build_from_image(self, img: Image.Image) -> bytes:
        img = prepare_image(img, self.settings.width)
        out = io.BytesIO()
        self._write_page(Page(img), out)
        return out.getvalue()

    def _write_page(self, page: Page, output: BinaryIO) -> None:
        image, colors = image_to_sixel(
            page.image,
            colors=self._colors(),
            dither=self.settings.dither,
            space=self.settings.space,
        )
        logger.debug("Rendering %r with %d palette entries", image, len(colors))
        write_job(
            output,
            image,
            FixedPalette(colors),
            raster_attributes=self.settings.raster_attributes,
        )

    def _colors(self) -> int:
        if self.settings.colors is not None:
            return self.settings.colors
        return DEFAULT_COLORS

    @staticmethod
    def _validate_input_path(path: str) -> None:
        ext = os.path.splitext(path)[1].lower()
        if ext not in SUPPORTED_EXTENSIONS:
            raise ValueError("Supported formats: " + ", ".join(sorted(SUPPORTED_EXTENSIONS)))
        if not os.path.isfile(path):
            raise FileNotFoundError(f"File not found: {path}")
