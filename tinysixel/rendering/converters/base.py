from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from PIL import Image, ImageOps

from ...protocol.encoding import STRIP_HEIGHT


@dataclass(frozen=True)
class Page:
    image: Image.Image


class PageConverter:
    def load(self, path: str, width: Optional[int]) -> List[Page]:
        raise NotImplementedError


class RasterConverter(PageConverter):
    @staticmethod
    def _load_image(path: str) -> Image.Image:
        with Image.open(path) as img:
            img = ImageOps.exif_transpose(img)
            return img.copy()

    @staticmethod
    def _normalize_image(img: Image.Image) -> Image.Image:
        if img.mode != "RGB":
            return img.convert("RGB")
        return img

    @staticmethod
    def _resize_to_width(img: Image.Image, width: Optional[int]) -> Image.Image:
        if not width or img.width == width:
            return img
        ratio = width / float(img.width)
        height = max(1, int(img.height * ratio))
        return img.resize((width, height), Image.LANCZOS)

    @staticmethod
    def _fit_to_strips(img: Image.Image) -> Image.Image:
        """Crop or stretch the height to a whole number of six-row strips."""
        if img.height < STRIP_HEIGHT:
            return img.resize((img.width, STRIP_HEIGHT), Image.LANCZOS)
        extra = img.height % STRIP_HEIGHT
        if extra == 0:
            return img
        return img.crop((0, 0, img.width, img.height - extra))


def prepare_image(img: Image.Image, width: Optional[int] = None) -> Image.Image:
    """Normalize, resize and fit an in-memory image the way files are loaded."""
    img = RasterConverter._normalize_image(img)
    return RasterConverter._fit_to_strips(RasterConverter._resize_to_width(img, width))
