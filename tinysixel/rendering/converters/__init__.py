from __future__ import annotations

import os
from typing import Dict, List, Optional

from .base import Page, PageConverter
from .image import ImageConverter

IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg", ".gif", ".bmp", ".webp")

_image_converter = ImageConverter()
CONVERTERS: Dict[str, PageConverter] = {ext: _image_converter for ext in IMAGE_EXTENSIONS}
SUPPORTED_EXTENSIONS = frozenset(CONVERTERS)


def load_pages(path: str, width: Optional[int]) -> List[Page]:
    """Load `path` with the converter registered for its extension."""
    ext = os.path.splitext(path)[1].lower()
    converter = CONVERTERS.get(ext)
    if not converter:
        raise ValueError(f"Unsupported file extension: {ext}")
    return converter.load(path, width)


__all__ = ["CONVERTERS", "Page", "PageConverter", "SUPPORTED_EXTENSIONS", "load_pages"]
