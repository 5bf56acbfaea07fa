from __future__ import annotations

from typing import List, Optional

from .base import Page, RasterConverter, prepare_image


class ImageConverter(RasterConverter):
    def load(self, path: str, width: Optional[int]) -> List[Page]:
        img = prepare_image(self._load_image(path), width)
        return [Page(img)]
