from .converters import Page, SUPPORTED_EXTENSIONS, load_pages
from .renderer import image_to_sixel, rgb_to_sixel_color

__all__ = [
    "image_to_sixel",
    "load_pages",
    "Page",
    "rgb_to_sixel_color",
    "SUPPORTED_EXTENSIONS",
]
