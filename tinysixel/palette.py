from __future__ import annotations

from typing import BinaryIO, Iterable, List, Sequence

from .protocol.commands import color_cmd
from .protocol.encoding import write_all
from .protocol.types import SixelColor

DEFAULT_HUE_REGISTERS = 360


def define_palette(output: BinaryIO, colors: Iterable[SixelColor]) -> int:
    """Write one register definition per color, starting at index 0.

    Returns the number of registers defined.
    """
    count = 0
    for index, color in enumerate(colors):
        write_all(output, color_cmd(index, color))
        count += 1
    return count


class PaletteInitializer:
    """Defines color registers 0..N-1 on an output stream in sixel mode."""

    def colors(self) -> List[SixelColor]:
        raise NotImplementedError

    def define(self, output: BinaryIO) -> None:
        define_palette(output, self.colors())

    def __len__(self) -> int:
        return len(self.colors())


class FixedPalette(PaletteInitializer):
    def __init__(self, colors: Sequence[SixelColor]) -> None:
        self._colors = list(colors)

    def colors(self) -> List[SixelColor]:
        return list(self._colors)

    def __len__(self) -> int:
        return len(self._colors)


class HueWheelPalette(PaletteInitializer):
    """HLS palette sweeping the hue across `count` registers.

    By default hue runs over the full 0-360 degree circle. With `rescale`
    the register number is mapped onto 0-100 instead, which only covers
    part of the circle.
    """

    def __init__(
        self,
        count: int = DEFAULT_HUE_REGISTERS,
        lightness: int = 50,
        saturation: int = 100,
        rescale: bool = False,
    ) -> None:
        if count <= 0:
            raise ValueError("Palette must have at least one register")
        self.count = count
        self.lightness = lightness
        self.saturation = saturation
        self.rescale = rescale

    def hue(self, index: int) -> int:
        if self.rescale:
            return int(index / self.count * 100)
        return index * 360 // self.count

    def colors(self) -> List[SixelColor]:
        return [
            SixelColor.hls(self.hue(i), self.lightness, self.saturation)
            for i in range(self.count)
        ]

    def __len__(self) -> int:
        return self.count
