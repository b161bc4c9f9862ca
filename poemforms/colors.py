"""Deterministic author colors."""

import colorsys
from dataclasses import dataclass

SATURATION = 65
LIGHTNESS = 60
_MASK_32 = 0xFFFFFFFF


@dataclass(frozen=True)
class Color:
    hue: int
    saturation: int = SATURATION
    lightness: int = LIGHTNESS

    @property
    def css(self) -> str:
        return f"hsl({self.hue} {self.saturation}% {self.lightness}%)"

    @property
    def rgb(self) -> tuple[int, int, int]:
        """0-255 RGB, for raster output."""
        r, g, b = colorsys.hls_to_rgb(
            self.hue / 360, self.lightness / 100, self.saturation / 100
        )
        return (round(r * 255), round(g * 255), round(b * 255))


def _code_units(seed: str) -> list[int]:
    # UTF-16 code units, so astral characters hash as surrogate pairs.
    data = seed.encode("utf-16-le", "surrogatepass")
    return [int.from_bytes(data[i:i + 2], "little") for i in range(0, len(data), 2)]


def hash_seed(seed: str) -> int:
    """32-bit unsigned rolling hash: h = (h * 31 + code) mod 2**32."""
    h = 0
    for code in _code_units(seed):
        h = (h * 31 + code) & _MASK_32
    return h


def derive_color(seed: str) -> Color:
    """Map a seed string (an author name) to a soft, stable color."""
    return Color(hue=hash_seed(seed) % 360)
