"""RGBA colours in non-linear sRGB space."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace


def _to_byte(value: float) -> int:
    scaled = value * 255.0
    if math.isnan(scaled) or scaled <= 0.0:
        return 0
    if scaled >= 255.0:
        return 255
    return int(scaled)


@dataclass(frozen=True)
class Color:
    """An sRGB colour with alpha, components nominally in ``0..1``."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @classmethod
    def rgb(cls, r: float, g: float, b: float) -> Color:
        """Opaque colour from sRGB components."""
        return cls(r, g, b, 1.0)

    @classmethod
    def rgba(cls, r: float, g: float, b: float, a: float) -> Color:
        """Colour from sRGB components and alpha."""
        return cls(r, g, b, a)

    @classmethod
    def hsla(cls, hue: float, saturation: float, lightness: float, alpha: float) -> Color:
        """Colour from hue in degrees, saturation, lightness and alpha."""
        chroma = (1.0 - abs(2.0 * lightness - 1.0)) * saturation
        hue_prime = hue / 60.0
        largest = chroma * (1.0 - abs(math.fmod(hue_prime, 2.0) - 1.0))
        if hue_prime < 1.0:
            r, g, b = chroma, largest, 0.0
        elif hue_prime < 2.0:
            r, g, b = largest, chroma, 0.0
        elif hue_prime < 3.0:
            r, g, b = 0.0, chroma, largest
        elif hue_prime < 4.0:
            r, g, b = 0.0, largest, chroma
        elif hue_prime < 5.0:
            r, g, b = largest, 0.0, chroma
        else:
            r, g, b = chroma, 0.0, largest
        offset = lightness - chroma / 2.0
        return cls(r + offset, g + offset, b + offset, alpha)

    def with_alpha(self, alpha: float) -> Color:
        """Return a copy with a different alpha."""
        return replace(self, alpha=alpha)

    def as_rgba_f32(self) -> list[float]:
        """Return ``[r, g, b, a]``."""
        return [self.red, self.green, self.blue, self.alpha]

    def as_rgba_u32(self) -> int:
        """Pack the colour into a 32-bit integer, red in the lowest byte."""
        r, g, b, a = (_to_byte(c) for c in self.as_rgba_f32())
        return r | (g << 8) | (b << 16) | (a << 24)

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(
            self.red + other.red,
            self.green + other.green,
            self.blue + other.blue,
            self.alpha + other.alpha,
        )

    def __mul__(self, scalar: float) -> Color:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Color(self.red * scalar, self.green * scalar, self.blue * scalar, self.alpha)


WHITE = Color.rgb(1.0, 1.0, 1.0)
RED = Color.rgb(1.0, 0.0, 0.0)
GREEN = Color.rgb(0.0, 1.0, 0.0)
BLUE = Color.rgb(0.0, 0.0, 1.0)