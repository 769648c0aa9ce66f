from __future__ import annotations

"""Core color type used by the colorscale library.

:class:`Color` is an immutable OKLCH triple. Constructors and exporters
for the other supported formats route through :mod:`colorscale.spaces`.
"""

import math
from dataclasses import dataclass, replace
from typing import Optional

from . import spaces
from .engine import OKLCH, RGB, oklch_to_rgb, rgb_to_oklch
from .gamut import in_gamut, max_in_gamut_chroma


@dataclass(frozen=True)
class Color:
    """Concrete color in OKLCH.

    Attributes
    ----------
    l:
        Lightness in [0, 1]; 0 is black, 1 is white.
    c:
        Chroma, non-negative and typically below 0.4.
    h:
        Hue in degrees, [0, 360). May be NaN for achromatic colors.
    """

    l: float
    c: float
    h: float

    # --- constructors ---
    @classmethod
    def from_oklch(cls, l: float, c: float, h: float) -> "Color":
        return cls(l, c, h)

    @classmethod
    def from_hex(cls, hex_str: str) -> "Color":
        """Create a Color from ``#rrggbb``, ``rrggbb`` or ``#rgb``."""
        return cls(*spaces.hex_to_oklch(hex_str))

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float) -> "Color":
        """Create a Color from sRGB channels in [0, 255]."""
        return cls(*rgb_to_oklch(r, g, b))

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float) -> "Color":
        """Create a Color from HSL (h in degrees, s/l in [0, 100])."""
        return cls(*spaces.hsl_to_oklch(h, s, l))

    @classmethod
    def from_hsluv(cls, h: float, s: float, l: float) -> "Color":
        """Create a Color from HSLuv (h in degrees, s/l in [0, 100])."""
        return cls(*spaces.hsluv_to_oklch(h, s, l))

    # --- exporters ---
    def to_oklch(self) -> OKLCH:
        return (self.l, self.c, self.h)

    def to_hex(self) -> str:
        return spaces.oklch_to_hex(self.l, self.c, self.h)

    def to_rgb(self) -> spaces.RGB255:
        """Return integer sRGB, rounded and clamped to [0, 255]."""
        return spaces.oklch_to_rgb255(self.l, self.c, self.h)

    def to_hsl(self) -> spaces.HSL:
        return spaces.oklch_to_hsl(self.l, self.c, self.h)

    def to_hsluv(self) -> spaces.HSL:
        return spaces.oklch_to_hsluv(self.l, self.c, self.h)

    def to_srgb(self) -> RGB:
        """Return the unclamped sRGB projection on the 0-255 scale."""
        return oklch_to_rgb(self.l, self.c, self.h)

    @property
    def hue(self) -> float:
        """Hue with an undefined (NaN) value reported as 0."""
        return 0.0 if math.isnan(self.h) else self.h

    # --- gamut ---
    def is_in_gamut(self) -> bool:
        return in_gamut(self.to_srgb())

    def clamp_to_rgb(self, epsilon: Optional[float] = None) -> "Color":
        """Return the color reduced in chroma until it fits sRGB.

        Lightness and hue are preserved; an in-gamut color is returned
        unchanged (the same object).
        """
        c = max_in_gamut_chroma(self.l, self.c, self.h, epsilon)
        if c == self.c:
            return self
        return replace(self, c=c)

    # --- derived colors ---
    def with_lightness(self, l: float) -> "Color":
        return replace(self, l=l)

    def with_chroma(self, c: float) -> "Color":
        return replace(self, c=c)

    def with_hue(self, h: float) -> "Color":
        return replace(self, h=h)


__all__ = ["Color"]
