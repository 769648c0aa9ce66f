from __future__ import annotations

"""HSLuv capability used by the perceived generation mode.

HSLuv is a perceptually uniform hue/saturation/lightness space built on
CIE Luv. The conversion itself is supplied by an :class:`HsluvProvider`;
the default provider is backed by coloraide's HSLuv space. Hex strings
are the interchange format in both directions.
"""

import math
from typing import Protocol, Tuple

from coloraide import Color as _BaseColor
from coloraide.spaces.hsluv import HSLuv
from coloraide.spaces.lchuv import LChuv
from coloraide.spaces.luv import Luv

from .engine import round_half_away


HSLUV = Tuple[float, float, float]


class HsluvProvider(Protocol):
    """Protocol abstracting the HSLuv sub-algorithm."""

    def hsluv_to_hex(self, h: float, s: float, l: float) -> str: ...

    def hex_to_hsluv(self, hex_str: str) -> HSLUV: ...


class _HsluvColor(_BaseColor):
    """coloraide Color class with the Luv family registered."""


_HsluvColor.register([Luv(), LChuv(), HSLuv()], silent=True)


class ColorAideHsluvProvider:
    """Default provider based on coloraide."""

    def hsluv_to_hex(self, h: float, s: float, l: float) -> str:
        """Convert HSLuv (h in [0, 360), s/l in [0, 100]) to ``#rrggbb``."""
        srgb = _HsluvColor("hsluv", [h, s, l]).convert("srgb")
        channels = (srgb["red"], srgb["green"], srgb["blue"])
        r, g, b = (_to_u8(v) for v in channels)
        return f"#{r:02x}{g:02x}{b:02x}"

    def hex_to_hsluv(self, hex_str: str) -> HSLUV:
        """Convert ``#rrggbb`` to HSLuv; the hue is NaN for grays."""
        s = hex_str.lstrip("#")
        r, g, b = (int(s[i : i + 2], 16) / 255.0 for i in (0, 2, 4))
        hsluv = _HsluvColor("srgb", [r, g, b]).convert("hsluv")
        return (hsluv["hue"], hsluv["saturation"], hsluv["lightness"])


def _to_u8(v: float) -> int:
    if math.isnan(v):
        return 0
    return max(0, min(255, round_half_away(v * 255.0)))


_provider: HsluvProvider = ColorAideHsluvProvider()


def get_hsluv_provider() -> HsluvProvider:
    """Return the provider used by :mod:`colorscale.spaces`."""
    return _provider


def set_hsluv_provider(provider: HsluvProvider | None) -> None:
    """Replace the HSLuv provider; ``None`` restores the default."""
    global _provider
    _provider = provider if provider is not None else ColorAideHsluvProvider()


__all__ = [
    "HSLUV",
    "HsluvProvider",
    "ColorAideHsluvProvider",
    "get_hsluv_provider",
    "set_hsluv_provider",
]
