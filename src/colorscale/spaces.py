from __future__ import annotations

"""Format adapters between OKLCH and hex / RGB / HSL / HSLuv.

Every adapter routes through integer sRGB or the OKLCH transform in
:mod:`colorscale.engine`. HSL is computed from sRGB directly rather than
derived from OKLCH; HSLuv goes through the active
:class:`colorscale.hsluv.HsluvProvider` using hex strings.
"""

import math
from typing import Tuple

from .engine import OKLCH, oklch_to_rgb, rgb_to_oklch, round_half_away
from .hsluv import get_hsluv_provider


RGB255 = Tuple[int, int, int]
HSL = Tuple[float, float, float]


# --- Hex ---------------------------------------------------------------
def expand_hex(hex_str: str) -> str:
    """Strip ``#`` and expand 3-digit shorthand (``"f0a"`` -> ``"ff00aa"``)."""
    s = hex_str.replace("#", "")
    if len(s) == 3:
        s = "".join(ch * 2 for ch in s)
    return s


def hex_to_rgb(hex_str: str) -> RGB255:
    s = expand_hex(hex_str)
    if len(s) != 6:
        raise ValueError(f"invalid hex color length: '{hex_str}' (expected RGB or RRGGBB)")
    try:
        return (int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16))
    except ValueError as exc:
        raise ValueError(f"invalid hex color: '{hex_str}'") from exc


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_oklch(hex_str: str) -> OKLCH:
    return rgb_to_oklch(*hex_to_rgb(hex_str))


def oklch_to_hex(l: float, c: float, h: float) -> str:
    return rgb_to_hex(*oklch_to_rgb255(l, c, h))


# --- RGB ---------------------------------------------------------------
def oklch_to_rgb255(l: float, c: float, h: float) -> RGB255:
    """Project OKLCH to integer sRGB, rounded and clamped to [0, 255]."""
    r, g, b = oklch_to_rgb(l, c, h)
    return (_to_channel(r), _to_channel(g), _to_channel(b))


def _to_channel(v: float) -> int:
    return round_half_away(max(0.0, min(255.0, v)))


# --- HSL ---------------------------------------------------------------
def hsl_to_rgb(h: float, s: float, l: float) -> RGB255:
    """Convert HSL (h in degrees, s/l in percent) to integer sRGB."""
    h = h / 360.0
    s = s / 100.0
    l = l / 100.0

    if s == 0:
        r = g = b = l * 255.0
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_rgb(p, q, h + 1 / 3) * 255.0
        g = _hue_to_rgb(p, q, h) * 255.0
        b = _hue_to_rgb(p, q, h - 1 / 3) * 255.0

    return (round_half_away(r), round_half_away(g), round_half_away(b))


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    """Convert sRGB (0-255) to HSL (h in [0, 360), s/l in [0, 100])."""
    r_ = r / 255.0
    g_ = g / 255.0
    b_ = b / 255.0

    mx = max(r_, g_, b_)
    mn = min(r_, g_, b_)
    l = (mx + mn) / 2

    if mx == mn:
        h = s = 0.0
    else:
        d = mx - mn
        s = d / (2 - mx - mn) if l > 0.5 else d / (mx + mn)
        if mx == r_:
            h = (g_ - b_) / d + (6 if g_ < b_ else 0)
        elif mx == g_:
            h = (b_ - r_) / d + 2
        else:
            h = (r_ - g_) / d + 4
        h /= 6

    return (h * 360.0, s * 100.0, l * 100.0)


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_oklch(h: float, s: float, l: float) -> OKLCH:
    return rgb_to_oklch(*hsl_to_rgb(h, s, l))


def oklch_to_hsl(l: float, c: float, h: float) -> HSL:
    return rgb_to_hsl(*oklch_to_rgb255(l, c, h))


# --- HSLuv -------------------------------------------------------------
def hsluv_to_oklch(h: float, s: float, l: float) -> OKLCH:
    return hex_to_oklch(get_hsluv_provider().hsluv_to_hex(h, s, l))


def oklch_to_hsluv(l: float, c: float, h: float) -> HSL:
    """Convert OKLCH to HSLuv; undefined hue or saturation become 0."""
    hh, ss, ll = get_hsluv_provider().hex_to_hsluv(oklch_to_hex(l, c, h))
    return (_defined(hh), _defined(ss), _defined(ll))


def _defined(v: float | None) -> float:
    if v is None or math.isnan(v):
        return 0.0
    return float(v)


__all__ = [
    "RGB255",
    "HSL",
    "expand_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "hex_to_oklch",
    "oklch_to_hex",
    "oklch_to_rgb255",
    "hsl_to_rgb",
    "rgb_to_hsl",
    "hsl_to_oklch",
    "oklch_to_hsl",
    "hsluv_to_oklch",
    "oklch_to_hsluv",
]
