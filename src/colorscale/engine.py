from __future__ import annotations

"""Color conversion engine for OKLCH and sRGB.

This module converts between gamma-encoded sRGB on the 0-255 scale and
OKLCH via OKLab (Björn Ottosson, https://bottosson.github.io/posts/oklab/).
Results are not range-checked: out-of-gamut OKLCH input simply yields
channel values outside [0, 255], which :mod:`colorscale.gamut` resolves.
"""

import math
from typing import Tuple

import numpy as np


OKLCH = Tuple[float, float, float]
RGB = Tuple[float, float, float]

# Linear sRGB -> LMS
_RGB_TO_LMS = np.array(
    [
        [0.4122214708, 0.5363325363, 0.0514459929],
        [0.2119034982, 0.6806995451, 0.1073969566],
        [0.0883024619, 0.2817188376, 0.6299787005],
    ]
)

# LMS' (cube root) -> OKLab
_LMS_TO_OKLAB = np.array(
    [
        [0.2104542553, 0.7936177850, -0.0040720468],
        [1.9779984951, -2.4285922050, 0.4505937099],
        [0.0259040371, 0.7827717662, -0.8086757660],
    ]
)

# OKLab -> LMS'
_OKLAB_TO_LMS = np.array(
    [
        [1.0, 0.3963377774, 0.2158037573],
        [1.0, -0.1055613458, -0.0638541728],
        [1.0, -0.0894841775, -1.2914855480],
    ]
)

# LMS -> linear sRGB
_LMS_TO_RGB = np.array(
    [
        [4.0767416621, -3.3077115913, 0.2309699292],
        [-1.2684380046, 2.6097574011, -0.3413193965],
        [-0.0041960863, -0.7034186147, 1.7076147010],
    ]
)


def oklch_to_rgb(l: float, c: float, h: float) -> RGB:
    """Convert OKLCH to sRGB on the 0-255 scale.

    Parameters
    ----------
    l, c, h:
        Lightness in [0, 1], chroma (>= 0) and hue in degrees. A NaN hue
        (achromatic color) is projected as hue 0.

    Returns
    -------
    tuple of float
        ``(r, g, b)``; components may fall outside [0, 255].
    """
    if math.isnan(h):
        h = 0.0
    h_rad = math.radians(h)
    lab = np.array([l, c * math.cos(h_rad), c * math.sin(h_rad)])

    lms = (_OKLAB_TO_LMS @ lab) ** 3
    linear = _LMS_TO_RGB @ lms

    r, g, b = (linear_to_srgb(float(v)) * 255.0 for v in linear)
    return (r, g, b)


def rgb_to_oklch(r: float, g: float, b: float) -> OKLCH:
    """Convert sRGB on the 0-255 scale to OKLCH ``(l, c, h)``.

    Hue is returned in [0, 360).
    """
    linear = np.array([srgb_to_linear(v / 255.0) for v in (r, g, b)])

    lms_ = np.cbrt(_RGB_TO_LMS @ linear)
    L, a, b_ = _LMS_TO_OKLAB @ lms_

    C = math.hypot(a, b_)
    h = math.degrees(math.atan2(b_, a))
    if h < 0:
        h += 360.0
    return (float(L), C, h)


def srgb_to_linear(c: float) -> float:
    """Inverse sRGB gamma for a channel in [0, 1]."""
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def linear_to_srgb(c: float) -> float:
    """sRGB gamma encoding for a linear channel.

    Negative input stays on the linear segment so that out-of-gamut
    values remain detectable downstream.
    """
    if c <= 0.0031308:
        return 12.92 * c
    return 1.055 * (c ** (1 / 2.4)) - 0.055


def round_half_away(x: float) -> int:
    """Round to the nearest integer, halves away from zero.

    The built-in :func:`round` rounds halves to even, which shifts shade
    lightness and channel values by one unit at exact halves. The value is
    first snapped to 9 decimals so that float noise such as
    ``127.49999999999997`` still counts as a half.
    """
    x = round(x, 9)
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def normalize_hue(h: float) -> float:
    """Normalize hue angle into [0, 360)."""
    return h % 360.0


__all__ = [
    "OKLCH",
    "RGB",
    "oklch_to_rgb",
    "rgb_to_oklch",
    "srgb_to_linear",
    "linear_to_srgb",
    "round_half_away",
    "normalize_hue",
]
