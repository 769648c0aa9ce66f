from __future__ import annotations

"""sRGB gamut handling for OKLCH colors.

Out-of-gamut colors are mapped by shrinking chroma only, keeping
lightness and hue fixed, with a binary search over ``[0, C]``.
"""

from typing import Optional

from .common import settings
from .engine import RGB, oklch_to_rgb


def in_gamut(rgb: RGB) -> bool:
    """Return True when every channel lies in [0, 255]."""
    r, g, b = rgb
    return 0.0 <= r <= 255.0 and 0.0 <= g <= 255.0 and 0.0 <= b <= 255.0


def max_in_gamut_chroma(
    l: float,
    c: float,
    h: float,
    epsilon: Optional[float] = None,
) -> float:
    """Return the largest chroma in ``[0, c]`` that projects into sRGB.

    Returns ``c`` itself when the color is already in gamut. Otherwise the
    search stops once the interval is narrower than ``epsilon`` (default
    from ``settings.GAMUT_EPSILON``) and returns its lower bound, so the
    result may undershoot the true boundary by up to ``epsilon``.
    """
    if in_gamut(oklch_to_rgb(l, c, h)):
        return c

    eps = settings.get().GAMUT_EPSILON if epsilon is None else epsilon
    if eps <= 0.0:
        raise ValueError("epsilon must be positive.")
    lo = 0.0
    hi = c
    while hi - lo > eps:
        mid = (lo + hi) / 2
        if in_gamut(oklch_to_rgb(l, mid, h)):
            lo = mid
        else:
            hi = mid
    return lo


__all__ = ["in_gamut", "max_in_gamut_chroma"]
