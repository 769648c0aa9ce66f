from __future__ import annotations

"""Parsing of textual color input.

Accepted forms: ``#rrggbb`` / ``rrggbb`` / ``#rgb``, ``rgb(r, g, b)``,
``hsl(h, s%, l%)`` and ``oklch(l c h)``; commas or whitespace separate
the components and function names are case-insensitive.
"""

import re

from .color_types import Color

_NUM = r"(\d+\.?\d*)"
_SEP = r"[,\s]+"

_HEX_RE = re.compile(r"^#?(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_RGB_RE = re.compile(rf"^rgb\(\s*(\d+){_SEP}(\d+){_SEP}(\d+)\s*\)$", re.IGNORECASE)
_HSL_RE = re.compile(rf"^hsl\(\s*{_NUM}{_SEP}{_NUM}%?{_SEP}{_NUM}%?\s*\)$", re.IGNORECASE)
_OKLCH_RE = re.compile(rf"^oklch\(\s*{_NUM}{_SEP}{_NUM}{_SEP}{_NUM}\s*\)$", re.IGNORECASE)


def parse_color(text: str) -> Color:
    """Parse ``text`` into a :class:`Color`.

    Raises
    ------
    ValueError
        If the text matches none of the supported formats or a channel
        is out of range.
    """
    s = text.strip()

    if _HEX_RE.match(s):
        return Color.from_hex(s)

    m = _RGB_RE.match(s)
    if m:
        r, g, b = (int(v) for v in m.groups())
        if max(r, g, b) > 255:
            raise ValueError(f"RGB channels must be in [0, 255]: {text!r}")
        return Color.from_rgb(r, g, b)

    m = _HSL_RE.match(s)
    if m:
        h, sat, light = (float(v) for v in m.groups())
        return Color.from_hsl(h, sat, light)

    m = _OKLCH_RE.match(s)
    if m:
        l, c, h = (float(v) for v in m.groups())
        return Color.from_oklch(l, c, h)

    raise ValueError(
        f"Invalid color format: {text!r}. Supported formats: hex (#RRGGBB), "
        "rgb(r, g, b), hsl(h, s%, l%), oklch(l c h)"
    )


__all__ = ["parse_color"]
