from __future__ import annotations

"""High-level public API for generating shade palettes.

:func:`generate_palette` parses the input (when given as text), resolves
the scale parameters and runs :func:`colorscale.scale.generate_shades`.
Each call builds its own parameters and returns a fresh, immutable
:class:`~colorscale.palette.Palette`.
"""

import logging
from dataclasses import replace
from typing import Any, Mapping, Union

from .color_types import Color
from .palette import Palette
from .parse import parse_color
from .scale import ScaleMode, ScaleParams, generate_shades

logger = logging.getLogger(__name__)

ColorLike = Union[Color, str]
Options = Union[ScaleParams, Mapping[str, Any], None]


def generate_palette(color: ColorLike, options: Options = None) -> Palette:
    """Generate an eleven-shade palette from a base color.

    Parameters
    ----------
    color:
        A :class:`Color` or color text (hex, ``rgb()``, ``hsl()``,
        ``oklch()``).
    options:
        :class:`ScaleParams`, or a mapping with the keys ``h``, ``s``,
        ``lMin``, ``lMax``, ``valueStop`` and ``mode`` (snake_case also
        accepted). None uses the defaults.

    Returns
    -------
    Palette
        Shades 50..950; the value-stop shade is the input color itself.
    """
    base = parse_color(color) if isinstance(color, str) else color
    params = _resolve_params(options)
    palette = Palette(generate_shades(base, params))
    logger.debug("generated %d shades for %r", len(palette), color)
    return palette


def generate_perceived(color: ColorLike, options: Options = None) -> Palette:
    """Generate a palette in perceived (HSLuv) mode."""
    return generate_palette(color, replace(_resolve_params(options), mode=ScaleMode.PERCEIVED))


def generate_linear(color: ColorLike, options: Options = None) -> Palette:
    """Generate a palette in linear (HSL) mode."""
    return generate_palette(color, replace(_resolve_params(options), mode=ScaleMode.LINEAR))


def _resolve_params(options: Options) -> ScaleParams:
    if isinstance(options, ScaleParams):
        return options
    return ScaleParams.from_mapping(options)


__all__ = ["ColorLike", "generate_palette", "generate_perceived", "generate_linear"]
