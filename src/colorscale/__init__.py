"""Public entrypoint for the colorscale library.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``colorscale`` instead of individual
submodules.
"""

from .color_types import Color
from .palette import Palette
from .scale import ALL_STOPS, SHADES, ScaleMode, ScaleParams, generate_shades
from .export import ExportFormat
from .parse import parse_color
from .api import generate_linear, generate_palette, generate_perceived
from .hsluv import HsluvProvider, set_hsluv_provider

__all__ = [
    "Color",
    "Palette",
    "ScaleMode",
    "ScaleParams",
    "SHADES",
    "ALL_STOPS",
    "generate_shades",
    "ExportFormat",
    "parse_color",
    "generate_palette",
    "generate_perceived",
    "generate_linear",
    "HsluvProvider",
    "set_hsluv_provider",
]
