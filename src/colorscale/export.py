from __future__ import annotations

"""String formatting of colors and shade mappings.

This module turns :class:`~colorscale.color_types.Color` values into CSS
notations and renders whole shade mappings as Tailwind configuration
snippets (v3 JavaScript object, v4 CSS ``@theme`` block).
"""

from enum import Enum
from typing import Callable, Dict, Mapping

from .color_types import Color


class ExportFormat(Enum):
    """Supported output formats for exported color mappings."""

    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    OKLCH = "oklch"

    @classmethod
    def from_value(cls, value: "ExportFormat | str") -> "ExportFormat":
        if isinstance(value, cls):
            return value
        for fmt in cls:
            if fmt.value == value:
                return fmt
        raise ValueError(f"Unknown export format: {value}")


def format_hex(color: Color) -> str:
    return color.to_hex()


def format_rgb(color: Color) -> str:
    """``rgb(r, g, b)`` with integer channels."""
    r, g, b = color.to_rgb()
    return f"rgb({r}, {g}, {b})"


def format_hsl(color: Color) -> str:
    """``hsl(h, s%, l%)`` with one decimal."""
    h, s, l = color.to_hsl()
    return f"hsl({h:.1f}, {s:.1f}%, {l:.1f}%)"


def format_oklch(color: Color, hue_precision: int = 1, alpha_placeholder: bool = False) -> str:
    """``oklch(l c h)``; an undefined hue is written as 0."""
    text = f"oklch({color.l:.3f} {color.c:.3f} {color.hue:.{hue_precision}f}"
    if alpha_placeholder:
        text += " / <alpha-value>"
    return text + ")"


def format_rgb_css4(color: Color) -> str:
    """Space-separated ``rgb(r g b)`` used in CSS ``@theme`` blocks."""
    r, g, b = color.to_rgb()
    return f"rgb({r} {g} {b})"


def format_hsl_css4(color: Color) -> str:
    h, s, l = color.to_hsl()
    return f"hsl({h:.1f} {s:.1f}% {l:.1f}%)"


_FORMATTERS: Dict[ExportFormat, Callable[[Color], str]] = {
    ExportFormat.HEX: format_hex,
    ExportFormat.RGB: format_rgb,
    ExportFormat.HSL: format_hsl,
    ExportFormat.OKLCH: format_oklch,
}


def format_color(color: Color, fmt: ExportFormat | str) -> str:
    return _FORMATTERS[ExportFormat.from_value(fmt)](color)


def export_colors(colors: Mapping[int, Color], fmt: ExportFormat | str) -> Dict[str, str]:
    """Format every color; keys are the shade numbers as strings."""
    formatter = _FORMATTERS[ExportFormat.from_value(fmt)]
    return {str(shade): formatter(color) for shade, color in colors.items()}


def tailwind_v3_config(
    colors: Mapping[int, Color],
    name: str = "primary",
    fmt: ExportFormat | str = ExportFormat.OKLCH,
) -> str:
    """Render a ``tailwind.config.js`` color entry.

    OKLCH values carry the ``<alpha-value>`` placeholder so Tailwind's
    opacity modifiers keep working. Unknown format strings fall back to hex.
    """
    try:
        export_fmt = ExportFormat.from_value(fmt)
    except ValueError:
        export_fmt = ExportFormat.HEX

    lines = [f"'{name}': {{"]
    for shade, color in colors.items():
        if export_fmt is ExportFormat.OKLCH:
            value = format_oklch(color, hue_precision=2, alpha_placeholder=True)
        else:
            value = _FORMATTERS[export_fmt](color)
        lines.append(f"  {shade}: '{value}',")
    lines.append("}")
    return "\n".join(lines)


def tailwind_v4_config(
    colors: Mapping[int, Color],
    name: str = "primary",
    fmt: ExportFormat | str = ExportFormat.OKLCH,
) -> str:
    """Render a Tailwind v4 CSS ``@theme`` block.

    Unknown format strings fall back to OKLCH.
    """
    try:
        export_fmt = ExportFormat.from_value(fmt)
    except ValueError:
        export_fmt = ExportFormat.OKLCH

    css: Dict[ExportFormat, Callable[[Color], str]] = {
        ExportFormat.HEX: format_hex,
        ExportFormat.RGB: format_rgb_css4,
        ExportFormat.HSL: format_hsl_css4,
        ExportFormat.OKLCH: lambda c: format_oklch(c, hue_precision=2),
    }
    lines = ["@theme {"]
    for shade, color in colors.items():
        lines.append(f"  --color-{name}-{shade}: {css[export_fmt](color)};")
    lines.append("}")
    return "\n".join(lines)


__all__ = [
    "ExportFormat",
    "format_hex",
    "format_rgb",
    "format_hsl",
    "format_oklch",
    "format_rgb_css4",
    "format_hsl_css4",
    "format_color",
    "export_colors",
    "tailwind_v3_config",
    "tailwind_v4_config",
]
