from __future__ import annotations

"""Container type for generated shade scales.

:class:`Palette` is a read-only, ordered ``shade -> Color`` mapping with
export helpers for the supported output notations.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Iterator, Optional

from . import export
from .color_types import Color
from .export import ExportFormat


class Palette(Mapping):
    """Generated color palette.

    Lookups of unknown shades through :meth:`get_shade` return ``None``;
    item access (``palette[shade]``) raises ``KeyError`` like any mapping.
    """

    __slots__ = ("_colors",)

    def __init__(self, colors: Mapping[int, Color]) -> None:
        self._colors = MappingProxyType(dict(colors))

    # --- Mapping interface ---
    def __getitem__(self, shade: int) -> Color:
        return self._colors[shade]

    def __iter__(self) -> Iterator[int]:
        return iter(self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def __repr__(self) -> str:
        return f"Palette({self.to_hex()!r})"

    # --- lookup ---
    def get_shade(self, shade: int) -> Optional[Color]:
        """Return the color of ``shade`` or None."""
        return self._colors.get(shade)

    @property
    def shades(self) -> tuple[int, ...]:
        return tuple(self._colors)

    @property
    def colors(self) -> Dict[int, Color]:
        """Copy of the shade -> Color mapping."""
        return dict(self._colors)

    # --- exports ---
    def export(self, fmt: ExportFormat | str) -> Dict[str, str]:
        return export.export_colors(self._colors, fmt)

    def to_hex(self) -> Dict[str, str]:
        return self.export(ExportFormat.HEX)

    def to_rgb(self) -> Dict[str, str]:
        return self.export(ExportFormat.RGB)

    def to_hsl(self) -> Dict[str, str]:
        return self.export(ExportFormat.HSL)

    def to_oklch(self) -> Dict[str, str]:
        return self.export(ExportFormat.OKLCH)

    def to_array(self) -> Dict[str, str]:
        """Alias of :meth:`to_hex`."""
        return self.to_hex()

    def to_tailwind_v3_config(
        self, name: str = "primary", fmt: ExportFormat | str = ExportFormat.OKLCH
    ) -> str:
        return export.tailwind_v3_config(self._colors, name, fmt)

    def to_tailwind_v4_config(
        self, name: str = "primary", fmt: ExportFormat | str = ExportFormat.OKLCH
    ) -> str:
        return export.tailwind_v4_config(self._colors, name, fmt)

    def to_tailwind_config(self, name: str = "primary") -> str:
        """Tailwind v3 entry with hex values."""
        return self.to_tailwind_v3_config(name, ExportFormat.HEX)


__all__ = ["Palette"]
