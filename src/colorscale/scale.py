from __future__ import annotations

"""Shade-scale generation (Tailwind-style 50..950 scales).

This module defines :class:`ScaleMode`, :class:`ScaleParams` and the
algorithm that turns one anchor color into eleven shades. Hue, saturation
and lightness follow three independent curves over the extended stop
sequence ``0, 50, ..., 950, 1000``; stops 0 and 1000 only anchor the
lightness interpolation and are never emitted.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .color_types import Color
from .common import settings
from .engine import round_half_away, srgb_to_linear

logger = logging.getLogger(__name__)

SHADES: Tuple[int, ...] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)
ALL_STOPS: Tuple[int, ...] = (0,) + SHADES + (1000,)

# Stop 500 doubles as "auto-detect" unless pinned through settings.
AUTO_VALUE_STOP = 500

# Relative luminance x100 of the baseline blue scale (#1e70f6 at 500).
BASELINE_PERCEIVED: Dict[int, float] = {
    0: 100.0,  # #ffffff
    50: 91.59,  # #f0f6fe
    100: 83.32,  # #e2ecfe
    200: 66.71,  # #bfd7fc
    300: 50.47,  # #98befb
    400: 34.52,  # #679ff9
    500: 18.52,  # #1e70f6
    600: 15.09,  # #0a62f0
    700: 10.85,  # #0854ce
    800: 6.97,  # #0744a7
    900: 4.02,  # #05347f
    950: 1.99,  # #042458
    1000: 0.0,  # #000000
}

# HSL lightness of the same baseline scale.
BASELINE_LINEAR: Dict[int, float] = {
    0: 100.0,
    50: 94.0,
    100: 89.0,
    200: 78.0,
    300: 67.0,
    400: 56.0,
    500: 48.0,
    600: 39.0,
    700: 32.0,
    800: 25.0,
    900: 19.0,
    950: 15.0,
    1000: 0.0,
}


class ScaleMode(Enum):
    """Space in which lightness and saturation are manipulated."""

    PERCEIVED = "perceived"  # HSLuv
    LINEAR = "linear"  # HSL

    @classmethod
    def from_value(cls, value: "ScaleMode | str") -> "ScaleMode":
        if isinstance(value, cls):
            return value
        for mode in cls:
            if mode.value == str(value).strip().lower():
                return mode
        raise ValueError(f"Unknown scale mode: {value!r} (expected 'perceived' or 'linear')")


@dataclass(frozen=True)
class ScaleParams:
    """Tunable parameters of the shade scale.

    Attributes
    ----------
    h:
        Hue drift per stop, in degrees.
    s:
        Saturation drift magnitude.
    l_min:
        Lightness at the darkest calculation anchor (stop 1000).
    l_max:
        Lightness at the lightest calculation anchor (stop 0).
    value_stop:
        Shade that reproduces the input color exactly. ``None`` requests
        auto-detection; so does 500 unless ``PIN_VALUE_STOP_500`` is set.
    mode:
        :class:`ScaleMode` used for the lightness/saturation math.
    """

    h: float = 0.0
    s: float = 0.0
    l_min: float = 0.0
    l_max: float = 100.0
    value_stop: Optional[int] = None
    mode: ScaleMode = ScaleMode.PERCEIVED

    def __post_init__(self) -> None:
        object.__setattr__(self, "mode", ScaleMode.from_value(self.mode))
        if self.value_stop is not None and self.value_stop not in SHADES:
            raise ValueError(f"value_stop must be one of {SHADES}, got {self.value_stop!r}.")
        for name in ("h", "s", "l_min", "l_max"):
            if math.isnan(float(getattr(self, name))):
                raise ValueError(f"{name} must be a number.")

    @property
    def auto_detect(self) -> bool:
        if self.value_stop is None:
            return True
        return self.value_stop == AUTO_VALUE_STOP and not settings.get().PIN_VALUE_STOP_500

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None) -> "ScaleParams":
        """Build parameters from an option mapping.

        Accepts both the camelCase keys of the reference tool (``lMin``,
        ``lMax``, ``valueStop``) and snake_case. Missing keys take the
        defaults; ``mode`` defaults to ``settings.DEFAULT_MODE``.
        """
        opts = dict(options or {})
        kwargs: Dict[str, Any] = {}
        aliases = {
            "h": ("h",),
            "s": ("s",),
            "l_min": ("l_min", "lMin"),
            "l_max": ("l_max", "lMax"),
            "value_stop": ("value_stop", "valueStop"),
            "mode": ("mode",),
        }
        for field_name, keys in aliases.items():
            given = [opts.pop(key) for key in keys if key in opts]
            given = [v for v in given if v is not None]
            if given:
                kwargs[field_name] = given[0]
        if opts:
            raise ValueError(f"Unknown scale options: {sorted(opts)}")

        for name in ("h", "s", "l_min", "l_max"):
            if name in kwargs:
                kwargs[name] = float(kwargs[name])
        if "value_stop" in kwargs:
            stop = float(kwargs["value_stop"])
            if not stop.is_integer():
                raise ValueError(f"value_stop must be an integer shade, got {kwargs['value_stop']!r}.")
            kwargs["value_stop"] = int(stop)
        kwargs.setdefault("mode", settings.get().DEFAULT_MODE)
        return cls(**kwargs)


@dataclass(frozen=True)
class StopTweak:
    """Per-stop adjustment produced by one of the scale curves."""

    stop: int
    tweak: float


def relative_luminance(color: Color) -> float:
    """Relative luminance (0-1) of the color's sRGB projection.

    Uses the WCAG linearization (threshold 0.03928).
    """

    def _linearize(v: int) -> float:
        c = v / 255.0
        return c / 12.92 if c <= 0.03928 else srgb_to_linear(c)

    r, g, b = color.to_rgb()
    return 0.2126 * _linearize(r) + 0.7152 * _linearize(g) + 0.0722 * _linearize(b)


def determine_value_stop(color: Color, mode: ScaleMode = ScaleMode.PERCEIVED) -> int:
    """Pick the stop whose baseline lightness is closest to the color.

    The probe is HSL lightness in linear mode and relative luminance x100
    in perceived mode. Ties resolve to the lower stop. The result may be
    one of the calculation-only anchors 0 or 1000.
    """
    if mode is ScaleMode.LINEAR:
        probe = color.to_hsl()[2]
        baseline = BASELINE_LINEAR
    else:
        probe = relative_luminance(color) * 100.0
        baseline = BASELINE_PERCEIVED

    closest = AUTO_VALUE_STOP
    smallest = math.inf
    for stop in ALL_STOPS:
        diff = abs(baseline[stop] - probe)
        if diff < smallest:
            smallest = diff
            closest = stop
    return closest


def hue_scale(value_stop_index: int, h: float) -> List[StopTweak]:
    """Hue drift: ``|i - vi| * h`` for every extended stop."""
    return [
        StopTweak(stop, abs(i - value_stop_index) * h if h != 0 else 0.0)
        for i, stop in enumerate(ALL_STOPS)
    ]


def saturation_scale(value_stop_index: int, s: float) -> List[StopTweak]:
    """Saturation drift: ``min(100, round((d + 1) * s * (1 + d / 10)))``."""
    scale: List[StopTweak] = []
    for i, stop in enumerate(ALL_STOPS):
        if s == 0:
            scale.append(StopTweak(stop, 0.0))
            continue
        d = abs(i - value_stop_index)
        scale.append(StopTweak(stop, float(min(100, round_half_away((d + 1) * s * (1 + d / 10))))))
    return scale


def lightness_scale(
    value_stop_index: int,
    input_lightness: float,
    l_min: float = 0.0,
    l_max: float = 100.0,
) -> List[StopTweak]:
    """Target lightness per extended stop.

    Three-point piecewise-linear interpolation through ``(0, l_max)``,
    ``(value stop, input_lightness)`` and ``(1000, l_min)``. Segments are
    chosen by stop index but interpolated over stop labels, so the uneven
    spacing around 50 and 950 is respected. Values are rounded.
    """
    value_stop = ALL_STOPS[value_stop_index]
    last = len(ALL_STOPS) - 1
    # (stop, index, lightness)
    anchors = [
        (0, 0, l_max),
        (value_stop, value_stop_index, input_lightness),
        (1000, last, l_min),
    ]

    scale: List[StopTweak] = []
    for i, stop in enumerate(ALL_STOPS):
        anchor = next((a for a in anchors if a[0] == stop), None)
        if anchor is not None:
            scale.append(StopTweak(stop, float(round_half_away(anchor[2]))))
            continue

        left, right = next(
            (anchors[k], anchors[k + 1])
            for k in range(len(anchors) - 1)
            if anchors[k][1] <= i <= anchors[k + 1][1]
        )
        span = right[0] - left[0]
        ratio = (stop - left[0]) / span if span > 0 else 0.0
        lightness = left[2] + (right[2] - left[2]) * ratio
        scale.append(StopTweak(stop, float(round_half_away(lightness))))
    return scale


def _clamp_pct(v: float) -> float:
    return max(0.0, min(100.0, v))


def generate_shades(color: Color, params: ScaleParams | None = None) -> Dict[int, Color]:
    """Generate the eleven shades for ``color``.

    Parameters
    ----------
    color:
        Input color. It is returned unchanged (same object) at the value
        stop.
    params:
        Scale parameters; defaults to ``ScaleParams()``.

    Returns
    -------
    dict
        Shade -> Color in ascending shade order. Every color except the
        value-stop one is gamut-clamped.
    """
    if params is None:
        params = ScaleParams()
    mode = params.mode

    if params.auto_detect:
        value_stop = determine_value_stop(color, mode)
    else:
        value_stop = int(params.value_stop)  # type: ignore[arg-type]
    value_stop_index = ALL_STOPS.index(value_stop)

    if mode is ScaleMode.LINEAR:
        base_h, base_s, base_l = color.to_hsl()
    else:
        base_h, base_s, base_l = color.to_hsluv()
    if math.isnan(base_h):
        base_h = 0.0

    logger.debug(
        "value stop %s (auto=%s), mode=%s, base h=%.3f s=%.3f l=%.3f",
        value_stop,
        params.auto_detect,
        mode.value,
        base_h,
        base_s,
        base_l,
    )

    hues = hue_scale(value_stop_index, params.h)
    sats = saturation_scale(value_stop_index, params.s)
    lights = lightness_scale(value_stop_index, base_l, params.l_min, params.l_max)

    build = Color.from_hsl if mode is ScaleMode.LINEAR else Color.from_hsluv

    shades: Dict[int, Color] = {}
    for shade in SHADES:
        if shade == value_stop:
            shades[shade] = color
            continue
        i = ALL_STOPS.index(shade)
        new_h = (base_h + hues[i].tweak + 360.0) % 360.0
        new_s = _clamp_pct(base_s + sats[i].tweak)
        new_l = _clamp_pct(lights[i].tweak)
        shades[shade] = build(new_h, new_s, new_l).clamp_to_rgb()
    return shades


__all__ = [
    "SHADES",
    "ALL_STOPS",
    "AUTO_VALUE_STOP",
    "BASELINE_PERCEIVED",
    "BASELINE_LINEAR",
    "ScaleMode",
    "ScaleParams",
    "StopTweak",
    "relative_luminance",
    "determine_value_stop",
    "hue_scale",
    "saturation_scale",
    "lightness_scale",
    "generate_shades",
]
