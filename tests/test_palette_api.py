from __future__ import annotations

"""Palette generation through the public API."""

import math
import re

import pytest

from colorscale import (
    SHADES,
    Color,
    Palette,
    ScaleParams,
    generate_linear,
    generate_palette,
    generate_perceived,
    parse_color,
)

HEX_RE = re.compile(r"^#[0-9a-f]{6}$")
TOL = 1e-6


def _assert_in_gamut(palette: Palette) -> None:
    for color in palette.values():
        for v in color.to_srgb():
            assert -TOL <= v <= 255.0 + TOL


def _hex_channels(hex_str: str) -> tuple[int, int, int]:
    return tuple(int(hex_str[i : i + 2], 16) for i in (1, 3, 5))  # type: ignore[return-value]


def test_default_palette_for_violet(violet: Color) -> None:
    palette = generate_palette(violet)
    assert palette.shades == SHADES
    assert len(palette) == 11
    # the input sits at its auto-detected shade, untouched
    assert palette.get_shade(700) is violet
    hexes = palette.to_hex()
    assert list(hexes) == [str(s) for s in SHADES]
    assert all(HEX_RE.match(h) for h in hexes.values())
    assert hexes["700"] == "#511ef3"
    _assert_in_gamut(palette)


def test_text_input_matches_color_input(violet: Color) -> None:
    assert generate_palette("#511ef3") == generate_palette(violet)


def test_lightness_is_monotonic_with_defaults(violet: Color, baseline_blue: Color) -> None:
    for base in (violet, baseline_blue, parse_color("#2a9d8f")):
        palette = generate_palette(base)
        lightness = [palette[s].l for s in SHADES]
        assert all(a >= b for a, b in zip(lightness, lightness[1:])), lightness


def test_custom_parameters_scenario(violet: Color) -> None:
    palette = generate_palette(
        violet, {"h": 10, "s": 5, "lMin": 5, "lMax": 95, "valueStop": 600}
    )
    assert palette[600] is violet
    assert palette[50].l > palette[950].l
    _assert_in_gamut(palette)


def test_equivalent_inputs_give_identical_palettes() -> None:
    a = generate_palette("rgb(81, 30, 243)").to_hex()
    b = generate_palette("hsl(254.4, 89.9%, 53.5%)").to_hex()
    c = generate_palette("#511ef3").to_hex()
    for shade in a:
        for other in (b, c):
            for x, y in zip(_hex_channels(a[shade]), _hex_channels(other[shade])):
                assert abs(x - y) <= 1

    assert generate_palette("rgb(0, 128, 255)") == generate_palette("hsl(210, 100%, 50%)")


def test_grayscale_input_has_no_nan(gray: Color) -> None:
    for mode in ("perceived", "linear"):
        palette = generate_palette(gray, {"mode": mode})
        exports = [
            palette.to_hex(),
            palette.to_rgb(),
            palette.to_hsl(),
            palette.to_oklch(),
        ]
        for exported in exports:
            assert not any("nan" in v.lower() for v in exported.values())
        assert "nan" not in palette.to_tailwind_v4_config().lower()
        assert "nan" not in palette.to_tailwind_v3_config().lower()
        _assert_in_gamut(palette)


def test_nan_hue_input_is_exported_as_zero() -> None:
    achromatic = Color(0.5, 0.0, math.nan)
    palette = generate_palette(achromatic, ScaleParams(value_stop=400))
    assert palette[400] is achromatic
    assert palette.to_oklch()["400"] == "oklch(0.500 0.000 0.0)"
    assert all("nan" not in v for v in palette.to_hsl().values())


def test_determinism(violet: Color) -> None:
    params = ScaleParams(h=3, s=2, l_min=4, l_max=96)
    first = generate_palette(violet, params)
    second = generate_palette(violet, params)
    assert first == second
    assert first is not second
    assert first.to_oklch() == second.to_oklch()


def test_mode_shortcuts(violet: Color) -> None:
    linear = generate_linear("#511ef3")
    assert linear[400] == violet
    assert generate_linear(violet, {"mode": "perceived"}) == linear

    perceived = generate_perceived("#511ef3", ScaleParams(mode="linear"))
    assert perceived == generate_palette(violet)


def test_linear_mode_palette(violet: Color) -> None:
    palette = generate_palette(violet, {"mode": "linear", "h": -4, "s": 3})
    assert palette[400] is violet
    assert palette[50].to_hsl()[2] > palette[950].to_hsl()[2]
    _assert_in_gamut(palette)


def test_invalid_inputs() -> None:
    with pytest.raises(ValueError):
        generate_palette("not-a-color")
    with pytest.raises(ValueError):
        generate_palette("#511ef3", {"valueStop": 450})
    with pytest.raises(ValueError):
        generate_palette("#511ef3", {"mode": "vivid"})
