from __future__ import annotations

import pytest

from colorscale import Color
from colorscale.common import settings
from colorscale.gamut import in_gamut, max_in_gamut_chroma

TOL = 1e-6


def _projects_in_gamut(color: Color) -> bool:
    return all(-TOL <= v <= 255.0 + TOL for v in color.to_srgb())


def test_in_gamut_bounds() -> None:
    assert in_gamut((0.0, 128.0, 255.0))
    assert not in_gamut((-0.1, 10.0, 10.0))
    assert not in_gamut((10.0, 255.1, 10.0))


def test_in_gamut_color_is_returned_unchanged(violet: Color) -> None:
    assert violet.clamp_to_rgb() is violet


def test_clamp_reduces_chroma_only() -> None:
    wild = Color(0.7, 0.4, 150.0)
    assert not wild.is_in_gamut()

    clamped = wild.clamp_to_rgb()
    assert clamped.l == wild.l
    assert clamped.h == wild.h
    assert 0.0 < clamped.c < wild.c
    assert clamped.is_in_gamut()


def test_clamp_lands_near_the_gamut_boundary() -> None:
    clamped = Color(0.7, 0.4, 150.0).clamp_to_rgb()
    # one epsilon more chroma leaves the gamut
    assert not in_gamut(clamped.with_chroma(clamped.c + 2e-4).to_srgb())


def test_clamp_is_idempotent() -> None:
    for color in (Color(0.7, 0.4, 150.0), Color(0.2, 0.3, 20.0), Color(0.99, 0.2, 300.0)):
        once = color.clamp_to_rgb()
        assert once.clamp_to_rgb() == once


def test_custom_epsilon() -> None:
    fine = max_in_gamut_chroma(0.7, 0.4, 150.0)
    coarse = max_in_gamut_chroma(0.7, 0.4, 150.0, epsilon=0.01)
    assert coarse <= fine + 1e-4
    assert coarse >= fine - 0.01
    with pytest.raises(ValueError):
        max_in_gamut_chroma(0.7, 0.4, 150.0, epsilon=0.0)


def test_epsilon_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COLORSCALE_GAMUT_EPSILON", "0.05")
    settings.reload_from_env()
    assert settings.get().GAMUT_EPSILON == pytest.approx(0.05)

    coarse = Color(0.7, 0.4, 150.0).clamp_to_rgb()
    assert _projects_in_gamut(coarse)
    assert coarse.c <= max_in_gamut_chroma(0.7, 0.4, 150.0, epsilon=1e-4) + 1e-4


def test_invalid_epsilon_env_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COLORSCALE_GAMUT_EPSILON", "-1")
    settings.reload_from_env()
    assert settings.get().GAMUT_EPSILON == pytest.approx(1e-4)

    monkeypatch.setenv("COLORSCALE_GAMUT_EPSILON", "abc")
    settings.reload_from_env()
    assert settings.get().GAMUT_EPSILON == pytest.approx(1e-4)
