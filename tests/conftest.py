"""Shared fixtures.

- settings and the HSLuv provider are reset before every test
- a few reference colors
"""

from __future__ import annotations

import pytest

from colorscale import Color, parse_color
from colorscale.common import settings
from colorscale.hsluv import set_hsluv_provider


@pytest.fixture(autouse=True)
def _fresh_state() -> None:
    """Reload settings from the (restored) environment and reset providers."""
    settings.reload_from_env()
    set_hsluv_provider(None)


@pytest.fixture()
def violet() -> Color:
    return parse_color("#511ef3")


@pytest.fixture()
def baseline_blue() -> Color:
    return parse_color("#1e70f6")


@pytest.fixture()
def gray() -> Color:
    return parse_color("#808080")
