from __future__ import annotations

import pytest

from colorscale import Color, parse_color


@pytest.mark.parametrize(
    "text",
    [
        "#511ef3",
        "511ef3",
        "  #511EF3  ",
        "rgb(81, 30, 243)",
        "rgb(81 30 243)",
        "RGB(81,30,243)",
        "hsl(254.4, 89.9%, 53.5%)",
        "hsl(254.4 89.9 53.5)",
    ],
)
def test_equivalent_notations(text: str) -> None:
    assert parse_color(text) == Color.from_rgb(81, 30, 243)


def test_shorthand_hex() -> None:
    assert parse_color("#fff") == Color.from_hex("#ffffff")
    assert parse_color("f00").to_hex() == "#ff0000"


def test_oklch_is_taken_verbatim() -> None:
    assert parse_color("oklch(0.5 0.1 200)") == Color(0.5, 0.1, 200.0)
    assert parse_color("OKLCH(0.5, 0.1, 200)") == Color(0.5, 0.1, 200.0)


@pytest.mark.parametrize(
    "text",
    ["blue", "#12345", "#1234", "#ggg", "rgb(300, 0, 0)", "rgb(1, 2)", "hsl(a, b, c)", ""],
)
def test_invalid_text(text: str) -> None:
    with pytest.raises(ValueError):
        parse_color(text)
