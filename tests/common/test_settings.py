from __future__ import annotations

import logging

import pytest

from colorscale.common import settings
from colorscale.common.env import env_bool, env_choice, env_float
from colorscale.common.logging import resolve_level, setup_default_logging


def test_defaults() -> None:
    s = settings.get()
    assert s.GAMUT_EPSILON == pytest.approx(1e-4)
    assert s.DEFAULT_MODE == "perceived"
    assert s.PIN_VALUE_STOP_500 is False


@pytest.mark.parametrize(
    "raw, expected",
    [("1", True), ("0", False), ("yes", True), ("off", False), ("maybe", False)],
)
def test_env_bool(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("COLORSCALE_TEST_FLAG", raw)
    assert env_bool("COLORSCALE_TEST_FLAG", False) is expected


def test_env_float(monkeypatch: pytest.MonkeyPatch) -> None:
    assert env_float("COLORSCALE_TEST_UNSET", 2.5) == 2.5
    monkeypatch.setenv("COLORSCALE_TEST_FLOAT", "0.25")
    assert env_float("COLORSCALE_TEST_FLOAT", 1.0) == 0.25
    monkeypatch.setenv("COLORSCALE_TEST_FLOAT", "nan")
    assert env_float("COLORSCALE_TEST_FLOAT", 1.0) == 1.0
    monkeypatch.setenv("COLORSCALE_TEST_FLOAT", "0.01")
    assert env_float("COLORSCALE_TEST_FLOAT", 1.0, min_value=0.1) == 1.0


def test_env_choice(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COLORSCALE_TEST_CHOICE", " Linear ")
    assert env_choice("COLORSCALE_TEST_CHOICE", "perceived", ("perceived", "linear")) == "linear"
    monkeypatch.setenv("COLORSCALE_TEST_CHOICE", "vivid")
    assert env_choice("COLORSCALE_TEST_CHOICE", "perceived", ("perceived", "linear")) == "perceived"


def test_log_level_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COLORSCALE_LOG_LEVEL", "debug")
    settings.reload_from_env()
    assert settings.get().LOG_LEVEL == "DEBUG"


def test_setup_default_logging_is_noop_when_configured(monkeypatch: pytest.MonkeyPatch) -> None:
    root = logging.getLogger()
    handler = logging.NullHandler()
    root.addHandler(handler)
    try:
        before = list(root.handlers)
        setup_default_logging("DEBUG")
        assert root.handlers == before
    finally:
        root.removeHandler(handler)


def test_resolve_level_defaults_to_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COLORSCALE_LOG_LEVEL", "warning")
    settings.reload_from_env()
    assert resolve_level() == logging.WARNING
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(logging.ERROR) == logging.ERROR
    with pytest.raises(ValueError):
        resolve_level("loud")


def test_log_format_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    assert settings.get().LOG_FORMAT == settings.DEFAULT_LOG_FORMAT
    monkeypatch.setenv("COLORSCALE_LOG_FORMAT", "%(message)s")
    settings.reload_from_env()
    assert settings.get().LOG_FORMAT == "%(message)s"
    monkeypatch.setenv("COLORSCALE_LOG_FORMAT", "  ")
    settings.reload_from_env()
    assert settings.get().LOG_FORMAT == settings.DEFAULT_LOG_FORMAT
