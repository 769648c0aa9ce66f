"""
Where: `colorscale.common.settings`
What: typed, centrally managed environment settings, loaded at import time.
Why: avoids scattered `os.getenv` calls and keeps defaults/types consistent
and easy to override in tests.
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_choice, env_float, env_str


DEFAULT_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


@dataclass
class _Settings:
    # Gamut mapping
    GAMUT_EPSILON: float = 1e-4

    # Generation
    DEFAULT_MODE: str = "perceived"
    PIN_VALUE_STOP_500: bool = False

    # Misc
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = DEFAULT_LOG_FORMAT


_settings = _Settings()


def reload_from_env() -> None:
    """Reload settings from environment variables.

    Invalid values fall back to the defaults.
    """
    _settings.GAMUT_EPSILON = env_float("COLORSCALE_GAMUT_EPSILON", 1e-4, min_value=1e-12)
    _settings.DEFAULT_MODE = env_choice(
        "COLORSCALE_DEFAULT_MODE", "perceived", ("perceived", "linear")
    )
    _settings.PIN_VALUE_STOP_500 = env_bool("COLORSCALE_PIN_VALUE_STOP_500", False)
    _settings.LOG_LEVEL = env_choice(
        "COLORSCALE_LOG_LEVEL", "info", ("debug", "info", "warning", "error", "critical")
    ).upper()
    _settings.LOG_FORMAT = env_str("COLORSCALE_LOG_FORMAT", DEFAULT_LOG_FORMAT)


def get() -> _Settings:
    """Return the current settings snapshot."""
    return _settings


# initial load
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
