"""
Where: `colorscale.common.env`
What: lightweight parsing helpers for environment variables.
Why: keeps `os.getenv` plus the fallback/bounds handling in one place.
"""

from __future__ import annotations

import os
from typing import Optional


def env_float(
    name: str, default: float, *, min_value: Optional[float] = None
) -> float:
    """Read a float environment variable (unset or invalid -> default).

    Parameters
    ----------
    name : str
        Variable name.
    default : float
        Fallback value.
    min_value : Optional[float]
        Values below this bound fall back to ``default``.
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    if val != val or (min_value is not None and val < min_value):
        return default
    return val


def env_bool(name: str, default: bool = False) -> bool:
    """Read a boolean environment variable (0/1, true/false accepted)."""
    raw = os.getenv(name)
    if raw is None:
        return bool(default)
    try:
        # numeric first
        return int(raw) != 0
    except ValueError:
        s = raw.strip().lower()
        if s in {"true", "t", "yes", "y", "on"}:
            return True
        if s in {"false", "f", "no", "n", "off"}:
            return False
        return bool(default)


def env_str(name: str, default: str) -> str:
    """Read a string environment variable (unset or blank -> default)."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw


def env_choice(name: str, default: str, choices: tuple[str, ...]) -> str:
    """Read a string environment variable restricted to ``choices``."""
    raw = os.getenv(name)
    if raw is None:
        return default
    s = raw.strip().lower()
    return s if s in choices else default


__all__ = ["env_float", "env_bool", "env_choice", "env_str"]
