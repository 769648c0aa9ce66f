"""
Logging setup for the ``colorscale`` command line.

Library modules only call ``logging.getLogger(__name__)``; handlers are
installed by :func:`setup_default_logging`, and only when the host has not
configured logging itself. Level and format default to ``COLORSCALE_LOG_LEVEL``
and ``COLORSCALE_LOG_FORMAT``.
"""

from __future__ import annotations

import logging
import sys

from . import settings


def resolve_level(level: int | str | None = None) -> int:
    """Turn a level name or number into a logging level.

    ``None`` means ``settings.LOG_LEVEL``. Unknown names raise ``ValueError``.
    """
    if level is None:
        level = settings.get().LOG_LEVEL
    if isinstance(level, int):
        return level
    lvl = logging.getLevelName(str(level).strip().upper())
    if not isinstance(lvl, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return lvl


def setup_default_logging(level: int | str | None = None, *, fmt: str | None = None) -> None:
    """Send log records to stderr unless logging is already configured."""
    lvl = resolve_level(level)
    root = logging.getLogger()
    if root.handlers:
        # the host application owns logging
        return
    logging.basicConfig(
        level=lvl,
        format=fmt or settings.get().LOG_FORMAT,
        stream=sys.stderr,
    )


__all__ = ["resolve_level", "setup_default_logging"]
