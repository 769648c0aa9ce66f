"""
Where: `colorscale.util.config`
What: YAML configuration loading for the CLI defaults (scale parameters,
export name/format).
Why: lets a project pin its palette settings in a file instead of
repeating command line flags.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        logger.debug("ignoring unreadable config %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def find_project_root(start: Path) -> Path:
    """Return the nearest ancestor that looks like a project root.

    - The first directory (``start`` included) holding `.git`,
      `pyproject.toml` or `configs/` wins.
    - Falls back to ``start`` itself when nothing matches.
    """
    cur = start.resolve()
    for parent in [cur] + list(cur.parents):
        if (
            (parent / ".git").exists()
            or (parent / "pyproject.toml").exists()
            or (parent / "configs").exists()
        ):
            return parent
    return cur


def load_config(start: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration as a dict (fail-soft).

    Precedence:
    1) `configs/default.yaml` (base)
    2) `config.yaml` at the project root (overrides the base)

    - Missing or invalid files contribute nothing.
    - Only top-level keys are overwritten; nested dicts are not merged.
    """
    project_root = find_project_root(start if start is not None else Path.cwd())
    base: Dict[str, Any] = {}

    default_path = project_root / "configs" / "default.yaml"
    if default_path.exists():
        base.update(_safe_load_yaml(default_path))

    root_config_path = project_root / "config.yaml"
    if root_config_path.exists():
        base.update(_safe_load_yaml(root_config_path))

    return base


__all__ = ["find_project_root", "load_config"]
