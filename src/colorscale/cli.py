"""
Command line entry point: `colorscale COLOR [options]`.

Defaults come from `configs/default.yaml` / `config.yaml` (see
`colorscale.util.config`); flags override them.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from .api import generate_palette
from .common.logging import setup_default_logging
from .palette import Palette
from .scale import SHADES, ScaleParams
from .util.config import load_config

logger = logging.getLogger(__name__)

FORMATS = ("hex", "rgb", "hsl", "oklch", "tailwind-v3", "tailwind-v4", "json")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="colorscale",
        description="Generate a 50..950 shade scale from one color.",
    )
    parser.add_argument("color", help="Input color: #hex, rgb(...), hsl(...) or oklch(...)")
    parser.add_argument("--mode", choices=("perceived", "linear"), help="Interpolation space")
    parser.add_argument("--h", type=float, help="Hue drift per stop (degrees)")
    parser.add_argument("--s", type=float, help="Saturation drift")
    parser.add_argument("--l-min", type=float, dest="l_min", help="Lightness at stop 1000")
    parser.add_argument("--l-max", type=float, dest="l_max", help="Lightness at stop 0")
    parser.add_argument(
        "--value-stop",
        type=int,
        choices=SHADES,
        dest="value_stop",
        help="Shade that keeps the input color (default: auto-detect)",
    )
    parser.add_argument("--format", choices=FORMATS, dest="fmt", help="Output format")
    parser.add_argument("--name", help="Color name used by the tailwind formats")
    parser.add_argument(
        "--log-level",
        dest="log_level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: COLORSCALE_LOG_LEVEL or INFO)",
    )
    return parser


def _scale_options(cfg: Dict[str, Any], args: argparse.Namespace) -> Dict[str, Any]:
    options: Dict[str, Any] = dict(cfg.get("scale") or {})
    overrides = {
        "h": args.h,
        "s": args.s,
        "l_min": args.l_min,
        "l_max": args.l_max,
        "value_stop": args.value_stop,
        "mode": args.mode,
    }
    camel = {"l_min": "lMin", "l_max": "lMax", "value_stop": "valueStop"}
    for key, value in overrides.items():
        if value is None:
            continue
        options.pop(camel.get(key, key), None)
        options[key] = value
    return options


def render(palette: Palette, fmt: str, name: str) -> str:
    if fmt == "tailwind-v3":
        return palette.to_tailwind_v3_config(name)
    if fmt == "tailwind-v4":
        return palette.to_tailwind_v4_config(name)
    if fmt == "json":
        return json.dumps(palette.to_hex(), indent=2)
    return "\n".join(f"{shade}: {value}" for shade, value in palette.export(fmt).items())


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_default_logging(args.log_level)

    cfg = load_config()
    export_cfg = cfg.get("export") or {}
    fmt = args.fmt or export_cfg.get("format", "hex")
    name = args.name or export_cfg.get("name", "primary")

    try:
        params = ScaleParams.from_mapping(_scale_options(cfg, args))
        palette = generate_palette(args.color, params)
        output = render(palette, fmt, name)
    except ValueError as exc:
        logger.debug("generation failed", exc_info=True)
        print(f"colorscale: error: {exc}", file=sys.stderr)
        return 2

    print(output)
    return 0


__all__ = ["build_parser", "render", "main"]
