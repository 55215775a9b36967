# File: tricheck/app.py
# Project: TriCheck (TCK)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Entry-point CLI: genera los paths de un estado y los exporta/imprime.
# Notes: Precedencia de config: defaults < tricheck_settings.json < TRICHECK_* < flags.
from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import math
import sys
from typing import Any, Optional, Sequence

from tricheck.core.models import CheckState, PathConfig, coerce_box_type, coerce_check_state, coerce_mark_type
from tricheck.core.settings import load_path_config
from tricheck.core.version import APP_NAME, APP_VERSION
from tricheck.geom.svgelements_bbox import compute_path_bbox
from tricheck.paths.presets import CheckboxPathPresets
from tricheck.render.exporter import build_checkbox_svg, export_checkbox_svg, path_to_svg_d
from tricheck.utils.errors import TriCheckError
from tricheck.utils.log import get_logger, setup_logging

log = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="tricheck",
        description=f"{APP_NAME} v{APP_VERSION}: paths de checkbox (contorno + marca) por estado.",
    )
    ap.add_argument("--state", default=CheckState.CHECKED.value, help="unchecked | checked | mixed")
    ap.add_argument("--box-type", default=None, help="circle | rounded_rect (alias: square)")
    ap.add_argument("--mark-type", default=None, help="checkmark | radio")
    ap.add_argument("--size", type=float, default=None)
    ap.add_argument("--box-line-width", type=float, default=None)
    ap.add_argument("--checkmark-line-width", type=float, default=None)
    ap.add_argument("--corner-radius", type=float, default=None)
    ap.add_argument("--angle-deg", type=float, default=None, help="Ángulo del brazo largo contra la caja (grados).")
    ap.add_argument("--precision", type=int, default=4, help="Decimales en el SVG.")

    out = ap.add_mutually_exclusive_group()
    out.add_argument("--out", default=None, help="Escribe el SVG en este archivo.")
    out.add_argument("--d", action="store_true", help="Imprime sólo los atributos d (contorno y marca).")
    out.add_argument("--points", action="store_true", help="Imprime los puntos característicos (JSON).")
    out.add_argument("--bbox", action="store_true", help="Imprime bbox de contorno y marca vía svgelements (JSON).")

    ap.add_argument("--log-dir", default=None, help="Carpeta para tricheck.log (default: sólo consola).")
    ap.add_argument("--verbose", action="store_true")
    return ap


def config_from_args(args: argparse.Namespace, base: PathConfig) -> PathConfig:
    changes: dict[str, Any] = {}
    for name in ("size", "box_line_width", "checkmark_line_width", "corner_radius"):
        v = getattr(args, name)
        if v is not None:
            changes[name] = v
    if args.box_type is not None:
        changes["box_type"] = coerce_box_type(args.box_type)
    if args.mark_type is not None:
        changes["mark_type"] = coerce_mark_type(args.mark_type)
    if args.angle_deg is not None:
        changes["checkmark"] = dataclasses.replace(
            base.checkmark, long_arm_box_intersection_angle=math.radians(args.angle_deg)
        )
    return dataclasses.replace(base, **changes) if changes else base


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_dir, logging.DEBUG if args.verbose else None)

    try:
        state = coerce_check_state(args.state)
        cfg = config_from_args(args, load_path_config())
        presets = CheckboxPathPresets(cfg)

        if args.out:
            export_checkbox_svg(presets.config, state, args.out, precision=args.precision)
        elif args.d:
            print(path_to_svg_d(presets.path_for_box(), args.precision))
            print(path_to_svg_d(presets.path(state), args.precision))
        elif args.points:
            print(json.dumps(presets.feature_points.as_dict(), indent=2))
        elif args.bbox:
            report = {
                "box": compute_path_bbox(presets.path_for_box()),
                "mark": compute_path_bbox(presets.path(state)),
            }
            print(json.dumps(report, indent=2))
        else:
            print(build_checkbox_svg(presets.config, state, precision=args.precision))
    except TriCheckError as e:
        log.error("%s", e)
        return 2

    log.debug("%s v%s: state=%s config=%s", APP_NAME, APP_VERSION, state.value, cfg.to_dict())
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
