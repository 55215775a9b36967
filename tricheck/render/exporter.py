# File: tricheck/render/exporter.py
# Project: TriCheck (TCK)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Export de paths a SVG (atributo d + documento completo).
# Notes: Contornos únicamente (fill="none"); el ancho de trazo sale de PathConfig.
from __future__ import annotations

import logging
import math
from pathlib import Path as FsPath
from xml.etree.ElementTree import Element, SubElement, tostring

from tricheck.core.models import CheckState, PathConfig
from tricheck.paths.path import ArcTo, Close, LineTo, MoveTo, Path
from tricheck.paths.presets import CheckboxPathPresets
from tricheck.utils.errors import TriCheckIOError

log = logging.getLogger(__name__)

# Arcos con |sweep| >= esto se parten en dos (SVG no dibuja un círculo con un solo A).
_FULL_TURN = 2.0 * math.pi - 1e-9


def _fmt(v: float, precision: int) -> str:
    s = f"{v:.{precision}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return "0" if s in ("-0", "") else s


def _arc_commands(op: ArcTo, precision: int) -> list[str]:
    r = _fmt(op.radius, precision)
    sweep = op.sweep
    sweep_flag = 1 if sweep > 0 else 0
    if abs(sweep) >= _FULL_TURN:
        mid = op.point_at(op.start_angle + sweep / 2.0)
        end = op.end_point
        return [
            f"A {r} {r} 0 0 {sweep_flag} {_fmt(mid.x, precision)} {_fmt(mid.y, precision)}",
            f"A {r} {r} 0 0 {sweep_flag} {_fmt(end.x, precision)} {_fmt(end.y, precision)}",
        ]
    large = 1 if abs(sweep) > math.pi else 0
    end = op.end_point
    return [f"A {r} {r} 0 {large} {sweep_flag} {_fmt(end.x, precision)} {_fmt(end.y, precision)}"]


def path_to_svg_d(path: Path, precision: int = 4) -> str:
    """Atributo `d` equivalente (M/L/A/Z, coordenadas absolutas)."""
    parts: list[str] = []
    for op in path:
        if isinstance(op, MoveTo):
            parts.append(f"M {_fmt(op.point.x, precision)} {_fmt(op.point.y, precision)}")
        elif isinstance(op, LineTo):
            parts.append(f"L {_fmt(op.point.x, precision)} {_fmt(op.point.y, precision)}")
        elif isinstance(op, ArcTo):
            parts.extend(_arc_commands(op, precision))
        elif isinstance(op, Close):
            parts.append("Z")
    return " ".join(parts)


def build_checkbox_svg(config: PathConfig, state: CheckState | str, *, precision: int = 4) -> str:
    """Documento SVG con el contorno y la marca de `state`."""
    presets = CheckboxPathPresets(config)
    cfg = presets.config
    size = _fmt(cfg.size, precision)
    svg = Element(
        "svg",
        {
            "xmlns": "http://www.w3.org/2000/svg",
            "version": "1.1",
            "width": size,
            "height": size,
            "viewBox": f"0 0 {size} {size}",
        },
    )
    g = SubElement(svg, "g", {"id": "TCK_CHECKBOX", "fill": "none", "stroke": "black"})
    SubElement(
        g,
        "path",
        {
            "id": "box",
            "stroke-width": _fmt(cfg.box_line_width, precision),
            "d": path_to_svg_d(presets.path_for_box(), precision),
        },
    )
    SubElement(
        g,
        "path",
        {
            "id": "mark",
            "stroke-width": _fmt(cfg.checkmark_line_width, precision),
            "stroke-linecap": "round",
            "stroke-linejoin": "round",
            "d": path_to_svg_d(presets.path(state), precision),
        },
    )
    return tostring(svg, encoding="unicode")


def export_checkbox_svg(
    config: PathConfig,
    state: CheckState | str,
    out_path: str | FsPath,
    *,
    precision: int = 4,
) -> FsPath:
    """Escribe el SVG de `state` en `out_path` (fuerza extensión .svg)."""
    p = FsPath(out_path)
    if p.suffix.lower() != ".svg":
        p = p.with_suffix(".svg")

    xml = build_checkbox_svg(config, state, precision=precision)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(xml, encoding="utf-8")
    except OSError as e:
        raise TriCheckIOError(f"No se pudo exportar SVG: {p}") from e
    log.info("SVG exportado: %s", p)
    return p
