# File: tricheck/render/qpath_render.py
# Project: TriCheck (TCK)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Path (grabado) -> QPainterPath para pintar con QPainter.
# Notes:
#   - Qt mide ángulos en grados, positivos en sentido antihorario en pantalla;
#     los ángulos de Path son de pantalla con clockwise positivo -> se niegan.
#   - QPainterPath no necesita QApplication.
from __future__ import annotations

import math

from PySide6.QtCore import QRectF
from PySide6.QtGui import QPainterPath

from tricheck.core.models import CheckState, PathConfig
from tricheck.paths.path import ArcTo, Close, LineTo, MoveTo, Path
from tricheck.paths.presets import CheckboxPathPresets


def path_to_qpath(path: Path) -> QPainterPath:
    """Convierte un Path a QPainterPath (mismas coordenadas)."""
    q = QPainterPath()
    for op in path:
        if isinstance(op, MoveTo):
            q.moveTo(op.point.x, op.point.y)
        elif isinstance(op, LineTo):
            q.lineTo(op.point.x, op.point.y)
        elif isinstance(op, ArcTo):
            r = op.radius
            rect = QRectF(op.center.x - r, op.center.y - r, 2.0 * r, 2.0 * r)
            # Path ya dejó el punto actual sobre el inicio del arco.
            q.arcTo(rect, -math.degrees(op.start_angle), -math.degrees(op.sweep))
        elif isinstance(op, Close):
            q.closeSubpath()
    return q


def checkbox_qpaths(config: PathConfig, state: CheckState | str) -> tuple[QPainterPath, QPainterPath]:
    """(contorno, marca) listos para QPainter.drawPath."""
    presets = CheckboxPathPresets(config)
    return path_to_qpath(presets.path_for_box()), path_to_qpath(presets.path(state))
