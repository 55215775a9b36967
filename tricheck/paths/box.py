# File: tricheck/paths/box.py
# Project: TriCheck (TCK)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Contorno de la caja (círculo / rectángulo redondeado).
# Notes: El trazo queda centrado: todo se inseta media línea (line_offset).
from __future__ import annotations

import math

from tricheck.core.models import BoxType, PathConfig
from tricheck.geom.primitives import Point
from tricheck.paths.path import Path


def path_for_box(config: PathConfig) -> Path:
    if config.box_type == BoxType.CIRCLE:
        return path_for_circle(config)
    return path_for_rounded_rect(config)


def path_for_circle(config: PathConfig) -> Path:
    """Círculo completo que arranca en el punto donde el brazo largo toca la caja.

    Empezar en -theta alinea el inicio del trazo con ese punto (útil para
    animaciones de stroke-dash).
    """
    theta = config.checkmark.long_arm_box_intersection_angle
    radius = (config.size - config.box_line_width) / 2.0
    center = Point(config.center, config.center)
    return Path().add_arc(center, radius, -theta, 2.0 * math.pi - theta, clockwise=True).close()


def path_for_rounded_rect(config: PathConfig) -> Path:
    size = config.size
    cr = config.corner_radius
    inset = config.line_offset + cr

    # Centros de los arcos de esquina.
    tr = Point(size - inset, inset)
    br = Point(size - inset, size - inset)
    bl = Point(inset, size - inset)
    tl = Point(inset, inset)

    # Con cr == 0 los arcos son puntos: no se emiten.
    has_arcs = cr != 0

    path = Path()
    # Arranca a 45 grados sobre el arco superior derecho.
    offset = cr * math.sqrt(2.0) / 2.0
    path.move_to(Point(tr.x + offset, tr.y - offset))
    if has_arcs:
        path.add_arc(tr, cr, -math.pi / 4.0, 0.0)
    # Lado derecho
    path.line_to(Point(br.x + cr, br.y))
    if has_arcs:
        path.add_arc(br, cr, 0.0, math.pi / 2.0)
    # Lado inferior
    path.line_to(Point(bl.x, bl.y + cr))
    if has_arcs:
        path.add_arc(bl, cr, math.pi / 2.0, math.pi)
    # Lado izquierdo
    path.line_to(Point(tl.x - cr, tl.y))
    if has_arcs:
        path.add_arc(tl, cr, math.pi, 1.5 * math.pi)
    # Lado superior
    path.line_to(Point(tr.x, tr.y - cr))
    if has_arcs:
        path.add_arc(tr, cr, 1.5 * math.pi, 1.75 * math.pi)
    return path.close()
