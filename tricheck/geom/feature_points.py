# File: tricheck/geom/feature_points.py
# Project: TriCheck (TCK)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Puntos característicos de la tilde (vértice, brazos, corte con la caja).
# Notes: Funciones puras de PathConfig; se recalculan en cada acceso.
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from tricheck.core.models import BoxType, PathConfig
from tricheck.geom.primitives import (
    BoundaryRegime,
    Point,
    line_circle_point,
    ray_exit_circle,
    ray_exit_rounded_rect,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class FeaturePoints:
    """Resuelve los puntos que definen la tilde para una configuración.

    - box_intersection_point: donde la prolongación del brazo largo toca la caja.
    - middle_point: vértice inferior de la "V".
    - short_arm_end_point: extremo izquierdo (brazo corto).
    - long_arm_end_point: extremo visible del brazo largo.
    """

    config: PathConfig

    @property
    def center(self) -> Point:
        return Point(self.config.center, self.config.center)

    def box_intersection(self) -> tuple[Point, BoundaryRegime | None]:
        """Punto de corte con la caja + régimen (None para el círculo)."""
        cfg = self.config
        theta = cfg.checkmark.long_arm_box_intersection_angle
        if cfg.box_type == BoxType.CIRCLE:
            return ray_exit_circle(cfg.size, cfg.line_offset, theta), None
        p, regime = ray_exit_rounded_rect(cfg.size, cfg.line_offset, cfg.corner_radius, theta)
        log.debug("box_intersection: régimen=%s punto=%s", regime.value, p)
        return p, regime

    @property
    def box_intersection_point(self) -> Point:
        return self.box_intersection()[0]

    @property
    def middle_point(self) -> Point:
        cfg = self.config
        r = cfg.ratio("middle_point_radius")
        o = cfg.ratio("middle_point_offset")
        return Point(cfg.center + cfg.size * o, cfg.center + cfg.size * r)

    @property
    def short_arm_end_point(self) -> Point:
        cfg = self.config
        r = cfg.ratio("short_arm_radius")
        o = cfg.ratio("short_arm_offset")
        return Point(cfg.center - cfg.size * r, cfg.center + cfg.size * o)

    @property
    def long_arm_radius(self) -> float:
        return self.config.size * self.config.ratio("long_arm_radius")

    @property
    def long_arm_end_point(self) -> Point:
        # Recta vértice -> caja cortada con el círculo de radio S alrededor del
        # centro del control; raíz del lado de la caja.
        return line_circle_point(
            self.middle_point,
            self.box_intersection_point,
            self.center,
            self.long_arm_radius,
        )

    def as_dict(self) -> dict[str, Any]:
        box_point, regime = self.box_intersection()
        return {
            "box_intersection_point": box_point.as_tuple(),
            "box_intersection_regime": regime.value if regime else None,
            "long_arm_end_point": self.long_arm_end_point.as_tuple(),
            "middle_point": self.middle_point.as_tuple(),
            "short_arm_end_point": self.short_arm_end_point.as_tuple(),
        }
