# File: tricheck/paths/marks.py
# Project: TriCheck (TCK)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Marcas interiores: tilde, punto de radio y marca "mixed".
# Notes: El estado unchecked devuelve la misma marca que checked (la oculta el
#        control); así la transición puede morfear desde/hacia ella.
from __future__ import annotations

from tricheck.core.models import MarkType, PathConfig
from tricheck.core.version import MIXED_MARK_X, RADIO_SCALE, RADIO_TRANSLATE
from tricheck.geom.feature_points import FeaturePoints
from tricheck.geom.primitives import Point
from tricheck.paths.box import path_for_box
from tricheck.paths.path import Path


# ------------------------------
# Checked
# ------------------------------
def path_for_mark(config: PathConfig) -> Path:
    if config.mark_type == MarkType.CHECKMARK:
        return path_for_checkmark(config)
    return path_for_radio(config)


def path_for_checkmark(config: PathConfig) -> Path:
    """Polilínea brazo corto -> vértice -> brazo largo."""
    fp = FeaturePoints(config)
    return (
        Path()
        .move_to(fp.short_arm_end_point)
        .line_to(fp.middle_point)
        .line_to(fp.long_arm_end_point)
    )


def path_for_radio(config: PathConfig) -> Path:
    """Copia concéntrica y reducida del contorno."""
    shift = config.size * RADIO_TRANSLATE
    return path_for_box(config).apply_transform(RADIO_SCALE, (shift, shift))


# ------------------------------
# Mixed
# ------------------------------
def path_for_mixed_mark(config: PathConfig) -> Path:
    if config.mark_type == MarkType.CHECKMARK:
        return path_for_mixed_checkmark(config)
    return path_for_mixed_radio(config)


def path_for_mixed_checkmark(config: PathConfig) -> Path:
    # Tres puntos (no dos) para poder morfear contra la tilde.
    y = config.size / 2.0
    left, middle, right = (config.size * k for k in MIXED_MARK_X)
    return Path().move_to(Point(left, y)).line_to(Point(middle, y)).line_to(Point(right, y))


def path_for_mixed_radio(config: PathConfig) -> Path:
    y = config.size / 2.0
    left, right = config.size * MIXED_MARK_X[0], config.size * MIXED_MARK_X[-1]
    return Path().move_to(Point(left, y)).line_to(Point(right, y)).reversed()


# ------------------------------
# Unchecked
# ------------------------------
def path_for_unselected_mark(config: PathConfig) -> Path:
    if config.mark_type == MarkType.CHECKMARK:
        return path_for_unselected_checkmark(config)
    return path_for_unselected_radio(config)


def path_for_unselected_checkmark(config: PathConfig) -> Path:
    return path_for_checkmark(config)


def path_for_unselected_radio(config: PathConfig) -> Path:
    return path_for_radio(config)
