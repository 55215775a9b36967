# File: tricheck/paths/presets.py
# Project: TriCheck (TCK)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Punto de entrada único: (estado, tipo de marca, tipo de caja) -> Path.
# Notes: Valida la configuración en el borde; cada llamada devuelve un Path nuevo.
from __future__ import annotations

import logging

from tricheck.core.models import CheckState, PathConfig, coerce_check_state
from tricheck.geom.feature_points import FeaturePoints
from tricheck.paths import box, marks
from tricheck.paths.path import Path

log = logging.getLogger(__name__)


class CheckboxPathPresets:
    """Fachada sobre los builders de contorno y marca.

    La configuración se copia al construir (es inmutable), no hay cache:
    se puede compartir entre hilos sin locks.
    """

    def __init__(self, config: PathConfig | None = None) -> None:
        self.config = (config or PathConfig()).validate()

    @property
    def feature_points(self) -> FeaturePoints:
        return FeaturePoints(self.config)

    # Contorno
    def path_for_box(self) -> Path:
        return box.path_for_box(self.config)

    def path_for_circle(self) -> Path:
        return box.path_for_circle(self.config)

    def path_for_rounded_rect(self) -> Path:
        return box.path_for_rounded_rect(self.config)

    # Marcas
    def path(self, state: CheckState | str) -> Path:
        st = coerce_check_state(state)
        log.debug(
            "path: state=%s mark=%s box=%s size=%s",
            st.value,
            self.config.mark_type.value,
            self.config.box_type.value,
            self.config.size,
        )
        if st == CheckState.UNCHECKED:
            return self.path_for_unselected_mark()
        if st == CheckState.CHECKED:
            return self.path_for_mark()
        return self.path_for_mixed_mark()

    def path_for_mark(self) -> Path:
        return marks.path_for_mark(self.config)

    def path_for_checkmark(self) -> Path:
        return marks.path_for_checkmark(self.config)

    def path_for_radio(self) -> Path:
        return marks.path_for_radio(self.config)

    def path_for_mixed_mark(self) -> Path:
        return marks.path_for_mixed_mark(self.config)

    def path_for_mixed_checkmark(self) -> Path:
        return marks.path_for_mixed_checkmark(self.config)

    def path_for_mixed_radio(self) -> Path:
        return marks.path_for_mixed_radio(self.config)

    def path_for_unselected_mark(self) -> Path:
        return marks.path_for_unselected_mark(self.config)


def path_for_box_outline(config: PathConfig) -> Path:
    """Contorno cerrado de la caja para `config`."""
    return CheckboxPathPresets(config).path_for_box()


def path_for_state(config: PathConfig, state: CheckState | str) -> Path:
    """Marca para `state`; siempre devuelve un Path (unchecked incluido)."""
    return CheckboxPathPresets(config).path(state)
