# File: tricheck/core/models.py
# Project: TriCheck (TCK)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Modelos de configuración (inmutables) para generar los paths.
# Notes: Se copia por cálculo; nada se cachea ni se muta después de validar.
from __future__ import annotations

import dataclasses
import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from tricheck.core.version import (
    DEFAULT_BOX_LINE_WIDTH,
    DEFAULT_CHECKMARK_LINE_WIDTH,
    DEFAULT_CORNER_RADIUS,
    DEFAULT_LONG_ARM_ANGLE,
    DEFAULT_LONG_ARM_RADIUS,
    DEFAULT_MIDDLE_POINT_OFFSET,
    DEFAULT_MIDDLE_POINT_RADIUS,
    DEFAULT_SHORT_ARM_OFFSET,
    DEFAULT_SHORT_ARM_RADIUS,
    DEFAULT_SIZE,
)
from tricheck.utils.errors import TriCheckConfigError, TriCheckValidationError

log = logging.getLogger(__name__)


class BoxType(str, Enum):
    """Forma del contorno.

    - circle: círculo inscrito en el cuadrado del control.
    - rounded_rect: rectángulo con esquinas redondeadas (`corner_radius`).
    """

    CIRCLE = "circle"
    ROUNDED_RECT = "rounded_rect"


class MarkType(str, Enum):
    """Estilo de la marca interior (tilde o punto de radio)."""

    CHECKMARK = "checkmark"
    RADIO = "radio"


class CheckState(str, Enum):
    UNCHECKED = "unchecked"
    CHECKED = "checked"
    MIXED = "mixed"


# Aliases aceptados al leer settings/CLI.
_BOX_ALIASES = {"square": BoxType.ROUNDED_RECT, "rect": BoxType.ROUNDED_RECT, "box": BoxType.ROUNDED_RECT}
_MARK_ALIASES = {"check": MarkType.CHECKMARK, "radio_dot": MarkType.RADIO, "dot": MarkType.RADIO}
_STATE_ALIASES = {"on": CheckState.CHECKED, "off": CheckState.UNCHECKED, "indeterminate": CheckState.MIXED}


def _coerce_enum(v: object, enum_cls: type[Enum], aliases: dict[str, Any], what: str) -> Any:
    if isinstance(v, enum_cls):
        return v
    s = str(v or "").strip().lower()
    for m in enum_cls:
        if m.value == s:
            return m
    if s in aliases:
        return aliases[s]
    raise TriCheckConfigError(f"{what} inválido: {v!r}")


def coerce_box_type(v: object) -> BoxType:
    return _coerce_enum(v, BoxType, _BOX_ALIASES, "box_type")


def coerce_mark_type(v: object) -> MarkType:
    return _coerce_enum(v, MarkType, _MARK_ALIASES, "mark_type")


def coerce_check_state(v: object) -> CheckState:
    return _coerce_enum(v, CheckState, _STATE_ALIASES, "state")


@dataclass(frozen=True)
class RatioPair:
    """Un ratio adimensional con un valor por tipo de caja."""

    circle: float
    box: float

    def for_box(self, box_type: BoxType) -> float:
        return self.circle if box_type == BoxType.CIRCLE else self.box

    def to_dict(self) -> dict[str, float]:
        return {"circle": float(self.circle), "box": float(self.box)}

    @staticmethod
    def from_value(v: Any, field_name: str) -> "RatioPair":
        # Acepta {"circle": x, "box": y} o [x, y].
        if isinstance(v, RatioPair):
            return v
        if isinstance(v, dict):
            return RatioPair(
                circle=_as_float(v.get("circle"), f"{field_name}.circle"),
                box=_as_float(v.get("box"), f"{field_name}.box"),
            )
        if isinstance(v, (list, tuple)) and len(v) == 2:
            return RatioPair(
                circle=_as_float(v[0], f"{field_name}[0]"),
                box=_as_float(v[1], f"{field_name}[1]"),
            )
        raise TriCheckConfigError(f"Campo {field_name} inválido (ratio pair): {v!r}")


def _pair(values: tuple[float, float]) -> RatioPair:
    return RatioPair(circle=values[0], box=values[1])


@dataclass(frozen=True)
class CheckmarkProperties:
    """Parámetros que definen la tilde, como fracciones de `size`.

    `long_arm_box_intersection_angle` está en radianes; el resto son pares
    (círculo, caja) porque el mismo rasgo cae a distinta distancia según la
    forma del contorno.
    """

    long_arm_box_intersection_angle: float = DEFAULT_LONG_ARM_ANGLE
    long_arm_radius: RatioPair = field(default_factory=lambda: _pair(DEFAULT_LONG_ARM_RADIUS))
    middle_point_radius: RatioPair = field(default_factory=lambda: _pair(DEFAULT_MIDDLE_POINT_RADIUS))
    middle_point_offset: RatioPair = field(default_factory=lambda: _pair(DEFAULT_MIDDLE_POINT_OFFSET))
    short_arm_radius: RatioPair = field(default_factory=lambda: _pair(DEFAULT_SHORT_ARM_RADIUS))
    short_arm_offset: RatioPair = field(default_factory=lambda: _pair(DEFAULT_SHORT_ARM_OFFSET))

    def to_dict(self) -> dict[str, Any]:
        return {
            "long_arm_box_intersection_angle": float(self.long_arm_box_intersection_angle),
            "long_arm_radius": self.long_arm_radius.to_dict(),
            "middle_point_radius": self.middle_point_radius.to_dict(),
            "middle_point_offset": self.middle_point_offset.to_dict(),
            "short_arm_radius": self.short_arm_radius.to_dict(),
            "short_arm_offset": self.short_arm_offset.to_dict(),
        }

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "CheckmarkProperties":
        if not isinstance(d, dict):
            raise TriCheckConfigError("checkmark inválido: se esperaba dict")
        base = CheckmarkProperties()
        kwargs: dict[str, Any] = {}
        if "long_arm_box_intersection_angle" in d:
            kwargs["long_arm_box_intersection_angle"] = _as_float(
                d["long_arm_box_intersection_angle"], "checkmark.long_arm_box_intersection_angle"
            )
        for name in RATIO_FIELDS:
            if name in d:
                kwargs[name] = RatioPair.from_value(d[name], f"checkmark.{name}")
        return dataclasses.replace(base, **kwargs)


RATIO_FIELDS = (
    "long_arm_radius",
    "middle_point_radius",
    "middle_point_offset",
    "short_arm_radius",
    "short_arm_offset",
)


@dataclass(frozen=True)
class PathConfig:
    """Snapshot inmutable de todo lo que necesita el cálculo de paths.

    Coordenadas locales del control: origen arriba-izquierda, y hacia abajo,
    cuadrado `[0, size] x [0, size]`.
    """

    size: float = DEFAULT_SIZE
    checkmark_line_width: float = DEFAULT_CHECKMARK_LINE_WIDTH
    box_line_width: float = DEFAULT_BOX_LINE_WIDTH
    corner_radius: float = DEFAULT_CORNER_RADIUS
    box_type: BoxType = BoxType.CIRCLE
    mark_type: MarkType = MarkType.CHECKMARK
    checkmark: CheckmarkProperties = field(default_factory=CheckmarkProperties)

    @property
    def line_offset(self) -> float:
        """Media línea de la caja: el trazo queda centrado sobre el contorno."""
        return self.box_line_width / 2.0

    @property
    def center(self) -> float:
        return self.size / 2.0

    @property
    def is_degenerate(self) -> bool:
        return self.size <= 0

    def ratio(self, name: str) -> float:
        """Ratio `name` de `checkmark` resuelto para el `box_type` actual."""
        pair: RatioPair = getattr(self.checkmark, name)
        return pair.for_box(self.box_type)

    def replace(self, **changes: Any) -> "PathConfig":
        return dataclasses.replace(self, **changes)

    # [TCK-KEEP] Validación de borde: la geometría asume estas precondiciones.
    def validate(self) -> "PathConfig":
        """Verifica rangos y devuelve `self` (permite encadenar).

        Lanza `TriCheckValidationError` si la configuración haría que el
        clasificador del rectángulo redondeado (arista superior / lateral /
        esquina) se vuelva inconsistente.
        """
        numbers = {
            "size": self.size,
            "checkmark_line_width": self.checkmark_line_width,
            "box_line_width": self.box_line_width,
            "corner_radius": self.corner_radius,
            "checkmark.long_arm_box_intersection_angle": self.checkmark.long_arm_box_intersection_angle,
        }
        for name in RATIO_FIELDS:
            pair: RatioPair = getattr(self.checkmark, name)
            numbers[f"checkmark.{name}.circle"] = pair.circle
            numbers[f"checkmark.{name}.box"] = pair.box
        for name, v in numbers.items():
            if not math.isfinite(v):
                raise TriCheckValidationError(f"{name} inválido: debe ser finito ({v!r})")

        if self.checkmark_line_width < 0 or self.box_line_width < 0:
            raise TriCheckValidationError("line widths inválidos: deben ser >= 0")
        if self.corner_radius < 0:
            raise TriCheckValidationError("corner_radius inválido: debe ser >= 0")

        if self.is_degenerate:
            # Resultado visual indefinido, resultado matemático definido.
            log.warning("size=%s <= 0: los paths resultantes son degenerados", self.size)
            return self

        if self.box_line_width > self.size or self.checkmark_line_width > self.size:
            raise TriCheckValidationError(
                f"line widths inválidos: no pueden superar size ({self.size})"
            )
        if self.corner_radius > self.size / 2.0:
            raise TriCheckValidationError(
                f"corner_radius inválido: {self.corner_radius} > size/2 ({self.size / 2.0})"
            )
        if self.box_type == BoxType.ROUNDED_RECT:
            theta = self.checkmark.long_arm_box_intersection_angle
            if not 0.0 <= theta <= math.pi / 2.0:
                raise TriCheckValidationError(
                    f"long_arm_box_intersection_angle inválido para rounded_rect: {theta!r} (rango [0, pi/2])"
                )
        return self

    def to_dict(self) -> dict[str, Any]:
        return {
            "size": float(self.size),
            "checkmark_line_width": float(self.checkmark_line_width),
            "box_line_width": float(self.box_line_width),
            "corner_radius": float(self.corner_radius),
            "box_type": self.box_type.value,
            "mark_type": self.mark_type.value,
            "checkmark": self.checkmark.to_dict(),
        }

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "PathConfig":
        if not isinstance(d, dict):
            raise TriCheckConfigError("PathConfig inválido: se esperaba dict")
        base = PathConfig()
        cm_raw = d.get("checkmark")
        return PathConfig(
            size=_as_float(d.get("size", base.size), "size"),
            checkmark_line_width=_as_float(
                d.get("checkmark_line_width", base.checkmark_line_width), "checkmark_line_width"
            ),
            box_line_width=_as_float(d.get("box_line_width", base.box_line_width), "box_line_width"),
            corner_radius=_as_float(d.get("corner_radius", base.corner_radius), "corner_radius"),
            box_type=coerce_box_type(d.get("box_type", base.box_type)),
            mark_type=coerce_mark_type(d.get("mark_type", base.mark_type)),
            checkmark=CheckmarkProperties.from_dict(cm_raw) if cm_raw is not None else base.checkmark,
        )


def _as_float(value: Any, field_name: str) -> float:
    if isinstance(value, bool):
        raise TriCheckConfigError(f"Campo {field_name} inválido (float): {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise TriCheckConfigError(f"Campo {field_name} inválido (float): {value!r}") from e
