# File: tricheck/paths/path.py
# Project: TriCheck (TCK)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Path vectorial grabado (move/line/arc/close) independiente de Qt.
# Notes:
#   - Los ángulos de arco son "de pantalla": desde +x hacia +y (y hacia abajo),
#     clockwise=True recorre ángulos crecientes.
#   - render/qpath_render.py y render/exporter.py traducen esto a Qt / SVG.
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

from tricheck.geom.primitives import Point
from tricheck.utils.errors import TriCheckError, TriCheckValidationError

TAU = 2.0 * math.pi

# Distancia bajo la cual dos puntos del path se consideran el mismo.
POINT_TOLERANCE = 1e-9


def _map(p: Point, scale: float, dx: float, dy: float) -> Point:
    return Point(p.x * scale + dx, p.y * scale + dy)


@dataclass(frozen=True)
class MoveTo:
    point: Point

    def transformed(self, scale: float, dx: float, dy: float) -> "MoveTo":
        return MoveTo(_map(self.point, scale, dx, dy))


@dataclass(frozen=True)
class LineTo:
    point: Point

    def transformed(self, scale: float, dx: float, dy: float) -> "LineTo":
        return LineTo(_map(self.point, scale, dx, dy))


@dataclass(frozen=True)
class ArcTo:
    center: Point
    radius: float
    start_angle: float
    end_angle: float
    clockwise: bool = True

    @property
    def sweep(self) -> float:
        """Ángulo recorrido con signo (positivo = clockwise), |sweep| <= 2*pi."""
        d = self.end_angle - self.start_angle
        if not self.clockwise:
            d = -d
        s = TAU if d >= TAU else d % TAU
        return s if self.clockwise else -s

    @property
    def start_point(self) -> Point:
        return self.point_at(self.start_angle)

    @property
    def end_point(self) -> Point:
        return self.point_at(self.start_angle + self.sweep)

    def point_at(self, angle: float) -> Point:
        return Point(
            self.center.x + self.radius * math.cos(angle),
            self.center.y + self.radius * math.sin(angle),
        )

    def transformed(self, scale: float, dx: float, dy: float) -> "ArcTo":
        return ArcTo(
            center=_map(self.center, scale, dx, dy),
            radius=self.radius * scale,
            start_angle=self.start_angle,
            end_angle=self.end_angle,
            clockwise=self.clockwise,
        )


@dataclass(frozen=True)
class Close:
    def transformed(self, scale: float, dx: float, dy: float) -> "Close":
        return self


PathOp = Union[MoveTo, LineTo, ArcTo, Close]


def _same_point(a: Point, b: Point) -> bool:
    return a.distance_to(b) <= POINT_TOLERANCE


class Path:
    """Secuencia ordenada de operaciones de dibujo.

    API de construcción mínima (move_to / line_to / add_arc / close /
    apply_transform). `add_arc` conecta con una línea si el punto actual no
    coincide con el inicio del arco, o abre el subpath si no hay punto actual.
    """

    def __init__(self, ops: list[PathOp] | None = None) -> None:
        self._ops: list[PathOp] = []
        self._current: Point | None = None
        self._subpath_start: Point | None = None
        for op in ops or []:
            self._append(op)

    # ------------------------------
    # Construcción
    # ------------------------------
    def move_to(self, p: Point) -> "Path":
        self._append(MoveTo(p))
        return self

    def line_to(self, p: Point) -> "Path":
        if self._current is None:
            # Sin punto actual, una línea abre el subpath.
            return self.move_to(p)
        self._append(LineTo(p))
        return self

    def add_arc(
        self,
        center: Point,
        radius: float,
        start_angle: float,
        end_angle: float,
        clockwise: bool = True,
    ) -> "Path":
        arc = ArcTo(center, radius, start_angle, end_angle, clockwise)
        start = arc.start_point
        if self._current is None:
            self._append(MoveTo(start))
        elif not _same_point(self._current, start):
            self._append(LineTo(start))
        self._append(arc)
        return self

    def close(self) -> "Path":
        if self._current is not None:
            self._append(Close())
        return self

    def _append(self, op: PathOp) -> None:
        if isinstance(op, MoveTo):
            self._current = op.point
            self._subpath_start = op.point
        elif isinstance(op, LineTo):
            self._current = op.point
        elif isinstance(op, ArcTo):
            self._current = op.end_point
        elif isinstance(op, Close):
            self._current = self._subpath_start
        self._ops.append(op)

    # ------------------------------
    # Transformaciones
    # ------------------------------
    def apply_transform(self, scale: float = 1.0, translate: tuple[float, float] = (0.0, 0.0)) -> "Path":
        """Escala uniforme (respecto al origen) y luego traslada, in-place."""
        if scale <= 0:
            raise TriCheckValidationError(f"scale inválido: debe ser > 0 ({scale!r})")
        dx, dy = translate
        ops = [op.transformed(scale, dx, dy) for op in self._ops]
        self._ops = []
        self._current = self._subpath_start = None
        for op in ops:
            self._append(op)
        return self

    def transformed(self, scale: float = 1.0, translate: tuple[float, float] = (0.0, 0.0)) -> "Path":
        return self.copy().apply_transform(scale, translate)

    def reversed(self) -> "Path":
        """Copia con el orden de puntos invertido (sólo polilíneas abiertas)."""
        if any(not isinstance(op, (MoveTo, LineTo)) for op in self._ops):
            raise TriCheckError("reversed() sólo soporta polilíneas (move/line)")
        if sum(1 for op in self._ops if isinstance(op, MoveTo)) > 1:
            raise TriCheckError("reversed() sólo soporta un subpath")
        out = Path()
        for p in reversed(self.points):
            out.line_to(p)
        return out

    def copy(self) -> "Path":
        return Path(list(self._ops))

    # ------------------------------
    # Consultas
    # ------------------------------
    @property
    def ops(self) -> tuple[PathOp, ...]:
        return tuple(self._ops)

    @property
    def current_point(self) -> Point | None:
        return self._current

    @property
    def points(self) -> list[Point]:
        """Vértices en orden: destinos de move/line y extremo final de cada arco."""
        out: list[Point] = []
        for op in self._ops:
            if isinstance(op, (MoveTo, LineTo)):
                out.append(op.point)
            elif isinstance(op, ArcTo):
                out.append(op.end_point)
        return out

    @property
    def is_empty(self) -> bool:
        return not self._ops

    @property
    def is_closed(self) -> bool:
        return bool(self._ops) and isinstance(self._ops[-1], Close)

    def count(self, kind: type) -> int:
        return sum(1 for op in self._ops if isinstance(op, kind))

    def __iter__(self) -> Iterator[PathOp]:
        return iter(self._ops)

    def __len__(self) -> int:
        return len(self._ops)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._ops == other._ops

    def __repr__(self) -> str:
        return f"Path({self._ops!r})"
