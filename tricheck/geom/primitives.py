"""Primitive geometry for the checkbox paths.

Coordinate space is the control's local square: origin top-left, y grows
downwards. Angles follow the math convention (counter-clockwise from +x as
seen on screen), which is why `point_on_circle` subtracts the sine.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum

log = logging.getLogger(__name__)

# Margin kept away from 0 and pi/2 so tan/cot stay finite.
ANGLE_EPSILON = 1e-9


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def scaled(self, k: float) -> "Point":
        return Point(self.x * k, self.y * k)

    def dot(self, other: "Point") -> float:
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


class BoundaryRegime(str, Enum):
    """Where a ray from the center leaves the rounded rectangle."""

    TOP_EDGE = "top_edge"
    RIGHT_EDGE = "right_edge"
    CORNER = "corner"


def point_on_circle(center: Point, radius: float, angle: float) -> Point:
    return Point(center.x + radius * math.cos(angle), center.y - radius * math.sin(angle))


def clamp_angle(theta: float) -> float:
    """Clamp `theta` into the open first quadrant `[eps, pi/2 - eps]`."""
    return min(max(theta, ANGLE_EPSILON), math.pi / 2.0 - ANGLE_EPSILON)


def line_circle_point(start: Point, toward: Point, center: Point, radius: float) -> Point:
    """Point of the line `start -> toward` lying on the circle (`center`, `radius`).

    Of the two intersections, returns the one with the larger parameter along
    `start -> toward`, i.e. the one on the `toward` side. When the line misses
    the circle the discriminant is clamped to 0 and the point of the line
    closest to `center` is returned.

    Parametrize P(t) = start + t*u with u the unit direction and w = start - center:
        |w + t*u|^2 = r^2  ->  t^2 + 2(w.u)t + (|w|^2 - r^2) = 0
        t = -(w.u) + sqrt((w.u)^2 - |w|^2 + r^2)
    """
    direction = toward - start
    length = direction.length()
    if length == 0.0:
        log.debug("line_circle_point: start == toward, sin dirección (%s)", start)
        return start
    u = direction.scaled(1.0 / length)
    w = start - center
    half_b = w.dot(u)
    c = w.dot(w) - radius * radius
    disc = half_b * half_b - c
    if disc < 0.0:
        log.debug("line_circle_point: la recta no corta el círculo (disc=%g), se usa el punto más cercano", disc)
        disc = 0.0
    t = -half_b + math.sqrt(disc)
    return start + u.scaled(t)


def ray_exit_circle(size: float, line_offset: float, theta: float) -> Point:
    """Point at angle `theta` on the stroke centerline of the circular box."""
    center = Point(size / 2.0, size / 2.0)
    return point_on_circle(center, size / 2.0 - line_offset, theta)


def ray_exit_rounded_rect(
    size: float,
    line_offset: float,
    corner_radius: float,
    theta: float,
) -> tuple[Point, BoundaryRegime]:
    """Exit point of the ray (center, `theta`) through the rounded rectangle.

    Only the top-right quadrant is handled (`theta` is clamped to it). The
    three regimes are exclusive and meet continuously: the top edge ends where
    the corner arc starts (x == corner center x) and the right edge starts
    where the arc ends (y == corner center y).
    """
    t = clamp_angle(theta)
    mid = size / 2.0
    half = mid - line_offset
    corner_center = Point(size - line_offset - corner_radius, line_offset + corner_radius)

    edge_x = mid + half * (math.cos(t) / math.sin(t))
    if edge_x <= corner_center.x:
        return Point(edge_x, line_offset), BoundaryRegime.TOP_EDGE

    edge_y = mid - half * math.tan(t)
    if edge_y >= corner_center.y:
        return Point(size - line_offset, edge_y), BoundaryRegime.RIGHT_EDGE

    center = Point(mid, mid)
    p = line_circle_point(center, point_on_circle(center, 1.0, t), corner_center, corner_radius)
    return p, BoundaryRegime.CORNER
