"""Circle queries: closest perimeter point and circle-circle intersection.

The module-level functions work on raw coordinates and are the canonical
implementation; `Circle` methods unpack their fields and forward to them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from .constants import DTYPE, EPS
from .intersection import Intersection
from .point import Point, PointLike, as_point

logger = logging.getLogger(__name__)


def closest_point(cx: float, cy: float, r: float, px: float, py: float) -> Point:
    """
    Point on the perimeter of circle (cx, cy, r) nearest to (px, py).

    When the query point sits on the center every perimeter point is equally
    close; the point at angle 0, (cx + r, cy), is returned.
    """
    cx, cy, r, px, py = (DTYPE(v) for v in (cx, cy, r, px, py))
    dx = px - cx
    dy = py - cy
    d = np.sqrt(dx * dx + dy * dy)
    if d == 0:
        logger.debug("closest_point: query point at circle center (%s, %s)", cx, cy)
        return Point(cx + r, cy)
    return Point(cx + dx / d * r, cy + dy / d * r)


def _center_distance(ax, ay, bx, by):
    dx = bx - ax
    dy = by - ay
    return dx, dy, np.sqrt(dx * dx + dy * dy)


def _gate(d, ar, br, eps: float, legacy_gate: bool) -> bool:
    if legacy_gate:
        # Legacy OR-combined test; only passes for coincident zero-radius circles.
        if abs(d - ar - br) > eps or abs(d - abs(ar - br)) > eps or (d != 0 and ar != br):
            return False
        return True
    if d <= eps:
        return False
    return bool(abs(ar - br) - eps <= d <= ar + br + eps)


def check_intersection(
    ax: float,
    ay: float,
    ar: float,
    bx: float,
    by: float,
    br: float,
    *,
    eps: float = EPS,
    legacy_gate: bool = False,
) -> bool:
    """
    True if the perimeters of circles A and B meet, tangency included.

    Concentric circles never intersect at a finite set of points and report
    False. `legacy_gate=True` applies the legacy OR-combined expression,
    which rejects nearly every intersecting pair.
    """
    ax, ay, ar, bx, by, br = (DTYPE(v) for v in (ax, ay, ar, bx, by, br))
    _, _, d = _center_distance(ax, ay, bx, by)
    return _gate(d, ar, br, eps, legacy_gate)


def intersect(
    ax: float,
    ay: float,
    ar: float,
    bx: float,
    by: float,
    br: float,
    *,
    eps: float = EPS,
    legacy_gate: bool = False,
) -> Intersection:
    """
    Intersection points of circles A and B via the radical line.

    Returns two points (coincident at tangency) or none.
    """
    ax, ay, ar, bx, by, br = (DTYPE(v) for v in (ax, ay, ar, bx, by, br))
    dx, dy, d = _center_distance(ax, ay, bx, by)
    if not _gate(d, ar, br, eps, legacy_gate):
        return Intersection.none()
    if d == 0:
        # Only reachable with legacy_gate; the default gate rejects d <= eps.
        logger.debug("intersect: legacy gate accepted concentric circles at (%s, %s)", ax, ay)
        return Intersection.none()

    sq_ar = ar * ar
    # Signed distance from A's center to the radical line
    w = (sq_ar - br * br + d * d) / (DTYPE(2) * d)
    # Half chord; clamped so tangency within eps stays finite
    h = np.sqrt(max(sq_ar - w * w, DTYPE(0)))

    t = w / d
    axis_x = ax + dx * t
    axis_y = ay + dy * t
    t = h / d
    offset_x = -dy * t
    offset_y = dx * t
    return Intersection.two(
        Point(axis_x + offset_x, axis_y + offset_y),
        Point(axis_x - offset_x, axis_y - offset_y),
    )


@dataclass
class Circle:
    """
    Circle with a center and a radius.

    Attributes:
        center: center point
        radius: radius; intersection queries expect a positive value
    """

    center: Point
    radius: float

    def __post_init__(self) -> None:
        self.center = as_point(self.center)
        self.radius = DTYPE(self.radius)

    @classmethod
    def at(cls, x: float, y: float, r: float) -> Circle:
        return cls(Point(x, y), r)

    def closest_point(self, p: PointLike) -> Point:
        px, py = as_point(p)
        return closest_point(self.center.x, self.center.y, self.radius, px, py)

    def check_intersection(self, other: Circle, *, eps: float = EPS, legacy_gate: bool = False) -> bool:
        return check_intersection(
            self.center.x, self.center.y, self.radius,
            other.center.x, other.center.y, other.radius,
            eps=eps, legacy_gate=legacy_gate,
        )

    def intersect(self, other: Circle, *, eps: float = EPS, legacy_gate: bool = False) -> Intersection:
        return self.intersect_at(other.center.x, other.center.y, other.radius, eps=eps, legacy_gate=legacy_gate)

    def intersect_at(
        self, x: float, y: float, r: float, *, eps: float = EPS, legacy_gate: bool = False
    ) -> Intersection:
        """Intersect with the circle given by raw center coordinates and radius."""
        return intersect(self.center.x, self.center.y, self.radius, x, y, r, eps=eps, legacy_gate=legacy_gate)

    def __str__(self) -> str:
        return f"bgeo.Circle | center [{self.center.x}, {self.center.y}] | radius [{self.radius}]"
