"""Segment queries: projection, distances, intersections and subdivision.

A `Line` is a finite segment from `a` to `b`. Distance and intersection
queries ignore its direction; `divide` walks from `a` to `b`.
"""

from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from .circle import Circle
from .constants import DTYPE, EPS
from .intersection import Intersection
from .point import Point, PointLike, as_point

logger = logging.getLogger(__name__)


def closest_point(ax: float, ay: float, bx: float, by: float, px: float, py: float, *, eps: float = EPS) -> Point:
    """
    Point on segment a-b nearest to (px, py).

    A degenerate segment (both components of b - a within eps of zero)
    returns `a`.
    """
    ax, ay, bx, by, px, py = (DTYPE(v) for v in (ax, ay, bx, by, px, py))
    dx = bx - ax
    dy = by - ay
    if abs(dx) <= eps and abs(dy) <= eps:
        return Point(ax, ay)

    # Scalar projection of (p - a) onto (b - a), as a fraction of |b - a|
    u = ((px - ax) * dx + (py - ay) * dy) / (dx * dx + dy * dy)
    if u < 0:
        return Point(ax, ay)
    if u > 1:
        return Point(bx, by)
    return Point(ax + u * dx, ay + u * dy)


def squared_distance(ax: float, ay: float, bx: float, by: float, px: float, py: float, *, eps: float = EPS) -> float:
    """Squared distance from (px, py) to segment a-b."""
    closest = closest_point(ax, ay, bx, by, px, py, eps=eps)
    px, py = DTYPE(px), DTYPE(py)
    return float((closest.x - px) * (closest.x - px) + (closest.y - py) * (closest.y - py))


def distance(ax: float, ay: float, bx: float, by: float, px: float, py: float, *, eps: float = EPS) -> float:
    """Distance from (px, py) to segment a-b."""
    return float(np.sqrt(DTYPE(squared_distance(ax, ay, bx, by, px, py, eps=eps))))


def intersect(
    ax: float,
    ay: float,
    bx: float,
    by: float,
    cx: float,
    cy: float,
    dx: float,
    dy: float,
    *,
    eps: float = EPS,
) -> Optional[Point]:
    """
    Intersection point of segments a-b and c-d, or None.

    Parallel segments report None, including collinear overlapping ones.
    """
    ax, ay, bx, by, cx, cy, dx, dy = (DTYPE(v) for v in (ax, ay, bx, by, cx, cy, dx, dy))
    den = (dy - cy) * (bx - ax) - (dx - cx) * (by - ay)
    if abs(den) < eps:
        return None

    na = (dx - cx) * (ay - cy) - (dy - cy) * (ax - cx)
    nb = (bx - ax) * (ay - cy) - (by - ay) * (ax - cx)
    ma = na / den
    mb = nb / den
    if ma < 0 or ma > 1 or mb < 0 or mb > 1:
        return None
    return Point(ax + ma * (bx - ax), ay + ma * (by - ay))


def squared_distance_to_center(
    x1: float, y1: float, x2: float, y2: float, cx: float, cy: float, *, eps: float = EPS
) -> float:
    """Squared distance from segment 1-2 to the point (cx, cy)."""
    return squared_distance(x1, y1, x2, y2, cx, cy, eps=eps)


def distance_to_center(x1: float, y1: float, x2: float, y2: float, cx: float, cy: float, *, eps: float = EPS) -> float:
    """Distance from segment 1-2 to a circle's center, not clamped by the radius."""
    return distance(x1, y1, x2, y2, cx, cy, eps=eps)


def distance_to_circle(
    x1: float, y1: float, x2: float, y2: float, cx: float, cy: float, r: float, *, eps: float = EPS
) -> float:
    """Unsigned distance from segment 1-2 to the perimeter of circle (cx, cy, r)."""
    d = DTYPE(distance_to_center(x1, y1, x2, y2, cx, cy, eps=eps))
    return float(abs(d - DTYPE(r)))


def squared_distance_to_circle(
    x1: float, y1: float, x2: float, y2: float, cx: float, cy: float, r: float, *, eps: float = EPS
) -> float:
    # Square of |d - r|, not d**2 - r**2.
    d = DTYPE(distance_to_circle(x1, y1, x2, y2, cx, cy, r, eps=eps))
    return float(d * d)


def intersect_circle(x1: float, y1: float, x2: float, y2: float, cx: float, cy: float, r: float) -> Intersection:
    """
    Points where segment 1-2 crosses the perimeter of circle (cx, cy, r).

    Returns one point when exactly one endpoint lies strictly inside the
    circle, two when neither does and the segment passes through it, and none
    when the segment misses the perimeter, is fully contained, or is
    degenerate.

    Raises:
        ValueError: if r <= 0.
    """
    if r <= 0:
        raise ValueError("The radius of the circle must be bigger than 0.")
    x1, y1, x2, y2, cx, cy, r = (DTYPE(v) for v in (x1, y1, x2, y2, cx, cy, r))
    if x1 == x2 and y1 == y2:
        logger.debug("intersect_circle: degenerate segment at (%s, %s)", x1, y1)
        return Intersection.none()

    sq_r = r * r
    one_inside = (cx - x1) * (cx - x1) + (cy - y1) * (cy - y1) < sq_r
    two_inside = (cx - x2) * (cx - x2) + (cy - y2) * (cy - y2) < sq_r
    if one_inside and two_inside:
        return Intersection.none()

    # Unit direction (sx, sy) and length sl of the segment
    dx = x2 - x1
    dy = y2 - y1
    sl = np.sqrt(dx * dx + dy * dy)
    sx = dx / sl
    sy = dy / sl

    # Length of the projection of (c - 1) onto the segment direction
    pl = (cx - x1) * sx + (cy - y1) * sy
    if (pl < 0 and not one_inside) or (pl > sl and not two_inside):
        return Intersection.none()

    x = x1 + sx * pl
    y = y1 + sy * pl
    h = sq_r - ((x - cx) * (x - cx) + (y - cy) * (y - cy))
    if h < 0:
        return Intersection.none()
    h = np.sqrt(h)

    if one_inside:
        return Intersection.one(Point(x + sx * h, y + sy * h))
    if two_inside:
        return Intersection.one(Point(x - sx * h, y - sy * h))
    return Intersection.two(Point(x + sx * h, y + sy * h), Point(x - sx * h, y - sy * h))


def divide(ax: float, ay: float, bx: float, by: float, n: int) -> List[Point]:
    """
    Split segment a-b into n equal parts.

    Returns the n + 1 division points from a to b, both included.
    """
    if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n < 1:
        raise ValueError("The number of equal parts must be positive.")
    start = np.array([ax, ay], dtype=DTYPE)
    end = np.array([bx, by], dtype=DTYPE)
    # Direct interpolation; the last point is exactly b.
    pts = np.linspace(start, end, int(n) + 1, dtype=DTYPE)
    return [Point(x, y) for x, y in pts]


@dataclass
class Line:
    """
    Finite segment from `a` to `b`.

    Attributes:
        a: first endpoint
        b: second endpoint
    """

    a: Point
    b: Point

    def __post_init__(self) -> None:
        self.a = as_point(self.a)
        self.b = as_point(self.b)

    @classmethod
    def at(cls, ax: float, ay: float, bx: float, by: float) -> Line:
        return cls(Point(ax, ay), Point(bx, by))

    @property
    def length(self) -> float:
        dx = self.b.x - self.a.x
        dy = self.b.y - self.a.y
        return float(np.sqrt(dx * dx + dy * dy))

    def closest_point(self, p: PointLike, *, eps: float = EPS) -> Point:
        px, py = as_point(p)
        return closest_point(self.a.x, self.a.y, self.b.x, self.b.y, px, py, eps=eps)

    def squared_distance(self, p: PointLike, *, eps: float = EPS) -> float:
        px, py = as_point(p)
        return squared_distance(self.a.x, self.a.y, self.b.x, self.b.y, px, py, eps=eps)

    def distance(self, p: PointLike, *, eps: float = EPS) -> float:
        px, py = as_point(p)
        return distance(self.a.x, self.a.y, self.b.x, self.b.y, px, py, eps=eps)

    def intersect(self, other: Line, *, eps: float = EPS) -> Optional[Point]:
        return self.intersect_at(other.a.x, other.a.y, other.b.x, other.b.y, eps=eps)

    def intersect_at(self, ax: float, ay: float, bx: float, by: float, *, eps: float = EPS) -> Optional[Point]:
        """Intersect with the segment given by raw endpoint coordinates."""
        return intersect(self.a.x, self.a.y, self.b.x, self.b.y, ax, ay, bx, by, eps=eps)

    def intersect_circle(self, circle: Circle) -> Intersection:
        return self.intersect_circle_at(circle.center.x, circle.center.y, circle.radius)

    def intersect_circle_at(self, cx: float, cy: float, r: float) -> Intersection:
        return intersect_circle(self.a.x, self.a.y, self.b.x, self.b.y, cx, cy, r)

    def distance_to_center(self, circle: Circle, *, eps: float = EPS) -> float:
        return distance_to_center(self.a.x, self.a.y, self.b.x, self.b.y, circle.center.x, circle.center.y, eps=eps)

    def squared_distance_to_center(self, circle: Circle, *, eps: float = EPS) -> float:
        return squared_distance_to_center(
            self.a.x, self.a.y, self.b.x, self.b.y, circle.center.x, circle.center.y, eps=eps
        )

    def distance_to_circle(self, circle: Circle, *, eps: float = EPS) -> float:
        return distance_to_circle(
            self.a.x, self.a.y, self.b.x, self.b.y, circle.center.x, circle.center.y, circle.radius, eps=eps
        )

    def squared_distance_to_circle(self, circle: Circle, *, eps: float = EPS) -> float:
        return squared_distance_to_circle(
            self.a.x, self.a.y, self.b.x, self.b.y, circle.center.x, circle.center.y, circle.radius, eps=eps
        )

    def divide(self, n: int) -> List[Point]:
        return divide(self.a.x, self.a.y, self.b.x, self.b.y, n)

    def __str__(self) -> str:
        return f"bgeo.Line[{self.a.x}, {self.a.y}][{self.b.x}, {self.b.y}]"
