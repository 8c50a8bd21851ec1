"""Closed-form 2D circle and segment geometry in single precision."""

from bgeo.circle import Circle
from bgeo.constants import DTYPE, EPS
from bgeo.intersection import Intersection, IntersectionKind
from bgeo.line import Line
from bgeo.point import Point, as_point, points_to_array

__all__ = [
    "Circle",
    "DTYPE",
    "EPS",
    "Intersection",
    "IntersectionKind",
    "Line",
    "Point",
    "as_point",
    "points_to_array",
]
