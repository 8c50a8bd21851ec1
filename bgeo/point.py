from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, Union

import numpy as np

from .constants import DTYPE

# A Point is an (x, y) pair of float32 values.


@dataclass(frozen=True)
class Point:
    """2D point with single-precision coordinates."""

    x: float
    y: float

    def __post_init__(self) -> None:
        # frozen dataclass: coerce through object.__setattr__
        object.__setattr__(self, "x", DTYPE(self.x))
        object.__setattr__(self, "y", DTYPE(self.y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=DTYPE)

    def to_json(self) -> list[float]:
        return [float(self.x), float(self.y)]


PointLike = Union[Point, Sequence[float], np.ndarray]


def as_point(value: PointLike) -> Point:
    """Coerce a Point, an (x, y) sequence or a (2,) array into a Point."""
    if isinstance(value, Point):
        return value
    arr = np.asarray(value, dtype=DTYPE)
    if arr.shape != (2,):
        raise ValueError(f"Expected an (x, y) pair, got shape {arr.shape}")
    return Point(arr[0], arr[1])


def points_to_array(points: Iterable[PointLike]) -> np.ndarray:
    """Stack points into an (N, 2) float32 array."""
    rows = [as_point(p).to_array() for p in points]
    if not rows:
        return np.zeros((0, 2), dtype=DTYPE)
    return np.stack(rows)
