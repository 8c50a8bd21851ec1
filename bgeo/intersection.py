"""Result type for queries that yield zero, one or two points."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple

from .point import Point


class IntersectionKind(Enum):
    NONE = 0
    ONE = 1
    TWO = 2


@dataclass(frozen=True)
class Intersection:
    """
    Points where two shapes meet.

    An empty Intersection is a valid "no result", not a failure. It is falsy,
    so callers can write `if hits:` or switch on `hits.kind`.

    Attributes:
        points: 0, 1 or 2 points, in the order the query produced them.
    """

    points: Tuple[Point, ...] = ()

    def __post_init__(self) -> None:
        if len(self.points) > 2:
            raise ValueError(f"An intersection holds at most 2 points, got {len(self.points)}")
        object.__setattr__(self, "points", tuple(self.points))

    @classmethod
    def none(cls) -> Intersection:
        return cls(())

    @classmethod
    def one(cls, p: Point) -> Intersection:
        return cls((p,))

    @classmethod
    def two(cls, p: Point, q: Point) -> Intersection:
        return cls((p, q))

    @property
    def kind(self) -> IntersectionKind:
        return IntersectionKind(len(self.points))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, idx: int) -> Point:
        return self.points[idx]

    def __bool__(self) -> bool:
        return bool(self.points)

    def to_json(self) -> list[list[float]] | None:
        if not self.points:
            return None
        return [p.to_json() for p in self.points]
