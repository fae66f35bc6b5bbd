"""Points, lines and unordered point pairs with tolerant comparisons."""

from __future__ import annotations

import math
from dataclasses import dataclass

from symmlines.util import EPSILON, float_cmp_tolerance, floats_equal_toler


@dataclass(frozen=True, eq=False)
class Point:
    """A point in the plane; equality and ordering use a small tolerance."""

    x: float
    y: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.x) and math.isfinite(self.y)):
            raise ValueError("Point coordinates must be finite and non-NaN")

    def compare(self, other: Point) -> int | None:
        """Compare by x, then y, with tolerance: -1, 0, 1 or None."""
        result = float_cmp_tolerance(self.x, other.x)
        if result == 0:
            return float_cmp_tolerance(self.y, other.y)
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return floats_equal_toler(self.x, other.x) and floats_equal_toler(self.y, other.y)

    def __lt__(self, other: Point) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.compare(other) == -1

    def __le__(self, other: Point) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.compare(other) in (-1, 0)

    def __gt__(self, other: Point) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.compare(other) == 1

    def __ge__(self, other: Point) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.compare(other) in (1, 0)

    def __hash__(self) -> int:
        return hash((self.x, self.y))


def _round_to_epsilon(value: float) -> float:
    scaled = value / EPSILON
    return math.copysign(math.floor(abs(scaled) + 0.5), scaled) * EPSILON


@dataclass(frozen=True, eq=False)
class Line:
    """The line ``a*x + b*y + c = 0``."""

    a: float
    b: float
    c: float

    def get_hash(self) -> int:
        """Return the tolerance-aware hash of the line."""
        return hash(self)

    def reflect(self, p: Point) -> Point:
        """Return the mirror image of ``p`` across this line."""
        denom = self.a**2 + self.b**2
        if denom == 0.0:
            raise ValueError("Invalid line: a^2 + b^2 cannot be zero")
        factor = 2.0 * (self.a * p.x + self.b * p.y + self.c) / denom
        return Point(p.x - factor * self.a, p.y - factor * self.b)

    def is_point_on_line(self, p: Point) -> bool:
        """Return True if ``p`` satisfies the line equation within tolerance."""
        return floats_equal_toler(self.a * p.x + self.b * p.y + self.c, 0.0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return all(
            float_cmp_tolerance(mine, theirs) == 0
            for mine, theirs in ((self.a, other.a), (self.b, other.b), (self.c, other.c))
        )

    def __hash__(self) -> int:
        return hash(tuple(_round_to_epsilon(v) for v in (self.a, self.b, self.c)))


class UnorderedPointPair:
    """Two points stored in canonical (ascending) order."""

    __slots__ = ("p1", "p2")

    def __init__(self, p1: Point, p2: Point) -> None:
        if p1 <= p2:
            self.p1, self.p2 = p1, p2
        else:
            self.p1, self.p2 = p2, p1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnorderedPointPair):
            return NotImplemented
        return self.p1 == other.p1 and self.p2 == other.p2

    def __hash__(self) -> int:
        return hash((self.p1, self.p2))

    def __repr__(self) -> str:
        return f"UnorderedPointPair(p1={self.p1!r}, p2={self.p2!r})"