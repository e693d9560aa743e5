from __future__ import annotations
import math
from typing import NamedTuple, Tuple, TypeAlias

Scalar: TypeAlias = int | float


class Point(NamedTuple):
    """A point in surface coordinates (origin top-left, y grows downward)."""
    x: float
    y: float

    def translate(self, dx: float, dy: float) -> Point:
        return Point(self.x + dx, self.y + dy)

    def distance_to(self, other: Tuple[float, float]) -> float:
        return math.hypot(other[0] - self.x, other[1] - self.y)

    def is_close(self, other: Tuple[float, float], tol: float = 1e-9) -> bool:
        return abs(self.x - other[0]) <= tol and abs(self.y - other[1]) <= tol


class GradientLine(NamedTuple):
    """
    The segment along which color stops are distributed.

    ``start`` maps to stop position 0 and ``end`` to stop position 1, so the
    direction from start to end is the visual direction of the gradient.
    """
    start: Point
    end: Point

    @property
    def delta(self) -> Tuple[float, float]:
        return self.end.x - self.start.x, self.end.y - self.start.y

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    @property
    def midpoint(self) -> Point:
        return Point((self.start.x + self.end.x) / 2, (self.start.y + self.end.y) / 2)

    @property
    def direction(self) -> Tuple[float, float]:
        """Unit vector from start to end, ``(0.0, 0.0)`` for a zero-length line."""
        length = self.length
        if length == 0.0:
            return 0.0, 0.0
        dx, dy = self.delta
        return dx / length, dy / length

    @property
    def is_degenerate(self) -> bool:
        return self.start == self.end

    def reversed(self) -> GradientLine:
        return GradientLine(self.end, self.start)

    def is_close(self, other: GradientLine, tol: float = 1e-9) -> bool:
        return self.start.is_close(other.start, tol) and self.end.is_close(other.end, tol)
