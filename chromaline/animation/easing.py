from __future__ import annotations
from abc import ABC, abstractmethod

from boundednumbers.functions import clamp


class Easing(ABC):
    """Maps linear time progress in [0, 1] to animation progress."""

    @abstractmethod
    def __call__(self, fraction: float) -> float:
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class LinearEasing(Easing):
    def __call__(self, fraction: float) -> float:
        return float(clamp(fraction, 0.0, 1.0))


class CubicBezierEasing(Easing):
    """
    CSS-style ``cubic-bezier(x1, y1, x2, y2)`` timing curve.

    The curve runs from (0, 0) to (1, 1). For a time fraction ``t`` the curve
    parameter ``s`` with ``x(s) == t`` is found by Newton's method, with a
    bisection fallback where the slope is too flat, and ``y(s)`` is returned.
    """
    newton_iterations = 8
    bisection_iterations = 64
    tolerance = 1e-7

    def __init__(self, x1: float, y1: float, x2: float, y2: float) -> None:
        if not (0.0 <= x1 <= 1.0 and 0.0 <= x2 <= 1.0):
            raise ValueError(f"x control points must be in [0, 1], got {x1!r} and {x2!r}")
        self.x1, self.y1, self.x2, self.y2 = float(x1), float(y1), float(x2), float(y2)

    @staticmethod
    def _bezier(s: float, p1: float, p2: float) -> float:
        inv = 1.0 - s
        return 3 * inv * inv * s * p1 + 3 * inv * s * s * p2 + s * s * s

    @staticmethod
    def _bezier_slope(s: float, p1: float, p2: float) -> float:
        inv = 1.0 - s
        return 3 * inv * inv * p1 + 6 * inv * s * (p2 - p1) + 3 * s * s * (1.0 - p2)

    def _solve_curve_x(self, t: float) -> float:
        s = t
        for _ in range(self.newton_iterations):
            error = self._bezier(s, self.x1, self.x2) - t
            if abs(error) < self.tolerance:
                return s
            slope = self._bezier_slope(s, self.x1, self.x2)
            if abs(slope) < 1e-6:
                break
            s -= error / slope

        # x(s) is monotone on [0, 1] because both x control points are in [0, 1]
        low, high = 0.0, 1.0
        s = t
        for _ in range(self.bisection_iterations):
            x = self._bezier(s, self.x1, self.x2)
            if abs(x - t) < self.tolerance:
                break
            if x < t:
                low = s
            else:
                high = s
            s = (low + high) / 2
        return s

    def __call__(self, fraction: float) -> float:
        t = float(clamp(fraction, 0.0, 1.0))
        if t == 0.0 or t == 1.0:
            return t
        return self._bezier(self._solve_curve_x(t), self.y1, self.y2)

    def __repr__(self) -> str:
        return f"CubicBezierEasing({self.x1}, {self.y1}, {self.x2}, {self.y2})"


LINEAR = LinearEasing()
# Fast start, long settle; drives the text gradient sweep.
TEXT_SWEEP_EASING = CubicBezierEasing(0.3, 0.0, 0.4, 1.0)
