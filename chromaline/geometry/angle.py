from __future__ import annotations
import math
from enum import Enum

from ..errors import InvalidAngle

# Tolerance, in degrees, below which an angle counts as exactly horizontal or
# vertical. It is the seam between the axis-aligned and the projected code
# paths, so changing it moves that seam visibly.
ANGLE_EPSILON = 0.001


class GradientKind(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    LINEAR = "linear"


def validate_angle(angle_degrees: float) -> float:
    """Return the angle as a float, raising ``InvalidAngle`` for NaN/inf."""
    try:
        angle = float(angle_degrees)
    except (TypeError, ValueError):
        raise TypeError(f"Angle must be a real number, got {type(angle_degrees).__name__}") from None
    if not math.isfinite(angle):
        raise InvalidAngle(angle)
    return angle


def normalize_angle(angle_degrees: float) -> float:
    """
    Reduce an angle modulo 360 keeping its sign.

    The result lies in (-360, 360): ``-370`` becomes ``-10`` and ``370``
    becomes ``10``.
    """
    return math.fmod(validate_angle(angle_degrees), 360.0)


def wrap_angle(angle_degrees: float) -> float:
    """Map an angle onto (-180, 180]."""
    wrapped = validate_angle(angle_degrees) % 360.0
    if wrapped > 180.0:
        wrapped -= 360.0
    return wrapped


def is_horizontal(angle_degrees: float, epsilon: float = ANGLE_EPSILON) -> bool:
    return abs(math.fmod(wrap_angle(angle_degrees), 180.0)) < epsilon


def is_vertical(angle_degrees: float, epsilon: float = ANGLE_EPSILON) -> bool:
    return abs(abs(wrap_angle(angle_degrees)) - 90.0) < epsilon


def classify_angle(angle_degrees: float, epsilon: float = ANGLE_EPSILON) -> GradientKind:
    """
    Decide which code path an angle takes.

    The checks run on the angle wrapped into (-180, 180] so that every angle
    congruent modulo 360 takes the same path; ``270`` is vertical just like
    ``-90``. Horizontal wins over vertical if a huge epsilon makes both true.
    """
    if is_horizontal(angle_degrees, epsilon):
        return GradientKind.HORIZONTAL
    if is_vertical(angle_degrees, epsilon):
        return GradientKind.VERTICAL
    return GradientKind.LINEAR


def is_left_to_right(angle_degrees: float) -> bool:
    return abs(wrap_angle(angle_degrees)) < 90.0


def is_top_to_bottom(angle_degrees: float) -> bool:
    return wrap_angle(angle_degrees) >= 0.0
