from __future__ import annotations
import math
from typing import NamedTuple, Tuple

from ..types.geometry_types import GradientLine, Point
from .angle import (
    ANGLE_EPSILON,
    GradientKind,
    classify_angle,
    is_left_to_right,
    is_top_to_bottom,
    normalize_angle,
)
from .corners import select_corners
from .projection import project_onto_line


class GradientLayout(NamedTuple):
    """
    A resolved gradient line plus the reference data used to derive it.

    ``start_corner``/``end_corner`` are the rectangle corners whose
    perpendiculars meet the line at its endpoints, and ``angle_radians`` is the
    direction the debug overlay draws the sweep arc and arrowhead with.
    """
    line: GradientLine
    start_corner: Point
    end_corner: Point
    angle_radians: float
    kind: GradientKind


def _validate_size(width: float, height: float) -> Tuple[float, float]:
    width, height = float(width), float(height)
    if not (math.isfinite(width) and math.isfinite(height)):
        raise ValueError(f"Surface size must be finite, got {width!r} x {height!r}")
    if width < 0 or height < 0:
        raise ValueError(f"Surface size must be non-negative, got {width!r} x {height!r}")
    return width, height


def horizontal_line(width: float, height: float, left_to_right: bool = True) -> GradientLine:
    start_x = 0.0 if left_to_right else width
    end_x = width if left_to_right else 0.0
    center_y = height / 2
    return GradientLine(Point(start_x, center_y), Point(end_x, center_y))


def vertical_line(width: float, height: float, top_to_bottom: bool = True) -> GradientLine:
    start_y = 0.0 if top_to_bottom else height
    end_y = height if top_to_bottom else 0.0
    center_x = width / 2
    return GradientLine(Point(center_x, start_y), Point(center_x, end_y))


def _horizontal_layout(width: float, height: float, left_to_right: bool) -> GradientLayout:
    if left_to_right:
        corners = Point(0.0, 0.0), Point(width, height)
    else:
        corners = Point(width, 0.0), Point(0.0, height)
    return GradientLayout(
        line=horizontal_line(width, height, left_to_right),
        start_corner=corners[0],
        end_corner=corners[1],
        angle_radians=0.0 if left_to_right else math.pi,
        kind=GradientKind.HORIZONTAL,
    )


def _vertical_layout(width: float, height: float, top_to_bottom: bool) -> GradientLayout:
    if top_to_bottom:
        corners = Point(width, 0.0), Point(0.0, height)
    else:
        corners = Point(width, height), Point(0.0, 0.0)
    return GradientLayout(
        line=vertical_line(width, height, top_to_bottom),
        start_corner=corners[0],
        end_corner=corners[1],
        angle_radians=math.pi / 2 if top_to_bottom else -math.pi / 2,
        kind=GradientKind.VERTICAL,
    )


def _projected_layout(angle_degrees: float, width: float, height: float) -> GradientLayout:
    angle_radians = math.radians(angle_degrees)
    start_corner, end_corner = select_corners(angle_degrees, width, height)
    center = Point(width / 2, height / 2)

    start = project_onto_line(center, angle_radians, start_corner)
    end = project_onto_line(center, angle_radians, end_corner)
    return GradientLayout(
        line=GradientLine(start, end),
        start_corner=start_corner,
        end_corner=end_corner,
        angle_radians=angle_radians,
        kind=GradientKind.LINEAR,
    )


def resolve_gradient_layout(
    angle_degrees: float,
    width: float,
    height: float,
    *,
    epsilon: float = ANGLE_EPSILON,
) -> GradientLayout:
    """
    Resolve the gradient line for an angle on a width x height surface.

    Angles within ``epsilon`` of a horizontal or vertical direction take the
    axis-aligned shortcut; every other angle projects the two far corners onto
    the line through the center, so that both corners sit on perpendiculars
    through the line's endpoints (the CSS ``linear-gradient()`` rule).

    Raises:
        InvalidAngle: the angle is NaN or infinite.
        ValueError: the size is negative or not finite.
    """
    normalized = normalize_angle(angle_degrees)
    width, height = _validate_size(width, height)
    if not epsilon > 0:
        raise ValueError(f"epsilon must be > 0, got {epsilon!r}")

    kind = classify_angle(normalized, epsilon)
    if kind is GradientKind.HORIZONTAL:
        return _horizontal_layout(width, height, is_left_to_right(normalized))
    if kind is GradientKind.VERTICAL:
        return _vertical_layout(width, height, is_top_to_bottom(normalized))
    return _projected_layout(normalized, width, height)


def resolve_gradient_line(
    angle_degrees: float,
    width: float,
    height: float,
    *,
    epsilon: float = ANGLE_EPSILON,
) -> GradientLine:
    """Shortcut for ``resolve_gradient_layout(...).line``."""
    return resolve_gradient_layout(angle_degrees, width, height, epsilon=epsilon).line
