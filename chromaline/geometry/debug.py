"""
Geometry for the diagnostic overlay.

Nothing here affects the gradient itself: these helpers only compute where
the overlay draws the infinite extension of the gradient line, the arrowhead
at its end, and the arc that visualizes the angle.
"""
from __future__ import annotations
import math
from typing import NamedTuple, Optional, Tuple

from ..types.geometry_types import GradientLine, Point
from .angle import ANGLE_EPSILON, GradientKind
from .gradient_line import GradientLayout

ARROW_HEAD_SIZE = 15
ARROW_HEAD_SPREAD = math.pi / 6
# Stand-in direction for arrowheads on an exactly zero angle.
ARROW_HEAD_FALLBACK_ANGLE = 0.01


class DebugOverlay(NamedTuple):
    width: float
    height: float
    center: Point
    zero_degree_line: GradientLine
    sweep_degrees: float
    arc_radius: float
    gradient_line: GradientLine
    start_projection: GradientLine
    end_projection: GradientLine
    arrow_head: Tuple[Point, Point]
    start_corner: Point
    end_corner: Point
    intersections: Optional[Tuple[Point, Point]]


def cotangent(angle_radians: float) -> float:
    """cos/sin, with 0 standing in where sin is exactly zero."""
    sin = math.sin(angle_radians)
    if sin == 0.0:
        return 0.0
    return math.cos(angle_radians) / sin


def bounds_delta_x(center: Point, angle_radians: float) -> float:
    """Horizontal offset from the center to where the line meets the top edge."""
    return -(center.y * cotangent(angle_radians))


def bounds_intersections(
    layout: GradientLayout,
    width: float,
    height: float,
    epsilon: float = ANGLE_EPSILON,
) -> Optional[Tuple[Point, Point]]:
    """
    Points where the infinite gradient line crosses the top and bottom edges.

    Returns None for horizontal layouts (0 and 180 degrees alike) and for an
    angle of (almost) zero, where the line never crosses them.
    """
    if layout.kind is GradientKind.HORIZONTAL or abs(layout.angle_radians) <= epsilon:
        return None
    center = Point(width / 2, height / 2)
    delta_x = bounds_delta_x(center, layout.angle_radians)
    return Point(center.x + delta_x, 0.0), Point(center.x - delta_x, height)


def arrowhead_points(
    point: Point,
    angle_radians: float,
    size: float = ARROW_HEAD_SIZE,
    epsilon: float = ANGLE_EPSILON,
) -> Tuple[Point, Point]:
    """The two barb ends of an arrowhead whose tip is ``point``."""
    angle = angle_radians if abs(angle_radians) >= epsilon else ARROW_HEAD_FALLBACK_ANGLE
    first = Point(
        point.x - size * math.cos(angle - ARROW_HEAD_SPREAD),
        point.y - size * math.sin(angle - ARROW_HEAD_SPREAD),
    )
    second = Point(
        point.x - size * math.cos(angle + ARROW_HEAD_SPREAD),
        point.y - size * math.sin(angle + ARROW_HEAD_SPREAD),
    )
    return first, second


def build_debug_overlay(
    layout: GradientLayout,
    width: float,
    height: float,
    *,
    arrow_size: float = ARROW_HEAD_SIZE,
    epsilon: float = ANGLE_EPSILON,
) -> DebugOverlay:
    center = Point(width / 2, height / 2)
    line = layout.line
    return DebugOverlay(
        width=width,
        height=height,
        center=center,
        zero_degree_line=GradientLine(center, Point(width, center.y)),
        sweep_degrees=math.degrees(layout.angle_radians),
        arc_radius=min(width / 4, height / 4),
        gradient_line=line,
        start_projection=GradientLine(line.start, layout.start_corner),
        end_projection=GradientLine(line.end, layout.end_corner),
        arrow_head=arrowhead_points(line.end, layout.angle_radians, arrow_size, epsilon),
        start_corner=layout.start_corner,
        end_corner=layout.end_corner,
        intersections=bounds_intersections(layout, width, height, epsilon),
    )
