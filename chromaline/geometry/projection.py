from __future__ import annotations
import math

from ..types.geometry_types import Point


def project_onto_line(line_point: Point, angle_radians: float, point: Point) -> Point:
    """
    Drop a perpendicular from ``point`` onto the line through ``line_point``.

    The line is given in slope-intercept form, ``y = m * x + b`` with
    ``m = tan(angle_radians)``. The slope must be finite and non-zero:
    axis-aligned angles are resolved before reaching this function.
    """
    m = math.tan(angle_radians)
    b = line_point.y - m * line_point.x

    # The perpendicular through `point` has slope -1/m; intersect the two lines.
    m_perpendicular = -1.0 / m
    xp = (b - point.x / m - point.y) / (m_perpendicular - m)
    yp = m * xp + b
    return Point(xp, yp)
