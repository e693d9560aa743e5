"""
Gradient Geometry
=================

Maps an angle and a surface size to the gradient line the CSS
``linear-gradient()`` rules produce.

Angles are degrees, zero points along +x and positive angles turn clockwise
on screen (y grows downward). The resolved line is exactly long enough that
the two far corners of the surface sit on perpendiculars through its ends.

>>> from chromaline.geometry import resolve_gradient_line
>>> resolve_gradient_line(0, 200, 100)
GradientLine(start=Point(x=0.0, y=50.0), end=Point(x=200.0, y=50.0))
"""
from .angle import (
    ANGLE_EPSILON,
    GradientKind,
    classify_angle,
    normalize_angle,
    validate_angle,
    wrap_angle,
)
from .corners import CORNER_BUCKETS, Corner, corner_bucket, select_corners
from .projection import project_onto_line
from .gradient_line import (
    GradientLayout,
    horizontal_line,
    resolve_gradient_layout,
    resolve_gradient_line,
    vertical_line,
)
from .debug import (
    DebugOverlay,
    arrowhead_points,
    bounds_intersections,
    build_debug_overlay,
    cotangent,
)

__all__ = [
    "ANGLE_EPSILON",
    "GradientKind",
    "classify_angle",
    "normalize_angle",
    "validate_angle",
    "wrap_angle",
    "CORNER_BUCKETS",
    "Corner",
    "corner_bucket",
    "select_corners",
    "project_onto_line",
    "GradientLayout",
    "horizontal_line",
    "resolve_gradient_layout",
    "resolve_gradient_line",
    "vertical_line",
    "DebugOverlay",
    "arrowhead_points",
    "bounds_intersections",
    "build_debug_overlay",
    "cotangent",
]
