"""
Chromaline - CSS-style angled linear gradients
==============================================

Resolve the gradient line CSS ``linear-gradient()`` would use for any angle
and rectangle, lay a color stop table along it, and sample, rasterize or
animate the result.

Quick Start
-----------
>>> from chromaline import REFERENCE_STOPS, linear_fill
>>> fill = linear_fill(REFERENCE_STOPS, -16, 500, 100)
>>> fill.color_at(250, 50).to_hex()
'#9B72CB'

Modules
-------
- geometry: angle handling, gradient line resolution, debug overlay geometry
- colors: immutable RGBA colors
- paint: color stop tables, fills and the caching painter
- animation: easing curves and the polled tween driver
- render: Pillow rasterization, debug overlay and gradient text
- state: caller-owned demo state and the angle stepper
"""
from .errors import ChromalineError, InsufficientStops, InvalidAngle
from .types.geometry_types import GradientLine, Point
from .colors import ColorRGBA, to_color
from .geometry import (
    ANGLE_EPSILON,
    GradientKind,
    GradientLayout,
    normalize_angle,
    resolve_gradient_layout,
    resolve_gradient_line,
)
from .paint import (
    ColorStop,
    ColorStopTable,
    GradientPainter,
    LinearGradientFill,
    REFERENCE_STOPS,
    TEXT_STOPS,
    build_fill,
    linear_fill,
    text_fill,
)
from .animation import CubicBezierEasing, LinearEasing, TweenDriver
from .config import DEFAULT_CONFIG, GradientConfig
from .state import GradientDemoState, step_angle

__version__ = "0.1.0"

__all__ = [
    "ChromalineError",
    "InsufficientStops",
    "InvalidAngle",
    "GradientLine",
    "Point",
    "ColorRGBA",
    "to_color",
    "ANGLE_EPSILON",
    "GradientKind",
    "GradientLayout",
    "normalize_angle",
    "resolve_gradient_layout",
    "resolve_gradient_line",
    "ColorStop",
    "ColorStopTable",
    "GradientPainter",
    "LinearGradientFill",
    "REFERENCE_STOPS",
    "TEXT_STOPS",
    "build_fill",
    "linear_fill",
    "text_fill",
    "CubicBezierEasing",
    "LinearEasing",
    "TweenDriver",
    "DEFAULT_CONFIG",
    "GradientConfig",
    "GradientDemoState",
    "step_angle",
]
