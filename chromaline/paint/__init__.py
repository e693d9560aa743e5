"""
Gradient Paint
==============

Color stop tables and the fills built from them.

>>> from chromaline.geometry import resolve_gradient_line
>>> from chromaline.paint import REFERENCE_STOPS, build_fill
>>> fill = build_fill(REFERENCE_STOPS, resolve_gradient_line(-16, 500, 100))
>>> fill.color_at(*fill.line.start).to_hex()
'#FFFF00'
"""
from .color_stops import ColorStop, ColorStopTable, as_stop_table
from .fill import (
    DEFAULT_TEXT_X_SCALE,
    LinearGradientFill,
    build_fill,
    linear_fill,
    text_fill,
)
from .painter import GradientPainter
from .palettes import REFERENCE_STOPS, TEXT_STOPS

__all__ = [
    "ColorStop",
    "ColorStopTable",
    "as_stop_table",
    "DEFAULT_TEXT_X_SCALE",
    "LinearGradientFill",
    "build_fill",
    "linear_fill",
    "text_fill",
    "GradientPainter",
    "REFERENCE_STOPS",
    "TEXT_STOPS",
]
