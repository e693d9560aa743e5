from .geometry_types import Point, GradientLine, Scalar
from .color_types import ColorInput, RGBATuple, IntRGBATuple

__all__ = [
    "Point",
    "GradientLine",
    "Scalar",
    "ColorInput",
    "RGBATuple",
    "IntRGBATuple",
]
