"""
Colors
======

Immutable RGBA colors used as color stop anchors.

>>> from chromaline.colors import ColorRGBA, to_color
>>> ColorRGBA.from_argb(0xFF4285F4).to_hex()
'#4285F4'
>>> to_color((255, 0, 0)) == to_color("#FF0000")
True
"""
from .rgba import ColorRGBA, to_color
from .named import (
    WHITE,
    BLACK,
    YELLOW,
    GREEN,
    GRAY,
    LIGHT_GRAY,
    CYAN,
    MAGENTA,
    RED,
    TRANSPARENT,
    BRAND_BLUE,
    BRAND_PURPLE,
    BRAND_ROSE,
)

__all__ = [
    "ColorRGBA",
    "to_color",
    "WHITE",
    "BLACK",
    "YELLOW",
    "GREEN",
    "GRAY",
    "LIGHT_GRAY",
    "CYAN",
    "MAGENTA",
    "RED",
    "TRANSPARENT",
    "BRAND_BLUE",
    "BRAND_PURPLE",
    "BRAND_ROSE",
]
