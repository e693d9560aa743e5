from __future__ import annotations

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import BoundType, bound_type_to_np_function
from PIL import Image

from ..paint.fill import LinearGradientFill


def unit_to_uint8(colors: NDArray) -> NDArray:
    clamped = bound_type_to_np_function[BoundType.CLAMP](np.asarray(colors, dtype=float), 0.0, 1.0)
    return np.round(clamped * 255).astype(np.uint8)


def fill_to_array(fill: LinearGradientFill, width: int, height: int) -> NDArray:
    """``(height, width, 4)`` uint8 RGBA raster of a fill."""
    return unit_to_uint8(fill.render(width, height))


def fill_to_image(fill: LinearGradientFill, width: int, height: int) -> Image.Image:
    if width == 0 or height == 0:
        return Image.new("RGBA", (int(width), int(height)))
    return Image.fromarray(fill_to_array(fill, width, height))
