from __future__ import annotations
from typing import Tuple, TypeAlias, Union
from numpy import ndarray

RGBATuple: TypeAlias = Tuple[float, float, float, float]
IntRGBATuple: TypeAlias = Tuple[int, int, int, int]
FloatElement = Union[Tuple[float, float, float], RGBATuple]
IntElement = Union[Tuple[int, int, int], IntRGBATuple]

# Packed 0xAARRGGBB ints, "#RRGGBB"/"#AARRGGBB" strings, tuples or 1D arrays.
ColorInput = Union[int, str, FloatElement, IntElement, ndarray, "ColorRGBA"]  # noqa: F821

CHANNELS = 4
