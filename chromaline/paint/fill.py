from __future__ import annotations
import math
from typing import Iterable, Optional, Tuple, Union

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import BoundType, bound_type_to_np_function

from ..colors.rgba import ColorRGBA
from ..geometry.angle import ANGLE_EPSILON, GradientKind
from ..geometry.gradient_line import resolve_gradient_line
from ..types.geometry_types import GradientLine, Point
from .color_stops import ColorStopTable, StopInput, as_stop_table

DEFAULT_TEXT_X_SCALE = 4.0


def _finite(name: str, value: float) -> float:
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value!r}")
    return value


class LinearGradientFill:
    """
    A color stop table laid out along a gradient line.

    Sampling a point first moves its x coordinate with
    ``x' = x * scale_x + offset_x * width`` and then projects ``(x', y)`` onto
    the line. With the defaults (no offset, unit scale) this is a plain linear
    gradient; an offset sliding from -1 to 0 sweeps a stretched copy of the
    gradient sideways, which is how the text fill is animated.

    Fills are immutable and cheap to build, so a new one is made whenever an
    input changes instead of being updated in place.
    """
    __slots__ = ('_stops', '_line', '_offset_x', '_scale_x', '_width')

    def __init__(
        self,
        stops: ColorStopTable,
        line: GradientLine,
        offset_x: float = 0.0,
        scale_x: float = 1.0,
        width: Optional[float] = None,
    ) -> None:
        self._stops = stops
        self._line = GradientLine(Point(*line.start), Point(*line.end))
        self._offset_x = _finite("offset_x", offset_x)
        self._scale_x = _finite("scale_x", scale_x)
        if width is None:
            width = abs(self._line.end.x - self._line.start.x)
        self._width = _finite("width", width)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def stops(self) -> ColorStopTable:
        return self._stops

    @property
    def line(self) -> GradientLine:
        return self._line

    @property
    def offset_x(self) -> float:
        return self._offset_x

    @property
    def scale_x(self) -> float:
        return self._scale_x

    @property
    def width(self) -> float:
        return self._width

    @property
    def kind(self) -> GradientKind:
        start, end = self._line
        if start != end and start.y == end.y:
            return GradientKind.HORIZONTAL
        if start != end and start.x == end.x:
            return GradientKind.VERTICAL
        return GradientKind.LINEAR

    @property
    def is_transformed(self) -> bool:
        return self._offset_x != 0.0 or self._scale_x != 1.0

    # ------------------ SAMPLING ------------------
    def transform_x(self, x: Union[float, NDArray]) -> Union[float, NDArray]:
        return x * self._scale_x + self._offset_x * self._width

    def parameters(self, xs: Union[float, NDArray], ys: Union[float, NDArray]) -> NDArray:
        """
        Gradient parameter of each point, clamped to [0, 1].

        A zero-length line maps every point to 0.
        """
        xs = np.asarray(xs, dtype=float)
        ys = np.asarray(ys, dtype=float)
        (sx, sy), _ = self._line
        dx, dy = self._line.delta
        length_sq = dx * dx + dy * dy
        if length_sq == 0.0:
            return np.zeros(np.broadcast(xs, ys).shape)

        t = ((self.transform_x(xs) - sx) * dx + (ys - sy) * dy) / length_sq
        return bound_type_to_np_function[BoundType.CLAMP](t, 0.0, 1.0)

    def parameter_at(self, x: float, y: float) -> float:
        return float(self.parameters(x, y))

    def sample(self, xs: Union[float, NDArray], ys: Union[float, NDArray]) -> NDArray:
        """Unit RGBA colors at the given points, shape ``broadcast(xs, ys) + (4,)``."""
        return self._stops.sample(self.parameters(xs, ys))

    def color_at(self, x: float, y: float) -> ColorRGBA:
        return ColorRGBA(self.sample(x, y))

    def render(self, width: int, height: int) -> NDArray:
        """
        Rasterize onto a ``width`` x ``height`` grid sampled at pixel centers.

        Returns:
            float array of shape ``(height, width, 4)`` with unit RGBA values.
        """
        if width < 0 or height < 0:
            raise ValueError("width and height must be non-negative")
        ys, xs = np.indices((int(height), int(width)), dtype=float)
        return self.sample(xs + 0.5, ys + 0.5)

    # ------------------ DERIVED FILLS ------------------
    def with_offset(self, offset_x: float) -> LinearGradientFill:
        return LinearGradientFill(self._stops, self._line, offset_x, self._scale_x, self._width)

    def _key(self) -> Tuple:
        return (self._stops, self._line, self._offset_x, self._scale_x, self._width)

    def __eq__(self, other) -> bool:
        if isinstance(other, LinearGradientFill):
            return self._key() == other._key()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"LinearGradientFill(line={self._line}, stops={len(self._stops)}, "
            f"offset_x={self._offset_x}, scale_x={self._scale_x}, width={self._width})"
        )


def build_fill(
    stops: Union[ColorStopTable, Iterable[StopInput]],
    line: GradientLine,
    offset_x: float = 0.0,
    scale_x: float = 1.0,
    *,
    width: Optional[float] = None,
) -> LinearGradientFill:
    """
    Combine a color stop table with a gradient line.

    Args:
        stops: A ``ColorStopTable`` or ``(position, color)`` pairs.
        line: The resolved gradient line.
        offset_x: Horizontal shift, in multiples of ``width``.
        scale_x: Horizontal stretch applied before the shift.
        width: Surface width the offset is measured in; defaults to the
            horizontal extent of ``line``.

    Raises:
        InsufficientStops: fewer than two stops were given.
    """
    return LinearGradientFill(as_stop_table(stops), line, offset_x, scale_x, width)


def linear_fill(
    stops: Union[ColorStopTable, Iterable[StopInput]],
    angle_degrees: float,
    width: float,
    height: float,
    *,
    epsilon: float = ANGLE_EPSILON,
) -> LinearGradientFill:
    """Static fill of a width x height rectangle at the given angle."""
    line = resolve_gradient_line(angle_degrees, width, height, epsilon=epsilon)
    return build_fill(stops, line, width=width)


def text_fill(
    stops: Union[ColorStopTable, Iterable[StopInput]],
    angle_degrees: float,
    width: float,
    height: float,
    offset_x: float,
    scale_x: float = DEFAULT_TEXT_X_SCALE,
    *,
    epsilon: float = ANGLE_EPSILON,
) -> LinearGradientFill:
    """Fill for gradient text: the static line, stretched and shifted sideways."""
    line = resolve_gradient_line(angle_degrees, width, height, epsilon=epsilon)
    return build_fill(stops, line, offset_x, scale_x, width=width)
