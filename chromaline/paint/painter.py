from __future__ import annotations
import warnings
from typing import Callable, Iterable, Optional, Tuple, Union

from ..errors import InvalidAngle
from ..geometry.angle import ANGLE_EPSILON
from .color_stops import ColorStopTable, StopInput, as_stop_table
from .fill import LinearGradientFill, text_fill

OffsetSource = Union[float, Callable[[], float]]


class GradientPainter:
    """
    Per-surface owner of the current fill.

    The painter keeps the inputs the last fill was built from and only builds
    a new one when one of them changed. The animation offset may be passed as
    a number or as a zero-argument callable (for example a tween driver's
    ``value`` getter); it is read exactly once per ``paint`` call, so a fill is
    always built from one consistent snapshot.

    When ``paint`` gets a NaN or infinite angle it keeps the last valid fill,
    stores the error in ``last_error`` and warns. Without a previous fill the
    ``InvalidAngle`` propagates.
    """

    def __init__(
        self,
        stops: Union[ColorStopTable, Iterable[StopInput]],
        scale_x: float = 1.0,
        *,
        epsilon: float = ANGLE_EPSILON,
    ) -> None:
        self._stops = as_stop_table(stops)
        self._scale_x = float(scale_x)
        self._epsilon = epsilon
        self.fill: Optional[LinearGradientFill] = None
        self.last_error: Optional[InvalidAngle] = None
        self.builds = 0
        self._inputs: Optional[Tuple[float, float, float, float, float]] = None

    # Fixed for the painter's lifetime.
    @property
    def stops(self) -> ColorStopTable:
        return self._stops

    @property
    def scale_x(self) -> float:
        return self._scale_x

    @property
    def epsilon(self) -> float:
        return self._epsilon

    def paint(
        self,
        angle_degrees: float,
        width: float,
        height: float,
        offset: OffsetSource = 0.0,
    ) -> LinearGradientFill:
        offset_x = float(offset() if callable(offset) else offset)
        inputs = (angle_degrees, float(width), float(height), offset_x, self._scale_x)
        if self.fill is not None and inputs == self._inputs:
            return self.fill

        try:
            fill = text_fill(
                self._stops, angle_degrees, width, height, offset_x, self._scale_x,
                epsilon=self._epsilon,
            )
        except InvalidAngle as error:
            self.last_error = error
            if self.fill is None:
                raise
            warnings.warn(f"{error}; keeping the previous fill", RuntimeWarning, stacklevel=2)
            return self.fill

        self.fill = fill
        self.last_error = None
        self._inputs = inputs
        self.builds += 1
        return fill

    def invalidate(self) -> None:
        """Forget the cached inputs so the next ``paint`` rebuilds."""
        self._inputs = None
