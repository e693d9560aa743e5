from __future__ import annotations
import warnings
from typing import Iterable, Iterator, NamedTuple, Optional, Sequence, Tuple, Union, overload

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import BoundType, bound_type_to_np_function

from ..colors.rgba import ColorRGBA, to_color
from ..errors import InsufficientStops
from ..types.color_types import CHANNELS, ColorInput, RGBATuple


class ColorStop(NamedTuple):
    position: float
    color: ColorRGBA


StopInput = Union[ColorStop, Tuple[float, ColorInput]]


class ColorStopTable:
    """
    An immutable, ordered list of color stops.

    Positions are fractions of the gradient line. They are fixed up on
    construction rather than rejected: values outside [0, 1] are clamped and a
    position lower than its predecessor is raised to it, both with a
    ``UserWarning``. Equal positions are kept and produce a hard edge; this is
    how the boundary colors of a palette are made to start and end sharply.

    Sampling interpolates every RGBA channel independently and linearly.
    """
    __slots__ = ('_stops', '_positions', '_colors')

    def __init__(self, stops: Iterable[StopInput]) -> None:
        pairs = [(float(position), to_color(color)) for position, color in stops]
        if len(pairs) < 2:
            raise InsufficientStops(len(pairs))

        positions = np.array([p for p, _ in pairs], dtype=float)
        if not np.all(np.isfinite(positions)):
            raise ValueError("Color stop positions must be finite")
        positions = self._fix_positions(positions)
        colors = np.array([c.value for _, c in pairs], dtype=float).reshape(-1, CHANNELS)

        positions.setflags(write=False)
        colors.setflags(write=False)
        self._positions = positions
        self._colors = colors
        self._stops = tuple(
            ColorStop(float(p), c) for p, (_, c) in zip(positions, pairs)
        )

    @staticmethod
    def _fix_positions(positions: NDArray) -> NDArray:
        clamped = bound_type_to_np_function[BoundType.CLAMP](positions, 0.0, 1.0)
        if np.any(clamped != positions):
            warnings.warn(
                f"Color stop positions outside [0, 1] were clamped: {positions.tolist()}",
                UserWarning,
                stacklevel=3,
            )
        ordered = np.maximum.accumulate(clamped)
        if np.any(ordered != clamped):
            warnings.warn(
                "Color stop positions must be non-decreasing; "
                "lower positions were raised to their predecessor.",
                UserWarning,
                stacklevel=3,
            )
        return np.asarray(ordered, dtype=float)

    @classmethod
    def from_colors(
        cls,
        colors: Sequence[ColorInput],
        positions: Optional[Sequence[float]] = None,
    ) -> ColorStopTable:
        """
        Pair colors with positions, spacing them evenly when none are given.

        Args:
            colors: Stop colors in order.
            positions: One position per color, or None for ``linspace(0, 1)``.
        """
        colors = list(colors)
        if len(colors) < 2:
            raise InsufficientStops(len(colors))
        if positions is None:
            positions = np.linspace(0.0, 1.0, len(colors)).tolist()
        elif len(positions) != len(colors):
            raise ValueError(
                f"colors and positions must have the same length, got {len(colors)} and {len(positions)}"
            )
        return cls(zip(positions, colors))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def positions(self) -> NDArray:
        return self._positions

    @property
    def colors(self) -> NDArray:
        """``(N, 4)`` array of unit RGBA values."""
        return self._colors

    @property
    def first(self) -> ColorStop:
        return self._stops[0]

    @property
    def last(self) -> ColorStop:
        return self._stops[-1]

    # ------------------ SAMPLING ------------------
    def sample(self, t: Union[float, NDArray]) -> NDArray:
        """
        Interpolate colors at gradient parameters ``t``.

        Args:
            t: Scalar or array of parameters; values outside [0, 1] are clamped.

        Returns:
            Array of shape ``t.shape + (4,)``.
        """
        clamp = bound_type_to_np_function[BoundType.CLAMP]
        t = clamp(np.asarray(t, dtype=float), 0.0, 1.0)
        positions = self._positions
        last_segment = len(positions) - 2

        # Last stop at or before t; with duplicate positions the later one wins.
        index = clamp(np.searchsorted(positions, t, side='right') - 1, 0, last_segment)
        left = positions[index]
        span = positions[index + 1] - left
        safe_span = np.where(span > 0, span, 1.0)
        u = np.where(span > 0, (t - left) / safe_span, 1.0)
        u = clamp(u, 0.0, 1.0)[..., None]

        start = self._colors[index]
        end = self._colors[index + 1]
        return start * (1 - u) + end * u

    def color_at(self, t: float) -> ColorRGBA:
        return ColorRGBA(self.sample(float(t)))

    def ramp(self, steps: int) -> NDArray:
        """``(steps, 4)`` colors sampled at evenly spaced parameters."""
        if steps < 1:
            raise ValueError("steps must be >= 1")
        return self.sample(np.linspace(0.0, 1.0, steps))

    # ------------------ PROTOCOLS ------------------
    def __len__(self) -> int:
        return len(self._stops)

    def __iter__(self) -> Iterator[ColorStop]:
        return iter(self._stops)

    @overload
    def __getitem__(self, index: int) -> ColorStop: ...
    @overload
    def __getitem__(self, index: slice) -> Tuple[ColorStop, ...]: ...

    def __getitem__(self, index):
        return self._stops[index]

    def __eq__(self, other) -> bool:
        if isinstance(other, ColorStopTable):
            return self._stops == other._stops
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._stops)

    def __repr__(self) -> str:
        inner = ", ".join(f"{s.position:g}: {s.color.to_hex()}" for s in self._stops)
        return f"ColorStopTable([{inner}])"

    def as_tuples(self) -> Tuple[Tuple[float, RGBATuple], ...]:
        return tuple((s.position, s.color.value) for s in self._stops)


def as_stop_table(stops: Union[ColorStopTable, Iterable[StopInput]]) -> ColorStopTable:
    if isinstance(stops, ColorStopTable):
        return stops
    return ColorStopTable(stops)
