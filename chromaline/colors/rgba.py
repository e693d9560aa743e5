from __future__ import annotations
from typing import Any, ClassVar, Sequence, Tuple, cast

import numpy as np
from numpy import ndarray
from boundednumbers.functions import clamp

from ..types.color_types import CHANNELS, ColorInput, IntRGBATuple, RGBATuple


class ColorRGBA:
    """
    Immutable sRGB color with straight alpha, stored as unit floats.

    Channels outside [0, 1] are clamped on construction. Instances are frozen
    once ``__init__`` returns, so a color can be shared between palettes and
    fills without copying.
    """
    __slots__ = ('_value', '_is_frozen')

    num_channels: ClassVar[int] = CHANNELS
    maxima: ClassVar[RGBATuple] = (1.0, 1.0, 1.0, 1.0)
    int_max: ClassVar[int] = 255

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Sequence[float] | ndarray) -> None:
        values = tuple(float(v) for v in np.asarray(value, dtype=float).ravel())
        if len(values) == 3:
            values = values + (1.0,)
        if len(values) != self.num_channels:
            raise ValueError(f"RGBA expects 3 or 4 channels, got {len(values)}")
        if not all(np.isfinite(values)):
            raise ValueError(f"RGBA channels must be finite, got {values!r}")

        self._value = cast(RGBATuple, tuple(
            float(clamp(v, 0.0, m)) for v, m in zip(values, self.maxima)
        ))
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_argb(cls, packed: int) -> ColorRGBA:
        """Build a color from a packed ``0xAARRGGBB`` integer."""
        if not 0 <= packed <= 0xFFFFFFFF:
            raise ValueError(f"Packed ARGB color out of range: {packed:#x}")
        a = (packed >> 24) & 0xFF
        r = (packed >> 16) & 0xFF
        g = (packed >> 8) & 0xFF
        b = packed & 0xFF
        return cls.from_ints((r, g, b, a))

    @classmethod
    def from_ints(cls, value: Sequence[int]) -> ColorRGBA:
        """Build a color from 0-255 channels; a missing alpha means opaque."""
        channels = tuple(value)
        if len(channels) == 3:
            channels = channels + (cls.int_max,)
        return cls(tuple(c / cls.int_max for c in channels))

    @classmethod
    def from_hex(cls, text: str) -> ColorRGBA:
        """Parse ``#RGB``, ``#RRGGBB`` or ``#RRGGBBAA`` (CSS channel order)."""
        digits = text.strip().lstrip('#')
        if len(digits) == 3:
            digits = ''.join(d * 2 for d in digits)
        if len(digits) not in (6, 8):
            raise ValueError(f"Invalid hex color: {text!r}")
        try:
            channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        except ValueError:
            raise ValueError(f"Invalid hex color: {text!r}") from None
        return cls.from_ints(channels)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> RGBATuple:
        return self._value

    @property
    def r(self) -> float:
        return self._value[0]

    @property
    def g(self) -> float:
        return self._value[1]

    @property
    def b(self) -> float:
        return self._value[2]

    @property
    def alpha(self) -> float:
        return self._value[3]

    a = alpha

    @property
    def is_opaque(self) -> bool:
        return self._value[3] >= 1.0

    # ------------------ DERIVED COLORS ------------------
    def with_alpha(self, alpha: float) -> ColorRGBA:
        """Return a new instance with modified alpha channel."""
        return self.__class__(self._value[:3] + (alpha,))

    def lerp(self, other: ColorRGBA, t: float) -> ColorRGBA:
        """Per-channel linear interpolation, no color space conversion."""
        t = clamp(t, 0.0, 1.0)
        return self.__class__(tuple(
            a * (1 - t) + b * t for a, b in zip(self._value, other.value)
        ))

    # ------------------ EXPORT ------------------
    def as_array(self) -> ndarray:
        return np.array(self._value, dtype=float)

    def to_ints(self) -> IntRGBATuple:
        return cast(IntRGBATuple, tuple(int(round(c * self.int_max)) for c in self._value))

    def to_hex(self, with_alpha: bool | None = None) -> str:
        """Format as ``#RRGGBB``, or ``#RRGGBBAA`` when translucent or requested."""
        ints = self.to_ints()
        if with_alpha is None:
            with_alpha = ints[3] != self.int_max
        channels = ints if with_alpha else ints[:3]
        return '#' + ''.join(f"{c:02X}" for c in channels)

    def to_argb(self) -> int:
        r, g, b, a = self.to_ints()
        return (a << 24) | (r << 16) | (g << 8) | b

    # ------------------ PROTOCOLS ------------------
    def __iter__(self):
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, ColorRGBA):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_hex(with_alpha=True)})"


def _is_int_channels(values: Tuple[Any, ...]) -> bool:
    return all(isinstance(v, (int, np.integer)) and not isinstance(v, bool) for v in values)


def to_color(value: ColorInput) -> ColorRGBA:
    """
    Coerce any supported color input into a ``ColorRGBA``.

    Integer tuples are read as 0-255 channels and float tuples as unit
    channels; a bare ``int`` is a packed ``0xAARRGGBB`` value.
    """
    if isinstance(value, ColorRGBA):
        return value
    if isinstance(value, str):
        return ColorRGBA.from_hex(value)
    if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
        return ColorRGBA.from_argb(int(value))
    if isinstance(value, ndarray):
        if value.ndim != 1:
            raise ValueError("Color array input must be 1-dimensional.")
        if np.issubdtype(value.dtype, np.integer):
            return ColorRGBA.from_ints(value.tolist())
        return ColorRGBA(value)
    if isinstance(value, (tuple, list)):
        channels = tuple(value)
        if _is_int_channels(channels):
            return ColorRGBA.from_ints(channels)
        return ColorRGBA(channels)
    raise TypeError(f"Unsupported color input type: {type(value).__name__}")
