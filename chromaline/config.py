"""
Shared defaults for the gradient demos.

Geometry tolerances live next to the code that uses them
(``chromaline.geometry.angle.ANGLE_EPSILON``); this module only holds the
host-facing knobs: the stepper increments, the animation timing and the text
gradient stretch.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple

from .geometry.angle import ANGLE_EPSILON


@dataclass(frozen=True)
class GradientConfig:
    default_angle: int = -16
    angle_step: int = 1
    fast_angle_step: int = 10
    angle_epsilon: float = ANGLE_EPSILON

    animation_duration_ms: int = 1500
    animation_start: float = -1.0
    animation_end: float = 0.0
    # Control points of the sweep easing curve: (x1, y1, x2, y2).
    text_easing: Tuple[float, float, float, float] = (0.3, 0.0, 0.4, 1.0)

    text_x_scale: float = 4.0
    text_font_size: int = 48
    debug_arrow_size: int = 15

    def __post_init__(self) -> None:
        if self.animation_duration_ms <= 0:
            raise ValueError("animation_duration_ms must be > 0")
        if self.angle_epsilon <= 0:
            raise ValueError("angle_epsilon must be > 0")

    def replace(self, **changes) -> GradientConfig:
        """Return a copy with the given fields changed."""
        return replace(self, **changes)


DEFAULT_CONFIG = GradientConfig()
