"""
Caller-owned demo state.

The host keeps one ``GradientDemoState`` per demo and passes it explicitly to
whatever renders a frame; nothing in chromaline keeps global state. The angle
stepper and the text-field parsers live here because only the resulting
numbers cross into the geometry and paint code.
"""
from __future__ import annotations
import re
from dataclasses import dataclass, field
from typing import Optional

from .animation.easing import CubicBezierEasing
from .animation.tween import TweenDriver
from .config import DEFAULT_CONFIG, GradientConfig

_INT_PATTERN = re.compile(r"[+-]?\d+")


def step_angle(
    angle: int,
    direction: int,
    fast: bool = False,
    config: GradientConfig = DEFAULT_CONFIG,
) -> int:
    """
    Move ``angle`` one step up (direction > 0) or down (direction < 0).

    ``fast`` selects the larger step, bound to shift+arrow in the demos.
    """
    if direction == 0:
        return angle
    step = config.fast_angle_step if fast else config.angle_step
    return angle + step if direction > 0 else angle - step


def parse_angle(text: str) -> Optional[int]:
    """Integer degrees from a text field, or None when it is not an integer."""
    text = text.strip()
    if not _INT_PATTERN.fullmatch(text):
        return None
    return int(text)


def parse_duration(text: str, current: int) -> int:
    """A positive integer from the text, otherwise ``current``."""
    value = parse_angle(text)
    if value is None or value <= 0:
        return current
    return value


@dataclass
class GradientDemoState:
    angle: int = DEFAULT_CONFIG.default_angle
    animating: bool = False
    duration_ms: int = DEFAULT_CONFIG.animation_duration_ms
    config: GradientConfig = field(default=DEFAULT_CONFIG, repr=False)

    def step(self, direction: int, fast: bool = False) -> int:
        """Step the angle; the stepper is disabled while animating."""
        if not self.animating:
            self.angle = step_angle(self.angle, direction, fast, self.config)
        return self.angle

    def set_angle_text(self, text: str) -> int:
        value = parse_angle(text)
        if value is not None and not self.animating:
            self.angle = value
        return self.angle

    def set_duration_text(self, text: str) -> int:
        if not self.animating:
            self.duration_ms = parse_duration(text, self.duration_ms)
        return self.duration_ms

    def start_animation(self, driver: TweenDriver) -> bool:
        """Kick off a sweep unless one is already running."""
        if self.sync(driver):
            return False
        driver.duration_ms = self.duration_ms
        driver.start()
        self.animating = True
        return True

    def sync(self, driver: TweenDriver) -> bool:
        """Mirror the driver's running flag; call once per frame."""
        self.animating = driver.is_running
        return self.animating

    def make_driver(self, **kwargs) -> TweenDriver:
        kwargs.setdefault("start_value", self.config.animation_start)
        kwargs.setdefault("end_value", self.config.animation_end)
        kwargs.setdefault("easing", CubicBezierEasing(*self.config.text_easing))
        return TweenDriver(duration_ms=self.duration_ms, **kwargs)
