from .easing import Easing, LinearEasing, CubicBezierEasing, LINEAR, TEXT_SWEEP_EASING
from .tween import TweenDriver

__all__ = [
    "Easing",
    "LinearEasing",
    "CubicBezierEasing",
    "LINEAR",
    "TEXT_SWEEP_EASING",
    "TweenDriver",
]
