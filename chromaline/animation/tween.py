from __future__ import annotations
import logging
import time
from typing import Callable, Optional

from .easing import TEXT_SWEEP_EASING, Easing

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


class TweenDriver:
    """
    Advances one float from a start value to an end value over time.

    The driver is polled, not scheduled: every read of ``value``,
    ``is_running`` or ``progress`` looks at the clock and settles the
    animation if its duration has elapsed. Render code takes a single
    ``value`` snapshot per frame and builds the fill from it.

    ``start`` runs the sweep as three explicit commands: stop whatever is in
    flight, snap to ``start_value``, animate to ``end_value``.

    Args:
        start_value: Value snapped to when an animation starts.
        end_value: Value animated to.
        duration_ms: Animation length in milliseconds, > 0.
        easing: Maps linear time progress to value progress.
        clock: Monotonic time source in seconds.
    """

    def __init__(
        self,
        start_value: float = -1.0,
        end_value: float = 0.0,
        duration_ms: int = 1500,
        easing: Easing = TEXT_SWEEP_EASING,
        clock: Clock = time.monotonic,
    ) -> None:
        self.start_value = float(start_value)
        self.end_value = float(end_value)
        self.duration_ms = duration_ms
        self.easing = easing
        self._clock = clock

        self._value = self.start_value
        self._from = self.start_value
        self._to = self.start_value
        self._started_at: Optional[float] = None
        self._run_duration_ms = self.duration_ms

    @property
    def duration_ms(self) -> int:
        return self._duration_ms

    @duration_ms.setter
    def duration_ms(self, value: int) -> None:
        if value <= 0:
            raise ValueError(f"duration_ms must be > 0, got {value!r}")
        self._duration_ms = int(value)

    # ------------------ COMMANDS ------------------
    def start(self) -> None:
        logger.info("Starting animation (%d ms)", self.duration_ms)
        self.stop()
        self.snap_to(self.start_value)
        self.animate_to(self.end_value)

    def stop(self) -> None:
        """Freeze the value where it currently is."""
        if self._started_at is None:
            return
        self._advance()
        if self._started_at is not None:
            logger.debug("Animation cancelled at %.3f", self._value)
            self._started_at = None

    def snap_to(self, value: float) -> None:
        self.stop()
        self._value = float(value)

    def animate_to(self, target: float, duration_ms: Optional[int] = None) -> None:
        if duration_ms is not None and duration_ms <= 0:
            raise ValueError(f"duration_ms must be > 0, got {duration_ms!r}")
        self.stop()
        self._from = self._value
        self._to = float(target)
        self._run_duration_ms = int(duration_ms) if duration_ms is not None else self.duration_ms
        self._started_at = self._clock()

    # ------------------ STATE ------------------
    def _elapsed_fraction(self) -> float:
        if self._started_at is None:
            return 1.0
        elapsed_ms = (self._clock() - self._started_at) * 1000.0
        return min(max(elapsed_ms / self._run_duration_ms, 0.0), 1.0)

    def _advance(self) -> float:
        if self._started_at is None:
            return 1.0
        fraction = self._elapsed_fraction()
        if fraction >= 1.0:
            self._value = self._to
            self._started_at = None
            logger.info("Done animating")
        else:
            self._value = self._from + (self._to - self._from) * self.easing(fraction)
        return fraction

    @property
    def value(self) -> float:
        self._advance()
        return self._value

    @property
    def is_running(self) -> bool:
        self._advance()
        return self._started_at is not None

    @property
    def progress(self) -> float:
        """Linear time progress of the current run; 1.0 when idle."""
        return self._advance()

    def __repr__(self) -> str:
        return (
            f"TweenDriver(value={self._value:.3f}, running={self._started_at is not None}, "
            f"duration_ms={self.duration_ms})"
        )
