"""Exceptions raised by chromaline.

Both error kinds describe caller-supplied data, never a transient condition,
so none of them is retryable. They subclass ``ValueError`` so code that
already guards numeric input with ``except ValueError`` keeps working.
"""
from __future__ import annotations


class ChromalineError(ValueError):
    """Base class for chromaline errors."""


class InvalidAngle(ChromalineError):
    """Raised when a gradient angle is NaN or infinite."""

    def __init__(self, angle: float) -> None:
        self.angle = angle
        super().__init__(f"Gradient angle must be finite, got {angle!r}")


class InsufficientStops(ChromalineError):
    """Raised when a color stop table has fewer than two entries."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"At least 2 color stops are required, got {count}")
