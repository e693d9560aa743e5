from __future__ import annotations
from enum import Enum
from typing import Tuple

from ..types.geometry_types import Point


class Corner(Enum):
    TOP_LEFT = (0, 0)
    TOP_RIGHT = (1, 0)
    BOTTOM_LEFT = (0, 1)
    BOTTOM_RIGHT = (1, 1)

    def locate(self, width: float, height: float) -> Point:
        fx, fy = self.value
        return Point(fx * width, fy * height)


# Keyed by (angle + 180) mod 360 in 90 degree buckets. Each entry is the pair of
# opposite corners whose projections become the gradient start and end.
CORNER_BUCKETS: Tuple[Tuple[float, Corner, Corner], ...] = (
    (90.0, Corner.BOTTOM_RIGHT, Corner.TOP_LEFT),
    (180.0, Corner.BOTTOM_LEFT, Corner.TOP_RIGHT),
    (270.0, Corner.TOP_LEFT, Corner.BOTTOM_RIGHT),
    (360.0, Corner.TOP_RIGHT, Corner.BOTTOM_LEFT),
)


def corner_bucket(angle_degrees: float) -> int:
    """
    Index into ``CORNER_BUCKETS`` for an angle.

    Boundaries compare with ``<``, so an angle sitting exactly on 90, 180 or
    270 belongs to the next bucket up.
    """
    key = (angle_degrees + 180.0) % 360.0
    for index, (upper, _, _) in enumerate(CORNER_BUCKETS):
        if key < upper:
            return index
    # key can round up to 360.0 for tiny negative inputs
    return len(CORNER_BUCKETS) - 1


def select_corner_pair(angle_degrees: float) -> Tuple[Corner, Corner]:
    _, start, end = CORNER_BUCKETS[corner_bucket(angle_degrees)]
    return start, end


def select_corners(angle_degrees: float, width: float, height: float) -> Tuple[Point, Point]:
    """Locate the (start, end) reference corners of a width x height surface."""
    start, end = select_corner_pair(angle_degrees)
    return start.locate(width, height), end.locate(width, height)
