"""
Built-in color stop tables.

``REFERENCE_STOPS`` is the palette of the angled rectangle fill. Its yellow and
green end stops are squeezed to a thousandth of the line on either side, which
turns them into thin markers showing exactly where the gradient line begins
and ends. ``TEXT_STOPS`` is the same brand sequence without the markers, used
for the sweeping text fill.
"""
from __future__ import annotations

from ..colors.named import BRAND_BLUE, BRAND_PURPLE, BRAND_ROSE, GREEN, WHITE, YELLOW
from .color_stops import ColorStopTable

BRAND_SEQUENCE = (
    BRAND_BLUE,
    BRAND_PURPLE,
    BRAND_ROSE,
    BRAND_ROSE,
    BRAND_PURPLE,
    BRAND_BLUE,
    BRAND_PURPLE,
    BRAND_ROSE,
    WHITE,
    WHITE,
)
BRAND_POSITIONS = (0.0, 0.09, 0.2, 0.24, 0.35, 0.44, 0.5, 0.56, 0.75, 1.0)

TEXT_STOPS = ColorStopTable.from_colors(BRAND_SEQUENCE, BRAND_POSITIONS)

# Interior positions come from the brand sequence; the first and last brand
# stops move inward by 0.001 to make room for the markers.
REFERENCE_STOPS = ColorStopTable(
    [(0.0, YELLOW), (0.001, BRAND_SEQUENCE[0])]
    + list(zip(BRAND_POSITIONS[1:-1], BRAND_SEQUENCE[1:-1]))
    + [(0.999, BRAND_SEQUENCE[-1]), (1.0, GREEN)]
)
