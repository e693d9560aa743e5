from __future__ import annotations
import math
from typing import Optional, Sequence, Tuple

from PIL import Image, ImageDraw

from ..colors.named import BLACK, CYAN, GRAY, GREEN, LIGHT_GRAY, MAGENTA, RED
from ..colors.rgba import ColorRGBA
from ..config import DEFAULT_CONFIG, GradientConfig
from ..geometry.debug import DebugOverlay, build_debug_overlay
from ..geometry.gradient_line import resolve_gradient_layout
from ..paint.color_stops import ColorStopTable
from ..paint.fill import build_fill
from ..paint.palettes import REFERENCE_STOPS
from ..types.geometry_types import Point
from .raster import fill_to_image

Dash = Tuple[float, float]


def _ink(color: ColorRGBA) -> Tuple[int, int, int, int]:
    return color.to_ints()


def clip_span(
    start: Point,
    end: Point,
    width: float,
    height: float,
    margin: float = 0.0,
) -> Optional[Tuple[float, float]]:
    """
    Distances along ``start -> end`` where the segment is inside the rectangle.

    The rectangle is ``[-margin, width + margin] x [-margin, height + margin]``
    (Liang-Barsky). Returns None when the segment misses it entirely.
    """
    length = start.distance_to(end)
    if length == 0:
        return None
    ux, uy = (end.x - start.x) / length, (end.y - start.y) / length
    low, high = 0.0, length
    for origin, direction, lower, upper in (
        (start.x, ux, -margin, width + margin),
        (start.y, uy, -margin, height + margin),
    ):
        if direction == 0:
            if not lower <= origin <= upper:
                return None
            continue
        first = (lower - origin) / direction
        second = (upper - origin) / direction
        low = max(low, min(first, second))
        high = min(high, max(first, second))
        if low > high:
            return None
    return low, high


def draw_dashed_line(
    draw: ImageDraw.ImageDraw,
    start: Point,
    end: Point,
    dash: Dash,
    fill: ColorRGBA,
    width: int = 1,
    bounds: Optional[Tuple[float, float]] = None,
) -> None:
    """
    Alternate ``dash[0]`` pixels of ink with ``dash[1]`` pixels of gap.

    Only the part inside ``bounds`` (the image size by default) is dashed; the
    dash phase stays anchored at ``start``.
    """
    surface_width, surface_height = bounds if bounds is not None else draw.im.size
    span = clip_span(start, end, surface_width, surface_height, margin=width)
    if span is None:
        return
    visible_start, visible_end = span
    length = start.distance_to(end)
    ux, uy = (end.x - start.x) / length, (end.y - start.y) / length
    on, off = dash
    period = on + off
    position = math.floor(visible_start / period) * period if period > 0 else visible_start
    while position < visible_end:
        segment_start = max(position, visible_start)
        segment_end = min(position + on, visible_end)
        if segment_end > segment_start:
            draw.line(
                [
                    (start.x + ux * segment_start, start.y + uy * segment_start),
                    (start.x + ux * segment_end, start.y + uy * segment_end),
                ],
                fill=_ink(fill),
                width=width,
            )
        if period <= 0:
            break
        position += period


def draw_dot(draw: ImageDraw.ImageDraw, center: Point, radius: float, fill: ColorRGBA) -> None:
    draw.ellipse(
        [center.x - radius, center.y - radius, center.x + radius, center.y + radius],
        fill=_ink(fill),
    )


def draw_polyline(draw: ImageDraw.ImageDraw, points: Sequence[Point], fill: ColorRGBA, width: int = 1) -> None:
    draw.line([tuple(p) for p in points], fill=_ink(fill), width=width)


def draw_debug_overlay(image: Image.Image, overlay: DebugOverlay) -> Image.Image:
    """
    Draw the gradient construction on top of ``image``, in place.

    Gray bounds, a dashed zero-degree reference from the center, the cyan arc
    swept by the angle, the dashed perpendiculars from the reference corners,
    the gradient line with its arrowhead, magenta endpoints (the end one
    larger), red corners and, when the line crosses them, the green
    intersections with the top and bottom edges.
    """
    draw = ImageDraw.Draw(image)
    width, height = overlay.width, overlay.height
    bounds = (width, height)

    draw.rectangle([0, 0, width - 1, height - 1], outline=_ink(GRAY), width=1)

    draw_dashed_line(draw, *overlay.zero_degree_line, dash=(10, 5), fill=LIGHT_GRAY, bounds=bounds)
    draw_dot(draw, overlay.center, 2, BLACK)

    radius = overlay.arc_radius
    sweep = overlay.sweep_degrees
    if radius > 0 and sweep != 0:
        box = [
            overlay.center.x - radius, overlay.center.y - radius,
            overlay.center.x + radius, overlay.center.y + radius,
        ]
        # Pillow arcs run clockwise from `start` to `end`, like y-down sweeps.
        start, end = (0.0, sweep) if sweep > 0 else (sweep, 0.0)
        draw.arc(box, start=start, end=end, fill=_ink(CYAN), width=2)

    draw_dashed_line(draw, *overlay.start_projection, dash=(10, 10), fill=BLACK, width=2, bounds=bounds)
    draw_dashed_line(draw, *overlay.end_projection, dash=(10, 10), fill=BLACK, width=2, bounds=bounds)

    line = overlay.gradient_line
    draw_polyline(draw, line, BLACK, width=2)
    first_barb, second_barb = overlay.arrow_head
    draw_polyline(draw, [first_barb, line.end, second_barb], BLACK, width=2)

    draw_dot(draw, line.start, 4, MAGENTA)
    draw_dot(draw, line.end, 6, MAGENTA)
    draw_dot(draw, overlay.start_corner, 4, RED)
    draw_dot(draw, overlay.end_corner, 4, RED)

    if overlay.intersections is not None:
        top, bottom = overlay.intersections
        draw_dashed_line(draw, top, bottom, dash=(10, 5), fill=BLACK, bounds=bounds)
        for point in (top, bottom):
            # Near-horizontal lines cross the edges far outside the image
            if -width <= point.x <= 2 * width:
                draw_dot(draw, point, 4, GREEN)
    return image


def render_css_gradient(
    angle_degrees: float,
    width: int,
    height: int,
    stops: ColorStopTable = REFERENCE_STOPS,
    *,
    debug: bool = True,
    config: GradientConfig = DEFAULT_CONFIG,
) -> Image.Image:
    """Rasterize the angled rectangle fill, optionally with the construction drawn on top."""
    epsilon = config.angle_epsilon
    layout = resolve_gradient_layout(angle_degrees, width, height, epsilon=epsilon)
    image = fill_to_image(build_fill(stops, layout.line, width=width), width, height)
    if debug and width > 0 and height > 0:
        draw_debug_overlay(image, build_debug_overlay(
            layout, width, height, arrow_size=config.debug_arrow_size, epsilon=epsilon,
        ))
    return image
