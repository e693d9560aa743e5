from __future__ import annotations
from typing import List, Optional, Sequence

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from ..animation.easing import CubicBezierEasing, Easing
from ..config import DEFAULT_CONFIG, GradientConfig
from ..paint.color_stops import ColorStopTable
from ..paint.fill import LinearGradientFill, text_fill
from ..paint.palettes import TEXT_STOPS
from .raster import unit_to_uint8

FontLike = ImageFont.ImageFont | ImageFont.FreeTypeFont


def load_font(size: int = DEFAULT_CONFIG.text_font_size) -> FontLike:
    return ImageFont.load_default(size=size)


def text_mask(text: str, font: Optional[FontLike] = None, padding: int = 0) -> Image.Image:
    """8-bit coverage mask of ``text``, cropped to its bounding box plus ``padding``."""
    font = font or load_font()
    left, top, right, bottom = ImageDraw.Draw(Image.new("L", (1, 1))).textbbox((0, 0), text, font=font)
    width = max(right - left + 2 * padding, 1)
    height = max(bottom - top + 2 * padding, 1)

    mask = Image.new("L", (width, height), 0)
    ImageDraw.Draw(mask).text((padding - left, padding - top), text, font=font, fill=255)
    return mask


def paint_mask(mask: Image.Image, fill: LinearGradientFill) -> Image.Image:
    """Color a coverage mask with a fill; uncovered pixels become transparent."""
    width, height = mask.size
    colors = fill.render(width, height)
    coverage = np.asarray(mask, dtype=float) / 255.0
    colors[..., 3] *= coverage
    return Image.fromarray(unit_to_uint8(colors))


def render_gradient_text(
    text: str,
    offset_x: float,
    *,
    stops: ColorStopTable = TEXT_STOPS,
    angle_degrees: float = DEFAULT_CONFIG.default_angle,
    scale_x: float = DEFAULT_CONFIG.text_x_scale,
    font: Optional[FontLike] = None,
    padding: int = 0,
) -> Image.Image:
    """
    Draw ``text`` colored by the sweeping text gradient at ``offset_x``.

    The gradient line is resolved against the text's own bounding box, so
    the sweep covers the glyphs whatever the font size.
    """
    mask = text_mask(text, font, padding)
    width, height = mask.size
    fill = text_fill(stops, angle_degrees, width, height, offset_x, scale_x)
    return paint_mask(mask, fill)


def sweep_offsets(
    frames: int,
    config: GradientConfig = DEFAULT_CONFIG,
    easing: Optional[Easing] = None,
) -> List[float]:
    """Offsets the sweep passes through at ``frames`` evenly spaced instants."""
    if frames < 2:
        raise ValueError("frames must be >= 2")
    easing = easing or CubicBezierEasing(*config.text_easing)
    start, end = config.animation_start, config.animation_end
    return [start + (end - start) * easing(i / (frames - 1)) for i in range(frames)]


def render_text_frames(
    text: str,
    frames: int = 24,
    *,
    config: GradientConfig = DEFAULT_CONFIG,
    stops: ColorStopTable = TEXT_STOPS,
    font: Optional[FontLike] = None,
    offsets: Optional[Sequence[float]] = None,
) -> List[Image.Image]:
    """Frames of one full sweep, from ``animation_start`` to ``animation_end``."""
    font = font or load_font(config.text_font_size)
    offsets = list(offsets) if offsets is not None else sweep_offsets(frames, config)
    mask = text_mask(text, font)
    width, height = mask.size
    return [
        paint_mask(mask, text_fill(
            stops, config.default_angle, width, height, offset, config.text_x_scale,
            epsilon=config.angle_epsilon,
        ))
        for offset in offsets
    ]
