"""
Pillow adapters: rasterize fills, draw the debug overlay and gradient text.
"""
from .raster import fill_to_array, fill_to_image, unit_to_uint8
from .overlay import draw_debug_overlay, draw_dashed_line, render_css_gradient
from .text import (
    load_font,
    paint_mask,
    render_gradient_text,
    render_text_frames,
    sweep_offsets,
    text_mask,
)

__all__ = [
    "fill_to_array",
    "fill_to_image",
    "unit_to_uint8",
    "draw_debug_overlay",
    "draw_dashed_line",
    "render_css_gradient",
    "load_font",
    "paint_mask",
    "render_gradient_text",
    "render_text_frames",
    "sweep_offsets",
    "text_mask",
]
