"""
Tests for the CSS gradient rendering with its diagnostic overlay.
"""
import time

import numpy as np
import pytest
from PIL import Image, ImageDraw

from chromaline.colors import GRAY
from chromaline.config import GradientConfig
from chromaline.geometry import build_debug_overlay, resolve_gradient_layout
from chromaline.render import draw_dashed_line, draw_debug_overlay, render_css_gradient
from chromaline.render.overlay import clip_span
from chromaline.types.geometry_types import Point


def test_render_without_overlay_is_the_plain_fill():
    image = render_css_gradient(-16, 120, 40, debug=False)
    assert image.size == (120, 40)
    assert image.mode == "RGBA"


def test_overlay_changes_the_image():
    plain = np.asarray(render_css_gradient(-16, 120, 40, debug=False))
    debug = np.asarray(render_css_gradient(-16, 120, 40, debug=True))
    assert plain.shape == debug.shape
    assert (plain != debug).any()


def test_overlay_draws_bounds():
    image = render_css_gradient(-16, 120, 40)
    assert image.getpixel((0, 0)) == GRAY.to_ints()
    assert image.getpixel((119, 20)) == GRAY.to_ints()


def test_overlay_for_axis_angles():
    for angle in (0, 90, 180, -90):
        image = render_css_gradient(angle, 60, 60)
        assert image.size == (60, 60)


def test_draw_debug_overlay_on_blank_image():
    layout = resolve_gradient_layout(30, 80, 80)
    image = Image.new("RGBA", (80, 80), (255, 255, 255, 255))
    result = draw_debug_overlay(image, build_debug_overlay(layout, 80, 80))
    assert result is image
    assert (np.asarray(image)[..., :3] != 255).any()


def test_dashed_line_leaves_gaps():
    image = Image.new("RGBA", (30, 1), (0, 0, 0, 0))
    draw_dashed_line(ImageDraw.Draw(image), Point(0, 0), Point(30, 0), dash=(5, 5), fill=GRAY)
    alpha = np.asarray(image)[0, :, 3]
    assert alpha[2] == 255
    assert alpha[7] == 0
    assert alpha[12] == 255


def test_zero_size_render():
    assert render_css_gradient(-16, 0, 0).size == (0, 0)


def test_config_epsilon_reaches_the_geometry():
    coarse = GradientConfig(angle_epsilon=5.0)
    snapped = np.asarray(render_css_gradient(3, 60, 30, debug=False, config=coarse))
    horizontal = np.asarray(render_css_gradient(0, 60, 30, debug=False))
    assert (snapped == horizontal).all()


@pytest.mark.parametrize("angle", [180, -180, 540, 179.9995, -179.9995, 0.0015])
def test_overlay_near_horizontal_renders_quickly(angle):
    started = time.perf_counter()
    image = render_css_gradient(angle, 60, 60)
    assert time.perf_counter() - started < 5.0
    assert image.size == (60, 60)


def test_clip_span():
    # Fully inside
    assert clip_span(Point(10, 10), Point(20, 10), 30, 30) == (0.0, 10.0)
    # Crossing from far outside: only the visible 30 pixels remain
    low, high = clip_span(Point(-1e9, 5), Point(1e9, 5), 30, 10)
    assert high - low == pytest.approx(30.0)
    # Missing the rectangle
    assert clip_span(Point(-10, 50), Point(40, 50), 30, 30) is None
    assert clip_span(Point(5, 5), Point(5, 5), 30, 30) is None


def test_dashed_line_far_outside_is_clipped():
    image = Image.new("RGBA", (30, 1), (0, 0, 0, 0))
    started = time.perf_counter()
    draw_dashed_line(ImageDraw.Draw(image), Point(-1e12, 0), Point(1e12, 0), dash=(5, 5), fill=GRAY)
    assert time.perf_counter() - started < 1.0
    assert np.asarray(image)[0, :, 3].any()
