"""
Tests for building and sampling linear gradient fills.
"""
import math

import numpy as np
import pytest

from chromaline.colors import BLACK, GREEN, RED, WHITE, YELLOW
from chromaline.errors import InsufficientStops, InvalidAngle
from chromaline.geometry import GradientKind, resolve_gradient_line
from chromaline.paint import (
    REFERENCE_STOPS,
    ColorStopTable,
    LinearGradientFill,
    build_fill,
    linear_fill,
    text_fill,
)
from chromaline.types.geometry_types import GradientLine, Point

BLACK_TO_WHITE = ColorStopTable([(0.0, BLACK), (1.0, WHITE)])


def test_line_ends_carry_first_and_last_stop():
    for angle in (0, 90, 180, -90, -16, 45, 200):
        fill = linear_fill(REFERENCE_STOPS, angle, 500, 100)
        assert fill.color_at(*fill.line.start) == YELLOW
        assert fill.color_at(*fill.line.end).to_hex() == GREEN.to_hex()


def test_center_carries_the_middle_stop():
    fill = linear_fill(REFERENCE_STOPS, -16, 500, 100)
    assert fill.color_at(250, 50).to_hex() == "#9B72CB"


def test_build_fill_rejects_short_tables():
    line = resolve_gradient_line(0, 10, 10)
    with pytest.raises(InsufficientStops):
        build_fill([(0.0, RED)], line)
    with pytest.raises(InsufficientStops):
        build_fill([], line)


def test_build_fill_accepts_stop_pairs():
    fill = build_fill([(0.0, RED), (1.0, GREEN)], resolve_gradient_line(0, 10, 10))
    assert isinstance(fill.stops, ColorStopTable)
    assert fill.color_at(0, 5) == RED


def test_invalid_angle_propagates():
    with pytest.raises(InvalidAngle):
        linear_fill(REFERENCE_STOPS, math.nan, 10, 10)


def test_render_samples_pixel_centers():
    fill = linear_fill(BLACK_TO_WHITE, 0, 4, 1)
    pixels = fill.render(4, 1)
    assert pixels.shape == (1, 4, 4)
    assert np.allclose(pixels[0, :, 0], [0.125, 0.375, 0.625, 0.875])
    assert np.allclose(pixels[..., 3], 1.0)


def test_render_vertical():
    fill = linear_fill(BLACK_TO_WHITE, 90, 3, 2)
    pixels = fill.render(3, 2)
    assert pixels.shape == (2, 3, 4)
    assert np.allclose(pixels[0, :, 0], 0.25)
    assert np.allclose(pixels[1, :, 0], 0.75)


def test_points_beyond_the_line_are_clamped():
    fill = linear_fill(BLACK_TO_WHITE, 0, 100, 10)
    assert fill.parameter_at(-50, 5) == 0.0
    assert fill.parameter_at(150, 5) == 1.0


def test_default_width_is_horizontal_extent():
    line = GradientLine(Point(10, 0), Point(60, 40))
    assert build_fill(BLACK_TO_WHITE, line).width == 50
    assert build_fill(BLACK_TO_WHITE, line, width=80).width == 80


def test_transform_x():
    fill = build_fill(BLACK_TO_WHITE, resolve_gradient_line(0, 100, 10), -0.5, 2.0)
    assert fill.transform_x(10) == pytest.approx(10 * 2.0 - 0.5 * 100)
    assert fill.is_transformed
    assert not build_fill(BLACK_TO_WHITE, fill.line).is_transformed


def test_offset_shifts_the_colors_in_text_fill():
    # 500x100 surface, reference palette, reference angle, x stretched by 4
    before = text_fill(REFERENCE_STOPS, -16, 500, 100, offset_x=-1.0, scale_x=4.0)
    after = text_fill(REFERENCE_STOPS, -16, 500, 100, offset_x=0.0, scale_x=4.0)

    assert before.color_at(250, 50) != after.color_at(250, 50)
    assert before.color_at(250, 50).to_hex() == WHITE.to_hex()
    assert after.color_at(250, 50).to_hex() == GREEN.to_hex()


def test_offset_measured_in_surface_widths():
    line = resolve_gradient_line(0, 100, 10)
    fill = build_fill(BLACK_TO_WHITE, line, offset_x=0.25, width=100)
    # x' = 10 + 25
    assert fill.parameter_at(10, 5) == pytest.approx(0.35)


def test_zero_length_line_gives_first_color():
    fill = build_fill(BLACK_TO_WHITE, GradientLine(Point(5, 5), Point(5, 5)))
    assert fill.color_at(0, 0) == BLACK
    assert fill.render(2, 2).shape == (2, 2, 4)


def test_zero_size_surface():
    fill = linear_fill(BLACK_TO_WHITE, -16, 0, 0)
    assert fill.render(0, 0).shape == (0, 0, 4)


def test_non_finite_transform_rejected():
    line = resolve_gradient_line(0, 10, 10)
    with pytest.raises(ValueError):
        build_fill(BLACK_TO_WHITE, line, offset_x=math.inf)
    with pytest.raises(ValueError):
        build_fill(BLACK_TO_WHITE, line, scale_x=math.nan)


def test_kind():
    assert linear_fill(BLACK_TO_WHITE, 0, 10, 10).kind is GradientKind.HORIZONTAL
    assert linear_fill(BLACK_TO_WHITE, 90, 10, 10).kind is GradientKind.VERTICAL
    assert linear_fill(BLACK_TO_WHITE, 30, 10, 10).kind is GradientKind.LINEAR


def test_with_offset_and_equality():
    fill = text_fill(REFERENCE_STOPS, -16, 500, 100, offset_x=-1.0)
    moved = fill.with_offset(0.0)
    assert isinstance(moved, LinearGradientFill)
    assert moved.offset_x == 0.0
    assert moved.scale_x == fill.scale_x
    assert moved == text_fill(REFERENCE_STOPS, -16, 500, 100, offset_x=0.0)
    assert hash(moved) == hash(text_fill(REFERENCE_STOPS, -16, 500, 100, offset_x=0.0))
    assert moved != fill


def test_parameters_are_clamped_arrays():
    fill = linear_fill(BLACK_TO_WHITE, 0, 100, 10)
    t = fill.parameters(np.array([-50.0, 50.0, 150.0]), np.array([5.0, 5.0, 5.0]))
    assert np.allclose(t, [0.0, 0.5, 1.0])
