"""
Tests for the diagnostic overlay geometry.
"""
import math

import pytest

from chromaline.geometry import (
    arrowhead_points,
    bounds_intersections,
    build_debug_overlay,
    cotangent,
    resolve_gradient_layout,
)
from chromaline.types.geometry_types import Point


def test_cotangent():
    assert cotangent(math.pi / 4) == pytest.approx(1.0)
    assert cotangent(0.0) == 0.0


def test_no_intersections_at_zero_degrees():
    layout = resolve_gradient_layout(0, 500, 100)
    assert bounds_intersections(layout, 500, 100) is None


def test_intersections_lie_on_the_line():
    width, height = 500, 100
    layout = resolve_gradient_layout(-16, width, height)
    top, bottom = bounds_intersections(layout, width, height)

    assert top.y == 0
    assert bottom.y == height
    dx, dy = layout.line.direction
    center = Point(width / 2, height / 2)
    for point in (top, bottom):
        cross = (point.x - center.x) * dy - (point.y - center.y) * dx
        assert cross == pytest.approx(0.0, abs=1e-9)


def test_intersections_at_vertical_share_the_center_column():
    layout = resolve_gradient_layout(90, 400, 200)
    top, bottom = bounds_intersections(layout, 400, 200)
    assert top.x == pytest.approx(200)
    assert bottom.x == pytest.approx(200)


def test_arrowhead_barbs():
    tip = Point(100, 100)
    first, second = arrowhead_points(tip, math.radians(30), size=10)
    assert tip.distance_to(first) == pytest.approx(10)
    assert tip.distance_to(second) == pytest.approx(10)
    # Both barbs trail behind the tip
    direction = (math.cos(math.radians(30)), math.sin(math.radians(30)))
    for barb in (first, second):
        assert (barb.x - tip.x) * direction[0] + (barb.y - tip.y) * direction[1] < 0


def test_arrowhead_at_zero_uses_fallback_direction():
    first, second = arrowhead_points(Point(0, 0), 0.0, size=10)
    assert first != second
    assert first.x < 0 and second.x < 0


def test_build_debug_overlay():
    layout = resolve_gradient_layout(-16, 500, 100)
    overlay = build_debug_overlay(layout, 500, 100, arrow_size=12)

    assert overlay.center == Point(250, 50)
    assert overlay.zero_degree_line.end == Point(500, 50)
    assert overlay.sweep_degrees == pytest.approx(-16)
    assert overlay.arc_radius == 25
    assert overlay.gradient_line == layout.line
    assert overlay.start_projection.start == layout.line.start
    assert overlay.start_projection.end == layout.start_corner
    assert overlay.end_projection.end == layout.end_corner
    assert overlay.start_corner == Point(0, 100)
    assert overlay.end_corner == Point(500, 0)
    assert overlay.intersections is not None
    assert layout.line.end.distance_to(overlay.arrow_head[0]) == pytest.approx(12)


def test_overlay_for_horizontal_angle_has_no_intersections():
    layout = resolve_gradient_layout(0, 300, 300)
    overlay = build_debug_overlay(layout, 300, 300)
    assert overlay.intersections is None
    assert overlay.sweep_degrees == 0


@pytest.mark.parametrize("angle", [0, 180, -180, 540, -540, 360])
def test_horizontal_layouts_have_no_intersections(angle):
    layout = resolve_gradient_layout(angle, 60, 60)
    assert bounds_intersections(layout, 60, 60) is None
    assert build_debug_overlay(layout, 60, 60).intersections is None


@pytest.mark.parametrize("angle", [180, -180, 540])
def test_right_to_left_arrowhead_trails_to_the_right(angle):
    layout = resolve_gradient_layout(angle, 60, 40)
    overlay = build_debug_overlay(layout, 60, 40, arrow_size=10)
    tip = layout.line.end
    assert tip == Point(0, 20)
    for barb in overlay.arrow_head:
        assert barb.x > tip.x
        assert tip.distance_to(barb) == pytest.approx(10)


@pytest.mark.parametrize("angle", [179.9995, -179.9995, 179.5])
def test_near_horizontal_intersections_are_finite_and_symmetric(angle):
    width, height = 60, 40
    layout = resolve_gradient_layout(angle, width, height)
    top, bottom = bounds_intersections(layout, width, height)
    center = Point(width / 2, height / 2)
    for point in (top, bottom):
        assert math.isfinite(point.x)
    # Symmetric about the center
    assert (top.x + bottom.x) / 2 == pytest.approx(center.x)
    assert abs(top.x - center.x) > width
