"""
Tests for ColorStopTable construction and sampling.
"""
import numpy as np
import pytest

from chromaline.colors import BLACK, BRAND_BLUE, BRAND_PURPLE, GREEN, RED, WHITE, YELLOW, ColorRGBA
from chromaline.errors import InsufficientStops
from chromaline.paint import REFERENCE_STOPS, TEXT_STOPS, ColorStop, ColorStopTable, as_stop_table


@pytest.mark.parametrize("stops", [[], [(0.0, RED)]])
def test_fewer_than_two_stops_raise(stops):
    with pytest.raises(InsufficientStops) as exc_info:
        ColorStopTable(stops)
    assert exc_info.value.count == len(stops)


def test_two_stops_are_enough():
    table = ColorStopTable([(0.0, BLACK), (1.0, WHITE)])
    assert len(table) == 2
    assert table.first == ColorStop(0.0, BLACK)
    assert table.last == ColorStop(1.0, WHITE)


def test_from_colors_requires_two():
    with pytest.raises(InsufficientStops):
        ColorStopTable.from_colors([RED])


def test_from_colors_spaces_evenly():
    table = ColorStopTable.from_colors([RED, GREEN, BRAND_BLUE])
    assert np.allclose(table.positions, [0.0, 0.5, 1.0])


def test_from_colors_length_mismatch():
    with pytest.raises(ValueError):
        ColorStopTable.from_colors([RED, GREEN], [0.0, 0.5, 1.0])


def test_mixed_color_inputs():
    table = ColorStopTable([(0.0, "#FF0000"), (0.5, 0xFF00FF00), (1.0, (0, 0, 255))])
    assert table[0].color == RED
    assert table[1].color == GREEN
    assert table[2].color.to_hex() == "#0000FF"


def test_out_of_range_positions_are_clamped():
    with pytest.warns(UserWarning, match="clamped"):
        table = ColorStopTable([(-0.5, RED), (1.5, GREEN)])
    assert np.allclose(table.positions, [0.0, 1.0])


def test_decreasing_positions_are_raised():
    with pytest.warns(UserWarning, match="non-decreasing"):
        table = ColorStopTable([(0.0, RED), (0.6, GREEN), (0.4, WHITE), (1.0, BLACK)])
    assert np.allclose(table.positions, [0.0, 0.6, 0.6, 1.0])


def test_non_finite_position_rejected():
    with pytest.raises(ValueError):
        ColorStopTable([(0.0, RED), (float("nan"), GREEN)])


def test_arrays_are_read_only():
    with pytest.raises(ValueError):
        TEXT_STOPS.positions[0] = 0.5
    with pytest.raises(ValueError):
        TEXT_STOPS.colors[0, 0] = 0.5


def test_exact_colors_at_stop_positions():
    for stop in REFERENCE_STOPS:
        assert REFERENCE_STOPS.color_at(stop.position) == stop.color


def test_reference_end_markers():
    assert REFERENCE_STOPS.color_at(0.0) == YELLOW
    assert REFERENCE_STOPS.color_at(0.001) == BRAND_BLUE
    assert REFERENCE_STOPS.color_at(0.5) == BRAND_PURPLE
    assert REFERENCE_STOPS.color_at(0.999) == WHITE
    assert REFERENCE_STOPS.color_at(1.0) == GREEN


def test_linear_interpolation_midway():
    table = ColorStopTable([(0.0, BLACK), (1.0, WHITE)])
    assert np.allclose(table.sample(0.25), [0.25, 0.25, 0.25, 1.0])


def test_alpha_is_interpolated():
    table = ColorStopTable([(0.0, RED.with_alpha(0.0)), (1.0, RED)])
    assert table.color_at(0.5).alpha == pytest.approx(0.5)


def test_sample_clamps_parameters():
    table = ColorStopTable([(0.2, RED), (0.8, GREEN)])
    assert table.color_at(-3.0) == RED
    assert table.color_at(0.1) == RED
    assert table.color_at(0.9) == GREEN
    assert table.color_at(7.0) == GREEN


def test_duplicate_positions_make_a_hard_edge():
    table = ColorStopTable([(0.0, RED), (0.5, RED), (0.5, GREEN), (1.0, GREEN)])
    assert table.color_at(0.4999).to_hex() == "#FF0000"
    assert table.color_at(0.5) == GREEN


def test_sample_is_vectorized():
    t = np.linspace(0, 1, 12).reshape(3, 4)
    assert TEXT_STOPS.sample(t).shape == (3, 4, 4)


def test_ramp():
    ramp = ColorStopTable([(0.0, BLACK), (1.0, WHITE)]).ramp(5)
    assert ramp.shape == (5, 4)
    assert np.allclose(ramp[:, 0], [0, 0.25, 0.5, 0.75, 1])
    with pytest.raises(ValueError):
        TEXT_STOPS.ramp(0)


def test_tables_compare_by_value():
    a = ColorStopTable([(0.0, RED), (1.0, GREEN)])
    b = ColorStopTable([(0.0, "#FF0000"), (1.0, "#00FF00")])
    assert a == b
    assert hash(a) == hash(b)
    assert as_stop_table(a) is a
    assert as_stop_table([(0.0, RED), (1.0, GREEN)]) == a


def test_as_tuples_and_repr():
    table = ColorStopTable([(0.0, RED), (1.0, GREEN)])
    assert table.as_tuples() == ((0.0, (1.0, 0.0, 0.0, 1.0)), (1.0, (0.0, 1.0, 0.0, 1.0)))
    assert repr(table) == "ColorStopTable([0: #FF0000, 1: #00FF00])"


def test_builtin_palettes():
    assert len(TEXT_STOPS) == 10
    assert len(REFERENCE_STOPS) == 12
    assert TEXT_STOPS.first.color == BRAND_BLUE
    assert TEXT_STOPS.last.color == ColorRGBA((1, 1, 1))
