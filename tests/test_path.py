"""Tests for path geometry and path data parsing."""

import cairo
import pytest

from svgpicture.path import Path, parse_path_data


M, L, C, Z = cairo.PATH_MOVE_TO, cairo.PATH_LINE_TO, cairo.PATH_CURVE_TO, cairo.PATH_CLOSE_PATH


def types(path):
	return [_type for (_type, _points) in path]


def test_absolute_commands():
	p = parse_path_data('M 10 10 L 20 10 H 30 V 40 Z')
	assert types(p) == [M, L, L, L, Z]
	assert p.segments[2] == (L, (30, 10))
	assert p.segments[3] == (L, (30, 40))
	assert p.current_point == (10, 10)


def test_relative_commands():
	p = parse_path_data('m 10 10 l 5 5 h 5 v -10')
	assert p.segments[1] == (L, (15, 15))
	assert p.segments[2] == (L, (20, 15))
	assert p.current_point == (20, 5)


def test_implicit_repetition_after_move_is_line():
	p = parse_path_data('M0,0 10,0 10,10')
	assert types(p) == [M, L, L]

	p = parse_path_data('m1 1 2 2')
	assert p.segments[1] == (L, (3, 3))


def test_packed_numbers():
	p = parse_path_data('M-1-2L.5.5')
	assert p.segments[0] == (M, (-1, -2))
	assert p.segments[1] == (L, (0.5, 0.5))


def test_cubic_and_smooth_reflection():
	p = parse_path_data('M0 0 C 0 10 10 10 10 0 S 20 -10 20 0')
	assert types(p) == [M, C, C]
	assert p.segments[2][1][:2] == (10, -10)


def test_smooth_without_previous_cubic_uses_current_point():
	p = parse_path_data('M5 5 S 10 10 20 5')
	assert p.segments[1][1][:2] == (5, 5)


def test_quadratic_is_converted_to_cubic():
	p = parse_path_data('M0 0 Q 3 3 6 0')
	assert p.segments[1] == (C, pytest.approx((2, 2, 4, 2, 6, 0)))


def test_smooth_quadratic_reflection():
	p = parse_path_data('M0 0 Q 3 3 6 0 T 12 0')
	# reflected control point is (9, -3)
	assert p.segments[2] == (C, pytest.approx((8, -2, 10, -2, 12, 0)))


def test_arc_ends_exactly_on_target():
	p = parse_path_data('M0,0 A10,10 0 0,1 20,0')
	assert all(_type == C for _type in types(p)[1:])
	assert p.current_point == (20, 0)


def test_arc_with_packed_flags():
	p = parse_path_data('M0 0a5 5 0 1020 0')
	assert p.current_point == (20, 0)


def test_large_arc_splits_into_quarter_segments():
	small = parse_path_data('M0 0 A10 10 0 0 1 20 0')
	large = parse_path_data('M0 0 A10 10 0 1 1 0 1')
	assert len(small) == 3
	assert len(large) == 5


def test_arc_radii_are_scaled_up():
	p = parse_path_data('M0 0 A1 1 0 0 1 20 0')
	x1, y1, x2, y2 = p.extents()
	assert y2 - y1 == pytest.approx(10, abs=0.5)


def test_zero_radius_arc_is_line():
	p = parse_path_data('M0 0 A0 5 0 0 1 20 0')
	assert p.segments[1] == (L, (20, 0))


def test_malformed_data_keeps_prefix():
	p = parse_path_data('M0 0 L10 10 L oops')
	assert types(p) == [M, L]

	p = parse_path_data('M0 0 X 5 5')
	assert types(p) == [M]


def test_empty_data():
	assert parse_path_data('').is_empty
	assert parse_path_data(None).is_empty
	assert parse_path_data('M 5 5').is_empty


def test_close_returns_to_subpath_start():
	p = parse_path_data('M1 1 L5 1 L5 5 Z l 1 0')
	assert p.segments[-1] == (L, (2, 1))


def test_rect_and_rounded_rect():
	p = Path()
	p.add_rect(0, 0, 10, 20)
	assert types(p) == [M, L, L, L, Z]
	assert p.extents() == (0, 0, 10, 20)

	p = Path()
	p.add_rounded_rect(0, 0, 10, 20, 100, 3)
	assert p.segments[0] == (M, (5, 0))
	assert types(p).count(C) == 4


def test_oval_extents():
	p = Path()
	p.add_circle(10, 10, 5)
	assert p.extents() == (5, 5, 15, 15)


def test_add_path_and_replay(pseudo_context):
	a = Path()
	a.add_rect(0, 0, 1, 1)
	b = Path()
	b.add_path(a)
	b.add_circle(0, 0, 1)
	b.replay(pseudo_context)
	assert pseudo_context.names() == ['move_to', 'line_to', 'line_to', 'line_to', 'close_path', 'move_to', 'curve_to', 'curve_to', 'curve_to', 'curve_to', 'close_path']
