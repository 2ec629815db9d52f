"""Tests for fill and stroke paint resolution."""

import cairo
import pytest

from svgpicture.colors import BLACK, Color
from svgpicture.paint import Dash, Paint, PaintState, TextAlign, create_paint, read_opacity, read_paints


class Warnings(list):
	def __call__(self, message, target=None):
		self.append(message)


@pytest.fixture
def root_state():
	return PaintState(None, create_paint())


def test_defaults():
	paint = Paint()
	assert paint.color == BLACK
	assert paint.stroke_width == 1
	assert paint.text_align == TextAlign.LEFT
	assert not paint.is_stroke


def test_fill_color(root_state):
	state = read_paints({'fill': 'red'}, root_state)
	assert state.fill.color == Color(255, 0, 0, 255)
	assert state.stroke is None


def test_inherited_state_is_not_modified(root_state):
	read_paints({'fill': 'red', 'stroke': 'blue'}, root_state)
	assert root_state.fill.color == BLACK
	assert root_state.stroke is None


def test_none_disables(root_state):
	state = read_paints({'fill': 'none', 'stroke': 'none'}, root_state)
	assert state.fill is None
	assert state.stroke is None


def test_stroke_created_by_width(root_state):
	state = read_paints({'stroke-width': '3'}, root_state)
	assert state.stroke.is_stroke
	assert state.stroke.stroke_width == 3
	assert state.stroke.color == BLACK


def test_stroke_width_resets_when_missing(root_state):
	parent = read_paints({'stroke': 'blue', 'stroke-width': '5'}, root_state)
	child = read_paints({}, parent)
	assert child.stroke.stroke_width == 1


def test_opaque_color_keeps_alpha(root_state):
	parent = read_paints({'fill-opacity': '0.5'}, root_state)
	assert parent.fill.color.alpha == 127
	child = read_paints({'fill': 'blue'}, parent)
	assert child.fill.color == Color(0, 0, 255, 127)


def test_translucent_color_replaces_alpha(root_state):
	parent = read_paints({'fill-opacity': '0.5'}, root_state)
	child = read_paints({'fill': 'rgba(0, 0, 255, 0.2)'}, parent)
	assert child.fill.color.alpha == 51


def test_element_opacity_multiplies_alpha(root_state):
	state = read_paints({'fill': 'red', 'stroke': 'blue', 'opacity': '0.5'}, root_state)
	assert state.fill.color.alpha == 127
	assert state.stroke.color.alpha == 127


def test_group_ignores_element_opacity(root_state):
	state = read_paints({'fill': 'red', 'opacity': '0.5'}, root_state, is_group=True)
	assert state.fill.color.alpha == 255


def test_stroke_attributes(root_state):
	state = read_paints({
		'stroke': 'black',
		'stroke-linecap': 'round',
		'stroke-linejoin': 'bevel',
		'stroke-miterlimit': '8',
		'stroke-opacity': '0.2',
	}, root_state)
	assert state.stroke.line_cap == cairo.LineCap.ROUND
	assert state.stroke.line_join == cairo.LineJoin.BEVEL
	assert state.stroke.miter_limit == 8
	assert state.stroke.color.alpha == 51


def test_odd_dash_array_is_repeated(root_state):
	state = read_paints({'stroke-dasharray': '5, 3 1', 'stroke-dashoffset': '2'}, root_state)
	assert state.stroke.dash == Dash([5, 3, 1, 5, 3, 1], 2)


def test_dash_array_none(root_state):
	parent = read_paints({'stroke-dasharray': '4 4'}, root_state)
	child = read_paints({'stroke-dasharray': 'none'}, parent)
	assert child.stroke.dash is None


def test_fill_rule(root_state):
	state = read_paints({'fill-rule': 'evenodd'}, root_state)
	assert state.fill.fill_rule == cairo.FillRule.EVEN_ODD


def test_gradient_fill(root_state):
	gradients = {'g': 'gradient'}
	state = read_paints({'fill': 'url(#g)'}, root_state, gradients=gradients)
	assert state.fill.shader == 'gradient'
	assert state.fill.color.alpha == 0

	child = read_paints({'fill': 'green'}, state)
	assert child.fill.shader is None


def test_unknown_fill_reference_is_reported(root_state):
	warnings = Warnings()
	state = read_paints({'fill': 'url(#missing)'}, root_state, gradients={}, emit_warning=warnings)
	assert warnings == ['Invalid fill url reference: missing', 'Unsupported fill: url(#missing)']
	assert state.fill.color == BLACK


def test_non_gradient_fill_reference_is_unsupported(root_state):
	warnings = Warnings()
	read_paints({'fill': 'url(#shape)'}, root_state, gradients={'shape': None}, emit_warning=warnings)
	assert warnings == ['Unsupported fill: url(#shape)']


def test_read_opacity_is_clamped():
	assert read_opacity({}) == 1
	assert read_opacity({'opacity': '2'}) == 1
	assert read_opacity({'opacity': '-1'}) == 0
	assert read_opacity({'opacity': '0.25'}) == 0.25


def test_clone_is_independent():
	paint = create_paint(True)
	copy = paint.clone()
	copy.stroke_width = 10
	assert paint.stroke_width == 1

	state = PaintState(paint, None).clone()
	assert state.stroke is not paint
	assert state.fill is None


def test_apply_stroke(pseudo_context):
	paint = create_paint(True)
	paint.color = Color(255, 0, 0, 255)
	paint.stroke_width = 2
	paint.dash = Dash([4, 2], 1)
	paint.apply(pseudo_context)
	assert pseudo_context.args('set_source_rgba') == [(1, 0, 0, 1)]
	assert pseudo_context.args('set_line_width') == [(2,)]
	assert pseudo_context.args('set_dash') == [([4, 2], 1)]
	assert 'set_fill_rule' not in pseudo_context.names()


def test_apply_invalid_dash_clears_it(pseudo_context):
	paint = create_paint(True)
	paint.dash = Dash([0, 0], 0)
	paint.apply(pseudo_context)
	assert pseudo_context.args('set_dash') == [([], 0)]


def test_apply_fill_with_pattern(pseudo_context):
	pattern = cairo.SolidPattern(0, 0, 0)
	create_paint().apply(pseudo_context, pattern)
	assert pseudo_context.args('set_source') == [(pattern,)]
	assert pseudo_context.args('set_fill_rule') == [(cairo.FillRule.WINDING,)]
