#!/usr/bin/python3
#-*- coding:utf-8 -*-


__all__ = 'Paint', 'PaintState', 'Typeface', 'DEFAULT_TYPEFACE', 'Dash', 'TextAlign', 'create_paint', 'read_opacity', 'read_paints'


if __name__ == '__main__':
	import sys
	del sys.path[0]


import re
import cairo
from enum import Enum
from copy import copy
from collections import namedtuple
from logging import getLogger

if __name__ == '__main__':
	from svgpicture.colors import BLACK, TRANSPARENT, parse_color
	from svgpicture.style import read_url_id
	from svgpicture.units import DEFAULT_PPI, read_number
else:
	from .colors import BLACK, TRANSPARENT, parse_color
	from .style import read_url_id
	from .units import DEFAULT_PPI, read_number


logger = getLogger(__name__)

_re_dash_separators = re.compile(r'[\s,]+')


class TextAlign(Enum):
	LEFT = 'start'
	CENTER = 'middle'
	RIGHT = 'end'


class Typeface(namedtuple('Typeface', 'family weight width slant')):
	"Font request. Weight is in range 100..1000, width (stretch) in range 1..9, slant is a `cairo.FontSlant`."


DEFAULT_TYPEFACE = Typeface('sans-serif', 400, 5, cairo.FontSlant.NORMAL)


class Dash(namedtuple('Dash', 'intervals offset')):
	pass


_line_caps = {
	'butt': cairo.LineCap.BUTT,
	'round': cairo.LineCap.ROUND,
	'square': cairo.LineCap.SQUARE
}

_line_joins = {
	'miter': cairo.LineJoin.MITER,
	'round': cairo.LineJoin.ROUND,
	'bevel': cairo.LineJoin.BEVEL
}

_fill_rules = {
	'nonzero': cairo.FillRule.WINDING,
	'evenodd': cairo.FillRule.EVEN_ODD
}


class Paint:
	"Resolved drawing attributes of a fill or a stroke. Treat as a value: `clone()` before mutating a shared one."

	def __init__(self, is_stroke=False):
		self.antialias = True
		self.is_stroke = is_stroke
		self.color = BLACK
		self.shader = None # gradient descriptor, painted instead of the flat color
		self.stroke_width = 1
		self.miter_limit = 4
		self.line_join = cairo.LineJoin.MITER
		self.line_cap = cairo.LineCap.BUTT
		self.dash = None
		self.fill_rule = cairo.FillRule.WINDING
		self.typeface = None
		self.text_size = 12
		self.text_align = TextAlign.LEFT

	def __repr__(self):
		kind = 'stroke' if self.is_stroke else 'fill'
		return f'<Paint {kind} {self.color}>'

	def clone(self):
		return copy(self)

	def apply(self, ctx, pattern=None):
		"Set the context source and line or fill state from this paint."

		ctx.set_antialias(cairo.Antialias.DEFAULT if self.antialias else cairo.Antialias.NONE)

		if pattern is not None:
			ctx.set_source(pattern)
		else:
			ctx.set_source_rgba(*self.color.rgba())

		if self.is_stroke:
			ctx.set_line_width(self.stroke_width)
			ctx.set_miter_limit(self.miter_limit)
			ctx.set_line_join(self.line_join)
			ctx.set_line_cap(self.line_cap)
			if self.dash is not None and sum(self.dash.intervals) > 0 and all(_d >= 0 for _d in self.dash.intervals):
				ctx.set_dash(self.dash.intervals, self.dash.offset)
			else:
				ctx.set_dash([], 0)
		else:
			ctx.set_fill_rule(self.fill_rule)


def create_paint(is_stroke=False):
	return Paint(is_stroke)


class PaintState(namedtuple('PaintState', 'stroke fill')):
	"Stroke and fill paints in effect for an element, either may be None."

	def clone(self):
		return self.__class__(self.stroke.clone() if self.stroke is not None else None, self.fill.clone() if self.fill is not None else None)


def _log_warning(message, target=None):
	logger.warning(message)


def read_opacity(style, pixels_per_inch=DEFAULT_PPI):
	if 'opacity' in style:
		opacity = read_number(style['opacity'], pixels_per_inch)
	else:
		opacity = 1
	return min(max(0, opacity), 1)


def _has(style, key):
	value = style.get(key, None)
	return value is not None and bool(value.strip())


def _merge_color(paint, color):
	"Opaque colors keep the alpha the paint already has."

	if color.alpha == 255:
		paint.color = color.with_alpha(paint.color.alpha)
	else:
		paint.color = color


def read_paints(style, state, is_group=False, pixels_per_inch=DEFAULT_PPI, gradients=None, emit_warning=_log_warning):
	"""Resolve the stroke and fill paints of an element from its style and the inherited `PaintState`.
	Returns a new `PaintState`; the inherited paints are never modified.

	`gradients` maps definition ids to gradient descriptors: it raises `KeyError` for unknown ids
	and returns None for definitions that are not gradients.
	"""

	stroke_paint, fill_paint = state.clone()

	element_opacity = 1 if is_group else read_opacity(style, pixels_per_inch)

	stroke = style.get('stroke', '').strip()
	if stroke.lower() == 'none':
		stroke_paint = None
	else:
		if stroke:
			if stroke_paint is None:
				stroke_paint = create_paint(True)
			color = parse_color(stroke)
			if color is not None:
				_merge_color(stroke_paint, color)

		has_dasharray = _has(style, 'stroke-dasharray')
		has_width = _has(style, 'stroke-width')
		has_opacity = _has(style, 'stroke-opacity')
		has_linecap = _has(style, 'stroke-linecap')
		has_linejoin = _has(style, 'stroke-linejoin')
		has_miterlimit = _has(style, 'stroke-miterlimit')

		if stroke_paint is None and (has_dasharray or has_width or has_opacity or has_linecap or has_linejoin):
			stroke_paint = create_paint(True)

		if has_dasharray:
			dasharray = style['stroke-dasharray'].strip()
			if dasharray.lower() == 'none':
				stroke_paint.dash = None
			else:
				intervals = [read_number(_d, pixels_per_inch) for _d in _re_dash_separators.split(dasharray) if _d]
				if len(intervals) % 2 == 1:
					intervals = intervals + intervals
				offset = read_number(style.get('stroke-dashoffset', None), pixels_per_inch)
				stroke_paint.dash = Dash(intervals, offset)

		if has_width:
			stroke_paint.stroke_width = read_number(style['stroke-width'], pixels_per_inch)
		elif stroke_paint is not None:
			stroke_paint.stroke_width = 1

		if has_opacity:
			stroke_paint.color = stroke_paint.color.with_alpha(read_number(style['stroke-opacity'], pixels_per_inch) * 255)

		if has_linecap:
			stroke_paint.line_cap = _line_caps.get(style['stroke-linecap'].strip(), stroke_paint.line_cap)

		if has_linejoin:
			stroke_paint.line_join = _line_joins.get(style['stroke-linejoin'].strip(), stroke_paint.line_join)

		if has_miterlimit and stroke_paint is not None:
			stroke_paint.miter_limit = read_number(style['stroke-miterlimit'], pixels_per_inch)

		if stroke_paint is not None:
			stroke_paint.color = stroke_paint.color.with_alpha(stroke_paint.color.alpha * element_opacity)

	fill = style.get('fill', '').strip()
	if fill.lower() == 'none':
		fill_paint = None
	else:
		if fill:
			if fill_paint is None:
				fill_paint = create_paint()

			color = parse_color(fill)
			if color is not None:
				_merge_color(fill_paint, color)
				fill_paint.shader = None
			else:
				shader = None
				id_ = read_url_id(fill)
				if id_ is not None:
					try:
						shader = gradients[id_] if gradients is not None else None
					except KeyError:
						emit_warning(f"Invalid fill url reference: {id_}")

				if shader is not None:
					fill_paint.color = TRANSPARENT
					fill_paint.shader = shader
				else:
					emit_warning(f"Unsupported fill: {fill}")

		if _has(style, 'fill-opacity'):
			if fill_paint is None:
				fill_paint = create_paint()
			fill_paint.color = fill_paint.color.with_alpha(read_number(style['fill-opacity'], pixels_per_inch) * 255)

		if _has(style, 'fill-rule') and fill_paint is not None:
			fill_paint.fill_rule = _fill_rules.get(style['fill-rule'].strip(), fill_paint.fill_rule)

		if fill_paint is not None:
			fill_paint.color = fill_paint.color.with_alpha(fill_paint.color.alpha * element_opacity)

	return PaintState(stroke_paint, fill_paint)


if __debug__ and __name__ == '__main__':
	print("paint")

	root = PaintState(None, create_paint())
	state = read_paints({'fill': 'red', 'stroke-width': '2', 'opacity': '0.5'}, root)
	assert state.fill.color == (255, 0, 0, 127)
	assert state.stroke.stroke_width == 2 and state.stroke.color.alpha == 127
	assert root.fill.color == BLACK

	group = read_paints({'fill': 'red', 'opacity': '0.5'}, root, is_group=True)
	assert group.fill.color.alpha == 255
