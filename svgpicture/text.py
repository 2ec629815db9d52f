#!/usr/bin/python3
#-*- coding:utf-8 -*-


__all__ = 'Text', 'TextSpan', 'read_text', 'read_text_spans', 'read_font_attributes', 'read_text_alignment', 'read_baseline_shift', 'measure_text_width', 'draw_text', 'import_pango'


if __name__ == '__main__':
	import sys
	del sys.path[0]


import re
import cairo
from collections import namedtuple

if __name__ == '__main__':
	from svgpicture.element import is_element, local_name
	from svgpicture.paint import DEFAULT_TYPEFACE, TextAlign, Typeface
	from svgpicture.style import read_style, read_style_value
	from svgpicture.units import DEFAULT_PPI, read_number, read_optional_number
else:
	from .element import is_element, local_name
	from .paint import DEFAULT_TYPEFACE, TextAlign, Typeface
	from .style import read_style, read_style_value
	from .units import DEFAULT_PPI, read_number, read_optional_number


Pango = PangoCairo = None


def import_pango():
	"Load Pango and PangoCairo through PyGObject. Needed for non-Latin scripts."

	global Pango, PangoCairo
	if Pango is None:
		import gi
		gi.require_version('Pango', '1.0')
		gi.require_version('PangoCairo', '1.0')
		from gi.repository import Pango, PangoCairo


_re_whitespace = re.compile(r'\s{2,}')
_re_line_breaks = re.compile(r'[\n\r]+')

_font_weights = {
	'normal': 400,
	'bold': 700
}

_font_widths = {
	'ultra-condensed': 1,
	'extra-condensed': 2,
	'condensed': 3,
	'semi-condensed': 4,
	'normal': 5,
	'semi-expanded': 6,
	'expanded': 7,
	'extra-expanded': 8,
	'ultra-expanded': 9
}

_font_slants = {
	'normal': cairo.FontSlant.NORMAL,
	'italic': cairo.FontSlant.ITALIC,
	'oblique': cairo.FontSlant.OBLIQUE
}


class TextSpan(namedtuple('TextSpan', 'text fill stroke x y baseline_shift')):
	"One run of text. `x` and `y` are None unless the run moves the cursor."


class Text:
	"Text runs of one `text` element, sharing the element position and alignment."

	def __init__(self, x, y, text_align):
		self.x = x
		self.y = y
		self.text_align = text_align
		self.spans = []

	def __repr__(self):
		return f'<Text at ({self.x}, {self.y}) {self.text_align.name} {len(self.spans)} spans>'

	def __len__(self):
		return len(self.spans)

	def __iter__(self):
		return iter(self.spans)

	def append(self, span):
		self.spans.append(span)


def read_text_alignment(node):
	anchor = read_style_value(node, 'text-anchor')
	if anchor is not None:
		anchor = anchor.strip()
	if anchor == 'end':
		return TextAlign.RIGHT
	elif anchor == 'middle':
		return TextAlign.CENTER
	else:
		return TextAlign.LEFT


def read_baseline_shift(node, pixels_per_inch=DEFAULT_PPI):
	return read_number(read_style_value(node, 'baseline-shift'), pixels_per_inch)


def _first_family(raw):
	family = raw.split(',')[0].strip()
	if family and family[0] in '\'\"':
		family = family[1:]
	if family and family[-1] in '\'\"':
		family = family[:-1]
	return family.strip()


def _read_font_weight(style, default):
	value = style.get('font-weight', '').strip()
	if not value:
		return default

	try:
		weight = int(value)
	except ValueError:
		if value in _font_weights:
			weight = _font_weights[value]
		elif value == 'bolder':
			weight = default + 100
		elif value == 'lighter':
			weight = default - 100
		else:
			weight = default

	return min(max(100, weight), 1000)


def _read_font_width(style, default):
	value = style.get('font-stretch', '').strip()
	if not value:
		return default

	try:
		width = int(value)
	except ValueError:
		if value in _font_widths:
			width = _font_widths[value]
		elif value == 'wider':
			width = default + 1
		elif value == 'narrower':
			width = default - 1
		else:
			width = default

	return min(max(1, width), 9)


def _read_font_slant(style, default):
	value = style.get('font-style', '').strip()
	return _font_slants.get(value, default)


def read_font_attributes(node, paint, pixels_per_inch=DEFAULT_PPI):
	"Merge the font properties of the node onto the paint typeface and text size."

	style = read_style(node)
	base = paint.typeface if paint.typeface is not None else DEFAULT_TYPEFACE

	family = style.get('font-family', '')
	if family.strip():
		family = _first_family(family) or base.family
	else:
		family = base.family

	paint.typeface = Typeface(family, _read_font_weight(style, base.weight), _read_font_width(style, base.width), _read_font_slant(style, base.slant))

	size = style.get('font-size', '')
	if size.strip():
		paint.text_size = read_number(size, pixels_per_inch)


def _text_nodes(node):
	"Text content and child elements of the node, in document order."

	if node.text:
		yield node.text
	for child in node:
		if is_element(child):
			yield child
		if child.tail:
			yield child.tail


def read_text_spans(node, x, y, text_align, baseline_shift, stroke, fill, pixels_per_inch=DEFAULT_PPI):
	spans = Text(x, y, text_align)

	current_baseline_shift = baseline_shift
	for paint in (stroke, fill):
		if paint is not None:
			paint.text_align = TextAlign.LEFT # alignment is applied once for the whole element

	nodes = list(_text_nodes(node))
	for n, item in enumerate(nodes):
		is_first = (n == 0)
		is_last = (n == len(nodes) - 1)

		if isinstance(item, str):
			segments = [_s for _s in _re_line_breaks.split(item) if _s]
			if not segments:
				continue
			if is_first:
				segments[0] = segments[0].lstrip()
			if is_last:
				segments[-1] = segments[-1].rstrip()
			text = _re_whitespace.sub(' ', ''.join(segments))
			if text:
				spans.append(TextSpan(text, fill.clone() if fill is not None else None, stroke.clone() if stroke is not None else None, None, None, current_baseline_shift))

		elif local_name(item) == 'tspan':
			span_x = read_optional_number(item.attrib.get('x', None), pixels_per_inch)
			span_y = read_optional_number(item.attrib.get('y', None), pixels_per_inch)
			text = ''.join(item.itertext())

			span_fill = fill.clone() if fill is not None else None
			span_stroke = stroke.clone() if stroke is not None else None
			for paint in (span_stroke, span_fill):
				if paint is not None:
					read_font_attributes(item, paint, pixels_per_inch)

			# text-anchor is taken from the enclosing text element only
			current_baseline_shift = read_baseline_shift(item, pixels_per_inch)

			spans.append(TextSpan(text, span_fill, span_stroke, span_x, span_y, current_baseline_shift))

	return spans


def read_text(node, state, pixels_per_inch=DEFAULT_PPI):
	"Build the text runs of a `text` element from the inherited paints. The paints in `state` are not modified."

	x = read_number(node.attrib.get('x', None), pixels_per_inch)
	y = read_number(node.attrib.get('y', None), pixels_per_inch)
	text_align = read_text_alignment(node)
	baseline_shift = read_baseline_shift(node, pixels_per_inch)

	stroke, fill = state.clone()
	for paint in (stroke, fill):
		if paint is not None:
			read_font_attributes(node, paint, pixels_per_inch)

	return read_text_spans(node, x, y, text_align, baseline_shift, stroke, fill, pixels_per_inch)


def _select_font(ctx, paint, pango_layout):
	typeface = paint.typeface if paint.typeface is not None else DEFAULT_TYPEFACE

	if pango_layout is not None:
		font = Pango.FontDescription()
		font.set_family(typeface.family)
		font.set_weight(typeface.weight)
		font.set_stretch(Pango.Stretch(typeface.width - 1))
		if typeface.slant == cairo.FontSlant.ITALIC:
			font.set_style(Pango.Style.ITALIC)
		elif typeface.slant == cairo.FontSlant.OBLIQUE:
			font.set_style(Pango.Style.OBLIQUE)
		else:
			font.set_style(Pango.Style.NORMAL)
		font.set_absolute_size(paint.text_size * Pango.SCALE)
		pango_layout.set_font_description(font)
	else:
		weight = cairo.FontWeight.BOLD if typeface.weight > 500 else cairo.FontWeight.NORMAL
		ctx.select_font_face(typeface.family, typeface.slant, weight)
		ctx.set_font_size(paint.text_size)


def _measure(ctx, txt, pango_layout):
	if pango_layout is not None:
		pango_layout.set_text(txt, -1)
		PangoCairo.update_context(ctx, pango_layout.get_context())
		pango_layout.context_changed()
		return pango_layout.get_extents()[1].width / Pango.SCALE
	else:
		return ctx.text_extents(txt).x_advance


def _text_path(ctx, txt, pango_layout):
	if pango_layout is not None:
		ctx.rel_move_to(0, -pango_layout.get_baseline() / Pango.SCALE)
		pango_layout.set_text(txt, -1)
		PangoCairo.update_context(ctx, pango_layout.get_context())
		pango_layout.context_changed()
		PangoCairo.layout_path(ctx, pango_layout)
	else:
		ctx.text_path(txt)


def measure_text_width(ctx, text, pango_layout=None):
	width = 0
	for span in text:
		paint = span.fill if span.fill is not None else span.stroke
		if paint is None or paint.text_size <= 0:
			continue
		_select_font(ctx, paint, pango_layout)
		width += _measure(ctx, span.text, pango_layout)
	return width


def draw_text(ctx, text, fill_pattern=None, use_pango=False):
	"""Draw the runs left to right from the element position, shifted by the element alignment.
	Each run is filled, then stroked."""

	if use_pango:
		import_pango()
		pango_layout = PangoCairo.create_layout(ctx)
	else:
		pango_layout = None

	x, y = text.x, text.y

	total_width = measure_text_width(ctx, text, pango_layout)
	if text.text_align == TextAlign.CENTER:
		x -= total_width / 2
	elif text.text_align == TextAlign.RIGHT:
		x -= total_width

	for span in text:
		if span.x is not None:
			x = span.x
		if span.y is not None:
			y = span.y

		font_paint = span.fill if span.fill is not None else span.stroke
		if font_paint is None or font_paint.text_size <= 0:
			continue

		_select_font(ctx, font_paint, pango_layout)
		span_width = _measure(ctx, span.text, pango_layout)

		if span.fill is not None:
			ctx.new_path()
			ctx.move_to(x, y - span.baseline_shift)
			_text_path(ctx, span.text, pango_layout)
			span.fill.apply(ctx, fill_pattern if span.fill.shader is not None else None)
			ctx.fill()

		if span.stroke is not None:
			_select_font(ctx, span.stroke, pango_layout)
			ctx.new_path()
			ctx.move_to(x, y - span.baseline_shift)
			_text_path(ctx, span.text, pango_layout)
			span.stroke.apply(ctx)
			ctx.stroke()

		x += span_width

	ctx.new_path()


if __debug__ and __name__ == '__main__':
	from lxml.etree import fromstring
	from svgpicture.paint import PaintState, create_paint

	print("text")

	node = fromstring('<text x="10" y="20" text-anchor="middle">\n   Hello   <tspan font-weight="bold" baseline-shift="3">world</tspan>\n</text>')
	spans = read_text(node, PaintState(None, create_paint()))
	assert spans.text_align == TextAlign.CENTER
	assert [_s.text for _s in spans] == ['Hello ', 'world']
	assert spans.spans[1].fill.typeface.weight == 700
	assert spans.spans[1].baseline_shift == 3
