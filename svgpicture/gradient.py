#!/usr/bin/python3
#-*- coding:utf-8 -*-


__all__ = 'LinearGradient', 'RadialGradient', 'GradientCache', 'read_stops', 'read_linear_gradient', 'read_radial_gradient'


if __name__ == '__main__':
	import sys
	del sys.path[0]


import cairo
from collections import namedtuple
from logging import getLogger

if __name__ == '__main__':
	from svgpicture.colors import BLACK, parse_color
	from svgpicture.element import is_element, local_name
	from svgpicture.style import read_style
	from svgpicture.transform import compose
	from svgpicture.units import DEFAULT_PPI, read_number
else:
	from .colors import BLACK, parse_color
	from .element import is_element, local_name
	from .style import read_style
	from .transform import compose
	from .units import DEFAULT_PPI, read_number


logger = getLogger(__name__)


_spread_methods = {
	'pad': cairo.Extend.PAD,
	'reflect': cairo.Extend.REFLECT,
	'repeat': cairo.Extend.REPEAT
}


def _log_warning(message, target=None):
	logger.warning(message)


def _number(node, key, default, pixels_per_inch):
	if key in node.attrib:
		return read_number(node.attrib[key], pixels_per_inch)
	else:
		return default


def read_stops(node, pixels_per_inch=DEFAULT_PPI):
	"List of (offset, color) pairs sorted by offset. A later stop with the same offset replaces the earlier one."

	stops = {}
	for child in node:
		if not is_element(child) or local_name(child) != 'stop':
			continue

		style = read_style(child)
		offset = read_number(style.get('offset', None), pixels_per_inch)

		color = BLACK
		if 'stop-color' in style:
			color = parse_color(style['stop-color']) or BLACK

		alpha = 255
		if 'stop-opacity' in style:
			alpha = read_number(style['stop-opacity'], pixels_per_inch) * 255

		stops[offset] = color.with_alpha(alpha)

	return sorted(stops.items())


class _Gradient:
	def _finish_pattern(self, pattern):
		for offset, color in self.stops:
			pattern.add_color_stop_rgba(offset, *color.rgba())
		pattern.set_extend(self.spread)

		if self.transform is not None:
			matrix = cairo.Matrix(*self.transform)
			try:
				matrix.invert()
			except cairo.Error:
				logger.debug(f"Singular gradient transform ignored: {self.transform}")
			else:
				pattern.set_matrix(matrix)

		return pattern


class LinearGradient(_Gradient, namedtuple('LinearGradient', 'x1 y1 x2 y2 stops spread absolute transform')):
	"""Linear gradient descriptor. Unless `absolute` (gradientUnits="userSpaceOnUse") is set,
	coordinates are fractions of the target box."""

	def start_point(self, x, y, width, height):
		if self.absolute:
			return self.x1, self.y1
		return x + self.x1 * width, y + self.y1 * height

	def end_point(self, x, y, width, height):
		if self.absolute:
			return self.x2, self.y2
		return x + self.x2 * width, y + self.y2 * height

	def create_pattern(self, x, y, width, height):
		pattern = cairo.LinearGradient(*self.start_point(x, y, width, height), *self.end_point(x, y, width, height))
		return self._finish_pattern(pattern)


class RadialGradient(_Gradient, namedtuple('RadialGradient', 'cx cy r fx fy stops spread absolute transform')):
	"Radial gradient descriptor. The fractional radius is scaled by the mean of the target width and height."

	def center_point(self, x, y, width, height):
		if self.absolute:
			return self.cx, self.cy
		return x + self.cx * width, y + self.cy * height

	def focal_point(self, x, y, width, height):
		if self.absolute:
			return self.fx, self.fy
		return x + self.fx * width, y + self.fy * height

	def radius(self, width, height):
		if self.absolute:
			return self.r
		return self.r * (width + height) / 2

	def create_pattern(self, x, y, width, height):
		cx, cy = self.center_point(x, y, width, height)
		fx, fy = self.focal_point(x, y, width, height)
		pattern = cairo.RadialGradient(fx, fy, 0, cx, cy, self.radius(width, height))
		return self._finish_pattern(pattern)


def _read_common(node, pixels_per_inch, emit_warning):
	spread = _spread_methods.get(node.attrib.get('spreadMethod', 'pad'), cairo.Extend.PAD)
	absolute = node.attrib.get('gradientUnits', None) == 'userSpaceOnUse'
	raw_transform = node.attrib.get('gradientTransform', None)
	if raw_transform is not None and raw_transform.strip():
		m = compose(raw_transform, pixels_per_inch, emit_warning)
		transform = m.xx, m.yx, m.xy, m.yy, m.x0, m.y0
	else:
		transform = None
	return read_stops(node, pixels_per_inch), spread, absolute, transform


def read_linear_gradient(node, pixels_per_inch=DEFAULT_PPI, emit_warning=_log_warning):
	x1 = _number(node, 'x1', 0, pixels_per_inch)
	y1 = _number(node, 'y1', 0, pixels_per_inch)
	x2 = _number(node, 'x2', 1, pixels_per_inch)
	y2 = _number(node, 'y2', 0, pixels_per_inch)
	return LinearGradient(x1, y1, x2, y2, *_read_common(node, pixels_per_inch, emit_warning))


def read_radial_gradient(node, pixels_per_inch=DEFAULT_PPI, emit_warning=_log_warning):
	cx = _number(node, 'cx', 0.5, pixels_per_inch)
	cy = _number(node, 'cy', 0.5, pixels_per_inch)
	r = _number(node, 'r', 0.5, pixels_per_inch)
	fx = _number(node, 'fx', cx, pixels_per_inch)
	fy = _number(node, 'fy', cy, pixels_per_inch)
	return RadialGradient(cx, cy, r, fx, fy, *_read_common(node, pixels_per_inch, emit_warning))


class GradientCache:
	"""Gradient descriptors by definition id, built on first use. Lookup of an id missing from the definitions
	raises `KeyError`; definitions that are not gradients yield None."""

	def __init__(self, definitions, pixels_per_inch=DEFAULT_PPI, emit_warning=_log_warning):
		self.definitions = definitions
		self.pixels_per_inch = pixels_per_inch
		self.emit_warning = emit_warning
		self.__cache = {}

	def __getitem__(self, id_):
		try:
			return self.__cache[id_]
		except KeyError:
			pass

		definition = self.definitions[id_]
		kind = local_name(definition).lower()
		if kind == 'lineargradient':
			gradient = read_linear_gradient(definition, self.pixels_per_inch, self.emit_warning)
		elif kind == 'radialgradient':
			gradient = read_radial_gradient(definition, self.pixels_per_inch, self.emit_warning)
		else:
			gradient = None

		self.__cache[id_] = gradient
		return gradient

	def __len__(self):
		return len(self.__cache)

	def clear(self):
		self.__cache.clear()


if __debug__ and __name__ == '__main__':
	from lxml.etree import fromstring

	print("gradient")

	g = read_linear_gradient(fromstring('<linearGradient><stop offset="1" stop-color="red"/><stop offset="0" stop-color="blue" stop-opacity="0.5"/></linearGradient>'))
	assert [_o for (_o, _c) in g.stops] == [0, 1]
	assert g.stops[0][1] == (0, 0, 255, 127)
	assert g.end_point(10, 10, 100, 50) == (110, 10)
