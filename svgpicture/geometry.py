#!/usr/bin/python3
#-*- coding:utf-8 -*-


__all__ = 'read_geometry',


if __name__ == '__main__':
	import sys
	del sys.path[0]


if __name__ == '__main__':
	from svgpicture.element import ElementKind
	from svgpicture.path import Path, parse_path_data
	from svgpicture.units import DEFAULT_PPI, read_number, read_optional_number
else:
	from .element import ElementKind
	from .path import Path, parse_path_data
	from .units import DEFAULT_PPI, read_number, read_optional_number


def read_geometry(node, pixels_per_inch=DEFAULT_PPI):
	"Path geometry of a shape element. Returns None if the element is not a shape."

	kind = ElementKind.of(node)

	def number(key):
		return read_number(node.attrib.get(key, None), pixels_per_inch)

	if kind == ElementKind.RECT:
		x, y = number('x'), number('y')
		width, height = number('width'), number('height')
		rx = read_optional_number(node.attrib.get('rx', None), pixels_per_inch)
		ry = read_optional_number(node.attrib.get('ry', None), pixels_per_inch)
		rx, ry = (rx if rx is not None else ry) or 0, (ry if ry is not None else rx) or 0
		path = Path()
		if rx > 0 or ry > 0:
			path.add_rounded_rect(x, y, x + width, y + height, rx, ry)
		else:
			path.add_rect(x, y, x + width, y + height)
		return path

	elif kind == ElementKind.ELLIPSE:
		cx, cy = number('cx'), number('cy')
		rx, ry = number('rx'), number('ry')
		path = Path()
		path.add_oval(cx - rx, cy - ry, cx + rx, cy + ry)
		return path

	elif kind == ElementKind.CIRCLE:
		path = Path()
		path.add_circle(number('cx'), number('cy'), number('r'))
		return path

	elif kind == ElementKind.PATH:
		d = node.attrib.get('d', None)
		if d is None or not d.strip():
			return Path()
		return parse_path_data(d)

	elif kind in (ElementKind.POLYGON, ElementKind.POLYLINE):
		points = node.attrib.get('points', None)
		if points is None or not points.strip():
			return Path()
		d = 'M' + points
		if kind == ElementKind.POLYGON:
			d += ' Z'
		return parse_path_data(d)

	elif kind == ElementKind.LINE:
		path = Path()
		path.move_to(number('x1'), number('y1'))
		path.line_to(number('x2'), number('y2'))
		return path

	else:
		return None


if __debug__ and __name__ == '__main__':
	from lxml.etree import fromstring

	print("geometry")

	assert read_geometry(fromstring('<rect x="1" y="2" width="3" height="4"/>')).extents() == (1, 2, 4, 6)
	assert read_geometry(fromstring('<g/>')) is None
	assert read_geometry(fromstring('<polygon points="0,0 10,0 10,10"/>')).current_point == (0, 0)
