#!/usr/bin/python3
#-*- coding:utf-8 -*-


__all__ = 'compose', 'identity', 'translation', 'scaling', 'rotation', 'is_invertible'


if __name__ == '__main__':
	import sys
	del sys.path[0]


import re
import math
import cairo
from logging import getLogger

if __name__ == '__main__':
	from svgpicture.units import DEFAULT_PPI, read_number
else:
	from .units import DEFAULT_PPI, read_number


logger = getLogger(__name__)

_re_separators = re.compile(r'[(,\s]+')


def identity():
	return cairo.Matrix()


def translation(x, y):
	return cairo.Matrix(1, 0, 0, 1, x, y)


def scaling(sx, sy):
	return cairo.Matrix(sx, 0, 0, sy, 0, 0)


def rotation(degrees):
	m = cairo.Matrix()
	m.rotate(math.radians(degrees))
	return m


def is_invertible(m):
	return m.xx * m.yy - m.yx * m.xy != 0


def _log_warning(message, target=None):
	logger.warning(message)


def compose(raw, pixels_per_inch=DEFAULT_PPI, emit_warning=_log_warning):
	"""Compose an SVG transform list into one matrix. Calls are concatenated in document order,
	so the rightmost call is applied to points first."""

	t = identity()

	if raw is None or not raw.strip():
		return t

	for call in raw.strip().split(')'):
		args = [_a for _a in _re_separators.split(call) if _a]
		if not args:
			continue

		name = args[0]
		values = [read_number(_a, pixels_per_inch) for _a in args[1:]]
		nt = identity()

		if name == 'matrix':
			if len(values) == 6:
				nt = cairo.Matrix(*values)
			else:
				emit_warning(f"Matrices are expected to have 6 elements, this one has {len(values)}.")

		elif name == 'translate':
			if len(values) >= 2:
				nt = translation(values[0], values[1])
			elif len(values) == 1:
				nt = translation(values[0], 0)

		elif name == 'scale':
			if len(values) >= 2:
				nt = scaling(values[0], values[1])
			elif len(values) == 1:
				nt = scaling(values[0], values[0])

		elif name == 'rotate':
			if len(values) >= 3:
				x, y = values[1], values[2]
				nt = translation(-x, -y) * rotation(values[0]) * translation(x, y)
			elif len(values) >= 1:
				nt = rotation(values[0])
			else:
				emit_warning(f"Rotation without an angle: {call.strip()})")

		elif name == 'skewX' and values:
			nt = cairo.Matrix(1, 0, math.tan(math.radians(values[0])), 1, 0, 0)

		elif name == 'skewY' and values:
			nt = cairo.Matrix(1, math.tan(math.radians(values[0])), 0, 1, 0, 0)

		else:
			emit_warning(f"Can't transform {name}.")

		t = nt * t

	return t


if __debug__ and __name__ == '__main__':
	print("transform")

	m = compose('translate(10,20) scale(2)')
	assert m.transform_point(0, 0) == (10, 20)
	assert m.transform_point(1, 0) == (12, 20)
