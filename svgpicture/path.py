#!/usr/bin/python3
#-*- coding:utf-8 -*-


__all__ = 'Path', 'parse_path_data'


if __name__ == '__main__':
	import sys
	del sys.path[0]


import re
import math
import cairo
from logging import getLogger

if __name__ == '__main__':
	from svgpicture.units import _p_number
else:
	from .units import _p_number


logger = getLogger(__name__)

KAPPA = 0.5522847498307936 # control point distance of a quarter circle approximated with a cubic curve


def _angle_between(ux, uy, vx, vy):
	return math.atan2(ux * vy - uy * vx, ux * vx + uy * vy)


class Path:
	"Device-independent path geometry. Segments have the same shape as items of `cairo.Path`: (type, points)."

	def __init__(self):
		self.segments = []
		self.__start = None
		self.__current = None

	def __iter__(self):
		return iter(self.segments)

	def __len__(self):
		return len(self.segments)

	def __repr__(self):
		return f'<Path {len(self.segments)} segments>'

	@property
	def is_empty(self):
		return not any(_type != cairo.PATH_MOVE_TO for (_type, _points) in self.segments)

	@property
	def current_point(self):
		return self.__current

	def move_to(self, x, y):
		self.segments.append((cairo.PATH_MOVE_TO, (x, y)))
		self.__start = self.__current = (x, y)

	def line_to(self, x, y):
		if self.__current is None:
			self.move_to(x, y)
			return
		self.segments.append((cairo.PATH_LINE_TO, (x, y)))
		self.__current = (x, y)

	def curve_to(self, x1, y1, x2, y2, x3, y3):
		if self.__current is None:
			self.move_to(x1, y1)
		self.segments.append((cairo.PATH_CURVE_TO, (x1, y1, x2, y2, x3, y3)))
		self.__current = (x3, y3)

	def quad_to(self, x1, y1, x2, y2):
		x0, y0 = self.__current if self.__current is not None else (x1, y1)
		self.curve_to(x0 + 2 / 3 * (x1 - x0), y0 + 2 / 3 * (y1 - y0), x2 + 2 / 3 * (x1 - x2), y2 + 2 / 3 * (y1 - y2), x2, y2)

	def arc_to(self, rx, ry, x_axis_rotation, large_arc, sweep, x, y):
		"SVG elliptical arc from the current point to (x, y), approximated with cubic curves of at most 90 degrees."

		if self.__current is None:
			self.move_to(0, 0)

		x0, y0 = self.__current
		if (x0, y0) == (x, y):
			return

		rx, ry = abs(rx), abs(ry)
		if rx == 0 or ry == 0:
			self.line_to(x, y)
			return

		phi = math.radians(x_axis_rotation)
		cos_phi, sin_phi = math.cos(phi), math.sin(phi)

		dx2 = (x0 - x) / 2
		dy2 = (y0 - y) / 2
		x1 = cos_phi * dx2 + sin_phi * dy2
		y1 = -sin_phi * dx2 + cos_phi * dy2

		s = (x1 / rx)**2 + (y1 / ry)**2
		if s > 1: # radii too small to reach the endpoint
			s = math.sqrt(s)
			rx *= s
			ry *= s

		den = (rx * y1)**2 + (ry * x1)**2
		sq = math.sqrt(max(0, ((rx * ry)**2 - den) / den)) if den else 0
		if large_arc == sweep:
			sq = -sq
		cxp = sq * rx * y1 / ry
		cyp = -sq * ry * x1 / rx

		cx = cos_phi * cxp - sin_phi * cyp + (x0 + x) / 2
		cy = sin_phi * cxp + cos_phi * cyp + (y0 + y) / 2

		ux, uy = (x1 - cxp) / rx, (y1 - cyp) / ry
		vx, vy = (-x1 - cxp) / rx, (-y1 - cyp) / ry
		eta = _angle_between(1, 0, ux, uy)
		eta_delta = math.fmod(_angle_between(ux, uy, vx, vy), 2 * math.pi)
		if not sweep and eta_delta > 0:
			eta_delta -= 2 * math.pi
		elif sweep and eta_delta < 0:
			eta_delta += 2 * math.pi

		def point(a):
			ex, ey = rx * math.cos(a), ry * math.sin(a)
			return cos_phi * ex - sin_phi * ey + cx, sin_phi * ex + cos_phi * ey + cy

		def derivative(a):
			ex, ey = -rx * math.sin(a), ry * math.cos(a)
			return cos_phi * ex - sin_phi * ey, sin_phi * ex + cos_phi * ey

		count = max(1, math.ceil(abs(eta_delta) / (math.pi / 2) - 1e-9))
		step = eta_delta / count
		for n in range(count):
			eta_1 = eta + n * step
			eta_2 = eta_1 + step
			alpha = math.sin(step) * (math.sqrt(4 + 3 * math.tan(step / 2)**2) - 1) / 3
			px0, py0 = point(eta_1)
			px3, py3 = point(eta_2) if n < count - 1 else (x, y)
			dx1, dy1 = derivative(eta_1)
			dx2, dy2 = derivative(eta_2)
			self.curve_to(px0 + alpha * dx1, py0 + alpha * dy1, px3 - alpha * dx2, py3 - alpha * dy2, px3, py3)

	def close_path(self):
		if self.__current is None:
			return
		self.segments.append((cairo.PATH_CLOSE_PATH, ()))
		self.__current = self.__start

	def add_rect(self, left, top, right, bottom):
		self.move_to(left, top)
		self.line_to(right, top)
		self.line_to(right, bottom)
		self.line_to(left, bottom)
		self.close_path()

	def add_rounded_rect(self, left, top, right, bottom, rx, ry):
		rx = max(0, min(rx, (right - left) / 2))
		ry = max(0, min(ry, (bottom - top) / 2))
		if not rx or not ry:
			self.add_rect(left, top, right, bottom)
			return

		kx = rx * KAPPA
		ky = ry * KAPPA
		self.move_to(left + rx, top)
		self.line_to(right - rx, top)
		self.curve_to(right - rx + kx, top, right, top + ry - ky, right, top + ry)
		self.line_to(right, bottom - ry)
		self.curve_to(right, bottom - ry + ky, right - rx + kx, bottom, right - rx, bottom)
		self.line_to(left + rx, bottom)
		self.curve_to(left + rx - kx, bottom, left, bottom - ry + ky, left, bottom - ry)
		self.line_to(left, top + ry)
		self.curve_to(left, top + ry - ky, left + rx - kx, top, left + rx, top)
		self.close_path()

	def add_oval(self, left, top, right, bottom):
		cx = (left + right) / 2
		cy = (top + bottom) / 2
		kx = (right - left) / 2 * KAPPA
		ky = (bottom - top) / 2 * KAPPA
		self.move_to(right, cy)
		self.curve_to(right, cy + ky, cx + kx, bottom, cx, bottom)
		self.curve_to(cx - kx, bottom, left, cy + ky, left, cy)
		self.curve_to(left, cy - ky, cx - kx, top, cx, top)
		self.curve_to(cx + kx, top, right, cy - ky, right, cy)
		self.close_path()

	def add_circle(self, cx, cy, r):
		self.add_oval(cx - r, cy - r, cx + r, cy + r)

	def add_path(self, other):
		for type_, points in other.segments:
			if type_ == cairo.PATH_MOVE_TO:
				self.move_to(*points)
			elif type_ == cairo.PATH_LINE_TO:
				self.line_to(*points)
			elif type_ == cairo.PATH_CURVE_TO:
				self.curve_to(*points)
			elif type_ == cairo.PATH_CLOSE_PATH:
				self.close_path()

	def extents(self):
		"Bounding box of all points, control points included, as (x1, y1, x2, y2)."

		xs = []
		ys = []
		for type_, points in self.segments:
			xs.extend(points[0::2])
			ys.extend(points[1::2])
		if not xs:
			return 0, 0, 0, 0
		return min(xs), min(ys), max(xs), max(ys)

	def replay(self, ctx):
		"Append this path to the current path of a cairo context."

		for type_, points in self.segments:
			if type_ == cairo.PATH_MOVE_TO:
				ctx.move_to(*points)
			elif type_ == cairo.PATH_LINE_TO:
				ctx.line_to(*points)
			elif type_ == cairo.PATH_CURVE_TO:
				ctx.curve_to(*points)
			elif type_ == cairo.PATH_CLOSE_PATH:
				ctx.close_path()


class _PathDataReader:
	__re_skip = re.compile(r'[\s,]*')
	__re_command = re.compile(r'[MmLlHhVvCcSsQqTtAaZz]')
	__re_number = re.compile(_p_number)
	__re_flag = re.compile(r'[01]')

	def __init__(self, text):
		self.text = text
		self.pos = 0

	def __skip(self):
		self.pos = self.__re_skip.match(self.text, self.pos).end()

	def at_end(self):
		self.__skip()
		return self.pos >= len(self.text)

	def command(self):
		self.__skip()
		m = self.__re_command.match(self.text, self.pos)
		if not m:
			return None
		self.pos = m.end()
		return m.group()

	def has_number(self):
		self.__skip()
		return self.__re_number.match(self.text, self.pos) is not None

	def number(self):
		self.__skip()
		m = self.__re_number.match(self.text, self.pos)
		if not m:
			raise ValueError(f"Number expected at position {self.pos}.")
		self.pos = m.end()
		return float(m.group())

	def flag(self):
		self.__skip()
		m = self.__re_flag.match(self.text, self.pos)
		if not m:
			raise ValueError(f"Flag expected at position {self.pos}.")
		self.pos = m.end()
		return m.group() == '1'


def parse_path_data(text):
	"""Build a path from SVG path data (the `d` attribute). Parsing stops at the first malformed token;
	the geometry read up to that point is kept."""

	path = Path()
	reader = _PathDataReader(text or '')

	command = None
	cubic_control = None # second control point of the previous C/S command
	quad_control = None # control point of the previous Q/T command

	try:
		while not reader.at_end():
			c = reader.command()
			if c is None:
				if command is None or command in 'Zz' or not reader.has_number():
					raise ValueError(f"Command expected at position {reader.pos}.")
				c = {'M': 'L', 'm': 'l'}.get(command, command)

			cx, cy = path.current_point if path.current_point is not None else (0, 0)
			relative = c.islower()
			ox, oy = (cx, cy) if relative else (0, 0)
			upper = c.upper()
			next_cubic = None
			next_quad = None

			if upper == 'M':
				x, y = reader.number() + ox, reader.number() + oy
				path.move_to(x, y)

			elif upper == 'L':
				x, y = reader.number() + ox, reader.number() + oy
				path.line_to(x, y)

			elif upper == 'H':
				x = reader.number() + ox
				path.line_to(x, cy)

			elif upper == 'V':
				y = reader.number() + oy
				path.line_to(cx, y)

			elif upper == 'C':
				x1, y1 = reader.number() + ox, reader.number() + oy
				x2, y2 = reader.number() + ox, reader.number() + oy
				x, y = reader.number() + ox, reader.number() + oy
				path.curve_to(x1, y1, x2, y2, x, y)
				next_cubic = x2, y2

			elif upper == 'S':
				if cubic_control is not None:
					x1, y1 = 2 * cx - cubic_control[0], 2 * cy - cubic_control[1]
				else:
					x1, y1 = cx, cy
				x2, y2 = reader.number() + ox, reader.number() + oy
				x, y = reader.number() + ox, reader.number() + oy
				path.curve_to(x1, y1, x2, y2, x, y)
				next_cubic = x2, y2

			elif upper == 'Q':
				x1, y1 = reader.number() + ox, reader.number() + oy
				x, y = reader.number() + ox, reader.number() + oy
				path.quad_to(x1, y1, x, y)
				next_quad = x1, y1

			elif upper == 'T':
				if quad_control is not None:
					x1, y1 = 2 * cx - quad_control[0], 2 * cy - quad_control[1]
				else:
					x1, y1 = cx, cy
				x, y = reader.number() + ox, reader.number() + oy
				path.quad_to(x1, y1, x, y)
				next_quad = x1, y1

			elif upper == 'A':
				rx, ry = reader.number(), reader.number()
				angle = reader.number()
				large_arc, sweep = reader.flag(), reader.flag()
				x, y = reader.number() + ox, reader.number() + oy
				path.arc_to(rx, ry, angle, large_arc, sweep, x, y)

			elif upper == 'Z':
				path.close_path()

			command = c
			cubic_control = next_cubic
			quad_control = next_quad

	except ValueError as error:
		logger.debug(f"Path data parsing stopped: {error}")

	return path


if __debug__ and __name__ == '__main__':
	print("path")

	p = parse_path_data('M 10 10 20 20 h 5 v 5 z')
	assert [_t for (_t, _) in p] == [cairo.PATH_MOVE_TO, cairo.PATH_LINE_TO, cairo.PATH_LINE_TO, cairo.PATH_LINE_TO, cairo.PATH_CLOSE_PATH]
	assert p.current_point == (10, 10)

	p = parse_path_data('M0,0 A10,10 0 0,1 20,0')
	assert p.current_point == (20, 0)

	p = parse_path_data('M0 0 L10 10 L oops')
	assert len(p) == 2
