#!/usr/bin/python3
#-*- coding:utf-8 -*-


__all__ = 'DEFAULT_PPI', 'Rect', 'Size', 'read_number', 'read_optional_number', 'read_rectangle', 'unit_factor'


import re
from collections import namedtuple


DEFAULT_PPI = 160

_p_number = r'[+-]?(?:\d+\.?\d*|\d*\.?\d+)(?:[eE][+-]?\d+)?' # regex pattern matching a floating point number
_re_number = re.compile(_p_number)
_units = ('in', 'cm', 'mm', 'pt', 'pc', 'px', 'em', 'ex')


class Rect(namedtuple('Rect', 'left top right bottom')):
	@classmethod
	def create(cls, x, y, width, height):
		return cls(x, y, x + width, y + height)

	@property
	def width(self):
		return self.right - self.left

	@property
	def height(self):
		return self.bottom - self.top

	@property
	def is_empty(self):
		return not (self.left < self.right and self.top < self.bottom)

	def aspect_fit(self, width, height):
		"Center a box of the given proportions inside this rectangle, scaled uniformly to fit."
		if width <= 0 or height <= 0:
			return Rect(self.left, self.top, self.left, self.top)
		scale = min(self.width / width, self.height / height)
		w = width * scale
		h = height * scale
		x = self.left + (self.width - w) / 2
		y = self.top + (self.height - h) / 2
		return Rect.create(x, y, w, h)


class Size(namedtuple('Size', 'width height')):
	@property
	def is_empty(self):
		return self.width == 0 and self.height == 0


def unit_factor(unit, pixels_per_inch=DEFAULT_PPI):
	if unit == 'in':
		return pixels_per_inch
	elif unit == 'cm':
		return pixels_per_inch / 2.54
	elif unit == 'mm':
		return pixels_per_inch / 25.4
	elif unit == 'pt':
		return pixels_per_inch / 72
	elif unit == 'pc':
		return pixels_per_inch / 6
	else:
		return 1 # px, em and ex are stripped but not scaled


def read_number(raw, pixels_per_inch=DEFAULT_PPI):
	"Convert a length, coordinate, percentage or plain number into device units. Unparsable text is 0."

	if raw is None or not raw.strip():
		return 0

	s = raw.strip()
	m = 1

	for unit in _units:
		if s.endswith(unit):
			m = unit_factor(unit, pixels_per_inch)
			s = s[:-len(unit)]
			break
	else:
		if s.endswith('%'):
			m = 0.01
			s = s[:-1]

	s = s.strip()
	if not _re_number.fullmatch(s):
		return 0

	return m * float(s)


def read_optional_number(raw, pixels_per_inch=DEFAULT_PPI):
	if raw is None:
		return None
	return read_number(raw, pixels_per_inch)


def read_rectangle(raw, pixels_per_inch=DEFAULT_PPI):
	"Read `left top width height` (viewBox syntax). Missing trailing components are 0."

	p = raw.replace(',', ' ').split()
	left = read_number(p[0], pixels_per_inch) if len(p) > 0 else 0
	top = read_number(p[1], pixels_per_inch) if len(p) > 1 else 0
	right = left + read_number(p[2], pixels_per_inch) if len(p) > 2 else 0
	bottom = top + read_number(p[3], pixels_per_inch) if len(p) > 3 else 0
	return Rect(left, top, right, bottom)


if __debug__ and __name__ == '__main__':
	print("units")

	assert read_number('1in') == 160
	assert read_number('72pt', 96) == 96
	assert read_number('50%') == 0.5
	assert read_number('12px') == 12
	assert read_number('abc') == 0
	assert read_number('') == 0
	assert read_rectangle('0 0 100 50') == Rect(0, 0, 100, 50)
