"""Tests for rendering documents to image surfaces."""

import cairo
import PIL.Image

from svgpicture.renderer import render_to_png, render_to_surface


def pixel(surface, x, y):
	offset = y * surface.get_stride() + x * 4
	blue, green, red, alpha = surface.get_data()[offset:offset + 4]
	return red, green, blue, alpha


def test_render_at_canvas_size(red_rect_svg):
	surface = render_to_surface(red_rect_svg)
	assert surface.get_format() == cairo.Format.ARGB32
	assert (surface.get_width(), surface.get_height()) == (100, 100)
	assert pixel(surface, 30, 30) == (255, 0, 0, 255)
	assert pixel(surface, 80, 80) == (0, 0, 0, 0)


def test_render_scaled_keeps_proportions(red_rect_svg):
	surface = render_to_surface(red_rect_svg, width=50)
	assert (surface.get_width(), surface.get_height()) == (50, 50)
	assert pixel(surface, 15, 15) == (255, 0, 0, 255)
	assert pixel(surface, 40, 40) == (0, 0, 0, 0)


def test_render_without_canvas_uses_ink_extents():
	surface = render_to_surface('<svg xmlns="http://www.w3.org/2000/svg"><rect x="5" y="5" width="10" height="20" fill="blue"/></svg>')
	assert (surface.get_width(), surface.get_height()) == (10, 20)
	assert pixel(surface, 0, 0) == (0, 0, 255, 255)


def test_render_to_png(tmp_path, red_rect_svg):
	target = tmp_path / 'out.png'
	render_to_png(red_rect_svg, str(target), width=20, height=10)
	with PIL.Image.open(target) as image:
		assert image.size == (20, 10)
