#!/usr/bin/python3
#-*- coding: utf-8 -*-


__all__ = 'render_to_surface', 'render_to_png'


if __name__ == '__main__':
	import sys
	del sys.path[0]


import cairo
from math import ceil
from logging import getLogger

if __name__ == '__main__':
	from svgpicture.picture import SVGPicture
else:
	from .picture import SVGPicture


logger = getLogger(__name__)


def render_to_surface(source, width=None, height=None, **options):
	"""Load an SVG document and paint it onto a new ARGB32 image surface. Without explicit dimensions the canvas size
	is used; with only one of them the other follows the canvas proportions. Keyword options go to `SVGPicture`."""

	picture = SVGPicture(**options)
	picture.load(source)

	left = top = 0
	canvas_width, canvas_height = picture.canvas_size
	if picture.canvas_size.is_empty:
		left, top, canvas_width, canvas_height = picture.picture.ink_extents()

	if width is None and height is None:
		width, height = canvas_width, canvas_height
	elif width is None:
		width = canvas_width * height / canvas_height if canvas_height else height
	elif height is None:
		height = canvas_height * width / canvas_width if canvas_width else width

	surface = cairo.ImageSurface(cairo.Format.ARGB32, max(1, ceil(width)), max(1, ceil(height)))
	ctx = cairo.Context(surface)
	if canvas_width and canvas_height:
		ctx.scale(width / canvas_width, height / canvas_height)
	ctx.translate(-left, -top)
	picture.draw(ctx)
	surface.flush()

	logger.debug(f"Rendered {surface.get_width()}x{surface.get_height()} image, {len(picture.diagnostics)} diagnostics.")
	return surface


def render_to_png(source, target, width=None, height=None, **options):
	"Render an SVG document to a PNG file name or writable binary file object."

	surface = render_to_surface(source, width, height, **options)
	try:
		surface.write_to_png(target)
	finally:
		surface.finish()


if __name__ == '__main__':
	import logging
	logging.basicConfig(level=logging.DEBUG)

	if len(sys.argv) != 3:
		print("usage: renderer.py input.svg output.png")
	else:
		render_to_png(sys.argv[1], sys.argv[2])
