#!/usr/bin/python3


__all__ = 'SVGPicture', 'UnsupportedElementError', 'read_number', 'read_style', 'build_definitions', \
          'parse_color', 'parse_path_data', 'render_to_surface', 'render_to_png'


if __name__ == '__main__':
	print("SVG picture library")

else:
	def __dir__():
		return __all__

	def __getattr__(symbol):
		if symbol == 'SVGPicture':
			from .picture import SVGPicture
			return SVGPicture

		elif symbol == 'UnsupportedElementError':
			from .picture import UnsupportedElementError
			return UnsupportedElementError

		elif symbol == 'read_number':
			from .units import read_number
			return read_number

		elif symbol == 'read_style':
			from .style import read_style
			return read_style

		elif symbol == 'build_definitions':
			from .definitions import build_definitions
			return build_definitions

		elif symbol == 'parse_color':
			from .colors import parse_color
			return parse_color

		elif symbol == 'parse_path_data':
			from .path import parse_path_data
			return parse_path_data

		elif symbol == 'render_to_surface':
			from .renderer import render_to_surface
			return render_to_surface

		elif symbol == 'render_to_png':
			from .renderer import render_to_png
			return render_to_png

		else:
			raise AttributeError(f"module {__name__!r} has no attribute {symbol!r}")
