"""Shared test fixtures."""

import cairo
import pytest


RED_RECT_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="0 0 100 100">
	<rect x="10" y="10" width="50" height="50" fill="#ff0000"/>
</svg>"""

GROUP_OPACITY_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="0 0 100 100">
	<g opacity="0.5">
		<rect width="10" height="10"/>
		<circle cx="50" cy="50" r="10"/>
	</g>
</svg>"""

USE_SVG = """<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" width="100" height="100">
	<defs>
		<rect id="box" width="10" height="10" fill="blue"/>
	</defs>
	<use xlink:href="#box" x="5" fill="lime" transform="translate(20, 0)"/>
</svg>"""

GRADIENT_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="200" height="100">
	<defs>
		<linearGradient id="fade" x1="0" y1="0" x2="1" y2="0">
			<stop offset="1" stop-color="white"/>
			<stop offset="0" stop-color="black" stop-opacity="0.5"/>
		</linearGradient>
		<radialGradient id="glow" spreadMethod="reflect">
			<stop offset="0" stop-color="yellow"/>
			<stop offset="1" stop-color="red"/>
		</radialGradient>
		<rect id="not-a-gradient" width="1" height="1"/>
	</defs>
	<rect width="200" height="100" fill="url(#fade)"/>
</svg>"""

CLIP_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">
	<defs>
		<clipPath id="clip">
			<circle cx="50" cy="50" r="40"/>
			<rect x="0" y="0" width="10" height="10"/>
		</clipPath>
	</defs>
	<rect width="100" height="100" fill="green" clip-path="url(#clip)"/>
</svg>"""

TEXT_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="200" height="50">
	<text x="100" y="30" font-size="20" text-anchor="middle">Hi <tspan font-weight="bold">there</tspan></text>
</svg>"""

UNSUPPORTED_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10">
	<foo/>
	<rect width="5" height="5"/>
</svg>"""


class PseudoContext:
	"Stand-in for `cairo.Context` that records every call as a (name, args) pair."

	def __init__(self):
		self.calls = []

	def get_current_point(self):
		self.calls.append(('get_current_point', ()))
		return 0, 0

	def text_extents(self, txt):
		self.calls.append(('text_extents', (txt,)))
		return cairo.TextExtents(0, -10, len(txt), 12, len(txt), 0)

	def __getattr__(self, attr):
		if attr.startswith('__'):
			raise AttributeError(attr)
		return lambda *args: self.calls.append((attr, args))

	def names(self):
		return [_name for (_name, _args) in self.calls]

	def args(self, name):
		return [_args for (_name, _args) in self.calls if _name == name]


@pytest.fixture
def pseudo_context():
	return PseudoContext()


@pytest.fixture
def red_rect_svg() -> str:
	return RED_RECT_SVG


@pytest.fixture
def gradient_svg() -> str:
	return GRADIENT_SVG


@pytest.fixture
def group_opacity_svg() -> str:
	return GROUP_OPACITY_SVG


@pytest.fixture
def use_svg() -> str:
	return USE_SVG


@pytest.fixture
def clip_svg() -> str:
	return CLIP_SVG


@pytest.fixture
def text_svg() -> str:
	return TEXT_SVG


@pytest.fixture
def unsupported_svg() -> str:
	return UNSUPPORTED_SVG
