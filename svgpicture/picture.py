#!/usr/bin/python3
#-*- coding:utf-8 -*-


__all__ = 'SVGPicture', 'UnsupportedElementError'


if __name__ == '__main__':
	import sys
	del sys.path[0]


import re
import cairo
from os import environ, PathLike, fspath
from logging import getLogger
from lxml.etree import XMLParser, QName, fromstring, parse, iselement, _ElementTree

if __name__ == '__main__':
	from svgpicture.clippath import ClipPathCache
	from svgpicture.definitions import build_definitions, resolve_href, instantiate_use
	from svgpicture.element import ElementKind, is_element, local_name, read_href
	from svgpicture.geometry import read_geometry
	from svgpicture.gradient import GradientCache
	from svgpicture.image import read_uri_bytes, decode_bitmap, draw_bitmap
	from svgpicture.paint import PaintState, create_paint, read_opacity, read_paints
	from svgpicture.style import read_style
	from svgpicture.text import read_text, draw_text, import_pango
	from svgpicture.transform import compose, is_invertible
	from svgpicture.units import DEFAULT_PPI, Rect, Size, read_number, read_rectangle
else:
	from .clippath import ClipPathCache
	from .definitions import build_definitions, resolve_href, instantiate_use
	from .element import ElementKind, is_element, local_name, read_href
	from .geometry import read_geometry
	from .gradient import GradientCache
	from .image import read_uri_bytes, decode_bitmap, draw_bitmap
	from .paint import PaintState, create_paint, read_opacity, read_paints
	from .style import read_style
	from .text import read_text, draw_text, import_pango
	from .transform import compose, is_invertible
	from .units import DEFAULT_PPI, Rect, Size, read_number, read_rectangle


logger = getLogger(__name__)

_re_xml_declaration = re.compile(r'^\s*<\?xml[^>]*\?>')

_use_pango = environ.get('SVGPICTURE_USE_PANGO', '0')

if _use_pango == '1':
	import_pango()


class UnsupportedElementError(NotImplementedError):
	"Raised for unsupported constructs when `throw_on_unsupported` is set."


class SVGPicture:
	"""Interprets an SVG document into cairo drawing operations, recorded on a `cairo.RecordingSurface`.

	Unsupported constructs are reported through `emit_warning`: collected in `diagnostics` and logged,
	or raised as `UnsupportedElementError` if `throw_on_unsupported` is set.
	"""

	use_pango = (_use_pango == '1') # required for non-Latin scripts

	conditional_attributes = frozenset({'requiredFeatures', 'requiredExtensions', 'systemLanguage'})

	def __init__(self, pixels_per_inch=DEFAULT_PPI, canvas_size=None, throw_on_unsupported=False):
		self.pixels_per_inch = pixels_per_inch
		self.throw_on_unsupported = throw_on_unsupported
		self.__requested_canvas_size = Size(*canvas_size) if canvas_size is not None else Size(0, 0)

		self.xml_parser = XMLParser(remove_comments=True, remove_pis=True, resolve_entities=False, no_network=True, load_dtd=False)

		self.document = None
		self.picture = None
		self.definitions = {}
		self.view_box = Rect(0, 0, 0, 0)
		self.canvas_size = self.__requested_canvas_size
		self.version = None
		self.title = None
		self.description = None
		self.diagnostics = []

		self.__emitted_warnings = set()
		self.__gradients = None # built per render
		self.__clip_paths = None
		self.__bitmaps = []

	def emit_warning(self, message, target=None):
		"Report an unsupported construct."

		if self.throw_on_unsupported:
			raise UnsupportedElementError(message)

		self.diagnostics.append(message)
		if message not in self.__emitted_warnings:
			self.__emitted_warnings.add(message)
			logger.warning(message)

	def parse(self, source):
		"Root element of an SVG document given as a path, markup, file object or lxml tree."

		if iselement(source):
			return source
		elif isinstance(source, _ElementTree):
			return source.getroot()
		elif isinstance(source, bytes):
			return fromstring(source, self.xml_parser)
		elif isinstance(source, str) and source.lstrip().startswith('<'):
			return fromstring(_re_xml_declaration.sub('', source, count=1), self.xml_parser) # already decoded
		elif isinstance(source, (str, PathLike)):
			return parse(fspath(source), self.xml_parser).getroot()
		elif hasattr(source, 'read'):
			return parse(source, self.xml_parser).getroot()
		else:
			raise TypeError(f"Unsupported document source: {type(source).__name__}")

	def load(self, source):
		"Interpret the document and record it. Returns the recorded `cairo.RecordingSurface`."

		root = self.parse(source)

		self.document = root
		self.definitions = build_definitions(root)

		self.version = root.attrib.get('version', None)
		self.title = self.__child_text(root, 'title')
		self.description = self.__child_text(root, 'desc')
		if self.description is None:
			self.description = self.__child_text(root, 'description')

		view_box = root.attrib.get('viewBox', None)
		if view_box is None:
			view_box = root.attrib.get('viewPort', None)
		if view_box is not None:
			self.view_box = read_rectangle(view_box, self.pixels_per_inch)
		else:
			self.view_box = Rect(0, 0, 0, 0)

		if self.__requested_canvas_size.is_empty:
			self.canvas_size = self.__derive_canvas_size(root)
		else:
			self.canvas_size = self.__requested_canvas_size

		logger.debug(f"Loading SVG document: canvas {self.canvas_size.width}x{self.canvas_size.height}, viewBox {tuple(self.view_box)}.")

		if self.canvas_size.is_empty:
			extents = None
		else:
			extents = cairo.Rectangle(0, 0, self.canvas_size.width, self.canvas_size.height)

		self.__bitmaps = []
		picture = cairo.RecordingSurface(cairo.Content.COLOR_ALPHA, extents)
		self.render(cairo.Context(picture))
		self.picture = picture
		return picture

	def draw(self, ctx):
		"Replay the recorded picture onto a cairo context."

		if self.picture is None:
			raise ValueError("No document loaded.")

		ctx.save()
		try:
			ctx.set_source_surface(self.picture, 0, 0)
			ctx.paint()
		finally:
			ctx.restore()

	def render(self, ctx):
		"Walk the loaded document, issuing drawing operations on the context. Diagnostics are collected anew."

		if self.document is None:
			raise ValueError("No document loaded.")

		root = self.document

		self.diagnostics = []
		self.__emitted_warnings = set()
		self.__gradients = GradientCache(self.definitions, self.pixels_per_inch, self.emit_warning)
		self.__clip_paths = ClipPathCache(self.definitions, self.pixels_per_inch, self.emit_warning)

		view_box = self.view_box
		canvas_size = self.canvas_size

		ctx.save()
		try:
			if not view_box.is_empty and canvas_size.width > 0 and canvas_size.height > 0 and (view_box.width != canvas_size.width or view_box.height != canvas_size.height):
				if root.attrib.get('preserveAspectRatio', None) == 'none':
					ctx.scale(canvas_size.width / view_box.width, canvas_size.height / view_box.height)
				else:
					scale = min(canvas_size.width / view_box.width, canvas_size.height / view_box.height)
					centered = Rect(0, 0, canvas_size.width, canvas_size.height).aspect_fit(view_box.width, view_box.height)
					ctx.translate(centered.left, centered.top)
					ctx.scale(scale, scale)

			ctx.translate(-view_box.left, -view_box.top)

			if not view_box.is_empty:
				ctx.rectangle(view_box.left, view_box.top, view_box.width, view_box.height)
				ctx.clip()

			state = read_paints(read_style(root), PaintState(None, create_paint()), True, self.pixels_per_inch, self.__gradients, self.emit_warning)

			for child in root:
				if is_element(child):
					self.__render_element(ctx, child, state)

		finally:
			ctx.restore()

	@staticmethod
	def __child_text(root, name):
		namespace = QName(root).namespace
		for child in root:
			if is_element(child) and local_name(child) == name and QName(child).namespace == namespace:
				return ''.join(child.itertext())
		return None

	def __derive_canvas_size(self, root):
		"Canvas size from the width and height attributes. Missing ones take the viewBox size, percentages are fractions of it."

		raw_width = root.attrib.get('width', None)
		raw_height = root.attrib.get('height', None)
		width = read_number(raw_width, self.pixels_per_inch)
		height = read_number(raw_height, self.pixels_per_inch)

		if raw_width is None:
			width = self.view_box.width
		elif '%' in raw_width:
			width *= self.view_box.width

		if raw_height is None:
			height = self.view_box.height
		elif '%' in raw_height:
			height *= self.view_box.height

		return Size(width, height)

	def read_element_size(self, node):
		"""Size of the box a fractional gradient is mapped onto: the nearest explicit width and height
		among the node and its ancestors, else the document root size."""

		width = height = 0
		element = node
		while element.getparent() is not None:
			if not width > 0:
				width = read_number(element.attrib.get('width', None), self.pixels_per_inch)
			if not height > 0:
				height = read_number(element.attrib.get('height', None), self.pixels_per_inch)
			if width > 0 and height > 0:
				break
			element = element.getparent()

		if not (width > 0 and height > 0):
			width = read_number(self.document.attrib.get('width', None), self.pixels_per_inch)
			height = read_number(self.document.attrib.get('height', None), self.pixels_per_inch)

		return Size(width, height)

	def __shader_pattern(self, node, paint):
		if paint is None or paint.shader is None:
			return None
		x = read_number(node.attrib.get('x', None), self.pixels_per_inch)
		y = read_number(node.attrib.get('y', None), self.pixels_per_inch)
		size = self.read_element_size(node)
		return paint.shader.create_pattern(x, y, size.width, size.height)

	def __render_element(self, ctx, node, state):
		if node.attrib.get('display', None) == 'none':
			return

		transform = compose(node.attrib.get('transform', None), self.pixels_per_inch, self.emit_warning)
		if not is_invertible(transform):
			return # collapsed to nothing

		ctx.save()
		try:
			ctx.transform(transform)

			clip = self.__clip_paths.read(node.attrib.get('clip-path', None))
			if clip is not None:
				ctx.new_path()
				clip.replay(ctx)
				ctx.clip()

			kind = ElementKind.of(node)
			style = read_style(node)
			state = read_paints(style, state, kind == ElementKind.GROUP, self.pixels_per_inch, self.__gradients, self.emit_warning)

			if kind == ElementKind.IMAGE:
				self.__render_image(ctx, node)

			elif kind == ElementKind.TEXT:
				if state.stroke is not None or state.fill is not None:
					text = read_text(node, state, self.pixels_per_inch)
					if len(text):
						draw_text(ctx, text, self.__shader_pattern(node, state.fill), self.use_pango)

			elif kind.is_shape:
				self.__render_shape(ctx, node, state)

			elif kind == ElementKind.GROUP:
				self.__render_group(ctx, node, style, state)

			elif kind == ElementKind.USE:
				self.__render_use(ctx, node, state)

			elif kind == ElementKind.SWITCH:
				for child in node:
					if is_element(child) and not any((_attr in child.attrib) for _attr in self.conditional_attributes):
						self.__render_element(ctx, child, state.clone())

			elif kind == ElementKind.DEFS:
				pass # indexed before drawing

			else:
				self.emit_warning(f"SVG element '{local_name(node)}' is not supported", node)

		finally:
			ctx.restore()

	def __render_shape(self, ctx, node, state):
		geometry = read_geometry(node, self.pixels_per_inch)
		if geometry is None or geometry.is_empty:
			return

		stroke, fill = state

		if fill is not None:
			ctx.new_path()
			geometry.replay(ctx)
			fill.apply(ctx, self.__shader_pattern(node, fill))
			ctx.fill()

		if stroke is not None:
			ctx.new_path()
			geometry.replay(ctx)
			stroke.apply(ctx)
			ctx.stroke()

	def __render_group(self, ctx, node, style, state):
		children = [_child for _child in node if is_element(_child)]
		if not children:
			return

		group_opacity = read_opacity(style, self.pixels_per_inch)
		if group_opacity != 1:
			ctx.push_group()

		try:
			for child in children:
				self.__render_element(ctx, child, state.clone())
		finally:
			if group_opacity != 1:
				ctx.pop_group_to_source()
				ctx.paint_with_alpha(int(255 * group_opacity) / 255)

	def __render_use(self, ctx, node, state):
		if not node.attrib:
			return

		definition = resolve_href(node, self.definitions)
		if definition is None:
			return

		self.__render_element(ctx, instantiate_use(node, definition), state.clone())

	def __render_image(self, ctx, node):
		x = read_number(node.attrib.get('x', None), self.pixels_per_inch)
		y = read_number(node.attrib.get('y', None), self.pixels_per_inch)
		width = read_number(node.attrib.get('width', None), self.pixels_per_inch)
		height = read_number(node.attrib.get('height', None), self.pixels_per_inch)

		data = None
		uri = read_href(node)
		if uri is not None:
			if uri.lower().startswith('data:'):
				data = read_uri_bytes(uri)
			else:
				self.emit_warning("Remote images are not supported", node)

		if not data:
			return

		bitmap = decode_bitmap(data)
		if bitmap is None:
			return

		self.__bitmaps.append(bitmap) # pixel buffers must outlive the recording
		draw_bitmap(ctx, bitmap, x, y, width, height)


if __debug__ and __name__ == '__main__':
	print("svg picture")

	picture = SVGPicture()
	picture.load(b'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100" width="100" height="100"><rect width="50" height="50" fill="#ff0000"/><foo/></svg>')
	assert picture.canvas_size == (100, 100)
	assert picture.diagnostics == ["SVG element 'foo' is not supported"]
