#!/usr/bin/python3
#-*- coding:utf-8 -*-


__all__ = 'ClipPathCache', 'read_clip_path_definition'


if __name__ == '__main__':
	import sys
	del sys.path[0]


from logging import getLogger

if __name__ == '__main__':
	from svgpicture.element import is_element, local_name
	from svgpicture.geometry import read_geometry
	from svgpicture.path import Path
	from svgpicture.style import read_url_id
	from svgpicture.units import DEFAULT_PPI
else:
	from .element import is_element, local_name
	from .geometry import read_geometry
	from .path import Path
	from .style import read_url_id
	from .units import DEFAULT_PPI


logger = getLogger(__name__)


def _log_warning(message, target=None):
	logger.warning(message)


def read_clip_path_definition(node, pixels_per_inch=DEFAULT_PPI, emit_warning=_log_warning):
	"Union of the geometries of all children of a `clipPath` element. None if the node is not a non-empty clipPath."

	children = [_child for _child in node if is_element(_child)]
	if local_name(node) != 'clipPath' or not children:
		return None

	result = Path()
	for child in children:
		geometry = read_geometry(child, pixels_per_inch)
		if geometry is not None:
			result.add_path(geometry)
		else:
			emit_warning(f"SVG element '{local_name(child)}' is not supported in clipPath.", child)

	return result


class ClipPathCache:
	"Clip geometries referenced by `clip-path` values, built once per definition id."

	def __init__(self, definitions, pixels_per_inch=DEFAULT_PPI, emit_warning=_log_warning):
		self.definitions = definitions
		self.pixels_per_inch = pixels_per_inch
		self.emit_warning = emit_warning
		self.__cache = {}

	def read(self, raw):
		"Geometry for a `clip-path` attribute value, or None. Unresolvable references are reported."

		if raw is None or not raw.strip():
			return None

		result = None
		id_ = read_url_id(raw)
		if id_ is not None:
			if id_ in self.definitions:
				try:
					result = self.__cache[id_]
				except KeyError:
					result = self.__cache[id_] = read_clip_path_definition(self.definitions[id_], self.pixels_per_inch, self.emit_warning)
			else:
				self.emit_warning(f"Invalid clip-path url reference: {id_}")

		if result is None:
			self.emit_warning(f"Unsupported clip-path: {raw}")

		return result

	def clear(self):
		self.__cache.clear()
