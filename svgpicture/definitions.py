#!/usr/bin/python3
#-*- coding:utf-8 -*-


__all__ = 'build_definitions', 'read_definition', 'resolve_href', 'instantiate_use'


if __name__ == '__main__':
	import sys
	del sys.path[0]


from copy import deepcopy
from logging import getLogger
from lxml.etree import Element, QName

if __name__ == '__main__':
	from svgpicture.element import is_element, read_href
else:
	from .element import is_element, read_href


logger = getLogger(__name__)


def resolve_href(node, definitions):
	"Definition referenced by the node's (xlink:)href, or None."

	href = read_href(node)
	if not href:
		return None
	return definitions.get(href[1:], None)


def read_definition(node, definitions):
	"""Copy of the node merged with one level of its href target: the target's children are appended
	and its attributes are added where the node does not define them."""

	union = Element(node.tag)
	union.text = node.text
	for child in node:
		union.append(deepcopy(child))
	for key, value in node.attrib.items():
		union.attrib[key] = value

	target = resolve_href(node, definitions)
	if target is not None:
		for child in target:
			union.append(deepcopy(child))
		for key, value in target.attrib.items():
			if key not in union.attrib:
				union.attrib[key] = value

	return union


def build_definitions(root):
	"Index every descendant with a non-blank id. Later duplicates overwrite earlier ones."

	definitions = {}
	for node in root.iterdescendants():
		if not is_element(node):
			continue
		id_ = node.attrib.get('id', '').strip()
		if id_:
			definitions[id_] = read_definition(node, definitions)

	logger.debug(f"Indexed {len(definitions)} definitions.")
	return definitions


def instantiate_use(node, definition):
	"""Copy of a definition placed by a `use` element. Attributes of the `use` element override the definition's,
	except its id, its transform and any href."""

	instance = deepcopy(definition)
	for key, value in node.attrib.items():
		name = QName(key).localname
		if 'href' not in name and name.lower() not in ('id', 'transform'):
			instance.attrib[key] = value
	return instance
