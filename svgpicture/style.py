#!/usr/bin/python3
#-*- coding:utf-8 -*-


__all__ = 'parse_style', 'read_style', 'read_style_value', 'read_url_id'


if __name__ == '__main__':
	import sys
	del sys.path[0]


import re

if __name__ == '__main__':
	from svgpicture.element import attribute_name
else:
	from .element import attribute_name


_re_key_value = re.compile(r'\s*([\w-]+)\s*:\s*(.*)')
_re_url = re.compile(r'url\s*\(\s*[^#)]*#([^)]+)\)')


def parse_style(style):
	"Parse inline `key: value; ...` declarations. Later declarations win."

	d = {}
	for kv in style.split(';'):
		if not kv:
			continue
		m = _re_key_value.match(kv)
		if m:
			k, v = m.groups()
			d[k] = v
	return d


def read_style(node):
	"Presentation attributes overwritten by the inline `style` attribute."

	style = {}
	for key, value in node.attrib.items():
		name = attribute_name(key)
		if name is not None:
			style[name] = value

	inline = node.attrib.get('style', None)
	if inline and not inline.isspace():
		style.update(parse_style(inline))

	return style


def read_style_value(node, key):
	"Explicit attribute if non-blank, else the value from the inline style."

	value = node.attrib.get(key, None)
	if value is not None and value.strip():
		return value

	inline = node.attrib.get('style', None)
	if inline and not inline.isspace():
		return parse_style(inline).get(key, None)

	return None


def read_url_id(value):
	"Id referenced by a `url(#id)` value, or None."

	m = _re_url.search(value)
	if m:
		return m.group(1).strip()
	else:
		return None


if __debug__ and __name__ == '__main__':
	from lxml.etree import fromstring

	print("style")

	node = fromstring('<rect fill="blue" style="fill:red;stroke:none"/>')
	assert read_style(node) == {'fill': 'red', 'stroke': 'none', 'style': 'fill:red;stroke:none'}
