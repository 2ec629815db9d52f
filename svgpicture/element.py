#!/usr/bin/python3
#-*- coding:utf-8 -*-


__all__ = 'xmlns_svg', 'xmlns_xlink', 'ElementKind', 'local_name', 'attribute_name', 'is_element', 'read_href'


from enum import Enum
from lxml.etree import QName


xmlns_svg = 'http://www.w3.org/2000/svg'
xmlns_xlink = 'http://www.w3.org/1999/xlink'


def is_element(node):
	"Comments and processing instructions have non-string tags in lxml."
	return isinstance(node.tag, str)


def local_name(node):
	return QName(node).localname


def attribute_name(key):
	"Local name of an attribute key if it is unqualified or belongs to SVG or XLink namespace, else None."

	if key[0] != '{':
		return key

	namespace, name = key[1:].split('}', 1)
	if namespace in (xmlns_svg, xmlns_xlink):
		return name
	else:
		return None


def read_href(node):
	href = node.attrib.get('href', None)
	if href is None:
		href = node.attrib.get(f'{{{xmlns_xlink}}}href', None)
	return href


class ElementKind(Enum):
	RECT = 'rect'
	ELLIPSE = 'ellipse'
	CIRCLE = 'circle'
	PATH = 'path'
	POLYGON = 'polygon'
	POLYLINE = 'polyline'
	LINE = 'line'
	GROUP = 'g'
	USE = 'use'
	SWITCH = 'switch'
	TEXT = 'text'
	IMAGE = 'image'
	DEFS = 'defs'
	OTHER = None

	@classmethod
	def of(cls, node):
		name = local_name(node)
		if name in ('title', 'desc', 'description'):
			return cls.DEFS
		try:
			return cls(name)
		except ValueError:
			return cls.OTHER

	@property
	def is_shape(self):
		return self in _shape_kinds


_shape_kinds = frozenset({ElementKind.RECT, ElementKind.ELLIPSE, ElementKind.CIRCLE, ElementKind.PATH, ElementKind.POLYGON, ElementKind.POLYLINE, ElementKind.LINE})
