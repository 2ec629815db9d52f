#!/usr/bin/python3
#-*- coding:utf-8 -*-


__all__ = 'Color', 'BLACK', 'TRANSPARENT', 'web_colors', 'parse_color', 'to_byte'


import re
from collections import namedtuple
from colorsys import hls_to_rgb


class Color(namedtuple('Color', 'red green blue alpha')):
	"Color with 8-bit channels. Alpha 255 is fully opaque."
	
	def with_alpha(self, alpha):
		return self._replace(alpha=to_byte(alpha))
	
	def rgba(self):
		"Channels as floats in range 0..1, the way cairo expects them."
		return self.red / 255, self.green / 255, self.blue / 255, self.alpha / 255


BLACK = Color(0, 0, 0, 255)
TRANSPARENT = Color(0, 0, 0, 0)


def to_byte(value):
	return max(0, min(255, int(value)))


web_colors = {
	'aliceblue': '#F0F8FF',
	'antiquewhite': '#FAEBD7',
	'aqua': '#00FFFF',
	'aquamarine': '#7FFFD4',
	'azure': '#F0FFFF',
	'beige': '#F5F5DC',
	'bisque': '#FFE4C4',
	'black': '#000000',
	'blanchedalmond': '#FFEBCD',
	'blue': '#0000FF',
	'blueviolet': '#8A2BE2',
	'brown': '#A52A2A',
	'burlywood': '#DEB887',
	'cadetblue': '#5F9EA0',
	'chartreuse': '#7FFF00',
	'chocolate': '#D2691E',
	'coral': '#FF7F50',
	'cornflowerblue': '#6495ED',
	'cornsilk': '#FFF8DC',
	'crimson': '#DC143C',
	'cyan': '#00FFFF',
	'darkblue': '#00008B',
	'darkcyan': '#008B8B',
	'darkgoldenrod': '#B8860B',
	'darkgray': '#A9A9A9',
	'darkgreen': '#006400',
	'darkgrey': '#A9A9A9',
	'darkkhaki': '#BDB76B',
	'darkmagenta': '#8B008B',
	'darkolivegreen': '#556B2F',
	'darkorange': '#FF8C00',
	'darkorchid': '#9932CC',
	'darkred': '#8B0000',
	'darksalmon': '#E9967A',
	'darkseagreen': '#8FBC8F',
	'darkslateblue': '#483D8B',
	'darkslategray': '#2F4F4F',
	'darkslategrey': '#2F4F4F',
	'darkturquoise': '#00CED1',
	'darkviolet': '#9400D3',
	'deeppink': '#FF1493',
	'deepskyblue': '#00BFFF',
	'dimgray': '#696969',
	'dimgrey': '#696969',
	'dodgerblue': '#1E90FF',
	'firebrick': '#B22222',
	'floralwhite': '#FFFAF0',
	'forestgreen': '#228B22',
	'fuchsia': '#FF00FF',
	'gainsboro': '#DCDCDC',
	'ghostwhite': '#F8F8FF',
	'gold': '#FFD700',
	'goldenrod': '#DAA520',
	'gray': '#808080',
	'green': '#008000',
	'greenyellow': '#ADFF2F',
	'grey': '#808080',
	'honeydew': '#F0FFF0',
	'hotpink': '#FF69B4',
	'indianred': '#CD5C5C',
	'indigo': '#4B0082',
	'ivory': '#FFFFF0',
	'khaki': '#F0E68C',
	'lavender': '#E6E6FA',
	'lavenderblush': '#FFF0F5',
	'lawngreen': '#7CFC00',
	'lemonchiffon': '#FFFACD',
	'lightblue': '#ADD8E6',
	'lightcoral': '#F08080',
	'lightcyan': '#E0FFFF',
	'lightgoldenrodyellow': '#FAFAD2',
	'lightgray': '#D3D3D3',
	'lightgreen': '#90EE90',
	'lightgrey': '#D3D3D3',
	'lightpink': '#FFB6C1',
	'lightsalmon': '#FFA07A',
	'lightseagreen': '#20B2AA',
	'lightskyblue': '#87CEFA',
	'lightslategray': '#778899',
	'lightslategrey': '#778899',
	'lightsteelblue': '#B0C4DE',
	'lightyellow': '#FFFFE0',
	'lime': '#00FF00',
	'limegreen': '#32CD32',
	'linen': '#FAF0E6',
	'magenta': '#FF00FF',
	'maroon': '#800000',
	'mediumaquamarine': '#66CDAA',
	'mediumblue': '#0000CD',
	'mediumorchid': '#BA55D3',
	'mediumpurple': '#9370DB',
	'mediumseagreen': '#3CB371',
	'mediumslateblue': '#7B68EE',
	'mediumspringgreen': '#00FA9A',
	'mediumturquoise': '#48D1CC',
	'mediumvioletred': '#C71585',
	'midnightblue': '#191970',
	'mintcream': '#F5FFFA',
	'mistyrose': '#FFE4E1',
	'moccasin': '#FFE4B5',
	'navajowhite': '#FFDEAD',
	'navy': '#000080',
	'oldlace': '#FDF5E6',
	'olive': '#808000',
	'olivedrab': '#6B8E23',
	'orange': '#FFA500',
	'orangered': '#FF4500',
	'orchid': '#DA70D6',
	'palegoldenrod': '#EEE8AA',
	'palegreen': '#98FB98',
	'paleturquoise': '#AFEEEE',
	'palevioletred': '#DB7093',
	'papayawhip': '#FFEFD5',
	'peachpuff': '#FFDAB9',
	'peru': '#CD853F',
	'pink': '#FFC0CB',
	'plum': '#DDA0DD',
	'powderblue': '#B0E0E6',
	'purple': '#800080',
	'red': '#FF0000',
	'rosybrown': '#BC8F8F',
	'royalblue': '#4169E1',
	'saddlebrown': '#8B4513',
	'salmon': '#FA8072',
	'sandybrown': '#F4A460',
	'seagreen': '#2E8B57',
	'seashell': '#FFF5EE',
	'sienna': '#A0522D',
	'silver': '#C0C0C0',
	'skyblue': '#87CEEB',
	'slateblue': '#6A5ACD',
	'slategray': '#708090',
	'slategrey': '#708090',
	'snow': '#FFFAFA',
	'springgreen': '#00FF7F',
	'steelblue': '#4682B4',
	'tan': '#D2B48C',
	'teal': '#008080',
	'thistle': '#D8BFD8',
	'tomato': '#FF6347',
	'turquoise': '#40E0D0',
	'violet': '#EE82EE',
	'wheat': '#F5DEB3',
	'white': '#FFFFFF',
	'whitesmoke': '#F5F5F5',
	'yellow': '#FFFF00',
	'yellowgreen': '#9ACD32'
}


_re_function = re.compile(r'(rgba?|hsla?)\s*\(([^)]*)\)')


def _channel(spec, scale):
	spec = spec.strip()
	if spec.endswith('%'):
		return float(spec[:-1]) / 100 * 255
	else:
		return float(spec) * scale


def _parse_hex(digits):
	if len(digits) in (3, 4):
		digits = ''.join(_c * 2 for _c in digits)
	
	if len(digits) == 6:
		r, g, b = [int(digits[_n:_n + 2], 16) for _n in (0, 2, 4)]
		return Color(r, g, b, 255)
	elif len(digits) == 8: # alpha first
		a, r, g, b = [int(digits[_n:_n + 2], 16) for _n in (0, 2, 4, 6)]
		return Color(r, g, b, a)
	else:
		raise ValueError(f"Wrong hex color length: {len(digits)}")


def parse_color(text):
	"Parse a color specification. Returns None if the text is not a color."
	
	if text is None:
		return None
	
	color = text.strip().lower()
	if not color:
		return None
	
	if color == 'transparent':
		return TRANSPARENT
	
	try:
		color = web_colors[color].lower()
	except KeyError:
		pass
	
	try:
		if color[0] == '#':
			return _parse_hex(color[1:])
		
		match = _re_function.fullmatch(color)
		if not match:
			return None
		
		function, args = match.groups()
		args = [_a for _a in args.replace(',', ' ').replace('/', ' ').split() if _a]
		
		if function in ('rgb', 'rgba'):
			if len(args) not in (3, 4):
				return None
			r, g, b = [max(0, min(255, _channel(_c, 1))) for _c in args[:3]]
		else:
			if len(args) not in (3, 4):
				return None
			h = (float(args[0].rstrip('deg')) % 360) / 360
			s = max(0, min(100, float(args[1].rstrip('%')))) / 100
			l = max(0, min(100, float(args[2].rstrip('%')))) / 100
			r, g, b = [_c * 255 for _c in hls_to_rgb(h, l, s)]
		
		if len(args) == 4:
			a = max(0, min(255, _channel(args[3], 255)))
		else:
			a = 255
		
		return Color(round(r), round(g), round(b), round(a))
	
	except ValueError:
		return None


if __debug__ and __name__ == '__main__':
	print("colors")
	
	assert parse_color('#f00') == Color(255, 0, 0, 255)
	assert parse_color('#80ff0000') == Color(255, 0, 0, 128)
	assert parse_color('Red') == Color(255, 0, 0, 255)
	assert parse_color('rgb(0, 128, 255)') == Color(0, 128, 255, 255)
	assert parse_color('rgba(0, 0, 0, 0.5)') == Color(0, 0, 0, 128)
	assert parse_color('url(#a)') is None
