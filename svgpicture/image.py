#!/usr/bin/python3
#-*- coding:utf-8 -*-


"Embedded bitmaps: `data:` uri decoding and Pillow based bitmap decoding into cairo surfaces."


__all__ = 'Bitmap', 'read_uri_bytes', 'decode_bitmap', 'draw_bitmap'


if __name__ == '__main__':
	import sys
	del sys.path[0]


import cairo
import PIL.Image
from io import BytesIO
from base64 import b64decode
from binascii import Error as Base64Error
from urllib.parse import unquote
from logging import getLogger
from numpy import asarray, ascontiguousarray


logger = getLogger(__name__)


def read_uri_bytes(uri):
	"Payload of a `data:` uri. Returns None if the uri is not a well-formed data uri."

	if not uri.lower().startswith('data:') or ',' not in uri:
		return None

	headers = uri[uri.index(':') + 1 : uri.index(',')].split(';')

	charset = 'utf-8'
	for h in headers[1:]:
		if h.startswith('charset='):
			charset = h.split('=')[1]

	data = uri[uri.index(',') + 1 :]

	try:
		if 'base64' in headers[1:]:
			return b64decode(data)
		else:
			return unquote(data).encode(charset)
	except (Base64Error, LookupError, UnicodeError) as error:
		logger.debug(f"Malformed data uri: {error}")
		return None


class Bitmap:
	"Decoded bitmap. The pixel array must live as long as the surface created over it."

	def __init__(self, width, height, array, surface):
		self.width = width
		self.height = height
		self.array = array
		self.surface = surface

	def __repr__(self):
		return f'<Bitmap {self.width}x{self.height}>'


def decode_bitmap(data):
	"Decode image bytes with Pillow. Returns None if the data can not be decoded."

	try:
		image = PIL.Image.open(BytesIO(data))
		image = image.convert('RGBA')
	except (OSError, ValueError, PIL.Image.DecompressionBombError) as error:
		logger.debug(f"Undecodable bitmap: {error}")
		return None

	width, height = image.size
	pixels = asarray(image)

	array = ascontiguousarray(pixels[:, :, [2, 1, 0, 3]])

	# Cairo expects premultiplied pixel values.
	array[:, :, 0] = (array[:, :, 0] * (array[:, :, 3] / 255.0)).astype(array.dtype)
	array[:, :, 1] = (array[:, :, 1] * (array[:, :, 3] / 255.0)).astype(array.dtype)
	array[:, :, 2] = (array[:, :, 2] * (array[:, :, 3] / 255.0)).astype(array.dtype)

	surface = cairo.ImageSurface.create_for_data(array.data.cast('B'), cairo.Format.ARGB32, width, height)
	return Bitmap(width, height, array, surface)


def draw_bitmap(ctx, bitmap, x, y, width, height):
	"Paint the bitmap stretched into the given rectangle."

	if not bitmap.width or not bitmap.height or not width or not height:
		return

	ctx.save()
	try:
		ctx.translate(x, y)
		ctx.scale(width / bitmap.width, height / bitmap.height)
		ctx.set_source_surface(bitmap.surface)
		ctx.paint()
	finally:
		ctx.restore()


if __debug__ and __name__ == '__main__':
	print("image")

	assert read_uri_bytes('data:,hello,void') == b"hello,void"
	assert read_uri_bytes('data:text/plain;base64,aGVsbG8=') == b"hello"
	assert decode_bitmap(b"not an image") is None
