"""pcfLib.misc.streamTools.py -- read fixed size numeric fields from a stream.

PCF stores its header and table of contents in the format's native byte
order (least significant byte first). Table bodies hold 16 and 32 bit
integers in the opposite order, so every reader here takes a 'swapBytes'
argument: unswapped bytes decode as little-endian values, swapped bytes
as big-endian ones.
"""

import struct
from pcfLib.errors import ShortReadError


def readFixed(file, count, elementSize, swapBytes=False):
	"""Read 'count' elements of 'elementSize' bytes each from the current
	position of 'file' and return them as one bytes object.

	When 'swapBytes' is true, the bytes of every element are reversed.
	Single byte elements are never affected.

		>>> from io import BytesIO
		>>> readFixed(BytesIO(b"\\x00\\x01\\x02\\x03"), 2, 2, swapBytes=True)
		b'\\x01\\x00\\x03\\x02'
	"""
	size = count * elementSize
	data = file.read(size)
	if len(data) != size:
		raise ShortReadError(
			"not enough data: expected %d bytes, found %d" % (size, len(data)))
	if swapBytes and elementSize > 1:
		data = b"".join(
			data[i:i+elementSize][::-1] for i in range(0, size, elementSize))
	return data


def readArray(file, typeCode, count, swapBytes=False):
	"""Read 'count' values of the struct 'typeCode' (one of B, H, h, L, l)
	and return them as a list of ints.
	"""
	elementSize = struct.calcsize("<" + typeCode)
	data = readFixed(file, count, elementSize, swapBytes)
	return list(struct.unpack("<%d%s" % (count, typeCode), data))


def readUInt8(file):
	return readArray(file, "B", 1)[0]


def readUInt16(file, swapBytes=False):
	return readArray(file, "H", 1, swapBytes)[0]


def readInt16(file, swapBytes=False):
	return readArray(file, "h", 1, swapBytes)[0]


def readUInt32(file, swapBytes=False):
	return readArray(file, "L", 1, swapBytes)[0]


def readInt32(file, swapBytes=False):
	return readArray(file, "l", 1, swapBytes)[0]


if __name__ == "__main__":
	import sys
	import doctest
	sys.exit(doctest.testmod().failed)
