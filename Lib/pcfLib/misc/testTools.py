"""Helpers for writing unit tests: build small PCF fonts in memory."""

from pcfLib.toc import (PCF_MAGIC, PCF_METRICS, PCF_BITMAPS,
	PCF_BDF_ENCODINGS, PCF_COMPRESSED_METRICS, PCF_BYTE_MASK, PCF_BIT_MASK)
from pcfLib.tables.encodings import NO_GLYPH
from io import BytesIO
import struct


def _order(byteOrder):
	return ">" if byteOrder == "big" else "<"


def _formatFlags(flags, byteOrder):
	if byteOrder == "big":
		flags |= PCF_BYTE_MASK
	return flags


def buildMetricsTable(metrics, compressed=False, byteOrder="big"):
	"""Return (format, data) of a METRICS table holding 'metrics', a list of
	(lsb, rsb, width, ascent, descent[, attributes]) tuples.
	"""
	o = _order(byteOrder)
	fmt = _formatFlags(PCF_COMPRESSED_METRICS if compressed else 0, byteOrder)
	data = struct.pack("<L", fmt)
	if compressed:
		data += struct.pack(o + "H", len(metrics))
		for m in metrics:
			data += bytes(v + 0x80 for v in m[:5])
	else:
		data += struct.pack(o + "L", len(metrics))
		for m in metrics:
			m = tuple(m) + (0,) * (6 - len(m))
			data += struct.pack(o + "6h", *m)
	return fmt, data


def buildBitmapsTable(offsets, blob, glyphPad=0, bitmapSizes=None,
		byteOrder="big", bitOrderMSB=True, scanUnit=0):
	o = _order(byteOrder)
	fmt = _formatFlags(glyphPad | (scanUnit << 4), byteOrder)
	if bitOrderMSB:
		fmt |= PCF_BIT_MASK
	if bitmapSizes is None:
		bitmapSizes = [len(blob)] * 4
	data = struct.pack("<L", fmt)
	data += struct.pack(o + "L", len(offsets))
	data += struct.pack(o + "%dL" % len(offsets), *offsets)
	data += struct.pack(o + "4L", *bitmapSizes)
	return fmt, data + blob


def buildEncodingsTable(mapping, minCharOrByte2, maxCharOrByte2,
		minByte1=0, maxByte1=0, defaultChar=0, byteOrder="big"):
	"""Return (format, data) of a BDF_ENCODINGS table. 'mapping' maps code
	points to glyph indices; cells not in it hold NO_GLYPH.
	"""
	o = _order(byteOrder)
	fmt = _formatFlags(0, byteOrder)
	columns = maxCharOrByte2 - minCharOrByte2 + 1
	index = []
	for row in range(minByte1, maxByte1 + 1):
		for col in range(minCharOrByte2, maxCharOrByte2 + 1):
			index.append(mapping.get((row << 8) | col, NO_GLYPH))
	assert len(index) == columns * (maxByte1 - minByte1 + 1)
	data = struct.pack("<L", fmt)
	data += struct.pack(o + "5H", minCharOrByte2, maxCharOrByte2,
		minByte1, maxByte1, defaultChar)
	data += struct.pack(o + "%dH" % len(index), *index)
	return fmt, data


def makePCF(tables, magic=PCF_MAGIC, tocByteOrder="little"):
	"""Return the bytes of a PCF file holding 'tables', a list of
	(type, format, data) tuples, laid out in order after the directory.
	'tocByteOrder' is the order of the directory entries; the header
	is always little endian.
	"""
	header = struct.pack("<4sL", magic.encode("latin-1"), len(tables))
	offset = len(header) + 16 * len(tables)
	o = _order(tocByteOrder)
	directory = b""
	body = b""
	for tableType, fmt, data in tables:
		directory += struct.pack(o + "4L", tableType, fmt, len(data), offset + len(body))
		body += data
	return header + directory + body


def makeSimpleFont(compressed=False, byteOrder="big", tocByteOrder="little"):
	"""Two glyphs for "A" and "B": glyph 0 is eight pixels wide and four
	rows high, alternating full and empty rows.
	"""
	metricsFormat, metricsData = buildMetricsTable(
		[(0, 8, 8, 4, 0), (0, 8, 8, 4, 0)], compressed=compressed, byteOrder=byteOrder)
	bitmapsFormat, bitmapsData = buildBitmapsTable(
		[0, 4], b"\xff\x00\xff\x00", byteOrder=byteOrder)
	encodingsFormat, encodingsData = buildEncodingsTable(
		{0x41: 0, 0x42: 1}, 0x41, 0x42, byteOrder=byteOrder)
	return makePCF([
		(PCF_METRICS, metricsFormat, metricsData),
		(PCF_BITMAPS, bitmapsFormat, bitmapsData),
		(PCF_BDF_ENCODINGS, encodingsFormat, encodingsData),
	], tocByteOrder=tocByteOrder)


def makeSimpleFontFile(**kwargs):
	return BytesIO(makeSimpleFont(**kwargs))
