"""pcfLib/font.py -- look up glyph bitmaps and metrics in a PCF font.

	>>> from pcfLib.font import PCFFont
	>>> with PCFFont("6x13.pcf") as font:
	...     print(font.getGlyph("A").toAscii())

The font decodes the table of contents and the directory part of the
METRICS, BITMAPS and BDF_ENCODINGS tables when it is opened. Metrics and
bitmap bytes are read from the file for each lookup, so the file must stay
open for as long as the font is used.
"""

from pcfLib.toc import PCFReader
from pcfLib.tables.metrics import MetricsTable
from pcfLib.tables.bitmaps import BitmapsTable
from pcfLib.tables.encodings import EncodingsTable
from pcfLib.errors import UnmappedCodepoint
import logging


log = logging.getLogger(__name__)


class PCFFont(object):

	"""A PCF font read from 'file', a path or a seekable binary file object.

	A file object passed in stays owned by the caller and is not closed
	by close(); a path is opened here and closed by close().

	'byteOrder' is "big" (the default), "little" or "auto"; see
	pcfLib.tables.baseTable.BaseTable.

	'tocByteOrder' is "little" (the default) or "big", the order of the
	table directory entries; see pcfLib.toc.PCFReader.

	'fixedRowSize', when given, replaces the row size derived from the
	glyph metrics with a constant number of bytes per raster row.
	"""

	def __init__(self, file, byteOrder="big", fixedRowSize=None,
			tocByteOrder="little"):
		if fixedRowSize is not None and fixedRowSize < 1:
			raise ValueError("Invalid fixedRowSize: %r" % fixedRowSize)
		if not hasattr(file, "read"):
			closeStream = True
			file = open(file, "rb")
		else:
			# assume "file" is a readable, seekable file object
			closeStream = False
		self.file = file
		self._closeStream = closeStream
		self.fixedRowSize = fixedRowSize
		try:
			self.reader = PCFReader(file, tocByteOrder)
			metricsEntry, bitmapsEntry, encodingsEntry = self.reader.getRequiredTables()
			self.metrics = MetricsTable(metricsEntry, byteOrder)
			self.metrics.decompile(file)
			self.bitmaps = BitmapsTable(bitmapsEntry, byteOrder)
			self.bitmaps.decompile(file)
			self.encodings = EncodingsTable(encodingsEntry, byteOrder)
			self.encodings.decompile(file)
		except Exception:
			if closeStream:
				file.close()
			raise
		if len(self.metrics) != len(self.bitmaps):
			log.warning("metrics table has %d glyphs, bitmaps table has %d",
				len(self.metrics), len(self.bitmaps))

	def __enter__(self):
		return self

	def __exit__(self, type, value, traceback):
		self.close()

	def close(self):
		if self._closeStream:
			self.file.close()

	def __repr__(self):
		name = getattr(self.file, "name", None)
		if name:
			return "<%s %r at %x>" % (self.__class__.__name__, name, id(self))
		return "<%s at %x>" % (self.__class__.__name__, id(self))

	def getGlyphIndex(self, codepoint, useDefaultChar=False):
		return self._getGlyphIndex(_toCodepoint(codepoint), useDefaultChar)

	def _getGlyphIndex(self, codepoint, useDefaultChar):
		try:
			return self.encodings.lookup(codepoint)
		except UnmappedCodepoint:
			if not useDefaultChar:
				raise
			glyphIndex = self.encodings.getDefaultGlyphIndex()
			if glyphIndex is None:
				raise
			log.debug("using default char 0x%04X for 0x%04X",
				self.encodings.defaultChar, codepoint)
			return glyphIndex

	def lookupGlyph(self, codepoint, useDefaultChar=False):
		"""Return the raw bitmap bytes and the MetricEntry of 'codepoint',
		a character or an int.
		"""
		return self._readGlyph(self.getGlyphIndex(codepoint, useDefaultChar))

	def _readGlyph(self, glyphIndex):
		data = self.bitmaps.dataFor(self.file, glyphIndex)
		metrics = self.metrics.entryAt(self.file, glyphIndex)
		return data, metrics

	def lookup(self, codepoint, useDefaultChar=False):
		"""Return the raw bitmap bytes of 'codepoint' and the number of bytes
		in each raster row.
		"""
		data, metrics = self.lookupGlyph(codepoint, useDefaultChar)
		return data, self.getRowSize(metrics)

	def getGlyph(self, codepoint, useDefaultChar=False):
		codepoint = _toCodepoint(codepoint)
		glyphIndex = self._getGlyphIndex(codepoint, useDefaultChar)
		data, metrics = self._readGlyph(glyphIndex)
		return Glyph(codepoint, glyphIndex, data, metrics,
			self.getRowSize(metrics), self.bitmaps, fixedRowSize=self.fixedRowSize)

	def getRowSize(self, metrics):
		"""Return the number of bytes per raster row for a glyph with the
		given metrics: its raster width rounded up to whole bits, then to
		the bitmap table's row padding.
		"""
		if self.fixedRowSize is not None:
			return self.fixedRowSize
		width = max(metrics.rightSideBearing - metrics.leftSideBearing, 0)
		pad = self.bitmaps.glyphPad
		return (width + 8 * pad - 1) // (8 * pad) * pad

	def codepoints(self):
		return self.encodings.codepoints()

	def __contains__(self, codepoint):
		return _toCodepoint(codepoint) in self.encodings


class Glyph(object):

	def __init__(self, codepoint, glyphIndex, data, metrics, rowSize,
			bitmaps, fixedRowSize=None):
		self.codepoint = codepoint
		self.glyphIndex = glyphIndex
		self.data = data
		self.metrics = metrics
		self.rowSize = rowSize
		self.bitOrderMSB = bitmaps.bitOrderMSB
		self.byteOrderMSB = bitmaps.byteOrderMSB
		self.scanUnit = bitmaps.scanUnit
		if fixedRowSize is not None:
			# every bit of a fixed size row is shown
			self.width = rowSize * 8
		else:
			self.width = max(metrics.rightSideBearing - metrics.leftSideBearing, 0)

	@property
	def height(self):
		if not self.rowSize:
			return 0
		return len(self.data) // self.rowSize

	def __repr__(self):
		return "<%s U+%04X index=%d %dx%d>" % (self.__class__.__name__,
			self.codepoint, self.glyphIndex, self.width, self.height)

	def getRows(self):
		"""Return the raster as a list of bytes objects, one per row, with
		the bytes of each scan unit put in the same order as the bits.
		"""
		rowSize = self.rowSize
		if not rowSize:
			return []
		rows = [self.data[i:i+rowSize] for i in range(0, self.height * rowSize, rowSize)]
		unit = self.scanUnit
		if self.byteOrderMSB != self.bitOrderMSB and unit > 1:
			rows = [b"".join(row[i:i+unit][::-1] for i in range(0, len(row), unit))
				for row in rows]
		return rows

	def getPixels(self):
		"""Return the raster as a list of rows, each a list of 'width'
		booleans, leftmost pixel first.
		"""
		pixels = []
		for row in self.getRows():
			bits = []
			for byte in row:
				if self.bitOrderMSB:
					bits.extend(bool(byte & (0x80 >> k)) for k in range(8))
				else:
					bits.extend(bool(byte & (1 << k)) for k in range(8))
			pixels.append(bits[:self.width])
		return pixels

	def toAscii(self, ink="@", paper="."):
		return "\n".join(
			"".join(ink if bit else paper for bit in row)
			for row in self.getPixels())


def _toCodepoint(codepoint):
	if isinstance(codepoint, str):
		if len(codepoint) != 1:
			raise ValueError("expected a single character, found %r" % codepoint)
		return ord(codepoint)
	return codepoint
