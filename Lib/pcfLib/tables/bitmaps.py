from pcfLib.toc import (PCF_GLYPH_PAD_MASK, PCF_BYTE_MASK, PCF_BIT_MASK,
	PCF_SCAN_UNIT_MASK)
from pcfLib.errors import OutOfRange, InvalidOffsets
from pcfLib.misc.streamTools import readFixed, readArray, readUInt32
from .baseTable import BaseTable


# format word plus the glyph count
bitmapsHeaderSize = 8
# one total per glyph row padding: 1, 2, 4 and 8 bytes
bitmapSizesSize = 16


class BitmapsTable(BaseTable):

	"""Glyph rasters stored back to back in one blob.

	The table holds the offset of each glyph's raster relative to the start
	of the blob, and the total blob size for each of the four row padding
	conventions. Rasters are not decoded: 'dataFor' returns the raw bytes
	and leaves padding, bit order and scan units to the caller.
	"""

	def decompile(self, file):
		self._readFormat(file)
		self.count = readUInt32(file, self.swapBytes)
		self.offsets = readArray(file, "L", self.count, self.swapBytes)
		self.bitmapSizes = readArray(file, "L", 4, self.swapBytes)
		self.log.debug("bitmap sizes %s, glyph pad %d", self.bitmapSizes, self.format & 3)
		self.log.debug("total bitmap glyphs: %d", self.count)

	@property
	def dataOffset(self):
		"""Absolute offset of the start of the bitmap blob."""
		return (self.entry.offset + bitmapsHeaderSize + 4 * len(self.offsets) +
			bitmapSizesSize)

	@property
	def bitmapSize(self):
		"""Blob size under the padding convention this table uses."""
		return self.bitmapSizes[self.format & PCF_GLYPH_PAD_MASK]

	@property
	def glyphPad(self):
		"""Number of bytes each glyph row is padded to."""
		return 1 << (self.format & PCF_GLYPH_PAD_MASK)

	@property
	def scanUnit(self):
		return 1 << ((self.format & PCF_SCAN_UNIT_MASK) >> 4)

	@property
	def byteOrderMSB(self):
		return bool(self.format & PCF_BYTE_MASK)

	@property
	def bitOrderMSB(self):
		return bool(self.format & PCF_BIT_MASK)

	def rangeFor(self, index):
		"""Return the (start, size) of glyph 'index' in the file.

		The size is taken from the following offset, so the last glyph of
		the table cannot be addressed.
		"""
		if index < 0 or index + 1 >= self.count:
			raise OutOfRange(
				"bitmap index out of range (%d of %d)" % (index, self.count))
		start = self.offsets[index]
		size = self.offsets[index + 1] - start
		if size < 0:
			raise InvalidOffsets(
				"invalid bitmap offsets for glyph %d: %d, %d"
				% (index, start, self.offsets[index + 1]))
		return self.dataOffset + start, size

	def dataFor(self, file, index):
		start, size = self.rangeFor(index)
		file.seek(start)
		return readFixed(file, 1, size)

	def __len__(self):
		return self.count
