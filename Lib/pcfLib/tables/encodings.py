from pcfLib.errors import PCFLibError, UnmappedCodepoint
from pcfLib.misc.streamTools import readArray
from .baseTable import BaseTable


# glyph index stored in cells that have no glyph
NO_GLYPH = 0xFFFF


class EncodingsTable(BaseTable):

	"""Maps character codes to glyph indices.

	The index is a dense, row-major array over the rectangle
	[minByte1..maxByte1] x [minCharOrByte2..maxCharOrByte2]. Single byte
	fonts have minByte1 == maxByte1 == 0, i.e. a single row.
	"""

	def decompile(self, file):
		self._readFormat(file)
		(self.minCharOrByte2, self.maxCharOrByte2, self.minByte1,
			self.maxByte1, self.defaultChar) = readArray(file, "H", 5, self.swapBytes)
		if (self.maxCharOrByte2 < self.minCharOrByte2 or
				self.maxByte1 < self.minByte1):
			raise PCFLibError(
				"bad encoding ranges: byte2 %d..%d, byte1 %d..%d" % (
					self.minCharOrByte2, self.maxCharOrByte2,
					self.minByte1, self.maxByte1))
		size = self.numColumns * self.numRows
		self.index = readArray(file, "H", size, self.swapBytes)
		self.log.debug("encoding table: byte2 %d..%d, byte1 %d..%d, %d cells",
			self.minCharOrByte2, self.maxCharOrByte2, self.minByte1,
			self.maxByte1, size)

	@property
	def numColumns(self):
		return self.maxCharOrByte2 - self.minCharOrByte2 + 1

	@property
	def numRows(self):
		return self.maxByte1 - self.minByte1 + 1

	def lookup(self, codepoint):
		"""Return the glyph index for 'codepoint'.

		Raise UnmappedCodepoint if the code falls outside the table's
		rectangle, or if its cell holds NO_GLYPH.
		"""
		if codepoint < 0:
			raise UnmappedCodepoint("negative code point: %d" % codepoint)
		b1, b2 = codepoint & 0xFF, codepoint >> 8
		if not self.minCharOrByte2 <= b1 <= self.maxCharOrByte2:
			raise UnmappedCodepoint("code point 0x%04X not in encoding" % codepoint)
		if b2 == 0:
			# a high byte of zero addresses the first row, which must be row 0
			if self.minByte1 != 0:
				raise UnmappedCodepoint("code point 0x%04X not in encoding" % codepoint)
			offset = b1 - self.minCharOrByte2
		else:
			if not self.minByte1 <= b2 <= self.maxByte1:
				raise UnmappedCodepoint("code point 0x%04X not in encoding" % codepoint)
			offset = ((b2 - self.minByte1) * self.numColumns +
				(b1 - self.minCharOrByte2))
		self.log.debug("lookup 0x%04X: offset %d (b1=%d, b2=%d)", codepoint, offset, b1, b2)
		glyphIndex = self.index[offset]
		if glyphIndex == NO_GLYPH:
			raise UnmappedCodepoint("no glyph for code point 0x%04X" % codepoint)
		return glyphIndex

	def getDefaultGlyphIndex(self):
		"""Return the glyph index of the default character, or None."""
		try:
			return self.lookup(self.defaultChar)
		except UnmappedCodepoint:
			return None

	def codepoints(self):
		"""Yield the mapped code points in table order."""
		for row in range(self.minByte1, self.maxByte1 + 1):
			for col in range(self.minCharOrByte2, self.maxCharOrByte2 + 1):
				offset = (row - self.minByte1) * self.numColumns + (col - self.minCharOrByte2)
				if self.index[offset] != NO_GLYPH:
					yield (row << 8) | col

	def __contains__(self, codepoint):
		try:
			self.lookup(codepoint)
		except UnmappedCodepoint:
			return False
		return True
