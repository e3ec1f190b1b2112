from pcfLib.toc import PCF_COMPRESSED_METRICS
from pcfLib.errors import OutOfRange
from pcfLib.misc.streamTools import readFixed, readArray, readUInt16, readUInt32
from .baseTable import BaseTable


# format word plus the glyph count
compressedHeaderSize = 6
uncompressedHeaderSize = 8

compressedEntrySize = 5
uncompressedEntrySize = 12

# compressed fields are unsigned bytes biased by this amount
compressedBias = 0x80


class MetricEntry(object):

	__slots__ = ("leftSideBearing", "rightSideBearing", "charWidth",
		"charAscent", "charDescent", "charAttributes")

	def __init__(self, leftSideBearing=0, rightSideBearing=0, charWidth=0,
			charAscent=0, charDescent=0, charAttributes=0):
		self.leftSideBearing = leftSideBearing
		self.rightSideBearing = rightSideBearing
		self.charWidth = charWidth
		self.charAscent = charAscent
		self.charDescent = charDescent
		self.charAttributes = charAttributes

	def __iter__(self):
		for name in self.__slots__:
			yield getattr(self, name)

	def __eq__(self, other):
		if type(self) != type(other):
			return NotImplemented
		return tuple(self) == tuple(other)

	def __repr__(self):
		return "%s(%s)" % (self.__class__.__name__, ", ".join(
			"%s=%d" % (name, getattr(self, name)) for name in self.__slots__))


class MetricsTable(BaseTable):

	"""Per glyph spacing metrics. Only the glyph count is decoded up front;
	entries are read from the file every time they are asked for.
	"""

	def decompile(self, file):
		self._readFormat(file)
		if self.compressed:
			self.count = readUInt16(file, self.swapBytes)
		else:
			self.count = readUInt32(file, self.swapBytes)
		self.log.debug("total metrics: %d (compressed: %s)", self.count, self.compressed)

	@property
	def compressed(self):
		return bool(self.entry.format & PCF_COMPRESSED_METRICS)

	def entryAt(self, file, index):
		if not 0 <= index < self.count:
			raise OutOfRange(
				"metrics index out of range (%d of %d)" % (index, self.count))
		if self.compressed:
			file.seek(self.entry.offset + compressedHeaderSize + index * compressedEntrySize)
			data = readFixed(file, compressedEntrySize, 1)
			return MetricEntry(*[b - compressedBias for b in data])
		else:
			file.seek(self.entry.offset + uncompressedHeaderSize + index * uncompressedEntrySize)
			return MetricEntry(*readArray(file, "h", 6, self.swapBytes))

	def __len__(self):
		return self.count
