"""pcfLib/toc.py -- low-level module to deal with the PCF table of contents.

Defines one public class:
	PCFReader

(Normally you don't have to use this class explicitly; it is used
automatically by pcfLib.font.PCFFont.)

A PCF file starts with a four byte magic and a table count, followed by
one directory entry per table. Each entry gives the table type, its format
flags, its size and its absolute offset in the file. The header is stored
least significant byte first, and so are the directory entries of the fonts
found in the wild; PCFReader can also read entries stored most significant
byte first.
"""

from fontTools.misc import sstruct
from fontTools.misc.textTools import Tag
from pcfLib.errors import PCFLibError, ShortReadError, MissingRequiredTable
from pcfLib.misc.streamTools import readFixed
from collections import OrderedDict
import logging


log = logging.getLogger(__name__)


PCF_MAGIC = "\x01fcp"

# table types
PCF_PROPERTIES = (1 << 0)
PCF_ACCELERATORS = (1 << 1)
PCF_METRICS = (1 << 2)
PCF_BITMAPS = (1 << 3)
PCF_INK_METRICS = (1 << 4)
PCF_BDF_ENCODINGS = (1 << 5)
PCF_SWIDTHS = (1 << 6)
PCF_GLYPH_NAMES = (1 << 7)
PCF_BDF_ACCELERATORS = (1 << 8)

tableTypeNames = OrderedDict([
	(PCF_PROPERTIES, "PROPERTIES"),
	(PCF_ACCELERATORS, "ACCELERATORS"),
	(PCF_METRICS, "METRICS"),
	(PCF_BITMAPS, "BITMAPS"),
	(PCF_INK_METRICS, "INK_METRICS"),
	(PCF_BDF_ENCODINGS, "BDF_ENCODINGS"),
	(PCF_SWIDTHS, "SWIDTHS"),
	(PCF_GLYPH_NAMES, "GLYPH_NAMES"),
	(PCF_BDF_ACCELERATORS, "BDF_ACCELERATORS"),
])

# format flags
PCF_DEFAULT_FORMAT = 0x00000000
PCF_INKBOUNDS = 0x00000200
PCF_ACCEL_W_INKBOUNDS = 0x00000100  # accelerator tables only
PCF_COMPRESSED_METRICS = 0x00000100  # metrics tables only

# format modifiers
PCF_GLYPH_PAD_MASK = (3 << 0)
PCF_BYTE_MASK = (1 << 2)  # most significant byte first
PCF_BIT_MASK = (1 << 3)  # most significant bit first
PCF_SCAN_UNIT_MASK = (3 << 4)


pcfHeaderFormat = """
		< # little endian
		magic:          4s   # "\\1fcp"
		tableCount:     L
"""

pcfHeaderSize = sstruct.calcsize(pcfHeaderFormat)

pcfTableEntryFields = """
		type:           L    # one of the PCF_* table types
		format:         L    # PCF_* format flags and modifiers
		size:           L    # in bytes
		offset:         L    # from the start of the file
"""

tableEntryFormats = {
	"little": "<" + pcfTableEntryFields,
	"big": ">" + pcfTableEntryFields,
}

tocByteOrders = ("little", "big")

pcfTableEntryFormat = tableEntryFormats["little"]
pcfTableEntrySize = sstruct.calcsize(pcfTableEntryFormat)


class TableEntry(object):

	entrySize = pcfTableEntrySize

	def fromFile(self, file, byteOrder="little"):
		sstruct.unpack(tableEntryFormats[byteOrder],
			readFixed(file, 1, self.entrySize), self)

	@property
	def name(self):
		return tableTypeNames.get(self.type)

	def __repr__(self):
		if hasattr(self, "type"):
			return "<%s %s at %x>" % (
				self.__class__.__name__, self.name or hex(self.type), id(self))
		else:
			return "<%s at %x>" % (self.__class__.__name__, id(self))

	def loadData(self, file):
		file.seek(self.offset)
		return readFixed(file, 1, self.size)


class PCFReader(object):

	"""Read the header and the table directory of the PCF font in 'file'.

	'tocByteOrder' is the order of the directory entries, "little" (the
	default) or "big". The header is always read least significant byte
	first.
	"""

	headerFormat = pcfHeaderFormat
	headerSize = pcfHeaderSize
	TableEntry = TableEntry

	def __init__(self, file, tocByteOrder="little"):
		if tocByteOrder not in tableEntryFormats:
			raise ValueError("Invalid tocByteOrder: %r" % tocByteOrder)
		self.file = file
		self.tocByteOrder = tocByteOrder
		self._readHeader()
		self._readTableEntries()

	def _readHeader(self):
		data = self.file.read(self.headerSize)
		if len(data) != self.headerSize:
			raise ShortReadError("Not a PCF font (not enough data)")
		sstruct.unpack(self.headerFormat, data, self)
		self.magic = Tag(self.magic)
		if self.magic != PCF_MAGIC:
			raise PCFLibError("Not a PCF font (bad magic)")
		log.debug("tableCount: %d", self.tableCount)

	def _readTableEntries(self):
		tables = {}
		for i in range(self.tableCount):
			entry = self.TableEntry()
			entry.fromFile(self.file, self.tocByteOrder)
			if entry.name is None:
				log.warning("unknown table type 0x%x at offset %d",
					entry.type, entry.offset)
			if entry.type in tables:
				log.warning("duplicate %s table; using the one at offset %d",
					entry.name or hex(entry.type), entry.offset)
			tables[entry.type] = entry
		self.tables = OrderedDict(sorted(tables.items(), key=lambda i: i[1].offset))

	def __contains__(self, tableType):
		return tableType in self.tables

	def keys(self):
		return self.tables.keys()

	def __getitem__(self, tableType):
		"""Fetch the raw table data."""
		return self.tables[tableType].loadData(self.file)

	def getRequiredTables(self):
		"""Return the METRICS, BITMAPS and BDF_ENCODINGS table entries, in
		that order. Nothing is read from the table bodies.
		"""
		metrics = self.tables.get(PCF_METRICS)
		bitmaps = self.tables.get(PCF_BITMAPS)
		if metrics is None or bitmaps is None:
			raise MissingRequiredTable("metrics or bitmap table not found")
		encodings = self.tables.get(PCF_BDF_ENCODINGS)
		if encodings is None:
			raise MissingRequiredTable("encoding table not found")
		return metrics, bitmaps, encodings


def openFont(file, **kwargs):
	"""Open 'file' (a path or a seekable binary file object) and return a
	pcfLib.font.PCFFont. Keyword arguments are passed on to PCFFont.
	"""
	from pcfLib.font import PCFFont
	return PCFFont(file, **kwargs)
