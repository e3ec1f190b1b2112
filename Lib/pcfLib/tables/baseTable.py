from fontTools.misc.loggingTools import LogMixin
from pcfLib.toc import PCF_BYTE_MASK
from pcfLib.misc.streamTools import readUInt32


byteOrders = ("big", "little", "auto")


class BaseTable(LogMixin):

	"""A table decoded from the body the TableEntry 'entry' points at.

	'byteOrder' tells how the multi-byte fields of the body are stored:
	"big" and "little" force one order for every table, "auto" follows
	the PCF_BYTE_MASK bit of the entry's format flags.
	"""

	def __init__(self, entry, byteOrder="big"):
		if byteOrder not in byteOrders:
			raise ValueError("Invalid byteOrder: %r" % byteOrder)
		self.entry = entry
		if byteOrder == "auto":
			self.swapBytes = bool(entry.format & PCF_BYTE_MASK)
		else:
			self.swapBytes = byteOrder == "big"

	def __repr__(self):
		return "<%s at offset %d>" % (self.__class__.__name__, self.entry.offset)

	def _readFormat(self, file):
		file.seek(self.entry.offset)
		# the format word itself is always stored least significant byte first
		self.format = readUInt32(file)

	def decompile(self, file):
		raise NotImplementedError
