class PCFLibError(Exception):
	pass


class ShortReadError(PCFLibError, IOError):
	"""The stream ended before a field could be read in full."""


class MissingRequiredTable(PCFLibError):
	pass


class OutOfRange(PCFLibError):
	"""A glyph index or code point falls outside the bounds of a table."""


class UnmappedCodepoint(OutOfRange):
	"""The encoding table has no glyph for the requested code point."""


class InvalidOffsets(PCFLibError):
	pass
