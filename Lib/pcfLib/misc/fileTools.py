"""pcfLib.misc.fileTools.py -- tell PCF fonts from other files.
"""
from fontTools.misc.textTools import Tag
from pcfLib.toc import PCF_MAGIC


def guessFileType(fileOrPath):
	""" Take a path or file object, and return its file type.
	Return None if the file type can't be found.
	Supported file types: PCF
	"""
	if not hasattr(fileOrPath, "read"):
		# assume fileOrPath is a file name
		try:
			f = open(fileOrPath, "rb")
		except IOError:
			return None
		with f:
			header = f.read(4)
	else:
		# assume fileOrPath is a readable file object
		f = fileOrPath
		# seek to start, but remember the current position
		pos = f.tell()
		f.seek(0)
		header = f.read(4)
		f.seek(pos)
	if Tag(header) == PCF_MAGIC:
		return "PCF"
	return None
