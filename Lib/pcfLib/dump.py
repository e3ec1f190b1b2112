"""Print the glyphs of a PCF font as ASCII art.

usage: pcfdump [options] FONT [CHAR ...]

Each CHAR is a literal character, or a code point written as U+XXXX or
0xXXXX. Without any CHAR, every glyph the font maps is dumped.
"""

from pcfLib import configLogger
from pcfLib.errors import PCFLibError
from pcfLib.font import PCFFont
from pcfLib.tables.baseTable import byteOrders
from pcfLib.toc import tocByteOrders
from pcfLib.misc.fileTools import guessFileType
from fontTools.misc.cliTools import makeOutputFileName
import argparse
import logging
import sys


log = logging.getLogger("pcfLib.dump")


def parseCodepoint(s):
	"""
		>>> parseCodepoint("A")
		65
		>>> parseCodepoint("U+6D4B")
		27979
		>>> parseCodepoint("0x41")
		65
	"""
	if len(s) == 1:
		return ord(s)
	for prefix in ("U+", "u+", "0x", "0X"):
		if s.startswith(prefix):
			try:
				return int(s[len(prefix):], 16)
			except ValueError:
				break
	raise argparse.ArgumentTypeError("invalid character: %r" % s)


def parseRowSize(s):
	rowSize = int(s)
	if rowSize < 1:
		raise argparse.ArgumentTypeError("row size must be at least 1: %r" % s)
	return rowSize


def listTables(font, outFile):
	for entry in font.reader.tables.values():
		outFile.write("%-16s format=0x%08x size=%-8d offset=%d\n" % (
			entry.name or hex(entry.type), entry.format, entry.size, entry.offset))


def dumpGlyph(font, codepoint, outFile, useDefaultChar=False):
	glyph = font.getGlyph(codepoint, useDefaultChar=useDefaultChar)
	log.debug("U+%04X: glyph %d, %d bytes, %d bytes per row",
		codepoint, glyph.glyphIndex, len(glyph.data), glyph.rowSize)
	outFile.write(glyph.toAscii() + "\n")


def dumpGlyphs(font, codepoints, outFile=None, outputDir=None, fontPath="",
		useDefaultChar=False):
	"""Dump each of 'codepoints' to 'outFile', or to one file per glyph in
	'outputDir'. Glyphs that cannot be found are logged and skipped.
	Return the number of glyphs that could not be dumped.
	"""
	failed = 0
	for codepoint in codepoints:
		try:
			if outputDir is not None:
				output = makeOutputFileName(fontPath, outputDir, "-U+%04X.txt" % codepoint)
				with open(output, "w") as f:
					dumpGlyph(font, codepoint, f, useDefaultChar)
				log.info("Dumped U+%04X to %s", codepoint, output)
			else:
				outFile.write("U+%04X\n" % codepoint)
				dumpGlyph(font, codepoint, outFile, useDefaultChar)
		except PCFLibError as e:
			log.warning("U+%04X: %s", codepoint, e)
			failed += 1
	return failed


def main(args=None):
	parser = argparse.ArgumentParser(
		prog="pcfdump", description="Print the glyphs of a PCF font as ASCII art.")
	parser.add_argument("font", metavar="FONT", help="PCF font file")
	parser.add_argument("chars", metavar="CHAR", nargs="*", type=parseCodepoint,
		help="character, U+XXXX or 0xXXXX (default: all mapped glyphs)")
	parser.add_argument("-o", "--output-dir", metavar="DIR",
		help="write one file per glyph to DIR instead of stdout")
	parser.add_argument("-l", "--list-tables", action="store_true",
		help="print the table of contents and exit")
	parser.add_argument("-r", "--row-size", type=parseRowSize, metavar="N",
		help="assume N bytes per raster row instead of deriving it")
	parser.add_argument("-b", "--byte-order", choices=byteOrders, default="big",
		help="byte order of the table bodies (default: %(default)s)")
	parser.add_argument("-t", "--toc-byte-order", choices=tocByteOrders,
		default="little",
		help="byte order of the table directory (default: %(default)s)")
	parser.add_argument("-d", "--default-char", action="store_true",
		help="show the font's default character for unmapped codes")
	logGroup = parser.add_mutually_exclusive_group()
	logGroup.add_argument("-v", "--verbose", action="store_true",
		help="print debug messages")
	logGroup.add_argument("-q", "--quiet", action="store_true",
		help="only print errors")
	options = parser.parse_intermixed_args(args)

	if options.verbose:
		level = "DEBUG"
	elif options.quiet:
		level = "ERROR"
	else:
		level = "INFO"
	configLogger(logger=logging.getLogger("pcfLib"), level=level)

	if guessFileType(options.font) != "PCF":
		log.error("%s is not a PCF font", options.font)
		return 1

	try:
		font = PCFFont(options.font, byteOrder=options.byte_order,
			fixedRowSize=options.row_size, tocByteOrder=options.toc_byte_order)
	except (PCFLibError, IOError) as e:
		log.error("%s: %s", options.font, e)
		return 1

	with font:
		if options.list_tables:
			listTables(font, sys.stdout)
			return 0
		codepoints = options.chars or list(font.codepoints())
		failed = dumpGlyphs(font, codepoints, outFile=sys.stdout,
			outputDir=options.output_dir, fontPath=options.font,
			useDefaultChar=options.default_char)
	return 1 if failed else 0


if __name__ == "__main__":
	sys.exit(main())
