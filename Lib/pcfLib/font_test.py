from io import BytesIO
from pcfLib.errors import (PCFLibError, OutOfRange, UnmappedCodepoint,
	MissingRequiredTable)
from pcfLib.font import PCFFont, Glyph
from pcfLib.toc import PCF_METRICS, PCF_BITMAPS, PCF_BDF_ENCODINGS
from pcfLib.tables.metrics import MetricEntry
from pcfLib.misc.testTools import (makePCF, makeSimpleFont, makeSimpleFontFile,
	buildMetricsTable, buildBitmapsTable, buildEncodingsTable)
import logging
import pytest


def makeFont(metrics, offsets, blob, mapping, minCode, maxCode,
		defaultChar=0, bitmapOptions=None, **kwargs):
	return PCFFont(BytesIO(makePCF([
		(PCF_METRICS,) + buildMetricsTable(metrics),
		(PCF_BITMAPS,) + buildBitmapsTable(offsets, blob, **(bitmapOptions or {})),
		(PCF_BDF_ENCODINGS,) + buildEncodingsTable(
			mapping, minCode, maxCode, defaultChar=defaultChar),
	])), **kwargs)


@pytest.fixture
def font():
	return PCFFont(makeSimpleFontFile())


class PCFFontTest:

	def test_lookup_glyph(self, font):
		data, metrics = font.lookupGlyph("A")
		assert data == b"\xff\x00\xff\x00"
		assert metrics == MetricEntry(0, 8, 8, 4, 0)

	def test_lookup_glyph_by_int(self, font):
		assert font.lookupGlyph(0x41)[0] == b"\xff\x00\xff\x00"

	def test_last_glyph_out_of_range(self, font):
		with pytest.raises(OutOfRange):
			font.lookupGlyph("B")

	def test_unmapped(self, font):
		with pytest.raises(UnmappedCodepoint):
			font.lookupGlyph("C")
		with pytest.raises(UnmappedCodepoint):
			font.lookupGlyph("C", useDefaultChar=True)

	def test_compressed_metrics(self):
		font = PCFFont(makeSimpleFontFile(compressed=True))
		data, metrics = font.lookupGlyph("A")
		assert data == b"\xff\x00\xff\x00"
		assert metrics == MetricEntry(0, 8, 8, 4, 0)

	@pytest.mark.parametrize("byteOrder", ["little", "auto"])
	def test_little_endian_font(self, byteOrder):
		font = PCFFont(makeSimpleFontFile(byteOrder="little"), byteOrder=byteOrder)
		assert font.lookupGlyph("A")[0] == b"\xff\x00\xff\x00"

	def test_wrong_byte_order(self):
		# a little-endian glyph count read big-endian runs off the end
		with pytest.raises(PCFLibError):
			PCFFont(makeSimpleFontFile(byteOrder="little"))

	def test_lookup_row_size(self, font):
		data, rowSize = font.lookup("A")
		assert data == b"\xff\x00\xff\x00"
		assert rowSize == 1

	def test_fixed_row_size(self):
		font = PCFFont(makeSimpleFontFile(), fixedRowSize=4)
		assert font.lookup("A") == (b"\xff\x00\xff\x00", 4)
		glyph = font.getGlyph("A")
		assert glyph.width == 32
		assert glyph.height == 1
		assert glyph.toAscii() == "@" * 8 + "." * 8 + "@" * 8 + "." * 8

	@pytest.mark.parametrize("glyphPad, width, expected", [
		(0, 8, 1),
		(0, 10, 2),
		(1, 10, 2),
		(2, 10, 4),
		(3, 10, 8),
		(2, 40, 8),
		(0, 0, 0),
	])
	def test_row_size(self, glyphPad, width, expected):
		font = makeFont([(0, width, width, 1, 0)] * 2, [0, 0], b"", {0x41: 0},
			0x41, 0x41, bitmapOptions={"glyphPad": glyphPad})
		assert font.getRowSize(font.metrics.entryAt(font.file, 0)) == expected

	def test_zero_width_glyph(self):
		# a blank space glyph: no raster at all
		font = makeFont([(0, 0, 6, 0, 0)] * 3, [0, 0, 0], b"", {0x20: 0}, 0x20, 0x20)
		glyph = font.getGlyph(" ")
		assert glyph.rowSize == 0
		assert (glyph.width, glyph.height) == (0, 0)
		assert glyph.getRows() == []
		assert glyph.getPixels() == []
		assert glyph.toAscii() == ""

	@pytest.mark.parametrize("fixedRowSize", [0, -1])
	def test_invalid_fixed_row_size(self, fixedRowSize):
		f = makeSimpleFontFile()
		with pytest.raises(ValueError):
			PCFFont(f, fixedRowSize=fixedRowSize)
		assert not f.closed

	def test_row_size_from_bearings(self):
		font = PCFFont(makeSimpleFontFile())
		assert font.getRowSize(MetricEntry(-2, 7, 3, 0, 0)) == 2

	def test_default_char(self):
		font = makeFont([(0, 8, 8, 1, 0)] * 2, [0, 1, 2], b"\x81\x42",
			{0x41: 0, 0x42: 1}, 0x41, 0x43, defaultChar=0x41)
		with pytest.raises(UnmappedCodepoint):
			font.lookupGlyph("C")
		assert font.lookupGlyph("C", useDefaultChar=True)[0] == b"\x81"
		assert font.getGlyphIndex("Z", useDefaultChar=True) == 0

	def test_get_glyph(self, font):
		glyph = font.getGlyph("A")
		assert isinstance(glyph, Glyph)
		assert glyph.codepoint == 0x41
		assert glyph.glyphIndex == 0
		assert glyph.rowSize == 1
		assert (glyph.width, glyph.height) == (8, 4)
		assert glyph.getRows() == [b"\xff", b"\x00", b"\xff", b"\x00"]
		assert glyph.toAscii() == "@@@@@@@@\n........\n@@@@@@@@\n........"
		assert glyph.toAscii(ink="#", paper=" ").splitlines()[1] == " " * 8
		assert repr(glyph) == "<Glyph U+0041 index=0 8x4>"

	def test_glyph_width_truncates_padding(self):
		font = makeFont([(0, 3, 4, 2, 0)] * 2, [0, 2, 2], b"\xe0\xff",
			{0x41: 0}, 0x41, 0x41)
		assert font.getGlyph("A").toAscii() == "@@@\n@@@"

	def test_glyph_lsb_bit_order(self):
		font = makeFont([(0, 8, 8, 1, 0)] * 2, [0, 1, 1], b"\x01",
			{0x41: 0}, 0x41, 0x41, bitmapOptions={"bitOrderMSB": False})
		assert font.getGlyph("A").toAscii() == "@......."

	def test_glyph_scan_unit_swap(self):
		font = makeFont([(0, 16, 16, 1, 0)] * 2, [0, 2, 2], b"\x01\x80",
			{0x41: 0}, 0x41, 0x41,
			bitmapOptions={"bitOrderMSB": False, "scanUnit": 1})
		glyph = font.getGlyph("A")
		assert glyph.getRows() == [b"\x80\x01"]
		assert glyph.toAscii() == "." * 7 + "@@" + "." * 7

	def test_codepoints(self, font):
		assert list(font.codepoints()) == [0x41, 0x42]
		assert "A" in font
		assert "C" not in font

	def test_invalid_character(self, font):
		with pytest.raises(ValueError):
			font.lookupGlyph("AB")

	def test_count_mismatch_warning(self, caplog):
		with caplog.at_level(logging.WARNING, logger="pcfLib.font"):
			makeFont([(0, 8, 8, 1, 0)] * 2, [0, 1, 2], b"\x00\x00",
				{0x41: 0}, 0x41, 0x41)
		assert "metrics table has 2 glyphs, bitmaps table has 3" in caplog.text

	def test_missing_encodings(self):
		data = makePCF([
			(PCF_METRICS,) + buildMetricsTable([(0, 8, 8, 1, 0)]),
			(PCF_BITMAPS,) + buildBitmapsTable([0, 1], b"\x00"),
		])
		with pytest.raises(MissingRequiredTable):
			PCFFont(BytesIO(data))

	def test_file_object_not_closed(self):
		f = makeSimpleFontFile()
		with PCFFont(f) as font:
			font.lookupGlyph("A")
		assert not f.closed

	def test_failed_open_leaves_file_object_open(self):
		f = BytesIO(makePCF([]))
		with pytest.raises(MissingRequiredTable):
			PCFFont(f)
		assert not f.closed

	def test_open_path(self, tmp_path):
		path = tmp_path / "simple.pcf"
		path.write_bytes(makeSimpleFont())
		font = PCFFont(str(path))
		assert font.lookupGlyph("A")[0] == b"\xff\x00\xff\x00"
		assert "simple.pcf" in repr(font)
		font.close()
		assert font.file.closed

	def test_context_manager_closes_path(self, tmp_path):
		path = tmp_path / "simple.pcf"
		path.write_bytes(makeSimpleFont())
		with PCFFont(str(path)) as font:
			pass
		assert font.file.closed

	def test_independent_handles(self):
		data = makeSimpleFont()
		first = PCFFont(BytesIO(data))
		second = PCFFont(BytesIO(data))
		assert first.file is not second.file
		assert first.lookupGlyph("A") == second.lookupGlyph("A")
