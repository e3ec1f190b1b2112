"""Decoders for the PCF sub-tables needed to look up a glyph."""
