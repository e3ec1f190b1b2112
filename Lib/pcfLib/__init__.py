import logging
from fontTools.misc.loggingTools import configLogger
from pcfLib.errors import (PCFLibError, ShortReadError, MissingRequiredTable,
	OutOfRange, UnmappedCodepoint, InvalidOffsets)

try:
	from pcfLib.version import version
except ImportError:
	# 'version.py' is missing; pcfLib was not correctly installed
	version = None

log = logging.getLogger(__name__)

__all__ = [
	"version", "log", "configLogger", "PCFLibError", "ShortReadError",
	"MissingRequiredTable", "OutOfRange", "UnmappedCodepoint",
	"InvalidOffsets",
]
