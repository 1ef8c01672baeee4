"""BWCurve infrastructure - .bwcurve tag-stream format handling."""

from bwcurve.core.formats.bitwig.exporter import BWCurveExporter, encode
from bwcurve.core.formats.bitwig.parser import BWCurveParser, decode
from bwcurve.core.formats.bitwig.revision import DEFAULT_REVISION, FormatRevision

__all__ = [
    "DEFAULT_REVISION",
    "BWCurveExporter",
    "BWCurveParser",
    "FormatRevision",
    "decode",
    "encode",
]
