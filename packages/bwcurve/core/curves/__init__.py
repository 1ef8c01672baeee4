"""Curve data model and transform pipeline."""

from bwcurve.core.curves.clipping import ClipAlgorithm
from bwcurve.core.curves.document import CurveDocument
from bwcurve.core.curves.models import CurveCategory, CurveMetadata, CurvePoint
from bwcurve.core.curves.sampling import evaluate, interpolate_segment

__all__ = [
    "ClipAlgorithm",
    "CurveCategory",
    "CurveDocument",
    "CurveMetadata",
    "CurvePoint",
    "evaluate",
    "interpolate_segment",
]
