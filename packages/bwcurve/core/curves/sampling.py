"""Curve evaluation between control points.

Only straight segments are supported: a segment whose start point has a
(near) zero slope is evaluated linearly. Curved segments (nonzero slope)
depend on how the host derives Bezier control points from the slope, which
is not known, so they raise UnsupportedInterpolationError instead of
returning an approximation.
"""

from __future__ import annotations

from collections.abc import Sequence

from bwcurve.core.curves.models import CurvePoint
from bwcurve.core.errors import EmptyCurveError, UnsupportedInterpolationError
from bwcurve.core.utils.math import lerp

# Slopes below this magnitude are treated as straight segments
SLOPE_EPSILON = 1e-9


def interpolate_segment(start: CurvePoint, end: CurvePoint, x: float) -> float:
    """Evaluate the segment from start to end at x.

    Args:
        start: Segment start; its slope shapes the segment.
        end: Segment end.
        x: Position to evaluate. Values outside [start.x, end.x] extrapolate.

    Returns:
        Value at x.

    Raises:
        UnsupportedInterpolationError: If start.slope is not near zero.

    Example:
        >>> a = CurvePoint(x=0.0, y=0.0)
        >>> b = CurvePoint(x=2.0, y=1.0)
        >>> interpolate_segment(a, b, 1.0)
        0.5
    """
    if abs(start.slope) >= SLOPE_EPSILON:
        raise UnsupportedInterpolationError(
            f"Curved segments are not supported (slope={start.slope})"
        )
    width = end.x - start.x
    if width == 0:
        return start.y
    return lerp(start.y, end.y, (x - start.x) / width)


def evaluate(points: Sequence[CurvePoint], x: float) -> float:
    """Evaluate an x-sorted curve at x.

    Positions before the first point or after the last return the value of
    that end point.

    Raises:
        EmptyCurveError: If points is empty.
        UnsupportedInterpolationError: If the enclosing segment is curved.
    """
    if not points:
        raise EmptyCurveError("evaluate requires at least one point")

    if x <= points[0].x:
        return points[0].y
    if x >= points[-1].x:
        return points[-1].y

    for start, end in zip(points, points[1:], strict=False):
        if start.x <= x <= end.x:
            return interpolate_segment(start, end, x)

    # Unsorted input can fall through the bracket search
    return points[-1].y
