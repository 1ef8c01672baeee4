"""Point-list transforms for curves.

Every function takes a sequence of CurvePoints and returns a new list;
the input is never modified. CurveDocument wraps these as fluent methods.

Callbacks given to map_points / filter_points receive
(point, index, snapshot) where snapshot is a tuple of the input taken
before the pass starts.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

import numpy as np

from bwcurve.core.curves.clipping import CLIP_FUNCTIONS, ClipAlgorithm, resolve_algorithm
from bwcurve.core.curves.models import CurvePoint
from bwcurve.core.errors import EmptyCurveError
from bwcurve.core.utils.logging import get_logger
from bwcurve.core.utils.math import clamp

logger = get_logger(__name__)

PointMapper = Callable[[CurvePoint, int, tuple[CurvePoint, ...]], CurvePoint]
PointPredicate = Callable[[CurvePoint, int, tuple[CurvePoint, ...]], bool]


def _require_points(points: Sequence[CurvePoint], operation: str) -> None:
    if not points:
        raise EmptyCurveError(f"{operation} requires at least one point")


def get_min_x(points: Sequence[CurvePoint]) -> float:
    """Smallest x of the curve.

    Raises:
        EmptyCurveError: If points is empty.
    """
    _require_points(points, "get_min_x")
    return min(p.x for p in points)


def get_max_x(points: Sequence[CurvePoint]) -> float:
    """Largest x of the curve.

    Raises:
        EmptyCurveError: If points is empty.
    """
    _require_points(points, "get_max_x")
    return max(p.x for p in points)


def get_min_y(points: Sequence[CurvePoint]) -> float:
    """Smallest y of the curve.

    Raises:
        EmptyCurveError: If points is empty.
    """
    _require_points(points, "get_min_y")
    return min(p.y for p in points)


def get_max_y(points: Sequence[CurvePoint]) -> float:
    """Largest y of the curve.

    Raises:
        EmptyCurveError: If points is empty.
    """
    _require_points(points, "get_max_y")
    return max(p.y for p in points)


def scale_x(points: Sequence[CurvePoint], factor: float) -> list[CurvePoint]:
    """Multiply every x by factor."""
    return [p.model_copy(update={"x": p.x * factor}) for p in points]


def scale_y(points: Sequence[CurvePoint], factor: float) -> list[CurvePoint]:
    """Multiply every y by factor."""
    return [p.model_copy(update={"y": p.y * factor}) for p in points]


def shift_x(points: Sequence[CurvePoint], offset: float) -> list[CurvePoint]:
    """Add offset to every x."""
    return [p.model_copy(update={"x": p.x + offset}) for p in points]


def shift_y(points: Sequence[CurvePoint], offset: float) -> list[CurvePoint]:
    """Add offset to every y."""
    return [p.model_copy(update={"y": p.y + offset}) for p in points]


def fit_in_x_range(points: Sequence[CurvePoint], min_x: float, max_x: float) -> list[CurvePoint]:
    """Normalize x so the curve spans [0, max_x - min_x].

    The minimum x is moved to 0 and the curve is scaled so its maximum
    becomes max_x - min_x. The result is NOT shifted by min_x; callers
    that want [min_x, max_x] follow up with shift_x(min_x).

    A curve whose points all share one x is only translated.

    Raises:
        EmptyCurveError: If points is empty.

    Example:
        >>> pts = [CurvePoint(x=2.0, y=0.0), CurvePoint(x=4.0, y=1.0)]
        >>> [p.x for p in fit_in_x_range(pts, 1.0, 2.0)]
        [0.0, 1.0]
    """
    _require_points(points, "fit_in_x_range")
    translated = shift_x(points, -get_min_x(points))
    span = get_max_x(translated)
    if span == 0:
        return translated
    return scale_x(translated, (max_x - min_x) / span)


def fit_in_y_range(points: Sequence[CurvePoint], min_y: float, max_y: float) -> list[CurvePoint]:
    """Normalize y so the curve spans [0, max_y - min_y].

    Same contract as fit_in_x_range, applied to y.

    Raises:
        EmptyCurveError: If points is empty.
    """
    _require_points(points, "fit_in_y_range")
    translated = shift_y(points, -get_min_y(points))
    span = get_max_y(translated)
    if span == 0:
        return translated
    return scale_y(translated, (max_y - min_y) / span)


def splice_points(
    points: Sequence[CurvePoint], other: Sequence[CurvePoint]
) -> list[CurvePoint]:
    """Append other after points, offset on x by the max x of points.

    An empty other leaves points unchanged; an empty points adopts other
    without any offset.
    """
    if not other:
        return list(points)
    if not points:
        return list(other)
    return [*points, *shift_x(other, get_max_x(points))]


def flatten_points(items: Iterable[CurvePoint | Iterable[CurvePoint]]) -> list[CurvePoint]:
    """Flatten a mix of points and point sequences, keeping order."""
    flat: list[CurvePoint] = []
    for item in items:
        if isinstance(item, CurvePoint):
            flat.append(item)
        else:
            flat.extend(item)
    return flat


def insert_at_x(points: Sequence[CurvePoint], point: CurvePoint) -> list[CurvePoint]:
    """Insert point before the first point with a strictly greater x.

    Appends when no such point exists. Equal x values are kept.
    """
    result = list(points)
    for i, existing in enumerate(result):
        if existing.x > point.x:
            result.insert(i, point)
            return result
    result.append(point)
    return result


def sort_points(points: Sequence[CurvePoint]) -> list[CurvePoint]:
    """Stable sort ascending by x."""
    return sorted(points, key=lambda p: p.x)


def reverse_points(points: Sequence[CurvePoint]) -> list[CurvePoint]:
    """Mirror the curve left-right inside its x domain.

    Point order is reversed and each x becomes max_x - x.
    """
    if not points:
        return []
    max_x = get_max_x(points)
    return [p.model_copy(update={"x": max_x - p.x}) for p in reversed(points)]


def invert_points(points: Sequence[CurvePoint]) -> list[CurvePoint]:
    """Flip the curve vertically: y becomes max_y - y."""
    if not points:
        return []
    max_y = get_max_y(points)
    return [p.model_copy(update={"y": max_y - p.y}) for p in points]


def clip_points(
    points: Sequence[CurvePoint], algorithm: ClipAlgorithm | str
) -> list[CurvePoint]:
    """Apply a waveshaping algorithm to every y.

    An unrecognized algorithm tag leaves the points unchanged.
    """
    resolved = resolve_algorithm(algorithm)
    if resolved is None:
        logger.debug(f"Ignoring unknown clip algorithm: {algorithm!r}")
        return list(points)
    if not points:
        return []

    ys = np.array([p.y for p in points], dtype=np.float64)
    shaped = CLIP_FUNCTIONS[resolved](ys)
    return [p.model_copy(update={"y": float(y)}) for p, y in zip(points, shaped, strict=True)]


def clamp_points(points: Sequence[CurvePoint]) -> list[CurvePoint]:
    """Force y into [0, 1] and slope into [-1, 1]; x is untouched."""
    return [
        p.model_copy(update={"y": clamp(p.y, 0.0, 1.0), "slope": clamp(p.slope, -1.0, 1.0)})
        for p in points
    ]


def map_points(points: Sequence[CurvePoint], fn: PointMapper) -> list[CurvePoint]:
    """Replace every point with fn(point, index, snapshot)."""
    snapshot = tuple(points)
    return [fn(p, i, snapshot) for i, p in enumerate(snapshot)]


def filter_points(points: Sequence[CurvePoint], fn: PointPredicate) -> list[CurvePoint]:
    """Keep the points for which fn(point, index, snapshot) is true."""
    snapshot = tuple(points)
    return [p for i, p in enumerate(snapshot) if fn(p, i, snapshot)]
