"""Curve document: ordered control points plus metadata.

CurveDocument owns all mutation of a curve. Mutating methods change the
document in place and return it, so operations chain left to right:

    >>> doc = CurveDocument().set_name("Ramp").push_points(
    ...     CurvePoint(x=0.0, y=0.0), CurvePoint(x=1.0, y=1.0)
    ... ).double()
    >>> doc.point_count
    4

Index policy: get() and remove_point() raise PointIndexError for any index
outside [0, point_count). Negative indices are not supported.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any, TypeVar

from bwcurve.core.curves import transforms
from bwcurve.core.curves.clipping import ClipAlgorithm
from bwcurve.core.curves.models import CurveCategory, CurveMetadata, CurvePoint
from bwcurve.core.errors import PointIndexError
from bwcurve.core.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

# Converter signature: (element, index, source) -> {x, y, slope?} or CurvePoint
PointConverter = Callable[[T, int, Sequence[T]], Mapping[str, Any] | CurvePoint]


def _to_point(converted: Mapping[str, Any] | CurvePoint) -> CurvePoint:
    """Build a CurvePoint from converter output; a missing slope is 0.0."""
    if isinstance(converted, CurvePoint):
        return converted
    slope = converted.get("slope")
    return CurvePoint(
        x=converted["x"],
        y=converted["y"],
        slope=0.0 if slope is None else slope,
    )


class CurveDocument:
    """A curve: an ordered list of CurvePoints and its CurveMetadata.

    Points are kept in insertion order; x-ordering is a convention that only
    sort() and insert_point_at_x() enforce.

    Args:
        points: Initial points (copied).
        metadata: Initial metadata (copied). Defaults to CurveMetadata().
    """

    def __init__(
        self,
        points: Iterable[CurvePoint] | None = None,
        metadata: CurveMetadata | None = None,
    ) -> None:
        self._points: list[CurvePoint] = list(points) if points is not None else []
        self._metadata = (
            metadata.model_copy(deep=True) if metadata is not None else CurveMetadata()
        )

    def __repr__(self) -> str:
        return (
            f"CurveDocument(name={self._metadata.name!r}, "
            f"category={self._metadata.category.value!r}, points={len(self._points)})"
        )

    def __len__(self) -> int:
        return len(self._points)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CurveDocument):
            return NotImplemented
        return self._metadata == other._metadata and self._points == other._points

    __hash__ = None  # type: ignore[assignment]

    # ------------------------------------------------------------------
    # Points
    # ------------------------------------------------------------------

    @property
    def points(self) -> tuple[CurvePoint, ...]:
        """Snapshot of the current points."""
        return tuple(self._points)

    @property
    def point_count(self) -> int:
        return len(self._points)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._points):
            raise PointIndexError(
                f"Point index {index} out of range for curve with {len(self._points)} points"
            )

    def get(self, index: int) -> CurvePoint:
        """Return the point at index.

        Raises:
            PointIndexError: If index is outside [0, point_count).
        """
        self._check_index(index)
        return self._points[index]

    def add_point(self, point: CurvePoint) -> CurveDocument:
        """Append a point."""
        self._points.append(point)
        return self

    def remove_point(self, index: int) -> CurveDocument:
        """Delete the point at index.

        Raises:
            PointIndexError: If index is outside [0, point_count).
        """
        self._check_index(index)
        del self._points[index]
        return self

    def set_points(self, source: Sequence[T], converter: PointConverter[T]) -> CurveDocument:
        """Replace all points with converted source elements.

        The converter is called as converter(element, index, source) and
        returns a mapping with "x", "y" and optionally "slope" (default 0.0),
        or a CurvePoint. Previous points are discarded.

        Args:
            source: Arbitrary ordered input (e.g. audio samples).
            converter: Element-to-point conversion.
        """
        self._points = [_to_point(converter(item, i, source)) for i, item in enumerate(source)]
        logger.debug(f"Set {len(self._points)} points on curve {self._metadata.name!r}")
        return self

    def push_points(self, *items: CurvePoint | Iterable[CurvePoint]) -> CurveDocument:
        """Append points or sequences of points in argument order."""
        self._points.extend(transforms.flatten_points(items))
        return self

    def insert_point_at_x(self, point: CurvePoint) -> CurveDocument:
        """Insert point keeping x-order (before the first greater x)."""
        self._points = transforms.insert_at_x(self._points, point)
        return self

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    @property
    def metadata(self) -> CurveMetadata:
        """Copy of the document metadata."""
        return self._metadata.model_copy(deep=True)

    @property
    def name(self) -> str:
        return self._metadata.name

    @name.setter
    def name(self, value: str) -> None:
        self._metadata.name = value

    @property
    def creator(self) -> str:
        return self._metadata.creator

    @creator.setter
    def creator(self, value: str) -> None:
        self._metadata.creator = value

    # The host labels the creator field "author"
    author = creator

    @property
    def description(self) -> str:
        return self._metadata.description

    @description.setter
    def description(self, value: str) -> None:
        self._metadata.description = value

    @property
    def category(self) -> CurveCategory:
        return self._metadata.category

    @category.setter
    def category(self, value: CurveCategory | str) -> None:
        self._metadata.category = CurveCategory(value)

    @property
    def tags(self) -> list[str]:
        """Copy of the tag list."""
        return list(self._metadata.tags)

    @tags.setter
    def tags(self, value: Iterable[str]) -> None:
        self._metadata.tags = list(value)

    def set_name(self, name: str) -> CurveDocument:
        self.name = name
        return self

    def set_creator(self, creator: str) -> CurveDocument:
        self.creator = creator
        return self

    def set_description(self, description: str) -> CurveDocument:
        self.description = description
        return self

    def set_category(self, category: CurveCategory | str) -> CurveDocument:
        self.category = category
        return self

    def set_tags(self, tags: Iterable[str]) -> CurveDocument:
        self.tags = tags
        return self

    def add_tag(self, tag: str) -> CurveDocument:
        """Append a tag. Duplicates are kept."""
        self._metadata.tags = [*self._metadata.tags, tag]
        return self

    def remove_tag(self, tag: str) -> CurveDocument:
        """Remove every occurrence of tag. Absent tags are ignored."""
        self._metadata.tags = [t for t in self._metadata.tags if t != tag]
        return self

    # ------------------------------------------------------------------
    # Copying
    # ------------------------------------------------------------------

    def clone(self) -> CurveDocument:
        """Deep copy sharing no point list or metadata with this document."""
        return CurveDocument(
            points=[p.model_copy() for p in self._points],
            metadata=self._metadata,
        )

    # ------------------------------------------------------------------
    # Extrema
    # ------------------------------------------------------------------

    def get_min_x(self) -> float:
        return transforms.get_min_x(self._points)

    def get_max_x(self) -> float:
        return transforms.get_max_x(self._points)

    def get_min_y(self) -> float:
        return transforms.get_min_y(self._points)

    def get_max_y(self) -> float:
        return transforms.get_max_y(self._points)

    # ------------------------------------------------------------------
    # Transform pipeline
    # ------------------------------------------------------------------

    def scale_x(self, factor: float) -> CurveDocument:
        self._points = transforms.scale_x(self._points, factor)
        return self

    def scale_y(self, factor: float) -> CurveDocument:
        self._points = transforms.scale_y(self._points, factor)
        return self

    def shift_x(self, offset: float) -> CurveDocument:
        self._points = transforms.shift_x(self._points, offset)
        return self

    def fit_in_x_range(self, min_x: float, max_x: float) -> CurveDocument:
        """Normalize x to [0, max_x - min_x] (min_x is not added back)."""
        self._points = transforms.fit_in_x_range(self._points, min_x, max_x)
        return self

    def fit_in_y_range(self, min_y: float, max_y: float) -> CurveDocument:
        """Normalize y to [0, max_y - min_y] (min_y is not added back)."""
        self._points = transforms.fit_in_y_range(self._points, min_y, max_y)
        return self

    def splice_curve(self, other: CurveDocument) -> CurveDocument:
        """Append other's points after this curve, offset by this max x.

        other is read, never modified.
        """
        self._points = transforms.splice_points(self._points, other._points)
        return self

    def sort(self) -> CurveDocument:
        self._points = transforms.sort_points(self._points)
        return self

    def reverse(self) -> CurveDocument:
        self._points = transforms.reverse_points(self._points)
        return self

    def invert(self) -> CurveDocument:
        self._points = transforms.invert_points(self._points)
        return self

    def double(self) -> CurveDocument:
        """Halve the x scale, then splice a copy of the halved curve."""
        self.scale_x(0.5)
        return self.splice_curve(self.clone())

    def mirror(self) -> CurveDocument:
        """Halve the x scale, then splice a reversed copy of the halved curve."""
        self.scale_x(0.5)
        return self.splice_curve(self.clone().reverse())

    def repeat(self, n: int, fn: DocumentTransform) -> CurveDocument:
        """Apply fn n times, feeding each result into the next call.

        Raises:
            ValueError: If n is negative.
        """
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")
        result: CurveDocument = self
        for _ in range(n):
            result = fn(result)
        return result

    def clip(self, algorithm: ClipAlgorithm | str) -> CurveDocument:
        """Waveshape every y. Unknown algorithm tags are ignored."""
        self._points = transforms.clip_points(self._points, algorithm)
        return self

    def clamp(self) -> CurveDocument:
        """Force y into [0, 1] and slope into [-1, 1]."""
        self._points = transforms.clamp_points(self._points)
        return self

    def map(self, fn: transforms.PointMapper) -> CurveDocument:
        self._points = transforms.map_points(self._points, fn)
        return self

    def filter(self, fn: transforms.PointPredicate) -> CurveDocument:
        self._points = transforms.filter_points(self._points, fn)
        return self


DocumentTransform = Callable[[CurveDocument], CurveDocument]
