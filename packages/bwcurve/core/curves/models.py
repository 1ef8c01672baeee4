"""Curve schema models.

This module defines the value types a curve document is built from:
- CurvePoint: A single control point (x, y, slope)
- CurveCategory: Closed set of curve categories understood by the host
- CurveMetadata: Descriptive fields written alongside the points

Points carry no range validation. The host application expects y in [0, 1]
and slope in [-1, 1]; that is enforced by the explicit clamp transform.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# Host-side limit on free-form text fields. Documented only.
METADATA_TEXT_SOFT_LIMIT = 256


class CurvePoint(BaseModel):
    """A single control point of a curve.

    This model is immutable (frozen=True); transforms replace points
    instead of editing them.

    Attributes:
        x: Position along the curve.
        y: Value at x.
        slope: Curvature of the segment starting at this point.

    Example:
        >>> point = CurvePoint(x=0.5, y=0.7)
        >>> point.slope
        0.0
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    x: float = Field(..., description="Position along the curve")
    y: float = Field(..., description="Value at x (host expects [0,1])")
    slope: float = Field(default=0.0, description="Segment slope (host expects [-1,1])")


class CurveCategory(str, Enum):
    """Curve category stored in the document metadata.

    The value is the exact ASCII text written to the stream.
    """

    ENVELOPE = "Envelope"
    LOOKUP = "Lookup"
    PERIODIC = "Periodic"
    SEQUENCE = "Sequence"


class CurveMetadata(BaseModel):
    """Descriptive fields of a curve document.

    Every field has a default so a new document can be encoded right away.
    Text fields have a soft limit of METADATA_TEXT_SOFT_LIMIT characters
    imposed by the host; the model does not enforce it.

    Attributes:
        name: Display name of the curve.
        creator: Author shown by the host.
        description: Free-form comment.
        category: Curve category.
        tags: Ordered tags, duplicates allowed.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    name: str = "Untitled"
    creator: str = "Anonymous"
    description: str = " "
    category: CurveCategory = CurveCategory.ENVELOPE
    tags: list[str] = Field(default_factory=list)
