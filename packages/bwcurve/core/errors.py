"""Exception types raised by bwcurve.

All errors derive from CurveError so callers can catch the whole family,
and each also derives from the closest builtin so generic handlers
(ValueError, IndexError) keep working.
"""

from __future__ import annotations


class CurveError(Exception):
    """Base exception for all curve model and codec errors."""


class FormatError(CurveError, ValueError):
    """Byte stream is malformed or does not match the expected format.

    Attributes:
        offset: Byte position where parsing failed (None if unknown)
    """

    def __init__(self, message: str, offset: int | None = None) -> None:
        self.message = message
        self.offset = offset
        super().__init__(str(self))

    def __str__(self) -> str:
        """Format error with the failing offset when known."""
        if self.offset is None:
            return self.message
        return f"{self.message} (at byte {self.offset})"


class EncodeError(CurveError, ValueError):
    """Document state cannot be represented in the binary format."""


class EmptyCurveError(CurveError, ValueError):
    """Operation needs at least one point but the curve is empty."""


class PointIndexError(CurveError, IndexError):
    """Point index is outside the document's point sequence."""


class UnsupportedInterpolationError(CurveError, NotImplementedError):
    """Interpolation mode is not available for the given segment."""
