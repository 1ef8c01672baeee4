"""Shared utilities for bwcurve."""

from bwcurve.core.utils.logging import configure_logging, get_logger
from bwcurve.core.utils.math import clamp, lerp

__all__ = [
    "clamp",
    "configure_logging",
    "get_logger",
    "lerp",
]
