"""Waveshaping (clip) functions for curve values.

Each algorithm maps y non-linearly while keeping the fixed point at 0.
The soft-knee variants (sin, cubic) saturate to sign(y) above 2/3.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

import numpy as np

# |y| above this saturates for the soft-knee algorithms
KNEE = 2.0 / 3.0


class ClipAlgorithm(str, Enum):
    """Waveshaping algorithms available to the clip transform."""

    TANH = "tanh"
    SIN = "sin"
    CUBIC = "cubic"


def clip_tanh(y: np.ndarray) -> np.ndarray:
    """Hard-driven hyperbolic tangent: tanh(5y)."""
    return np.tanh(5.0 * y)


def clip_sin(y: np.ndarray) -> np.ndarray:
    """Sine knee: sin(0.75*pi*y) inside the knee, sign(y) outside."""
    return np.where(np.abs(y) <= KNEE, np.sin(0.75 * np.pi * y), np.sign(y))


def clip_cubic(y: np.ndarray) -> np.ndarray:
    """Cubic knee: 2.25y - 1.6875y^3 inside the knee, sign(y) outside."""
    return np.where(np.abs(y) <= KNEE, 2.25 * y - 1.6875 * y**3, np.sign(y))


CLIP_FUNCTIONS: dict[ClipAlgorithm, Callable[[np.ndarray], np.ndarray]] = {
    ClipAlgorithm.TANH: clip_tanh,
    ClipAlgorithm.SIN: clip_sin,
    ClipAlgorithm.CUBIC: clip_cubic,
}


def resolve_algorithm(algorithm: ClipAlgorithm | str) -> ClipAlgorithm | None:
    """Look up a clip algorithm by enum or tag.

    Returns:
        The matching ClipAlgorithm, or None for an unrecognized tag.
    """
    if isinstance(algorithm, ClipAlgorithm):
        return algorithm
    try:
        return ClipAlgorithm(algorithm)
    except ValueError:
        return None
