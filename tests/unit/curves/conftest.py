"""Shared pytest fixtures for curve tests."""

from __future__ import annotations

import pytest

from bwcurve.core.curves.models import CurvePoint


@pytest.fixture
def simple_linear_points() -> list[CurvePoint]:
    """Create simple linear curve points from 0 to 1."""
    return [
        CurvePoint(x=0.0, y=0.0),
        CurvePoint(x=0.5, y=0.5),
        CurvePoint(x=1.0, y=1.0),
    ]


@pytest.fixture
def offset_points() -> list[CurvePoint]:
    """Points spanning x in [2, 6] and y in [1, 3]."""
    return [
        CurvePoint(x=2.0, y=1.0),
        CurvePoint(x=4.0, y=3.0),
        CurvePoint(x=6.0, y=2.0),
    ]


@pytest.fixture
def out_of_range_points() -> list[CurvePoint]:
    """Points violating the host's y and slope ranges."""
    return [
        CurvePoint(x=0.0, y=-0.5, slope=-3.0),
        CurvePoint(x=1.0, y=0.5, slope=0.5),
        CurvePoint(x=2.0, y=1.5, slope=2.0),
    ]


@pytest.fixture
def unsorted_points() -> list[CurvePoint]:
    """Points out of x-order with a duplicate x (told apart by slope)."""
    return [
        CurvePoint(x=2.0, y=0.2),
        CurvePoint(x=1.0, y=0.1, slope=0.1),
        CurvePoint(x=0.0, y=0.0),
        CurvePoint(x=1.0, y=0.1, slope=0.2),
    ]
