"""Shared pytest fixtures for bwcurve tests."""

from __future__ import annotations

import pytest

from bwcurve.core.curves.document import CurveDocument
from bwcurve.core.curves.models import CurveCategory, CurvePoint

# ============================================================================
# Document Fixtures
# ============================================================================


@pytest.fixture
def ramp_document() -> CurveDocument:
    """Two-point rising ramp over x in [0, 1]."""
    return CurveDocument().push_points(
        CurvePoint(x=0.0, y=0.0),
        CurvePoint(x=1.0, y=1.0),
    )


@pytest.fixture
def triangle_document() -> CurveDocument:
    """Rise-and-fall triangle over x in [0, 2]."""
    return CurveDocument().push_points(
        CurvePoint(x=0.0, y=0.0),
        CurvePoint(x=1.0, y=1.0),
        CurvePoint(x=2.0, y=0.0),
    )


@pytest.fixture
def described_document() -> CurveDocument:
    """Document with every metadata field set and curved points."""
    return (
        CurveDocument()
        .set_name("Swell")
        .set_creator("Jo")
        .set_description("slow swell into a plateau")
        .set_category(CurveCategory.PERIODIC)
        .set_tags(["pad", "slow", "pad"])
        .push_points(
            CurvePoint(x=0.0, y=0.1, slope=0.25),
            CurvePoint(x=0.5, y=0.9, slope=-0.75),
            CurvePoint(x=1.0, y=0.8),
        )
    )
