"""Shared fixtures for .bwcurve codec tests."""

from __future__ import annotations

import pytest

from bwcurve.core.curves.document import CurveDocument
from bwcurve.core.formats.bitwig import constants as c
from bwcurve.core.formats.bitwig.exporter import encode


@pytest.fixture
def default_bytes() -> bytes:
    """Encoded default document: no points, default metadata."""
    return encode(CurveDocument())


@pytest.fixture
def ramp_bytes(ramp_document: CurveDocument) -> bytes:
    """Encoded two-point ramp."""
    return encode(ramp_document)


@pytest.fixture
def points_offset(ramp_bytes: bytes) -> int:
    """Offset of the declared point count in ramp_bytes."""
    return ramp_bytes.index(c.POINTS_DECLARATION) + len(c.POINTS_DECLARATION)
