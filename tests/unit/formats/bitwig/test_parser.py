"""Tests for the .bwcurve parser."""

from __future__ import annotations

import logging

import pytest

from bwcurve.core.curves.document import CurveDocument
from bwcurve.core.curves.models import CurveCategory, CurvePoint
from bwcurve.core.errors import FormatError
from bwcurve.core.formats.bitwig import constants as c
from bwcurve.core.formats.bitwig.exporter import encode
from bwcurve.core.formats.bitwig.parser import BWCurveParser, decode
from bwcurve.core.formats.bitwig.revision import FormatRevision


def _replace_at(data: bytes, offset: int, chunk: bytes) -> bytes:
    return data[:offset] + chunk + data[offset + len(chunk) :]


class TestRoundTrip:
    """decode(encode(doc)) reproduces the document."""

    def test_default_document(self, default_bytes: bytes) -> None:
        assert decode(default_bytes) == CurveDocument()

    def test_ramp(self, ramp_document: CurveDocument, ramp_bytes: bytes) -> None:
        assert decode(ramp_bytes) == ramp_document

    def test_described_document(self, described_document: CurveDocument) -> None:
        """Metadata, duplicate tags and slopes survive."""
        decoded = decode(encode(described_document))
        assert decoded == described_document
        assert decoded.name == "Swell"
        assert decoded.tags == ["pad", "slow", "pad"]
        assert decoded.category is CurveCategory.PERIODIC
        assert [p.slope for p in decoded.points] == [0.25, -0.75, 0.0]

    def test_unsorted_points_keep_order(self) -> None:
        doc = CurveDocument(points=[CurvePoint(x=1.0, y=0.0), CurvePoint(x=0.0, y=1.0)])
        assert decode(encode(doc)).points == doc.points

    def test_extreme_doubles(self) -> None:
        doc = CurveDocument(points=[CurvePoint(x=-1e300, y=1e-300, slope=-0.0)])
        assert decode(encode(doc)).get(0) == doc.get(0)

    def test_reencode_is_identical(self, described_document: CurveDocument) -> None:
        data = encode(described_document)
        assert encode(decode(data)) == data

    @pytest.mark.parametrize("wrap", [bytearray, memoryview])
    def test_accepts_buffer_types(self, ramp_bytes: bytes, wrap) -> None:
        assert decode(wrap(ramp_bytes)) == decode(ramp_bytes)


class TestHeaderErrors:
    """Tests for header validation."""

    def test_bad_magic(self, ramp_bytes: bytes) -> None:
        with pytest.raises(FormatError) as exc_info:
            decode(b"X" + ramp_bytes[1:])
        assert exc_info.value.offset == 0

    def test_empty_input(self) -> None:
        with pytest.raises(FormatError) as exc_info:
            decode(b"")
        assert "Truncated" in str(exc_info.value)

    def test_signature_of_other_revision(self, ramp_document: CurveDocument) -> None:
        other = FormatRevision(signature=b"BtWg" + b"9" * (c.SIGNATURE_LENGTH - 4))
        with pytest.raises(FormatError):
            decode(encode(ramp_document, other))

    def test_parser_with_matching_revision(self, ramp_document: CurveDocument) -> None:
        other = FormatRevision(signature=b"BtWg" + b"9" * (c.SIGNATURE_LENGTH - 4))
        assert BWCurveParser(other).parse_bytes(encode(ramp_document, other)) == ramp_document

    def test_bad_container_byte(self, ramp_bytes: bytes) -> None:
        offset = c.SIGNATURE_LENGTH + len(c.SPACER)
        with pytest.raises(FormatError) as exc_info:
            decode(_replace_at(ramp_bytes, offset, b"\x05"))
        assert exc_info.value.offset == offset


class TestTruncation:
    """Every prefix of a valid stream is rejected."""

    @pytest.mark.parametrize("keep", [1, 41, 45, 60, 200])
    def test_prefix_rejected(self, ramp_bytes: bytes, keep: int) -> None:
        with pytest.raises(FormatError):
            decode(ramp_bytes[:keep])

    @pytest.mark.parametrize("drop", [1, 4, 5, 20, 50, 100])
    def test_missing_tail_rejected(self, ramp_bytes: bytes, drop: int) -> None:
        with pytest.raises(FormatError):
            decode(ramp_bytes[:-drop])

    def test_trailing_bytes_rejected(self, ramp_bytes: bytes) -> None:
        with pytest.raises(FormatError) as exc_info:
            decode(ramp_bytes + b"\x00")
        assert exc_info.value.offset == len(ramp_bytes)


class TestMetadataErrors:
    """Tests for metadata block validation."""

    def test_wrong_key(self, ramp_bytes: bytes) -> None:
        corrupted = ramp_bytes.replace(b"\x06branch", b"\x06brunch", 1)
        with pytest.raises(FormatError, match="branch"):
            decode(corrupted)

    def test_wrong_type_tag(self, ramp_bytes: bytes) -> None:
        corrupted = ramp_bytes.replace(b"\x06branch\x08", b"\x06branch\x05", 1)
        with pytest.raises(FormatError, match="type tag"):
            decode(corrupted)

    def test_length_past_end(self) -> None:
        """A length byte pointing past the data is a truncation."""
        data = encode(CurveDocument())
        cut = data.index(b"\x08releases") + 3
        with pytest.raises(FormatError, match="Truncated"):
            decode(data[:cut])


class TestPointErrors:
    """Tests for points block validation."""

    def test_bad_point_tag(self, ramp_bytes: bytes, points_offset: int) -> None:
        record = points_offset + c.UINT32.size
        with pytest.raises(FormatError) as exc_info:
            decode(_replace_at(ramp_bytes, record, b"\x02"))
        assert exc_info.value.offset == record

    def test_bad_slope_tag(self, ramp_bytes: bytes, points_offset: int) -> None:
        slope_tag = points_offset + c.UINT32.size + 7 + 8 + 5 + 8
        with pytest.raises(FormatError, match="slope tag"):
            decode(_replace_at(ramp_bytes, slope_tag, b"\x09"))

    def test_declared_count_too_large(self, ramp_bytes: bytes, points_offset: int) -> None:
        corrupted = _replace_at(ramp_bytes, points_offset, c.UINT32.pack(1000))
        with pytest.raises(FormatError) as exc_info:
            decode(corrupted)
        assert exc_info.value.offset == points_offset

    def test_declared_count_too_small(self, ramp_bytes: bytes, points_offset: int) -> None:
        corrupted = _replace_at(ramp_bytes, points_offset, c.UINT32.pack(1))
        with pytest.raises(FormatError):
            decode(corrupted)

    def test_terminator_count_mismatch(self, ramp_bytes: bytes, points_offset: int) -> None:
        closing = (
            points_offset + c.UINT32.size + 2 * c.POINT_RECORD_SIZE + len(c.POINTS_END)
        )
        corrupted = _replace_at(ramp_bytes, closing, c.UINT32.pack(3))
        with pytest.raises(FormatError, match="mismatch") as exc_info:
            decode(corrupted)
        assert exc_info.value.offset == closing


class TestIndexErrors:
    """Tests for the trailer index."""

    def test_creator_disagrees(self, default_bytes: bytes) -> None:
        offset = default_bytes.rindex(b"Anonymous\x00")
        corrupted = _replace_at(default_bytes, offset, b"Anonymoux")
        with pytest.raises(FormatError, match="creator"):
            decode(corrupted)

    def test_unknown_category(self, default_bytes: bytes) -> None:
        offset = default_bytes.rindex(b"Envelope\x00")
        with pytest.raises(FormatError, match="Unknown curve category") as exc_info:
            decode(_replace_at(default_bytes, offset, b"Envelopf"))
        assert exc_info.value.offset == offset

    def test_metadata_category_disagrees(self, default_bytes: bytes) -> None:
        corrupted = default_bytes.replace(b"\x08Envelope", b"\x08Sequence", 1)
        with pytest.raises(FormatError, match="category"):
            decode(corrupted)

    def test_tags_disagree(self, described_document: CurveDocument) -> None:
        data = encode(described_document)
        offset = data.rindex(b"pad,slow,pad\x00")
        with pytest.raises(FormatError, match="tags"):
            decode(_replace_at(data, offset, b"pad,slow,pat"))

    def test_missing_stream_end(self, default_bytes: bytes) -> None:
        corrupted = default_bytes[: -len(c.STREAM_END)] + c.SPACER + b"\x0c"
        with pytest.raises(FormatError, match="stream end"):
            decode(corrupted)

    def test_name_is_read_from_index(self) -> None:
        data = encode(CurveDocument().set_name("Alpha"))
        corrupted = data.replace(b"Alpha\x00", b"Omega\x00")
        assert decode(corrupted).name == "Omega"


class TestRevisionCheck:
    """Revision-specific metadata only produces warnings."""

    def test_mismatch_logs_warning(
        self, ramp_document: CurveDocument, caplog: pytest.LogCaptureFixture
    ) -> None:
        data = encode(ramp_document, FormatRevision(branch="beta", revision_no=1))
        with caplog.at_level(logging.WARNING, logger="bwcurve.core.formats.bitwig.parser"):
            decoded = decode(data)
        assert decoded == ramp_document
        messages = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
        assert any("branch" in m and "beta" in m for m in messages)
        assert any("revision_no" in m for m in messages)

    def test_matching_revision_is_silent(
        self, ramp_bytes: bytes, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="bwcurve.core.formats.bitwig.parser"):
            decode(ramp_bytes)
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]
