"""BWCurve Parser - Decode .bwcurve tag streams into curve documents.

Decoding is strict: every structural constant is checked and the document
is only built once the whole stream, including the trailer index, has been
read and cross-checked. Any deviation raises FormatError; no partially
populated document is ever returned.
"""

from __future__ import annotations

from typing import Any

from bwcurve.core.curves.document import CurveDocument
from bwcurve.core.curves.models import CurveCategory, CurveMetadata, CurvePoint
from bwcurve.core.errors import FormatError
from bwcurve.core.formats.bitwig import constants as c
from bwcurve.core.formats.bitwig.revision import DEFAULT_REVISION, FormatRevision
from bwcurve.core.formats.bitwig.stream import ByteReader
from bwcurve.core.utils.logging import get_logger

logger = get_logger(__name__)


class BWCurveParser:
    """Decoder for .bwcurve documents.

    Example:
        >>> parser = BWCurveParser()
        >>> document = parser.parse_bytes(data)
        >>> print(f"{document.name}: {document.point_count} points")
    """

    def __init__(self, revision: FormatRevision = DEFAULT_REVISION) -> None:
        """Initialize parser.

        Args:
            revision: Host format revision the stream is expected to match.
        """
        self.revision = revision

    def parse_bytes(self, data: bytes | bytearray | memoryview) -> CurveDocument:
        """Decode a complete byte stream.

        Args:
            data: .bwcurve content

        Returns:
            Decoded CurveDocument

        Raises:
            FormatError: If the stream does not conform to the format
        """
        reader = ByteReader(data)
        logger.debug(f"Parsing bwcurve stream ({reader.remaining} bytes)")

        self._parse_header(reader)
        meta = self._parse_metadata(reader)
        points = self._parse_points(reader)
        index = self._parse_index(reader)

        if reader.remaining:
            raise FormatError(f"{reader.remaining} unexpected trailing bytes", reader.position)

        self._check_index(meta, index)
        self._check_revision(meta)

        metadata = CurveMetadata(
            name=index["name"],
            creator=meta[c.KEY_CREATOR],
            description=meta[c.KEY_COMMENT],
            category=index["category"],
            tags=meta[c.KEY_TAGS],
        )
        return CurveDocument(points=points, metadata=metadata)

    def _parse_header(self, reader: ByteReader) -> None:
        reader.expect(self.revision.signature, "header signature")
        reader.expect(c.SPACER, "header spacer")
        reader.expect(c.HEADER_CONTAINER, "header container")
        reader.expect(c.SPACER, "header spacer")

    def _parse_metadata(self, reader: ByteReader) -> dict[str, Any]:
        reader.expect(c.META_BLOCK_KEY, "metadata block key")
        reader.expect(c.SPACER, "metadata spacer")

        meta: dict[str, Any] = {}
        for key, type_tag in c.META_FIELDS:
            reader.expect(c.FIELD_ENTRY, f"{key} entry marker")
            reader.expect(c.SPACER, f"{key} spacer")

            key_start = reader.position
            actual_key = reader.text("metadata key")
            if actual_key != key:
                raise FormatError(
                    f"Expected metadata key {key!r}, got {actual_key!r}", offset=key_start
                )

            tag_start = reader.position
            actual_tag = reader.byte(f"{key} type tag")
            if actual_tag != type_tag:
                raise FormatError(
                    f"Metadata {key!r} has type tag {actual_tag:#04x}, expected {type_tag:#04x}",
                    offset=tag_start,
                )
            reader.expect(c.SPACER, f"{key} spacer")
            meta[key] = self._parse_value(reader, key, type_tag)
            reader.expect(c.SPACER, f"{key} spacer")

        reader.expect(c.META_END, "metadata end marker")
        return meta

    def _parse_value(self, reader: ByteReader, key: str, type_tag: int) -> Any:
        if type_tag == c.TYPE_INT:
            return reader.uint32(key)
        if type_tag == c.TYPE_STRING_LIST:
            count = reader.byte(f"{key} count")
            items = []
            for _ in range(count):
                reader.expect(c.SPACER, f"{key} item spacer")
                items.append(reader.text(key))
            return items
        return reader.text(key)

    def _parse_points(self, reader: ByteReader) -> list[CurvePoint]:
        reader.expect(c.POINTS_DECLARATION, "points declaration")
        count_start = reader.position
        declared = reader.uint32("point count")

        needed = declared * c.POINT_RECORD_SIZE
        if needed > reader.remaining:
            raise FormatError(
                f"Point count {declared} needs {needed} bytes, {reader.remaining} left",
                offset=count_start,
            )

        points: list[CurvePoint] = []
        for i in range(declared):
            reader.expect(c.POINT_Y_TAG, f"point {i} y tag")
            y = reader.double(f"point {i} y")
            reader.expect(c.POINT_X_TAG, f"point {i} x tag")
            x = reader.double(f"point {i} x")
            reader.expect(c.POINT_SLOPE_TAG, f"point {i} slope tag")
            slope = reader.double(f"point {i} slope")
            reader.expect(c.POINT_RECORD_END, f"point {i} record end")
            points.append(CurvePoint(x=x, y=y, slope=slope))

        reader.expect(c.POINTS_END, "points terminator")
        end_start = reader.position
        closing = reader.uint32("closing point count")
        if closing != declared:
            raise FormatError(
                f"Point count mismatch: declared {declared}, terminator says {closing}",
                offset=end_start,
            )
        return points

    def _parse_index(self, reader: ByteReader) -> dict[str, Any]:
        reader.expect(c.INDEX_DECLARATION, "index declaration")
        index: dict[str, Any] = {
            "name": reader.cstring("index name"),
            "creator": reader.cstring("index creator"),
            "description": reader.cstring("index description"),
        }
        category_start = reader.position
        category = reader.cstring("index category")
        try:
            index["category"] = CurveCategory(category)
        except ValueError as e:
            raise FormatError(f"Unknown curve category {category!r}", category_start) from e
        index["tags"] = reader.cstring("index tags")
        reader.expect(c.STREAM_END, "stream end marker")
        return index

    def _check_index(self, meta: dict[str, Any], index: dict[str, Any]) -> None:
        """Verify the trailer index repeats the metadata block."""
        pairs = (
            ("creator", meta[c.KEY_CREATOR], index["creator"]),
            ("description", meta[c.KEY_COMMENT], index["description"]),
            ("category", meta[c.KEY_CURVE_CATEGORY], index["category"].value),
            ("tags", c.TAG_SEPARATOR.join(meta[c.KEY_TAGS]), index["tags"]),
        )
        for field, from_meta, from_index in pairs:
            if from_meta != from_index:
                raise FormatError(
                    f"Index {field} {from_index!r} disagrees with metadata {from_meta!r}"
                )

    def _check_revision(self, meta: dict[str, Any]) -> None:
        """Warn when revision-specific values differ from the expected revision."""
        rev = self.revision
        expected = {
            c.KEY_APPLICATION_VERSION: rev.application_version,
            c.KEY_BRANCH: rev.branch,
            c.KEY_CURVE_KIND: rev.curve_kind,
            c.KEY_REVISION_ID: rev.revision_id,
            c.KEY_REVISION_NO: rev.revision_no,
            c.KEY_MIME_TYPE: rev.mime_type,
        }
        for key, value in expected.items():
            if meta[key] != value:
                logger.warning(f"Stream {key} is {meta[key]!r}, expected {value!r}")


def decode(
    data: bytes | bytearray | memoryview, revision: FormatRevision = DEFAULT_REVISION
) -> CurveDocument:
    """Decode a byte stream with the given format revision."""
    return BWCurveParser(revision).parse_bytes(data)
