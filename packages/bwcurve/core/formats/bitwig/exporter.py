"""BWCurve Exporter - Encode curve documents into the .bwcurve tag stream.

The exporter writes four blocks in order: header, metadata, points and the
trailer index. Output depends only on the document state and the format
revision, so encoding an unchanged document always yields the same bytes.
"""

from __future__ import annotations

from bwcurve.core.curves.document import CurveDocument
from bwcurve.core.errors import EncodeError
from bwcurve.core.formats.bitwig import constants as c
from bwcurve.core.formats.bitwig.revision import DEFAULT_REVISION, FormatRevision
from bwcurve.core.formats.bitwig.stream import ByteWriter
from bwcurve.core.utils.logging import get_logger

logger = get_logger(__name__)

MetaValue = str | int | list[str]


class BWCurveExporter:
    """Encoder for .bwcurve documents.

    Example:
        >>> exporter = BWCurveExporter()
        >>> data = exporter.export(CurveDocument())
        >>> data[:4]
        b'BtWg'
    """

    def __init__(self, revision: FormatRevision = DEFAULT_REVISION) -> None:
        """Initialize exporter.

        Args:
            revision: Host format revision to write.
        """
        self.revision = revision

    def export(self, document: CurveDocument) -> bytes:
        """Encode a document.

        Args:
            document: Curve to encode

        Returns:
            Complete .bwcurve byte stream

        Raises:
            EncodeError: If metadata text is not ASCII, contains NUL, or a
                length-prefixed field exceeds 255 characters
        """
        writer = ByteWriter()
        self._write_header(writer)
        self._write_metadata(writer, document)
        self._write_points(writer, document)
        self._write_index(writer, document)

        data = writer.getvalue()
        logger.debug(
            f"Encoded curve {document.name!r}: {document.point_count} points, {len(data)} bytes"
        )
        return data

    def _write_header(self, writer: ByteWriter) -> None:
        writer.raw(self.revision.signature).spacer().raw(c.HEADER_CONTAINER).spacer()

    def _meta_values(self, document: CurveDocument) -> dict[str, MetaValue]:
        rev = self.revision
        return {
            c.KEY_APPLICATION_VERSION: rev.application_version,
            c.KEY_BRANCH: rev.branch,
            c.KEY_COMMENT: document.description,
            c.KEY_CREATOR: document.creator,
            c.KEY_CURVE_CATEGORY: document.category.value,
            c.KEY_CURVE_KIND: rev.curve_kind,
            c.KEY_REVISION_ID: rev.revision_id,
            c.KEY_REVISION_NO: rev.revision_no,
            c.KEY_TAGS: document.tags,
            c.KEY_MIME_TYPE: rev.mime_type,
        }

    def _write_metadata(self, writer: ByteWriter, document: CurveDocument) -> None:
        values = self._meta_values(document)

        writer.raw(c.META_BLOCK_KEY).spacer()
        for key, type_tag in c.META_FIELDS:
            writer.raw(c.FIELD_ENTRY).spacer().text(key, "metadata key")
            writer.byte(type_tag).spacer()
            self._write_value(writer, key, type_tag, values[key])
            writer.spacer()
        writer.raw(c.META_END)

    def _write_value(self, writer: ByteWriter, key: str, type_tag: int, value: MetaValue) -> None:
        if type_tag == c.TYPE_STRING and isinstance(value, str):
            writer.text(value, key)
        elif type_tag == c.TYPE_INT and isinstance(value, int):
            writer.uint32(value)
        elif type_tag == c.TYPE_STRING_LIST and isinstance(value, list):
            writer.count(len(value), key)
            for item in value:
                writer.spacer().text(item, key)
        else:
            raise EncodeError(f"Value for {key} does not match type tag {type_tag:#04x}")

    def _write_points(self, writer: ByteWriter, document: CurveDocument) -> None:
        points = document.points
        writer.raw(c.POINTS_DECLARATION).uint32(len(points))
        for point in points:
            writer.raw(c.POINT_Y_TAG).double(point.y)
            writer.raw(c.POINT_X_TAG).double(point.x)
            writer.raw(c.POINT_SLOPE_TAG).double(point.slope)
            writer.raw(c.POINT_RECORD_END)
        writer.raw(c.POINTS_END).uint32(len(points))

    def _write_index(self, writer: ByteWriter, document: CurveDocument) -> None:
        writer.raw(c.INDEX_DECLARATION)
        writer.cstring(document.name, "name")
        writer.cstring(document.creator, "creator")
        writer.cstring(document.description, "description")
        writer.cstring(document.category.value, "category")
        writer.cstring(c.TAG_SEPARATOR.join(document.tags), "tags")
        writer.raw(c.STREAM_END)


def encode(document: CurveDocument, revision: FormatRevision = DEFAULT_REVISION) -> bytes:
    """Encode a document with the given format revision."""
    return BWCurveExporter(revision).export(document)
