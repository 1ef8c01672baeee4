"""Binary constants of the .bwcurve tag stream.

Every fixed byte sequence the codec writes or expects lives here. Values
that change between host releases are defaults for FormatRevision
(see revision.py); everything else is structural and shared by all
revisions.

Stream layout (S = SPACER, L = one length byte):

    header    SIGNATURE S 04 S
    metadata  04 "meta" S
              { 01 S L key TYPE S value S } * len(META_FIELDS)
              00
    points    POINTS_DECLARATION count(>I)
              { POINT_Y_TAG y(>d) POINT_X_TAG x(>d) POINT_SLOPE_TAG slope(>d) POINT_RECORD_END }
              POINTS_END count(>I)
    trailer   INDEX_DECLARATION name\\0 creator\\0 description\\0 category\\0 tags\\0
              STREAM_END
"""

from __future__ import annotations

import struct

# -----------------------------------------------------------------------------
# Structural bytes
# -----------------------------------------------------------------------------

SPACER = b"\x00\x00\x00"

HEADER_CONTAINER = b"\x04"

META_BLOCK_KEY = b"\x04meta"
FIELD_ENTRY = b"\x01"
META_END = b"\x00"

# Value type tags inside the metadata block
TYPE_INT = 0x05
TYPE_STRING = 0x08
TYPE_STRING_LIST = 0x19

# Length bytes are a single byte
MAX_FIELD_LENGTH = 0xFF

# -----------------------------------------------------------------------------
# Metadata field table (order is part of the format)
# -----------------------------------------------------------------------------

KEY_APPLICATION_VERSION = "application_version_name"
KEY_BRANCH = "branch"
KEY_COMMENT = "comment"
KEY_CREATOR = "creator"
KEY_CURVE_CATEGORY = "curve_category"
KEY_CURVE_KIND = "curve_kind"
KEY_REVISION_ID = "revision_id"
KEY_REVISION_NO = "revision_no"
KEY_TAGS = "tags"
KEY_MIME_TYPE = "type"

META_FIELDS: tuple[tuple[str, int], ...] = (
    (KEY_APPLICATION_VERSION, TYPE_STRING),
    (KEY_BRANCH, TYPE_STRING),
    (KEY_COMMENT, TYPE_STRING),
    (KEY_CREATOR, TYPE_STRING),
    (KEY_CURVE_CATEGORY, TYPE_STRING),
    (KEY_CURVE_KIND, TYPE_STRING),
    (KEY_REVISION_ID, TYPE_STRING),
    (KEY_REVISION_NO, TYPE_INT),
    (KEY_TAGS, TYPE_STRING_LIST),
    (KEY_MIME_TYPE, TYPE_STRING),
)

# -----------------------------------------------------------------------------
# Points block
# -----------------------------------------------------------------------------

POINTS_DECLARATION = SPACER + b"\x06points\x12" + SPACER

POINT_Y_TAG = bytes.fromhex("01 00 00 01 2a 00 07")
POINT_X_TAG = bytes.fromhex("00 00 01 2b 07")
POINT_SLOPE_TAG = bytes.fromhex("00 00 01 2c 07")
POINT_RECORD_END = bytes.fromhex("00 00 00 00 00")

POINTS_END = b"\x03" + SPACER

DOUBLE = struct.Struct(">d")
UINT32 = struct.Struct(">I")

POINT_RECORD_SIZE = (
    len(POINT_Y_TAG)
    + len(POINT_X_TAG)
    + len(POINT_SLOPE_TAG)
    + len(POINT_RECORD_END)
    + 3 * DOUBLE.size
)  # = 46

# -----------------------------------------------------------------------------
# Trailer (index) block
# -----------------------------------------------------------------------------

INDEX_DECLARATION = SPACER + b"\x05index\x00"
NUL = b"\x00"
TAG_SEPARATOR = ","
STREAM_END = SPACER + b"\x0b"

# -----------------------------------------------------------------------------
# Revision defaults (host 5.2.2)
# -----------------------------------------------------------------------------

SIGNATURE_MAGIC = b"BtWg"
SIGNATURE_LENGTH = 42

# "BtWg" + "0003" + "0002" + "00000000" + "155e" + 18 x "0"
REFERENCE_SIGNATURE = bytes.fromhex(
    "42 74 57 67 30 30 30 33 30 30 30 32 30 30 30 30 30 30 30 30"
    " 31 35 35 65 30 30 30 30 30 30 30 30 30 30 30 30 30 30 30 30 30 30"
)

REFERENCE_APPLICATION_VERSION = "5.2.2"
REFERENCE_BRANCH = "releases"
REFERENCE_REVISION_ID = "0d3a1c5e9b7f24c68e0a5b3d71f9c2e4a6b8d0f1"
REFERENCE_REVISION_NO = 0x155E
REFERENCE_CURVE_KIND = "curve"
REFERENCE_MIME_TYPE = "application/bitwig-curve"
