"""Format revision: the version-dependent values of the tag stream."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bwcurve.core.formats.bitwig import constants as c


class FormatRevision(BaseModel):
    """Host-release specific values written into every document.

    The defaults reproduce the host 5.2.2 output byte for byte. A different
    host release only needs a new FormatRevision, not a new codec.

    Attributes:
        signature: Fixed-length file header, starting with b"BtWg".
        application_version: Host version string in the metadata block.
        branch: Host release channel.
        revision_id: Host build identifier.
        revision_no: Host build number.
        curve_kind: Document kind marker.
        mime_type: Document MIME type.

    Example:
        >>> FormatRevision().application_version
        '5.2.2'
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    signature: bytes = Field(default=c.REFERENCE_SIGNATURE)
    application_version: str = Field(default=c.REFERENCE_APPLICATION_VERSION, min_length=1)
    branch: str = Field(default=c.REFERENCE_BRANCH, min_length=1)
    revision_id: str = Field(default=c.REFERENCE_REVISION_ID, min_length=1)
    revision_no: int = Field(default=c.REFERENCE_REVISION_NO, ge=0, le=0xFFFFFFFF)
    curve_kind: str = Field(default=c.REFERENCE_CURVE_KIND, min_length=1)
    mime_type: str = Field(default=c.REFERENCE_MIME_TYPE, min_length=1)

    @field_validator("signature")
    @classmethod
    def _validate_signature(cls, value: bytes) -> bytes:
        if len(value) != c.SIGNATURE_LENGTH:
            raise ValueError(f"signature must be {c.SIGNATURE_LENGTH} bytes, got {len(value)}")
        if not value.startswith(c.SIGNATURE_MAGIC):
            raise ValueError(f"signature must start with {c.SIGNATURE_MAGIC!r}")
        return value


DEFAULT_REVISION = FormatRevision()
