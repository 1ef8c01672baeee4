"""Low-level byte primitives for the tag stream.

ByteWriter appends encoded fields to a growing buffer; ByteReader walks a
buffer with a cursor and raises FormatError (with the failing offset) on
anything unexpected. Text is 7-bit ASCII throughout.
"""

from __future__ import annotations

from bwcurve.core.errors import EncodeError, FormatError
from bwcurve.core.formats.bitwig import constants as c


def encode_text(text: str, field: str) -> bytes:
    """Encode text as ASCII.

    Raises:
        EncodeError: If text contains non-ASCII characters.
    """
    try:
        return text.encode("ascii")
    except UnicodeEncodeError as e:
        raise EncodeError(f"{field} must be 7-bit ASCII: {text!r}") from e


class ByteWriter:
    """Append-only builder for a tag stream."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def __len__(self) -> int:
        return len(self._buffer)

    def getvalue(self) -> bytes:
        return bytes(self._buffer)

    def raw(self, data: bytes) -> ByteWriter:
        self._buffer += data
        return self

    def byte(self, value: int) -> ByteWriter:
        self._buffer.append(value)
        return self

    def spacer(self) -> ByteWriter:
        return self.raw(c.SPACER)

    def uint32(self, value: int) -> ByteWriter:
        return self.raw(c.UINT32.pack(value))

    def double(self, value: float) -> ByteWriter:
        return self.raw(c.DOUBLE.pack(value))

    def count(self, value: int, field: str) -> ByteWriter:
        """Write a one-byte element count.

        Raises:
            EncodeError: If value does not fit in one byte.
        """
        if not 0 <= value <= c.MAX_FIELD_LENGTH:
            raise EncodeError(f"{field} has {value} entries; at most {c.MAX_FIELD_LENGTH} fit")
        return self.byte(value)

    def text(self, text: str, field: str) -> ByteWriter:
        """Write a length byte followed by the ASCII text.

        Raises:
            EncodeError: If text is not ASCII or longer than 255 characters.
        """
        data = encode_text(text, field)
        if len(data) > c.MAX_FIELD_LENGTH:
            raise EncodeError(
                f"{field} is {len(data)} characters; at most {c.MAX_FIELD_LENGTH} fit the format"
            )
        self._buffer.append(len(data))
        return self.raw(data)

    def cstring(self, text: str, field: str) -> ByteWriter:
        """Write ASCII text followed by a NUL terminator.

        Raises:
            EncodeError: If text is not ASCII or contains NUL.
        """
        data = encode_text(text, field)
        if c.NUL in data:
            raise EncodeError(f"{field} must not contain NUL characters")
        return self.raw(data + c.NUL)


class ByteReader:
    """Cursor over an immutable buffer."""

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = bytes(data)
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    def read(self, n: int, what: str) -> bytes:
        """Consume exactly n bytes.

        Raises:
            FormatError: If fewer than n bytes remain.
        """
        if n > self.remaining:
            raise FormatError(
                f"Truncated stream reading {what}: need {n} bytes, {self.remaining} left",
                offset=self._pos,
            )
        chunk = self._data[self._pos : self._pos + n]
        self._pos += n
        return chunk

    def expect(self, constant: bytes, what: str) -> None:
        """Consume bytes that must equal constant.

        Raises:
            FormatError: If the bytes differ or the stream is too short.
        """
        start = self._pos
        actual = self.read(len(constant), what)
        if actual != constant:
            raise FormatError(
                f"Unexpected bytes for {what}: expected {constant.hex(' ')}, got {actual.hex(' ')}",
                offset=start,
            )

    def byte(self, what: str) -> int:
        return self.read(1, what)[0]

    def uint32(self, what: str) -> int:
        return c.UINT32.unpack(self.read(c.UINT32.size, what))[0]

    def double(self, what: str) -> float:
        return c.DOUBLE.unpack(self.read(c.DOUBLE.size, what))[0]

    def _decode(self, data: bytes, start: int, what: str) -> str:
        try:
            return data.decode("ascii")
        except UnicodeDecodeError as e:
            raise FormatError(f"{what} is not ASCII text", offset=start) from e

    def text(self, what: str) -> str:
        """Read a length byte followed by that many ASCII characters.

        Raises:
            FormatError: If the declared length exceeds the remaining bytes.
        """
        length = self.byte(f"{what} length")
        start = self._pos
        return self._decode(self.read(length, what), start, what)

    def cstring(self, what: str) -> str:
        """Read ASCII text up to and including a NUL terminator.

        Raises:
            FormatError: If no terminator is found.
        """
        start = self._pos
        end = self._data.find(c.NUL, start)
        if end < 0:
            raise FormatError(f"Unterminated {what}", offset=start)
        self._pos = end + 1
        return self._decode(self._data[start:end], start, what)
