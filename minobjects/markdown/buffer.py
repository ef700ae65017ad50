"""Growable byte buffers that allocate in fixed units."""

from __future__ import annotations

from typing import BinaryIO, Union

_REPLACEMENT = b"\xef\xbf\xbd"

BytesLike = Union[bytes, bytearray, memoryview]


def encode_utf8(codepoint: int) -> bytes:
    """Encode a code point as UTF-8; surrogates and values past U+10FFFF become U+FFFD."""
    c = int(codepoint)
    if c < 0:
        raise ValueError("code point cannot be negative")
    if c < 0x80:
        return bytes((c,))
    if c < 0x800:
        return bytes((192 + c // 64, 128 + c % 64))
    if 0xD800 <= c < 0xE000:
        return _REPLACEMENT
    if c < 0x10000:
        return bytes((224 + c // 4096, 128 + (c // 64) % 64, 128 + c % 64))
    if c < 0x110000:
        return bytes(
            (240 + c // 262144, 128 + (c // 4096) % 64, 128 + (c // 64) % 64, 128 + c % 64)
        )
    return _REPLACEMENT


def _as_bytes(data: Union[BytesLike, str]) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class Buffer:
    """A byte buffer whose capacity grows in multiples of its unit."""

    def __init__(self, unit: int = 64):
        unit = int(unit)
        if unit < 1:
            raise ValueError("the growth unit must be at least one byte")
        self.unit = unit
        self._data = bytearray()
        self._allocated = 0

    @property
    def data(self) -> bytes:
        return bytes(self._data)

    @property
    def size(self) -> int:
        return len(self._data)

    @property
    def allocated(self) -> int:
        """Capacity reserved so far, always a multiple of the unit."""
        return self._allocated

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Buffer):
            return self._data == other._data
        if isinstance(other, (bytes, bytearray, memoryview, str)):
            return self._data == _as_bytes(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Buffer(unit={self.unit}, data={bytes(self._data)!r})"

    def grow(self, size: int) -> None:
        """Make sure at least size bytes are reserved."""
        size = int(size)
        if self._allocated >= size:
            return
        missing = size - self._allocated
        steps = max(1, -(-missing // self.unit))
        self._allocated += steps * self.unit

    def put(self, data: BytesLike) -> None:
        """Append raw bytes."""
        chunk = bytes(data)
        self.grow(len(self._data) + len(chunk))
        self._data.extend(chunk)

    def puts(self, text: str) -> None:
        """Append a string encoded as UTF-8."""
        self.put(text.encode("utf-8"))

    def putc(self, byte: int) -> None:
        """Append a single byte."""
        byte = int(byte)
        if not 0 <= byte <= 0xFF:
            raise ValueError("a byte lies between 0 and 255")
        self.grow(len(self._data) + 1)
        self._data.append(byte)

    def put_utf8(self, codepoint: int) -> None:
        """Append a code point encoded as UTF-8."""
        self.put(encode_utf8(codepoint))

    def read_from(self, stream: BinaryIO) -> int:
        """Append everything the stream holds, read one unit at a time; return the count."""
        total = 0
        while True:
            self.grow(len(self._data) + self.unit)
            chunk = stream.read(self.unit)
            if not chunk:
                return total
            chunk = _as_bytes(chunk)
            self._data.extend(chunk)
            total += len(chunk)

    def set(self, data: Union[BytesLike, str]) -> None:
        """Replace the content."""
        chunk = _as_bytes(data)
        self.grow(len(chunk))
        self._data[:] = chunk

    def reset(self) -> None:
        """Drop the content and the reserved capacity."""
        self._data.clear()
        self._allocated = 0

    def prefix(self, prefix: Union[BytesLike, str]) -> int:
        """Compare the start of the buffer with prefix: zero when they agree.

        Otherwise the difference of the first pair of bytes that differ.
        """
        expected = _as_bytes(prefix)
        for position, byte in enumerate(self._data):
            if position >= len(expected):
                return 0
            if byte != expected[position]:
                return byte - expected[position]
        return 0

    def slurp(self, size: int) -> None:
        """Remove size bytes from the head of the buffer."""
        size = int(size)
        if size < 0:
            raise ValueError("cannot remove a negative number of bytes")
        del self._data[:size]

    def printf(self, fmt: str, *args) -> None:
        """Append fmt formatted with args, as with the % operator."""
        self.puts(fmt % args)