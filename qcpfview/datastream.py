"""Binary serialisation primitives compatible with the Qt data stream format.

Integers are big-endian, booleans take one byte, strings are stored as a
32-bit byte length followed by UTF-16BE code units, and a null string is
marked by the length ``0xFFFFFFFF``.
"""

from __future__ import annotations

import struct

_INT32 = struct.Struct(">i")
_UINT32 = struct.Struct(">I")
_NULL_STRING = 0xFFFFFFFF


class DataStreamError(ValueError):
    """Raised when data cannot be encoded or decoded."""


class DataStreamWriter:
    """Accumulates values in the data stream wire format."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def write_bool(self, value: bool) -> None:
        self._buffer.append(1 if value else 0)

    def write_int32(self, value: int) -> None:
        try:
            self._buffer += _INT32.pack(value)
        except struct.error as exc:
            raise DataStreamError(f"value out of int32 range: {value!r}") from exc

    def write_string(self, value: str | None) -> None:
        if value is None:
            self._buffer += _UINT32.pack(_NULL_STRING)
            return
        encoded = value.encode("utf-16-be")
        self._buffer += _UINT32.pack(len(encoded))
        self._buffer += encoded

    def write_size(self, size: tuple[int, int]) -> None:
        width, height = size
        self.write_int32(width)
        self.write_int32(height)

    def getvalue(self) -> bytes:
        return bytes(self._buffer)


class DataStreamReader:
    """Reads values written in the data stream wire format."""

    def __init__(self, data: bytes) -> None:
        self._data = memoryview(bytes(data))
        self._pos = 0

    def _take(self, count: int) -> bytes:
        end = self._pos + count
        if end > len(self._data):
            raise DataStreamError(
                f"unexpected end of data: needed {count} bytes at offset {self._pos}"
            )
        chunk = self._data[self._pos:end].tobytes()
        self._pos = end
        return chunk

    def read_bool(self) -> bool:
        return self._take(1)[0] != 0

    def read_int32(self) -> int:
        return _INT32.unpack(self._take(4))[0]

    def read_string(self) -> str:
        length = _UINT32.unpack(self._take(4))[0]
        if length == _NULL_STRING:
            return ""
        if length % 2:
            raise DataStreamError(f"odd string byte length: {length}")
        return self._take(length).decode("utf-16-be")

    def read_size(self) -> tuple[int, int]:
        width = self.read_int32()
        height = self.read_int32()
        return (width, height)

    def at_end(self) -> bool:
        return self._pos >= len(self._data)