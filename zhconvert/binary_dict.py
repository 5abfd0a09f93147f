"""Binary dictionary serialization for fast loading."""

from __future__ import annotations

import struct
from collections.abc import Iterable
from typing import BinaryIO

from .dict_entry import DictEntry

_SIZE = struct.Struct("<Q")


class InvalidFormat(ValueError):
    """Raised when a dictionary or configuration is malformed."""


def _error(what: str) -> InvalidFormat:
    return InvalidFormat(f"Invalid binary dictionary ({what})")


def _read_size(stream: BinaryIO, what: str) -> int:
    data = stream.read(_SIZE.size)
    if len(data) != _SIZE.size:
        raise _error(what)
    return _SIZE.unpack(data)[0]


def _read_bytes(stream: BinaryIO, length: int, what: str) -> bytes:
    data = stream.read(length)
    if len(data) != length:
        raise _error(what)
    return data


def _c_string(buffer: bytes, offset: int, what: str) -> str:
    if offset >= len(buffer):
        raise _error(what)
    end = buffer.find(b"\0", offset)
    if end < 0:
        raise _error(what)
    try:
        return buffer[offset:end].decode("utf-8")
    except UnicodeDecodeError as exc:
        raise _error(what) from exc


def _encode(text: str) -> bytes:
    if "\0" in text:
        raise ValueError(f"NUL character not allowed in dictionary text: {text!r}")
    return text.encode("utf-8") + b"\0"


class BinaryDict:
    """A lexicon stored as key and value string buffers plus offset tables."""

    def __init__(self, lexicon: Iterable[DictEntry]) -> None:
        self.lexicon: list[DictEntry] = list(lexicon)

    @property
    def key_max_length(self) -> int:
        """Length of the longest key in the lexicon."""
        return max((len(entry.key) for entry in self.lexicon), default=0)

    def serialize(self, stream: BinaryIO) -> None:
        """Write the lexicon to a binary stream."""
        key_buffer = bytearray()
        value_buffer = bytearray()
        offsets: list[tuple[int, list[int]]] = []
        for entry in self.lexicon:
            if not entry.values:
                raise ValueError(f"entry without values cannot be serialized: {entry.key!r}")
            key_offset = len(key_buffer)
            key_buffer += _encode(entry.key)
            value_offsets = []
            for value in entry.values:
                value_offsets.append(len(value_buffer))
                value_buffer += _encode(value)
            offsets.append((key_offset, value_offsets))

        stream.write(_SIZE.pack(len(self.lexicon)))
        stream.write(_SIZE.pack(len(key_buffer)))
        stream.write(bytes(key_buffer))
        stream.write(_SIZE.pack(len(value_buffer)))
        stream.write(bytes(value_buffer))
        for key_offset, value_offsets in offsets:
            stream.write(_SIZE.pack(len(value_offsets)))
            stream.write(_SIZE.pack(key_offset))
            for value_offset in value_offsets:
                stream.write(_SIZE.pack(value_offset))

    @classmethod
    def from_stream(cls, stream: BinaryIO) -> BinaryDict:
        """Read a lexicon previously written by :meth:`serialize`."""
        num_items = _read_size(stream, "numItems")
        key_length = _read_size(stream, "keyTotalLength")
        key_buffer = _read_bytes(stream, key_length, "keyBuffer")
        value_length = _read_size(stream, "valueTotalLength")
        value_buffer = _read_bytes(stream, value_length, "valueBuffer")

        entries = []
        for _ in range(num_items):
            num_values = _read_size(stream, "numValues")
            key = _c_string(key_buffer, _read_size(stream, "keyOffset"), "keyOffset")
            values = [
                _c_string(value_buffer, _read_size(stream, "valueOffset"), "valueOffset")
                for _ in range(num_values)
            ]
            entries.append(DictEntry(key, values))
        return cls(entries)