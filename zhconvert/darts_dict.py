"""Dictionary with a lookup index, stored in the ``.ocd`` file layout."""

from __future__ import annotations

import struct
from collections.abc import Iterable
from typing import BinaryIO

from .binary_dict import BinaryDict, InvalidFormat
from .dict import Dict
from .dict_entry import DictEntry

HEADER = b"OPENCCDARTS1"
_SIZE = struct.Struct("<Q")


class DartsDict(Dict):
    """A dictionary answering exact and longest-prefix queries from an index.

    On disk it is a header, a length-prefixed index section and a binary
    lexicon. The index section is written empty and skipped on load: the
    lookup index is always rebuilt from the lexicon.
    """

    def __init__(self, lexicon: Iterable[DictEntry]) -> None:
        self._lexicon: list[DictEntry] = list(lexicon)
        self._index: dict[str, DictEntry] = {}
        for entry in self._lexicon:
            self._index.setdefault(entry.key, entry)
        self._key_max_length = max((len(entry.key) for entry in self._lexicon), default=0)

    @classmethod
    def from_dict(cls, other: Dict) -> DartsDict:
        """Build a dictionary holding the same entries as ``other``."""
        return cls(other.lexicon)

    @classmethod
    def from_stream(cls, stream: BinaryIO) -> DartsDict:
        """Read a dictionary previously written by :meth:`serialize`."""
        header = stream.read(len(HEADER))
        if header != HEADER:
            raise InvalidFormat("Invalid dictionary header")
        size_bytes = stream.read(_SIZE.size)
        if len(size_bytes) != _SIZE.size:
            raise InvalidFormat("Invalid dictionary header (dartsSize)")
        (index_size,) = _SIZE.unpack(size_bytes)
        if len(stream.read(index_size)) != index_size:
            raise InvalidFormat("Invalid dictionary size of darts mismatch")
        return cls(BinaryDict.from_stream(stream).lexicon)

    def serialize(self, stream: BinaryIO) -> None:
        """Write the dictionary to a binary stream."""
        stream.write(HEADER)
        stream.write(_SIZE.pack(0))
        BinaryDict(self._lexicon).serialize(stream)

    def match(self, word: str) -> DictEntry | None:
        return self._index.get(word)

    def match_prefix(self, word: str) -> DictEntry | None:
        for length in range(min(len(word), self._key_max_length), 0, -1):
            entry = self._index.get(word[:length])
            if entry is not None:
                return entry
        return None

    @property
    def key_max_length(self) -> int:
        return self._key_max_length

    @property
    def lexicon(self) -> list[DictEntry]:
        return self._lexicon