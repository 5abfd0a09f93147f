"""Abstract dictionary with prefix matching."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .dict_entry import DictEntry


class Dict(ABC):
    """A dictionary that maps keys to entries."""

    @abstractmethod
    def match(self, word: str) -> DictEntry | None:
        """Return the entry whose key equals ``word``, or None."""

    def match_prefix(self, word: str) -> DictEntry | None:
        """Return the entry for the longest key that is a prefix of ``word``."""
        truncated = word[: self.key_max_length]
        for length in range(len(truncated), 0, -1):
            entry = self.match(truncated[:length])
            if entry is not None:
                return entry
        return None

    def match_all_prefixes(self, word: str) -> list[DictEntry]:
        """Return entries for all keys that prefix ``word``, longest first."""
        truncated = word[: self.key_max_length]
        matches = (self.match(truncated[:length]) for length in range(len(truncated), 0, -1))
        return [entry for entry in matches if entry is not None]

    @property
    @abstractmethod
    def key_max_length(self) -> int:
        """Length of the longest key."""

    @property
    @abstractmethod
    def lexicon(self) -> list[DictEntry]:
        """All entries of the dictionary."""