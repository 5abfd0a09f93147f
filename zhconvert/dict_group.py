"""A group of dictionaries queried in priority order."""

from __future__ import annotations

from collections.abc import Iterable

from .dict import Dict
from .dict_entry import DictEntry


class DictGroup(Dict):
    """Dictionaries consulted in order; earlier ones take precedence."""

    def __init__(self, dicts: Iterable[Dict]) -> None:
        self.dicts: tuple[Dict, ...] = tuple(dicts)

    def match(self, word: str) -> DictEntry | None:
        for dictionary in self.dicts:
            entry = dictionary.match(word)
            if entry is not None:
                return entry
        return None

    def match_prefix(self, word: str) -> DictEntry | None:
        for dictionary in self.dicts:
            entry = dictionary.match_prefix(word)
            if entry is not None:
                return entry
        return None

    def match_all_prefixes(self, word: str) -> list[DictEntry]:
        matched: dict[int, DictEntry] = {}
        for dictionary in self.dicts:
            for entry in dictionary.match_all_prefixes(word):
                matched.setdefault(len(entry.key), entry)
        return [matched[length] for length in sorted(matched, reverse=True)]

    @property
    def key_max_length(self) -> int:
        return max((dictionary.key_max_length for dictionary in self.dicts), default=0)

    @property
    def lexicon(self) -> list[DictEntry]:
        merged = [
            DictEntry(entry.key, entry.values)
            for dictionary in self.dicts
            for entry in dictionary.lexicon
        ]
        return sorted(merged, key=lambda entry: entry.key)