"""Replace dictionary matches in text with their default values."""

from __future__ import annotations

from collections.abc import Iterable

from .dict import Dict


class Conversion:
    """Converts text by greedy longest-prefix replacement from a dictionary."""

    def __init__(self, dictionary: Dict) -> None:
        self.dictionary = dictionary

    def convert(self, phrase: str) -> str:
        """Convert a single phrase."""
        parts: list[str] = []
        position = 0
        while position < len(phrase):
            entry = self.dictionary.match_prefix(phrase[position:])
            if entry is None or not entry.key:
                parts.append(phrase[position])
                position += 1
            else:
                parts.append(entry.default)
                position += len(entry.key)
        return "".join(parts)

    def convert_segments(self, segments: Iterable[str]) -> list[str]:
        """Convert every segment of a segmented text."""
        return [self.convert(segment) for segment in segments]