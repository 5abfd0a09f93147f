"""Maximal-match segmentation of text by a dictionary."""

from __future__ import annotations

from .dict import Dict


class MaxMatchSegmentation:
    """Splits text into dictionary words and the unmatched runs between them."""

    def __init__(self, dictionary: Dict) -> None:
        self.dictionary = dictionary

    def segment(self, text: str) -> list[str]:
        """Return the segments of ``text``; joining them gives ``text`` back."""
        segments: list[str] = []
        pending_start = 0
        position = 0
        while position < len(text):
            entry = self.dictionary.match_prefix(text[position:])
            if entry is None or not entry.key:
                position += 1
                continue
            if pending_start < position:
                segments.append(text[pending_start:position])
            segments.append(entry.key)
            position += len(entry.key)
            pending_start = position
        if pending_start < position:
            segments.append(text[pending_start:position])
        return segments