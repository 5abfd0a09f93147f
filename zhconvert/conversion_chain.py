"""A sequence of conversions applied one after another."""

from __future__ import annotations

from collections.abc import Iterable

from .conversion import Conversion


class ConversionChain:
    """Applies conversions to segmented text in order."""

    def __init__(self, conversions: Iterable[Conversion]) -> None:
        self.conversions: tuple[Conversion, ...] = tuple(conversions)

    def convert(self, segments: Iterable[str]) -> list[str]:
        """Run every conversion over the segments, in order."""
        output = list(segments)
        for conversion in self.conversions:
            output = conversion.convert_segments(output)
        return output