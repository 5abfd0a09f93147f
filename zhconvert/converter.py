"""Segments text and runs it through a conversion chain."""

from __future__ import annotations

from .conversion_chain import ConversionChain
from .segmentation import MaxMatchSegmentation


class Converter:
    """A named pipeline of segmentation followed by a conversion chain."""

    def __init__(
        self,
        name: str,
        segmentation: MaxMatchSegmentation,
        conversion_chain: ConversionChain,
    ) -> None:
        self.name = name
        self.segmentation = segmentation
        self.conversion_chain = conversion_chain

    def convert(self, text: str) -> str:
        """Convert ``text`` and return the result."""
        segments = self.segmentation.segment(text)
        return "".join(self.conversion_chain.convert(segments))