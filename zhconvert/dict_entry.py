"""Dictionary entries: a key with zero or more candidate values."""

from __future__ import annotations

from collections.abc import Iterable
from functools import total_ordering


@total_ordering
class DictEntry:
    """A key with its candidate values, ordered and compared by key."""

    __slots__ = ("key", "values")

    def __init__(self, key: str, values: Iterable[str] = ()) -> None:
        if isinstance(values, str):
            raise TypeError("values must be an iterable of strings, not a string")
        self.key = key
        self.values: tuple[str, ...] = tuple(values)

    @property
    def default(self) -> str:
        """The preferred value, or the key itself when there is no value."""
        return self.values[0] if self.values else self.key

    @property
    def num_values(self) -> int:
        """Number of candidate values."""
        return len(self.values)

    def __str__(self) -> str:
        if not self.values:
            return self.key
        return f"{self.key}\t{' '.join(self.values)}"

    def __repr__(self) -> str:
        return f"DictEntry({self.key!r}, {list(self.values)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DictEntry):
            return NotImplemented
        return self.key == other.key

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DictEntry):
            return NotImplemented
        return self.key < other.key

    def __hash__(self) -> int:
        return hash(self.key)