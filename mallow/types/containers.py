"""Sequence and map values that plain Python lists cannot express.

A `Vector` is a Python list that remembers it was written with brackets.
A `HashMap` is an association list: pairs stay in insertion order and
inserting an existing key replaces its value where it stands.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from mallow import LispValue
from mallow.types.equality import is_equal, value_hash


class Vector(list):
    """Bracketed sequence; evaluates and compares exactly like a list."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Vector({list.__repr__(self)})"


class HashMap:
    __slots__ = ("pairs", "_hashes")

    def __init__(self, pairs: Iterable[tuple[LispValue, LispValue]] = ()):
        self.pairs: list[tuple[LispValue, LispValue]] = []
        self._hashes: list[int] = []
        for key, value in pairs:
            self.insert(key, value)

    @classmethod
    def from_flat(cls, items: list[LispValue]) -> HashMap:
        """Build a map from alternating key/value items; caller checks parity."""
        return cls(zip(items[0::2], items[1::2]))

    def _index(self, key: LispValue) -> int:
        h = value_hash(key)
        for i, (k, _) in enumerate(self.pairs):
            if self._hashes[i] == h and is_equal(k, key):
                return i
        return -1

    def insert(self, key: LispValue, value: LispValue) -> None:
        i = self._index(key)
        if i >= 0:
            self.pairs[i] = (self.pairs[i][0], value)
        else:
            self.pairs.append((key, value))
            self._hashes.append(value_hash(key))

    def get(self, key: LispValue, default: LispValue = None) -> LispValue:
        i = self._index(key)
        return self.pairs[i][1] if i >= 0 else default

    def __contains__(self, key: LispValue) -> bool:
        return self._index(key) >= 0

    def __len__(self) -> int:
        return len(self.pairs)

    def __iter__(self) -> Iterator[tuple[LispValue, LispValue]]:
        return iter(self.pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashMap) or len(self) != len(other):
            return False
        for key, value in self.pairs:
            i = other._index(key)
            if i < 0 or not is_equal(value, other.pairs[i][1]):
                return False
        return True

    def __hash__(self) -> int:
        # Order-insensitive to agree with __eq__
        return hash(frozenset((value_hash(k), value_hash(v)) for k, v in self.pairs))

    def __repr__(self) -> str:
        return f"HashMap({self.pairs!r})"
