"""Structural equality and hashing for Mallow values.

Lists and Vectors compare by their elements only, so `(1 2)` equals `[1 2]`.
Integers and floats are distinct numeric cases, and booleans never equal
numbers even though Python treats `True == 1`.
"""

from __future__ import annotations

from mallow import LispValue


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Deep equality for Lisp values, with element-wise comparison for sequences."""
    if a is b:
        return True
    if isinstance(a, list) and isinstance(b, list):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    # HashMap defines its own order-insensitive __eq__ on top of is_equal
    if type(a) is not type(b):
        return False
    return a == b


def value_hash(value: LispValue) -> int:
    """Hash consistent with is_equal; sequences hash by their elements."""
    if isinstance(value, list):
        return hash(tuple(value_hash(x) for x in value))
    return hash(value)
