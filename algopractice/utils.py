"""Small numeric and sequence helpers."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import TypeVar

N = TypeVar("N", int, float)
S = TypeVar("S", bound=MutableSequence)


def absolute(x: N) -> N:
    """Return the absolute value of ``x``, keeping its type."""
    return -x if x < 0 else x


def reverse_in_place(items: S) -> S:
    """Reverse ``items`` in place and return the same object."""
    items.reverse()
    return items