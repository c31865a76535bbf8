"""Strict, type-aware value comparison.

Plain ``==`` treats ``1``, ``1.0`` and ``True`` as equal.  Stored
constants are compared without that coercion: both sides must have the
same concrete type, and containers are compared element by element under
the same rule.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

_MISSING = object()


def strict_equals(left: Any, right: Any) -> bool:
    """Return ``True`` if *left* and *right* are strictly equal.

    Rules
    -----
    * Different concrete types are never equal (``1 != True != 1.0``).
    * Lists and tuples compare pairwise, in order.
    * Sets and frozensets match every element to a strictly equal one.
    * Mappings match every key to a strictly equal key, then compare
      the values under the same rule.
    * Anything else falls back to ``==``.

    There is no identity shortcut: a NaN is unequal to itself even when
    the very same object is passed on both sides.
    """
    if type(left) is not type(right):
        return False

    if isinstance(left, (list, tuple)):
        return len(left) == len(right) and all(
            strict_equals(a, b) for a, b in zip(left, right)
        )

    if isinstance(left, (set, frozenset)):
        return len(left) == len(right) and all(
            _find_strict(item, right) is not _MISSING for item in left
        )

    if isinstance(left, Mapping):
        if len(left) != len(right):
            return False
        for key, value in left.items():
            other_key = _find_strict(key, right)
            if other_key is _MISSING or not strict_equals(value, right[other_key]):
                return False
        return True

    return bool(left == right)


def _find_strict(item: Any, candidates: Iterable[Any]) -> Any:
    """Return the member of *candidates* strictly equal to *item*, or ``_MISSING``."""
    return next((c for c in candidates if strict_equals(item, c)), _MISSING)
