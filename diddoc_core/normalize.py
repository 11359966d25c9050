"""
Key ordering for digest input.

Only the top-level keys are reordered; nested values are left exactly as
they are and serialize in their natural order.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Mapping


def compare(a: str, b: str) -> int:
    """Three-way ordinal comparison (not locale-aware)."""
    return -1 if a < b else 1 if a > b else 0


def normalize(doc: Mapping[str, Any]) -> dict[str, Any]:
    """Return a new dict with the same items, keys in ascending order."""
    keys = sorted(doc.keys(), key=cmp_to_key(compare))
    return {k: doc[k] for k in keys}
