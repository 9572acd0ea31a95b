"""
Binary Search - Identifier Lookup over a Sorted Sequence.

Finds the index of a record by identifier in a sequence sorted by
ascending identifier. Absence is reported explicitly as ``None``.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence, TypeVar

T = TypeVar("T")


def _identifier(record: Any) -> int:
    return record.id


def binary_search(
    items: Sequence[T],
    target: int,
    low: int = 0,
    high: Optional[int] = None,
    key: Callable[[T], int] = _identifier,
) -> Optional[int]:
    """
    Find ``target`` in ``items[low:high + 1]``.

    Args:
        items: Sequence sorted ascending by ``key``
        target: Identifier to find
        low: First index to search (inclusive)
        high: Last index to search (inclusive), defaults to the last item
        key: Extracts the identifier from a record

    Returns:
        Index of the record whose key equals ``target``, or None
    """
    if high is None:
        high = len(items) - 1

    while low <= high:
        mid = low + (high - low) // 2
        current = key(items[mid])
        if current == target:
            return mid
        if current > target:
            high = mid - 1
        else:
            low = mid + 1

    return None
