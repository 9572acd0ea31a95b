"""
Merge Sort - Stable In-Place Sort with a Reusable Scratch Buffer.

Sorts a mutable sequence in place, driven by a pluggable three-way
comparator. One scratch list sized to the whole sequence is allocated per
top-level call and shared by every merge level, so a sort performs O(1)
allocations regardless of depth.

Design Notes:
    - Split at length // 2; lengths 0 and 1 are already sorted
    - Ties take the element from the left half first (stable)
    - Index-based slicing over one sequence, no per-level copies
"""

from __future__ import annotations

import logging
from typing import List, MutableSequence, Optional, TypeVar

from spreader_detector.ordering.comparators import Comparator

logger = logging.getLogger(__name__)

T = TypeVar("T")


def merge_sort(
    items: MutableSequence[T],
    compare: Comparator[T],
    scratch: Optional[List[T]] = None,
) -> None:
    """
    Sort ``items`` in place.

    Args:
        items: Sequence to sort
        compare: Three-way comparator (negative, zero, positive)
        scratch: Optional caller-provided buffer, at least len(items) long

    Raises:
        ValueError: If the provided scratch buffer is too short
    """
    length = len(items)
    if length < 2:
        return

    if scratch is None:
        scratch = [items[0]] * length
    elif len(scratch) < length:
        raise ValueError(
            f"scratch buffer holds {len(scratch)} items, needs {length}"
        )

    _sort_range(items, scratch, 0, length, compare)
    logger.debug(f"Merge sorted {length} items")


def _sort_range(
    items: MutableSequence[T],
    scratch: List[T],
    start: int,
    length: int,
    compare: Comparator[T],
) -> None:
    """Sort items[start:start + length] using scratch[start:start + length]."""
    if length < 2:
        return

    left_length = length // 2
    _sort_range(items, scratch, start, left_length, compare)
    _sort_range(items, scratch, start + left_length, length - left_length, compare)
    _merge(items, scratch, start, left_length, length, compare)


def _merge(
    items: MutableSequence[T],
    scratch: List[T],
    start: int,
    left_length: int,
    length: int,
    compare: Comparator[T],
) -> None:
    """Merge the two sorted runs of items[start:start + length]."""
    end = start + length
    for i in range(start, end):
        scratch[i] = items[i]

    left = start
    left_end = start + left_length
    right = left_end
    out = start

    while left < left_end and right < end:
        if compare(scratch[left], scratch[right]) <= 0:
            items[out] = scratch[left]
            left += 1
        else:
            items[out] = scratch[right]
            right += 1
        out += 1

    # Leftovers of the right run already sit in their final slots.
    while left < left_end:
        items[out] = scratch[left]
        left += 1
        out += 1
