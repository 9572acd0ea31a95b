"""
Ordering Package - Merge Sort and Comparison Strategies.

Components:
    - merge_sort: Stable in-place merge sort with one scratch buffer
    - Comparison: Three-way comparison result
    - SortOrder: Named orderings of the record store
    - compare_by_identifier / compare_by_probability: Comparator strategies

The record store is sorted twice per run: by identifier before
propagation, by probability afterwards.
"""

from spreader_detector.ordering.comparators import (
    EPSILON,
    Comparison,
    SortOrder,
    comparator_for,
    compare_by_identifier,
    compare_by_probability,
)
from spreader_detector.ordering.merge_sort import merge_sort

__all__ = [
    "EPSILON",
    "Comparison",
    "SortOrder",
    "comparator_for",
    "compare_by_identifier",
    "compare_by_probability",
    "merge_sort",
]
