"""
Comparators - Three-Way Comparison Strategies for Person Records.

Provides Strategy Pattern implementations for ordering the record store:
    - compare_by_identifier: ascending identifier
    - compare_by_probability: ascending probability with epsilon tolerance

Design Notes:
    - Comparators return a Comparison member (LESS, EQUAL, GREATER)
    - SortOrder names the strategy; comparator_for() resolves it
    - Probabilities closer than EPSILON compare equal on probability.
      Such ties are broken by descending identifier, so a report that
      walks the ascending order backwards lists lower identifiers first.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Callable, Dict, TypeVar

from spreader_detector.domain.entities import Person

T = TypeVar("T")

EPSILON = 1e-9


class Comparison(IntEnum):
    """Result of a three-way comparison."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


Comparator = Callable[[T, T], int]


class SortOrder(str, Enum):
    """Orderings the record store can be in."""

    INSERTION = "insertion"
    IDENTIFIER = "identifier"
    PROBABILITY = "probability"


def _compare_values(a: float, b: float) -> Comparison:
    if a < b:
        return Comparison.LESS
    if a > b:
        return Comparison.GREATER
    return Comparison.EQUAL


def compare_by_identifier(a: Person, b: Person) -> Comparison:
    """Ascending by identifier. Identifiers are unique, so no tie-break."""
    return _compare_values(a.id, b.id)


def compare_by_probability(a: Person, b: Person) -> Comparison:
    """
    Ascending by probability, tolerant to floating point noise.

    Two probabilities within EPSILON of each other are treated as equal and
    the records are then ordered by descending identifier.

    Args:
        a: First person
        b: Second person

    Returns:
        Comparison of ``a`` relative to ``b``
    """
    if abs(a.probability - b.probability) < EPSILON:
        return _compare_values(b.id, a.id)
    return _compare_values(a.probability, b.probability)


_COMPARATORS: Dict[SortOrder, Comparator[Person]] = {
    SortOrder.IDENTIFIER: compare_by_identifier,
    SortOrder.PROBABILITY: compare_by_probability,
}


def comparator_for(order: SortOrder) -> Comparator[Person]:
    """
    Resolve the comparator for a sort order.

    Raises:
        ValueError: For SortOrder.INSERTION, which has no comparator
    """
    try:
        return _COMPARATORS[order]
    except KeyError:
        raise ValueError(f"No comparator for sort order: {order.value}") from None
