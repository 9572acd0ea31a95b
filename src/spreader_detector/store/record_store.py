"""
Record Store - Growable Collection of Person Records.

The PersonStore owns every Person of a run. It remembers which ordering it
is currently in so that identifier lookups can only run while the store is
sorted by identifier.

Design Notes:
    - Backed by a Python list (amortized O(1) append)
    - MemoryError while growing clears the store before re-raising
    - Sorting is delegated to the merge sort with the chosen comparator
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional

from spreader_detector.adapters.line_reader import NumberedLine
from spreader_detector.domain.entities import Person
from spreader_detector.domain.errors import ResourceExhaustedError, StoreOrderError
from spreader_detector.domain.fields import parse_identifier, parse_number, split_fields
from spreader_detector.lookup.binary_search import binary_search
from spreader_detector.ordering.comparators import SortOrder, comparator_for
from spreader_detector.ordering.merge_sort import merge_sort

logger = logging.getLogger(__name__)

PERSON_FIELDS = 3


class PersonStore:
    """In-memory store of Person records with tracked ordering."""

    def __init__(self) -> None:
        self._records: List[Person] = []
        self._order = SortOrder.INSERTION

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, index: int) -> Person:
        return self._records[index]

    def __iter__(self) -> Iterator[Person]:
        return iter(self._records)

    def __reversed__(self) -> Iterator[Person]:
        return reversed(self._records)

    @property
    def order(self) -> SortOrder:
        """Ordering the records are currently in."""
        return self._order

    def append(self, person: Person) -> None:
        """
        Add a person at the end of the store.

        Raises:
            ResourceExhaustedError: If memory runs out; the store is cleared first
        """
        try:
            self._records.append(person)
        except MemoryError as exc:
            stored = len(self._records)
            self.clear()
            raise ResourceExhaustedError(
                f"out of memory after storing {stored} people"
            ) from exc
        self._order = SortOrder.INSERTION

    def sort_by(self, order: SortOrder) -> None:
        """Sort the records in place by identifier or probability."""
        compare = comparator_for(order)
        try:
            merge_sort(self._records, compare)
        except MemoryError as exc:
            self.clear()
            raise ResourceExhaustedError("out of memory while sorting") from exc
        self._order = order
        logger.debug(f"Sorted {len(self._records)} people by {order.value}")

    def index_of(self, identifier: int) -> Optional[int]:
        """
        Index of the person with ``identifier``, or None if absent.

        Raises:
            StoreOrderError: If the store is not sorted by identifier
        """
        if self._order is not SortOrder.IDENTIFIER:
            raise StoreOrderError(
                f"identifier lookup requires identifier order, store is in "
                f"{self._order.value} order"
            )
        return binary_search(self._records, identifier)

    def clear(self) -> None:
        """Release every stored record."""
        self._records.clear()
        self._order = SortOrder.INSERTION


def parse_person_line(line: str, line_number: int = 0) -> Person:
    """
    Build a Person from one ``<name> <id> <age>`` line.

    Args:
        line: Line from the people file
        line_number: 1-based line number for error messages

    Returns:
        Person with probability 0.0

    Raises:
        MalformedRecordError: On a missing, extra or non-numeric field
    """
    name, raw_id, raw_age = split_fields(line, PERSON_FIELDS, "name id age", line_number)
    return Person(
        name=name,
        id=parse_identifier(raw_id, "id", line_number, line),
        age=parse_number(raw_age, "age", line_number, line),
    )


def load_people(lines: Iterable[NumberedLine]) -> PersonStore:
    """
    Build a PersonStore from numbered people-file lines.

    The partially built store is cleared before any error propagates.
    """
    store = PersonStore()
    try:
        for line_number, line in lines:
            store.append(parse_person_line(line, line_number))
    except Exception:
        store.clear()
        raise

    logger.info(f"Loaded {len(store)} people")
    return store
