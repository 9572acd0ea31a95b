"""
Unit Tests for binary_search.

Test Aspects Covered:
    ✅ Business Logic: Every present identifier is found at its index
    ✅ Edge Cases: Empty sequence, absent identifiers, bounded ranges
"""

from __future__ import annotations

import pytest

from spreader_detector.domain.entities import Person
from spreader_detector.lookup.binary_search import binary_search


@pytest.fixture
def sorted_people() -> list:
    """People sorted by ascending, non-contiguous identifiers."""
    return [
        Person(name=f"P{identifier}", id=identifier, age=20)
        for identifier in (2, 5, 8, 13, 21, 34, 55)
    ]


class TestBinarySearch:
    """Test cases for binary_search."""

    def test_finds_every_present_identifier(self, sorted_people: list) -> None:
        """
        SCENARIO: Search for each identifier in the sequence
        EXPECTED: Returned index holds that identifier
        """
        for expected_index, person in enumerate(sorted_people):
            # Act
            index = binary_search(sorted_people, person.id)

            # Assert
            assert index == expected_index
            assert sorted_people[index].id == person.id

    @pytest.mark.parametrize("missing", [0, 3, 14, 56, 1000])
    def test_returns_none_when_absent(self, sorted_people: list, missing: int) -> None:
        """
        SCENARIO: Identifier below, between or above the stored ones
        EXPECTED: None
        """
        assert binary_search(sorted_people, missing) is None

    def test_empty_sequence(self) -> None:
        """
        SCENARIO: Nothing to search
        EXPECTED: None
        """
        assert binary_search([], 1) is None

    def test_respects_inclusive_bounds(self, sorted_people: list) -> None:
        """
        SCENARIO: Search restricted to indices 2..4
        EXPECTED: Found inside the range, None outside it
        """
        assert binary_search(sorted_people, 21, low=2, high=4) == 4
        assert binary_search(sorted_people, 2, low=2, high=4) is None

    def test_custom_key(self) -> None:
        """
        SCENARIO: Plain integers with an identity key
        EXPECTED: Index of the matching integer
        """
        assert binary_search([1, 4, 9, 16], 9, key=lambda x: x) == 2
