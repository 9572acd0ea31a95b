"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List

import pytest

from spreader_detector.adapters.metrics_collector import InMemoryMetricsCollector
from spreader_detector.config.models import DetectorConfig
from spreader_detector.domain.entities import Person
from spreader_detector.ordering.comparators import SortOrder
from spreader_detector.store.record_store import PersonStore

DATA_DIR = Path(__file__).parent / "fixtures" / "data"


@pytest.fixture
def data_dir() -> Path:
    """Directory holding sample people and meetings files."""
    return DATA_DIR


@pytest.fixture
def default_config() -> DetectorConfig:
    """Create default detector configuration."""
    return DetectorConfig()


@pytest.fixture
def metrics_collector() -> InMemoryMetricsCollector:
    """Create metrics collector for testing."""
    return InMemoryMetricsCollector()


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write ``content`` to ``tmp_path / name`` and return the path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_people() -> List[Person]:
    """Three people in identifier order."""
    return [
        Person(name="Alice", id=1, age=30),
        Person(name="Bob", id=2, age=40),
        Person(name="Carol", id=3, age=70),
    ]


def _make_store(
    people: List[Person], order: SortOrder = SortOrder.IDENTIFIER
) -> PersonStore:
    store = PersonStore()
    for person in people:
        store.append(person)
    if order is not SortOrder.INSERTION:
        store.sort_by(order)
    return store


@pytest.fixture
def store_factory() -> Callable[..., PersonStore]:
    """Build a store from a list of people, sorted into the given order."""
    return _make_store


@pytest.fixture
def id_sorted_store(sample_people: List[Person]) -> PersonStore:
    """Store holding the sample people, sorted by identifier."""
    return _make_store(sample_people)
