"""
Store Package - Ownership of Person Records.

Components:
    - PersonStore: Growable record collection with tracked ordering
    - parse_person_line: Strict ``<name> <id> <age>`` parsing
    - load_people: Builds a store from people-file lines
"""

from spreader_detector.store.record_store import (
    PersonStore,
    load_people,
    parse_person_line,
)

__all__ = ["PersonStore", "load_people", "parse_person_line"]
