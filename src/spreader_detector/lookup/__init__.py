"""
Lookup Package - Identifier Resolution.

Components:
    - binary_search: O(log n) lookup returning an index or None
"""

from spreader_detector.lookup.binary_search import binary_search

__all__ = ["binary_search"]
