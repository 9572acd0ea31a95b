"""
Adapters Package - Infrastructure Implementations.

This package contains the pieces that touch the outside world or collect
run data, kept apart from the algorithmic core.

Input:
    - open_lines: Scoped, numbered line iteration over an input file
    - numbered_lines: Same numbering over any iterable of strings

Metrics:
    - InMemoryMetricsCollector: Simple in-memory collection

Design Principles:
    - Easily swappable via Dependency Injection
    - No business logic in adapters
"""

from spreader_detector.adapters.line_reader import numbered_lines, open_lines
from spreader_detector.adapters.metrics_collector import InMemoryMetricsCollector

__all__ = [
    "InMemoryMetricsCollector",
    "numbered_lines",
    "open_lines",
]
