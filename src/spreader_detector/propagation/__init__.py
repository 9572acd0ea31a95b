"""
Propagation Package - Meeting-Driven Probability Updates.

Components:
    - transmission_factor: Per-meeting multiplier from distance and duration
    - PropagationEngine: Applies the meetings stream to the record store
    - parse_origin_line / parse_meeting_line: Meetings file parsing
"""

from spreader_detector.propagation.engine import (
    PropagationEngine,
    PropagationSummary,
    parse_meeting_line,
    parse_origin_line,
)
from spreader_detector.propagation.transmission import transmission_factor

__all__ = [
    "PropagationEngine",
    "PropagationSummary",
    "parse_meeting_line",
    "parse_origin_line",
    "transmission_factor",
]
