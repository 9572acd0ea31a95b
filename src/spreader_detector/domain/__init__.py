"""
Domain Layer - Core Entities and Error Taxonomy.

This package contains the core domain model for the Spreader Detector.
All entities here are pure Python with no external dependencies
(except Pydantic for validation).

Entities:
    - Person: A roster entry whose probability is mutated by propagation
    - Meeting: One line of the meetings file, consumed and discarded
    - Tier: Medical action classification
    - PersonReport: One rendered output line
    - DetectionResult: Complete result of a detection run

Errors:
    - SpreaderDetectorError and its category-specific subclasses
"""

from spreader_detector.domain.entities import (
    DetectionResult,
    Meeting,
    Person,
    PersonReport,
    Tier,
)
from spreader_detector.domain.errors import (
    ConfigurationError,
    InputFileError,
    InvalidMeetingError,
    MalformedRecordError,
    OutputFileError,
    ResourceExhaustedError,
    SpreaderDetectorError,
    StoreOrderError,
    UnknownIdentifierError,
    UsageError,
)

__all__ = [
    "DetectionResult",
    "Meeting",
    "Person",
    "PersonReport",
    "Tier",
    "ConfigurationError",
    "InputFileError",
    "InvalidMeetingError",
    "MalformedRecordError",
    "OutputFileError",
    "ResourceExhaustedError",
    "SpreaderDetectorError",
    "StoreOrderError",
    "UnknownIdentifierError",
    "UsageError",
]
