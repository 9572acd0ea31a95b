"""
Spreader Detector - Infection Probability Propagation Pipeline.

Reads a roster of people and a chronological log of pairwise meetings,
propagates an infection probability outward from one known sick person
along the meeting chain, and classifies every person into a medical
action tier.

Architecture:
    - In-memory record store with explicit ordering state
    - Strategy Pattern for sort comparators
    - Dependency Injection for config and metrics
    - Configuration-driven thresholds and messages via YAML

Main Components:
    - domain: Core entities (Person, Meeting, Tier) and error taxonomy
    - store: Record store and people-file parsing
    - ordering: Stable merge sort and comparators
    - lookup: Binary search by identifier
    - propagation: Transmission model and propagation engine
    - reporting: Tier classification and output rendering
    - pipeline: Orchestration of a full detection run
    - adapters: Line sources and metrics collection
    - config: Configuration models and loaders

Example:
    >>> from spreader_detector.config.models import DetectorConfig
    >>> from spreader_detector.pipeline.detection_pipeline import DetectionPipeline
    >>> pipeline = DetectionPipeline(DetectorConfig())
    >>> result = pipeline.run("People.in", "Meetings.in")
    >>> print(f"Classified {len(result.reports)} people")

"""

import logging

__version__ = "1.0.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Spreader Detector.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import spreader_detector
        >>> spreader_detector.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("spreader_detector").setLevel(level)
