"""
Configuration Package - Models and Loaders.

This package handles all configuration aspects of the Spreader Detector:
    - Pydantic models for type-safe configuration
    - Layered YAML loader: packaged defaults, user file, overrides

Configuration Structure:
    - DetectorConfig: Root configuration object
    - TransmissionModelConfig: Transmission formula constants
    - ClassificationConfig: Tier thresholds and epsilon
    - OutputConfig: Output file name and message templates
    - ErrorMessagesConfig: User-facing error messages

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
"""

from spreader_detector.config.loader import DEFAULT_CONFIG_PATH, ConfigLoader
from spreader_detector.config.models import (
    ClassificationConfig,
    DetectorConfig,
    ErrorMessagesConfig,
    OutputConfig,
    TransmissionModelConfig,
)

__all__ = [
    "ConfigLoader",
    "DEFAULT_CONFIG_PATH",
    "ClassificationConfig",
    "DetectorConfig",
    "ErrorMessagesConfig",
    "OutputConfig",
    "TransmissionModelConfig",
]
