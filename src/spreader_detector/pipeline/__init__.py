"""
Pipeline Package - Orchestration of a Detection Run.

Components:
    - DetectionPipeline: Main orchestrator coordinating all stages

The pipeline is responsible for:
    - Loading the people file into the record store
    - Ordering the store for lookup, then for reporting
    - Running propagation over the meetings file
    - Writing the output file
    - Collecting metrics and building the DetectionResult

Design Principles:
    - All dependencies injected via constructor
    - The record store is released on every exit path
"""

from spreader_detector.pipeline.detection_pipeline import DetectionPipeline

__all__ = ["DetectionPipeline"]
