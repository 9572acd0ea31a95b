"""
Reporting Package - Classification and Output.

Components:
    - TierClassifier: Probability to Tier with inclusive thresholds
    - ReportWriter: Highest-first report lines rendered from templates
"""

from spreader_detector.reporting.classifier import TierClassifier
from spreader_detector.reporting.report_writer import ReportWriter

__all__ = ["TierClassifier", "ReportWriter"]
