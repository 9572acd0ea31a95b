"""
Tier Classifier - Probability to Medical Action Tier.

Thresholds are inclusive: a probability at or above a threshold, or within
epsilon of it, meets that threshold.
"""

from __future__ import annotations

from typing import Optional

from spreader_detector.config.models import ClassificationConfig
from spreader_detector.domain.entities import Tier


class TierClassifier:
    """Maps a final infection probability to a Tier."""

    def __init__(self, config: Optional[ClassificationConfig] = None) -> None:
        self.config = config or ClassificationConfig()

    def classify(self, probability: float) -> Tier:
        """Classify a probability into HOSPITALIZATION, QUARANTINE or CLEAN."""
        if self._meets(probability, self.config.hospitalization_threshold):
            return Tier.HOSPITALIZATION
        if self._meets(probability, self.config.quarantine_threshold):
            return Tier.QUARANTINE
        return Tier.CLEAN

    def _meets(self, probability: float, threshold: float) -> bool:
        return (
            probability >= threshold
            or abs(probability - threshold) < self.config.epsilon
        )
