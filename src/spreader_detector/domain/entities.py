"""
Core Domain Entities.

This module defines the fundamental entities of the Spreader Detector domain.
These entities represent the core concepts that the business logic operates on.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class Tier(str, Enum):
    """Medical action tier derived from a final infection probability."""

    HOSPITALIZATION = "HOSPITALIZATION"
    QUARANTINE = "QUARANTINE"
    CLEAN = "CLEAN"


class Person(BaseModel):
    """A person from the roster. Only ``probability`` changes after ingestion."""

    name: str = Field(..., min_length=1, description="Name without whitespace")
    id: int = Field(..., ge=0, description="Unique numeric identifier")
    age: float = Field(..., description="Age in years (informational)")
    probability: float = Field(default=0.0, description="Infection probability")

    def __repr__(self) -> str:
        return f"Person(name={self.name!r}, id={self.id}, probability={self.probability})"


class Meeting(BaseModel):
    """A single meeting between an infector and an infected person."""

    infector_id: int = Field(..., ge=0)
    infected_id: int = Field(..., ge=0)
    distance: float = Field(..., description="Distance between the two people")
    duration: float = Field(..., description="Meeting duration in seconds")
    line_number: int = Field(default=0, ge=0, description="Source line (1-based)")

    model_config = {"frozen": True}


class PersonReport(BaseModel):
    """One emitted output line."""

    name: str
    id: int
    probability: float
    tier: Tier

    model_config = {"frozen": True}


class DetectionResult(BaseModel):
    """Complete result of a detection run."""

    origin_id: Optional[int] = Field(
        default=None, description="Sick person identifier, None for no meetings"
    )
    meetings_processed: int = 0
    reports: List[PersonReport] = Field(default_factory=list)
    output_path: str
    metrics: Dict[str, Any] = Field(default_factory=dict)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    def count_by_tier(self) -> Dict[Tier, int]:
        """Number of people classified into each tier."""
        counts = {tier: 0 for tier in Tier}
        for report in self.reports:
            counts[report.tier] += 1
        return counts

