"""Canonical metric models shared across ingestion and rating layers."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class PerformanceMetrics(BaseModel):
    """Raw per-analysis metrics fed to the rating normalizer.

    No range constraints are declared: out-of-domain and non-finite values are
    accepted here and absorbed by the normalizer.
    """

    speed: float
    stamina: float
    dribbling: float
    passing: float
    shooting: float
    agility: Optional[float] = None
    intelligence: Optional[float] = None
    distance_covered: Optional[float] = Field(default=None, alias="distanceCovered")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class AnalysisMetrics(BaseModel):
    """Metrics resolved from an external video-analysis response."""

    speed: float = 0.0
    stamina: float = 0.0
    dribbling: float = 0.0
    passing: float = 0.0
    shooting: float = 0.0
    distance_covered: Optional[float] = Field(default=None, alias="distanceCovered")
    top_speed: float = Field(default=0.0, alias="topSpeed")
    overall_accuracy: float = Field(default=0.0, alias="overallAccuracy")
    created_at: Optional[str] = Field(default=None, alias="createdAt")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_performance_metrics(self) -> PerformanceMetrics:
        return PerformanceMetrics(
            speed=self.speed,
            stamina=self.stamina,
            dribbling=self.dribbling,
            passing=self.passing,
            shooting=self.shooting,
            distance_covered=self.distance_covered,
        )
