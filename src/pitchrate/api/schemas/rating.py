from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from pitchrate.models import AnalysisMetrics


class AttributeContributionResponse(BaseModel):
    name: str
    raw: float | None
    normalized: float
    weight: float
    contribution: float


class RatingResponse(BaseModel):
    rating: int = Field(..., ge=40, le=95)
    weighted_sum: float
    components: List[AttributeContributionResponse]


class AnalysisResponse(BaseModel):
    metrics: AnalysisMetrics
    rating: int = Field(..., ge=40, le=95)
