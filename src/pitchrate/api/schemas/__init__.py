"""Pydantic models for API I/O."""

from .rating import AnalysisResponse, AttributeContributionResponse, RatingResponse
from .leaderboard import LeaderboardPlayerResponse, LeaderboardRequest, LeaderboardResponse

__all__ = [
    "AnalysisResponse",
    "AttributeContributionResponse",
    "RatingResponse",
    "LeaderboardPlayerResponse",
    "LeaderboardRequest",
    "LeaderboardResponse",
]
