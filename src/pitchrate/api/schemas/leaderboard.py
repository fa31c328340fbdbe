from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from pitchrate.leaderboard import LeaderboardEntry
from pitchrate.leaderboard.ranking import SortKey
from pitchrate.models import AnalysisMetrics


class LeaderboardRequest(BaseModel):
    players: List[LeaderboardEntry] = Field(default_factory=list)
    sort_by: SortKey = "rating"
    limit: int | None = Field(default=100, ge=1, le=500)
    position: str | None = None


class LeaderboardPlayerResponse(BaseModel):
    rank: int
    player_id: str
    name: str
    position: str | None
    club: str | None
    rating: int
    metrics: AnalysisMetrics


class LeaderboardResponse(BaseModel):
    total_players: int
    leaderboard: List[LeaderboardPlayerResponse]
