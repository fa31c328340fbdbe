"""Rank players by overall rating or a single analysis metric."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Literal, Optional

from pydantic import BaseModel, Field

from pitchrate.models import AnalysisMetrics
from pitchrate.rating import compute_overall_rating


SortKey = Literal["rating", "accuracy", "speed", "dribbling", "passing", "shooting", "stamina"]


class LeaderboardEntry(BaseModel):
    player_id: str = Field(..., min_length=1)
    name: str
    position: Optional[str] = None
    club: Optional[str] = None
    metrics: AnalysisMetrics


@dataclass(frozen=True)
class LeaderboardCriteria:
    """Sorting and filtering configuration for a leaderboard."""

    sort_by: SortKey = "rating"
    limit: int | None = 100
    position: str | None = None


@dataclass(frozen=True)
class RankedPlayer:
    rank: int
    entry: LeaderboardEntry
    rating: int


@dataclass(frozen=True)
class LeaderboardResult:
    total_players: int
    players: list[RankedPlayer]


def _sort_value(entry: LeaderboardEntry, rating: int, sort_by: SortKey) -> float:
    value = _metric_value(entry, rating, sort_by)
    # Non-finite metrics rank after every finite one.
    return value if math.isfinite(value) else float("-inf")


def _metric_value(entry: LeaderboardEntry, rating: int, sort_by: SortKey) -> float:
    metrics = entry.metrics
    if sort_by == "accuracy":
        return metrics.overall_accuracy
    if sort_by == "speed":
        return metrics.speed
    if sort_by == "dribbling":
        return metrics.dribbling
    if sort_by == "passing":
        return metrics.passing
    if sort_by == "shooting":
        return metrics.shooting
    if sort_by == "stamina":
        return metrics.stamina
    return float(rating)


def build_leaderboard(
    entries: Iterable[LeaderboardEntry],
    criteria: LeaderboardCriteria | None = None,
) -> LeaderboardResult:
    criteria = criteria or LeaderboardCriteria()
    position = criteria.position.strip().lower() if criteria.position else None

    rated: list[tuple[LeaderboardEntry, int]] = []
    for entry in entries:
        if position and (entry.position or "").strip().lower() != position:
            continue
        rated.append((entry, compute_overall_rating(entry.metrics.to_performance_metrics())))

    rated.sort(
        key=lambda item: (
            -_sort_value(item[0], item[1], criteria.sort_by),
            -item[1],
            item[0].name,
        )
    )
    total = len(rated)
    if criteria.limit is not None:
        rated = rated[: max(0, criteria.limit)]

    return LeaderboardResult(
        total_players=total,
        players=[
            RankedPlayer(rank=index, entry=entry, rating=rating)
            for index, (entry, rating) in enumerate(rated, start=1)
        ],
    )
