"""Ranking utilities over rated players."""

from .ranking import (
    LeaderboardCriteria,
    LeaderboardEntry,
    LeaderboardResult,
    RankedPlayer,
    build_leaderboard,
)

__all__ = [
    "LeaderboardCriteria",
    "LeaderboardEntry",
    "LeaderboardResult",
    "RankedPlayer",
    "build_leaderboard",
]
