"""REST API for the pitchrate rating service."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import Body, FastAPI, HTTPException

from pitchrate.api.schemas import (
    AnalysisResponse,
    AttributeContributionResponse,
    LeaderboardPlayerResponse,
    LeaderboardRequest,
    LeaderboardResponse,
    RatingResponse,
)
from pitchrate.ingest import AnalysisPayload, AnalysisUnavailableError, payload_to_metrics
from pitchrate.leaderboard import LeaderboardCriteria, build_leaderboard
from pitchrate.models import PerformanceMetrics
from pitchrate.rating import RatingBreakdown, compute_overall_rating, rating_breakdown


logger = logging.getLogger(__name__)


def breakdown_to_response(breakdown: RatingBreakdown) -> RatingResponse:
    return RatingResponse(
        rating=breakdown.rating,
        weighted_sum=breakdown.weighted_sum,
        components=[
            AttributeContributionResponse(
                name=component.name,
                raw=component.raw,
                normalized=component.normalized,
                weight=component.weight,
                contribution=component.contribution,
            )
            for component in breakdown.components
        ],
    )


def create_app() -> FastAPI:
    app = FastAPI(title="pitchrate rating service")

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/rating", response_model=RatingResponse)
    async def rating(metrics: PerformanceMetrics) -> RatingResponse:
        return breakdown_to_response(rating_breakdown(metrics))

    @app.post("/analysis", response_model=AnalysisResponse)
    async def analysis(payload: dict[str, Any] = Body(...)) -> AnalysisResponse:
        try:
            parsed = AnalysisPayload.from_response(payload)
        except AnalysisUnavailableError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        metrics = payload_to_metrics(parsed)
        overall = compute_overall_rating(metrics.to_performance_metrics())
        logger.debug("Rated analysis payload: %d", overall)
        return AnalysisResponse(metrics=metrics, rating=overall)

    @app.post("/leaderboard", response_model=LeaderboardResponse)
    async def leaderboard(request: LeaderboardRequest) -> LeaderboardResponse:
        result = build_leaderboard(
            request.players,
            LeaderboardCriteria(
                sort_by=request.sort_by,
                limit=request.limit,
                position=request.position,
            ),
        )
        return LeaderboardResponse(
            total_players=result.total_players,
            leaderboard=[
                LeaderboardPlayerResponse(
                    rank=ranked.rank,
                    player_id=ranked.entry.player_id,
                    name=ranked.entry.name,
                    position=ranked.entry.position,
                    club=ranked.entry.club,
                    rating=ranked.rating,
                    metrics=ranked.entry.metrics,
                )
                for ranked in result.players
            ],
        )

    return app
