"""Overall-rating computation for football scouting metrics."""

from pitchrate.models import AnalysisMetrics, PerformanceMetrics
from pitchrate.rating import compute_overall_rating, rating_breakdown

__all__ = [
    "AnalysisMetrics",
    "PerformanceMetrics",
    "compute_overall_rating",
    "rating_breakdown",
]
