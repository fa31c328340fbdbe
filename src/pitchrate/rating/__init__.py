"""Overall rating normalizer."""

from .service import (
    AttributeContribution,
    RatingBreakdown,
    clamp,
    compute_overall_rating,
    normalize,
    rating_breakdown,
)

__all__ = [
    "AttributeContribution",
    "RatingBreakdown",
    "clamp",
    "compute_overall_rating",
    "normalize",
    "rating_breakdown",
]
