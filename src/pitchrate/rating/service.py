"""Convert heterogeneous performance metrics into one bounded rating.

Every metric is rescaled linearly from its nominal domain to ``[0, 1]``,
combined with fixed weights that sum to 1.0 and projected onto the 40-95
rating scale. The computation is total: out-of-domain values are clamped,
non-finite values fall back to the domain minimum and absent optional
metrics use their configured default.
"""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple, Union

from pitchrate.config.rating import DEFAULT_SCALE, AttributeDomain, RatingScale, iter_domains
from pitchrate.models import PerformanceMetrics


MetricsInput = Union[PerformanceMetrics, Mapping[str, Any]]


@dataclass(frozen=True)
class AttributeContribution:
    name: str
    raw: Optional[float]
    normalized: float
    weight: float
    contribution: float


@dataclass(frozen=True)
class RatingBreakdown:
    """Per-attribute detail behind a single overall rating."""

    components: Tuple[AttributeContribution, ...]
    weighted_sum: float
    rating: int


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def normalize(value: float, minimum: float, maximum: float) -> float:
    """Rescale ``value`` from ``[minimum, maximum]`` onto ``[0, 1]``."""

    if maximum == minimum:
        return 0.5
    return clamp((value - minimum) / (maximum - minimum), 0.0, 1.0)


def _round_half_up(value: float) -> int:
    # Historical ratings were rounded half-up; round() would use banker's rounding.
    return int(math.floor(value + 0.5))


def _normalized_attribute(raw: Optional[float], domain: AttributeDomain) -> float:
    if raw is None:
        if domain.default is None:
            return 0.0
        raw = domain.default
    if not math.isfinite(raw):
        raw = domain.minimum
    return normalize(raw, domain.minimum, domain.maximum)


def _clamp_to_float_range(value: Any) -> Any:
    # Ints beyond the float range would fail validation instead of clamping.
    if isinstance(value, int) and not isinstance(value, bool) and abs(value) > sys.float_info.max:
        return sys.float_info.max if value > 0 else -sys.float_info.max
    return value


def _coerce_metrics(metrics: MetricsInput) -> PerformanceMetrics:
    if isinstance(metrics, PerformanceMetrics):
        return metrics
    return PerformanceMetrics.model_validate({key: _clamp_to_float_range(value) for key, value in metrics.items()})


def rating_breakdown(
    metrics: MetricsInput,
    *,
    scale: RatingScale = DEFAULT_SCALE,
) -> RatingBreakdown:
    """Compute the overall rating along with each attribute's contribution."""

    record = _coerce_metrics(metrics)
    components = []
    weighted_sum = 0.0
    for domain in iter_domains():
        raw = getattr(record, domain.name)
        normalized = _normalized_attribute(raw, domain)
        contribution = normalized * domain.weight
        weighted_sum += contribution
        components.append(
            AttributeContribution(
                name=domain.name,
                raw=raw,
                normalized=normalized,
                weight=domain.weight,
                contribution=contribution,
            )
        )

    rating = _round_half_up(scale.floor + weighted_sum * scale.span)
    rating = int(clamp(rating, scale.floor, scale.ceiling))
    return RatingBreakdown(components=tuple(components), weighted_sum=weighted_sum, rating=rating)


def compute_overall_rating(metrics: MetricsInput) -> int:
    """Return the overall rating (40-95) for a metrics record."""

    return rating_breakdown(metrics).rating
