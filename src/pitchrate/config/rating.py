"""Nominal domains, weights and output scale for the overall rating."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional


@dataclass(frozen=True)
class AttributeDomain:
    """Linear normalization interval and weight for one metric.

    ``default`` is the raw value substituted when the metric is absent. A
    ``None`` default means an absent metric contributes nothing.
    """

    name: str
    minimum: float
    maximum: float
    weight: float
    default: Optional[float] = None


@dataclass(frozen=True)
class RatingScale:
    floor: int
    ceiling: int

    @property
    def span(self) -> int:
        return self.ceiling - self.floor


# 40 is a replacement-level floor and 95 an elite ceiling. Stored ratings
# depend on these values, so they must not change.
DEFAULT_SCALE = RatingScale(floor=40, ceiling=95)

_ATTRIBUTE_DOMAINS: Dict[str, AttributeDomain] = {
    "speed": AttributeDomain("speed", 15.0, 35.0, 0.15),
    "stamina": AttributeDomain("stamina", 0.0, 100.0, 0.15),
    "distance_covered": AttributeDomain("distance_covered", 3000.0, 12000.0, 0.10),
    "dribbling": AttributeDomain("dribbling", 0.0, 100.0, 0.15),
    "passing": AttributeDomain("passing", 0.0, 100.0, 0.15),
    "shooting": AttributeDomain("shooting", 0.0, 100.0, 0.15),
    "agility": AttributeDomain("agility", 0.0, 100.0, 0.075, default=50.0),
    "intelligence": AttributeDomain("intelligence", 0.0, 100.0, 0.075, default=50.0),
}


def iter_domains() -> Iterable[AttributeDomain]:
    """Return the configured domains in weight-table order."""

    return _ATTRIBUTE_DOMAINS.values()


def get_domain(name: str) -> AttributeDomain:
    """Fetch the domain for an attribute, raising KeyError if missing."""

    if name not in _ATTRIBUTE_DOMAINS:
        raise KeyError(f"No rating domain configured for attribute={name!r}")
    return _ATTRIBUTE_DOMAINS[name]

