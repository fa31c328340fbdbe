"""Configuration helpers for rating domains and weights."""

from .rating import (
    DEFAULT_SCALE,
    AttributeDomain,
    RatingScale,
    get_domain,
    iter_domains,
)

__all__ = [
    "DEFAULT_SCALE",
    "AttributeDomain",
    "RatingScale",
    "get_domain",
    "iter_domains",
]
