"""Input adapters that normalize raw analysis payloads."""

from .metrics import (
    DEFAULT_STATS_MAPPING,
    AnalysisPayload,
    AnalysisUnavailableError,
    load_payload_json,
    normalize_stamina,
    parse_unit_value,
    payload_to_metrics,
)

__all__ = [
    "DEFAULT_STATS_MAPPING",
    "AnalysisPayload",
    "AnalysisUnavailableError",
    "load_payload_json",
    "normalize_stamina",
    "parse_unit_value",
    "payload_to_metrics",
]
