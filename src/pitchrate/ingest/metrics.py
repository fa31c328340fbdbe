"""Helpers to turn video-analysis responses into canonical metric records."""

from __future__ import annotations

import json
import logging
import math
import os
import re
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, Field

from pitchrate.models import AnalysisMetrics


logger = logging.getLogger(__name__)

_STAMINA_REFERENCE_ENV = "PITCHRATE_STAMINA_REFERENCE_M"
_STAMINA_REFERENCE_DEFAULT = 1000.0

DISTANCE_SUFFIX = " m"
SPEED_SUFFIX = " km/h"

DEFAULT_STATS_MAPPING: Dict[str, str] = {
    "distance_covered": "distance_covered",
    "top_speed": "top_speed",
    "dribbling": "dribble_success",
    "passing": "pass_accuracy",
    "shooting": "shot_conversion",
    "overall_accuracy": "overall_accuracy",
}

_LEADING_NUMBER = re.compile(r"^\s*[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


class AnalysisUnavailableError(ValueError):
    """Raised when a response carries no metric sections at all."""


def _env_float(name: str, default: float, *, clamp_min: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if not math.isfinite(value):
        logger.warning("Non-finite value for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    return value


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_unit_value(raw: Any, suffix: Optional[str] = None) -> float:
    """Parse numbers such as ``"905.35 m"`` or ``"32 km/h"``.

    Anything that does not yield a finite number resolves to ``0.0``.
    """

    if _is_number(raw):
        value = float(raw)
        return value if math.isfinite(value) else 0.0
    if not isinstance(raw, str):
        return 0.0
    text = raw.replace(suffix, "") if suffix else raw
    match = _LEADING_NUMBER.match(text)
    if match is None:
        logger.debug("Unparsable metric value %r; using 0", raw)
        return 0.0
    value = float(match.group(0))
    return value if math.isfinite(value) else 0.0


def stamina_reference_distance() -> float:
    return _env_float(_STAMINA_REFERENCE_ENV, _STAMINA_REFERENCE_DEFAULT, clamp_min=1.0)


def normalize_stamina(distance_m: float, reference_m: float | None = None) -> float:
    """Map distance covered onto 0-100 where ``reference_m`` scores 100."""

    if not distance_m or distance_m <= 0 or not math.isfinite(distance_m):
        return 0.0
    reference = reference_m if reference_m is not None else stamina_reference_distance()
    return max(0.0, min(distance_m / reference * 100.0, 100.0))


def _clamp_percentage(value: float) -> float:
    return max(0.0, min(value, 100.0))


class AnalysisPayload(BaseModel):
    """Raw ``stats`` and ``performanceMetrics`` sections of an analysis."""

    stats: Dict[str, Any] = Field(default_factory=dict)
    performance: Dict[str, Any] = Field(default_factory=dict)
    stats_mapping: Dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_STATS_MAPPING))

    @classmethod
    def from_response(
        cls,
        data: Mapping[str, Any],
        mapping: Mapping[str, str] | None = None,
    ) -> "AnalysisPayload":
        body = data.get("metrics", data)
        if not isinstance(body, Mapping):
            raise AnalysisUnavailableError("analysis not available")
        stats = body.get("stats")
        performance = body.get("performanceMetrics")
        if isinstance(performance, list):
            performance = performance[0] if performance else None
        if not isinstance(stats, Mapping) and not isinstance(performance, Mapping):
            raise AnalysisUnavailableError("analysis not available")

        stats_mapping = dict(DEFAULT_STATS_MAPPING)
        if mapping:
            stats_mapping.update(mapping)
        return cls(
            stats=dict(stats) if isinstance(stats, Mapping) else {},
            performance=dict(performance) if isinstance(performance, Mapping) else {},
            stats_mapping=stats_mapping,
        )

    def stat(self, key: str) -> Any:
        return self.stats.get(self.stats_mapping.get(key, key))

    def has_stat(self, key: str) -> bool:
        return self.stats_mapping.get(key, key) in self.stats


def _first_present(*values: Any) -> float:
    for value in values:
        if value is not None:
            return parse_unit_value(value)
    return 0.0


def payload_to_metrics(payload: AnalysisPayload) -> AnalysisMetrics:
    perf = payload.performance

    distance: float | None = None
    if payload.has_stat("distance_covered"):
        distance = parse_unit_value(payload.stat("distance_covered"), DISTANCE_SUFFIX)
    top_speed = parse_unit_value(payload.stat("top_speed"), SPEED_SUFFIX)

    raw_stamina = perf.get("stamina")
    if _is_number(raw_stamina) and math.isfinite(raw_stamina):
        stamina = _clamp_percentage(float(raw_stamina))
    else:
        stamina = normalize_stamina(distance or 0.0)
        logger.debug("Stamina derived from distance %.2f m: %.1f", distance or 0.0, stamina)

    raw_accuracy = payload.stat("overall_accuracy")
    overall_accuracy = 0.0
    if _is_number(raw_accuracy) and math.isfinite(raw_accuracy):
        overall_accuracy = _clamp_percentage(float(raw_accuracy))

    speed = perf.get("speed")
    created_at = perf.get("createdAt")
    return AnalysisMetrics(
        speed=parse_unit_value(speed, SPEED_SUFFIX) if speed is not None else top_speed,
        stamina=stamina,
        dribbling=_first_present(perf.get("dribbling"), payload.stat("dribbling")),
        passing=_first_present(perf.get("passing"), payload.stat("passing")),
        shooting=_first_present(perf.get("shooting"), payload.stat("shooting")),
        distance_covered=distance,
        top_speed=top_speed,
        overall_accuracy=overall_accuracy,
        created_at=str(created_at) if created_at is not None else None,
    )


def load_payload_json(path: Path, *, mapping: Mapping[str, str] | None = None) -> AnalysisPayload:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, Mapping):
        raise AnalysisUnavailableError(f"{path} does not contain an analysis object")
    return AnalysisPayload.from_response(data, mapping)
