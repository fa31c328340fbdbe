import math

import pytest
from pydantic import ValidationError

from pitchrate.models import AnalysisMetrics, PerformanceMetrics


def test_performance_metrics_is_frozen():
    metrics = PerformanceMetrics(speed=25, stamina=50, dribbling=50, passing=50, shooting=50)

    assert metrics.agility is None
    assert metrics.distance_covered is None

    with pytest.raises((TypeError, ValidationError)):
        metrics.speed = 30  # type: ignore[misc]


def test_performance_metrics_accepts_camel_case_alias():
    metrics = PerformanceMetrics.model_validate(
        {"speed": 25, "stamina": 50, "dribbling": 50, "passing": 50, "shooting": 50, "distanceCovered": 7500}
    )
    assert metrics.distance_covered == 7500


def test_performance_metrics_accepts_out_of_range_and_non_finite():
    metrics = PerformanceMetrics(speed=-10, stamina=250, dribbling=float("nan"), passing=0, shooting=0)
    assert metrics.stamina == 250
    assert math.isnan(metrics.dribbling)


def test_performance_metrics_rejects_missing_required_field():
    with pytest.raises(ValidationError):
        PerformanceMetrics(speed=25, stamina=50, dribbling=50, passing=50)  # type: ignore[call-arg]


def test_analysis_metrics_to_performance_metrics():
    analysis = AnalysisMetrics(
        speed=28,
        stamina=80,
        dribbling=60,
        passing=70,
        shooting=40,
        distance_covered=905.35,
        top_speed=28,
        overall_accuracy=91.2,
    )

    metrics = analysis.to_performance_metrics()
    assert metrics.speed == 28
    assert metrics.distance_covered == pytest.approx(905.35)
    assert metrics.agility is None
