"""Canonical metric records shared across ingest, rating and API layers."""

from .metrics import AnalysisMetrics, PerformanceMetrics

__all__ = ["AnalysisMetrics", "PerformanceMetrics"]
