"""Metrics module - Cache metrics and monitoring."""

from purplecache.metrics.collector import (
    MetricsCollector,
    CacheMetrics,
)

__all__ = [
    "MetricsCollector",
    "CacheMetrics",
]
