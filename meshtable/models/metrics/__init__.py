"""Metric record models."""

from meshtable.models.metrics.metric_record import (
    MetricRecord,
    MetricRow,
    PodStats,
    TcpStats,
    TrafficSplitStats,
)
from meshtable.models.metrics.resource_kind import ResourceKind

__all__ = [
    "MetricRecord",
    "MetricRow",
    "PodStats",
    "ResourceKind",
    "TcpStats",
    "TrafficSplitStats",
]
