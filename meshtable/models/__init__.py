"""Data models for MeshTable."""

from meshtable.models.metrics import (
    MetricRecord,
    MetricRow,
    PodStats,
    ResourceKind,
    TcpStats,
    TrafficSplitStats,
)
from meshtable.models.state import (
    ConfigError,
    ConfigLoadError,
    ConfigManager,
    ConfigSaveError,
    MetricsTableSettings,
)
from meshtable.models.table import ColumnDescriptor, TableSpec

__all__ = [
    "ColumnDescriptor",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
    "MetricRecord",
    "MetricRow",
    "MetricsTableSettings",
    "PodStats",
    "ResourceKind",
    "TableSpec",
    "TcpStats",
    "TrafficSplitStats",
]
