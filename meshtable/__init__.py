"""MeshTable - service-mesh telemetry tables."""

from meshtable.models.table import ColumnDescriptor, TableSpec
from meshtable.screens.metrics.columns import build_columns
from meshtable.screens.metrics.presenter import (
    MetricsTablePresenter,
    normalize_metrics,
    render_metrics_table,
)

__version__ = "0.1.0"

__all__ = [
    "ColumnDescriptor",
    "MetricsTablePresenter",
    "TableSpec",
    "__version__",
    "build_columns",
    "normalize_metrics",
    "render_metrics_table",
]
