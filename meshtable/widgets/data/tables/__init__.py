"""Data table widgets for MeshTable."""

from meshtable.widgets.data.tables.metrics_data_table import (
    MetricsDataTable,
    cell_value,
    filter_rows,
    sort_rows,
    sort_value,
)

__all__ = [
    "MetricsDataTable",
    "cell_value",
    "filter_rows",
    "sort_rows",
    "sort_value",
]
