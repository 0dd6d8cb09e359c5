"""Data display widgets."""

from meshtable.widgets.data.tables import MetricsDataTable

__all__ = [
    "MetricsDataTable",
]
