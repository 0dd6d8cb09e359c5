"""Widgets module for MeshTable.

This module provides the reusable widgets organized into submodules:
- data: Data display widgets (tables)
- display: Cell renderables (success rate, error indicator)
"""

from meshtable.widgets.data import MetricsDataTable
from meshtable.widgets.display import (
    error_indicator,
    success_rate_cell,
    with_error_indicator,
)

__all__ = [
    "MetricsDataTable",
    "error_indicator",
    "success_rate_cell",
    "with_error_indicator",
]
