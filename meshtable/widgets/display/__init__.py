"""Display helpers for metrics table cells."""

from meshtable.widgets.display.metric_cells import (
    classify_success_rate,
    count_errors,
    error_indicator,
    success_rate_cell,
    with_error_indicator,
)

__all__ = [
    "classify_success_rate",
    "count_errors",
    "error_indicator",
    "success_rate_cell",
    "with_error_indicator",
]
