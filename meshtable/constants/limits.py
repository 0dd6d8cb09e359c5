"""Limit and threshold constants for the metrics table.

All limit values, thresholds, and validation ranges.
"""

from typing import Final

# ============================================================================
# Display limits
# ============================================================================

MAX_ROWS_DISPLAY: Final = 1000
MAX_ROWS_MIN: Final = 1

__all__ = [
    "MAX_ROWS_DISPLAY",
    "MAX_ROWS_MIN",
]
