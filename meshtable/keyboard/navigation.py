"""Screen-specific keyboard bindings.

This module contains Textual Binding objects for each screen.
"""

from textual.binding import Binding

# ============================================================================
# Metrics screen bindings
# ============================================================================

METRICS_SCREEN_BINDINGS: list[Binding] = [
    Binding("/", "focus_filter", "Filter"),
    Binding("ctrl+l", "clear_filter", "Clear Filter"),
    Binding("r", "refresh", "Refresh"),
]

__all__ = [
    "METRICS_SCREEN_BINDINGS",
]
