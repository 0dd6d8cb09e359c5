"""DataTable keyboard bindings.

This module contains Textual Binding objects shared by table widgets.
"""

from textual.binding import Binding

# ============================================================================
# Textual Binding objects for data tables
# ============================================================================

DATA_TABLE_BINDINGS: list[Binding] = [
    Binding("s", "toggle_sort", "Sort"),
    Binding("S", "next_sort_column", "Sort Column"),
]

__all__ = [
    "DATA_TABLE_BINDINGS",
]
