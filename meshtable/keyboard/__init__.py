"""Keyboard bindings module.

This module provides all keyboard bindings for MeshTable.
Bindings are organized into three categories:

- app: App-level bindings (APP_BINDINGS)
- navigation: Screen-specific bindings (*_SCREEN_BINDINGS)
- tables: DataTable bindings (DATA_TABLE_BINDINGS)
"""

from meshtable.keyboard.app import APP_BINDINGS
from meshtable.keyboard.navigation import METRICS_SCREEN_BINDINGS
from meshtable.keyboard.tables import DATA_TABLE_BINDINGS

__all__ = [
    "APP_BINDINGS",
    # Table bindings
    "DATA_TABLE_BINDINGS",
    # Screen-specific bindings
    "METRICS_SCREEN_BINDINGS",
]
