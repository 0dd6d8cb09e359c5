"""Screens for MeshTable."""

from meshtable.screens.metrics import MetricsTableScreen

__all__ = [
    "MetricsTableScreen",
]
