"""Metrics table screen, presenter and column composition."""

from meshtable.screens.metrics.columns import build_columns
from meshtable.screens.metrics.metrics_screen import MetricsTableScreen
from meshtable.screens.metrics.presenter import (
    MetricsTablePresenter,
    normalize_metrics,
    render_metrics_table,
)

__all__ = [
    "MetricsTablePresenter",
    "MetricsTableScreen",
    "build_columns",
    "normalize_metrics",
    "render_metrics_table",
]
