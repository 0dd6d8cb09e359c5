"""Metrics screen - filter input and metrics table for one resource kind."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Footer, Input

from meshtable.keyboard import METRICS_SCREEN_BINDINGS
from meshtable.models.metrics import MetricRecord, ResourceKind
from meshtable.models.table import TableSpec
from meshtable.screens.metrics.config import METRICS_FILTER_ID, METRICS_TABLE_ID
from meshtable.screens.metrics.presenter import MetricsTablePresenter
from meshtable.utils.resource_names import friendly_title
from meshtable.widgets import MetricsDataTable

logger = logging.getLogger(__name__)


class MetricsTableScreen(Screen[None]):
    """Screen showing the metrics table of one resource kind."""

    BINDINGS = METRICS_SCREEN_BINDINGS

    DEFAULT_CSS = """
    MetricsTableScreen {
        layout: vertical;
    }
    MetricsTableScreen > #metrics-filter {
        height: 3;
    }
    MetricsTableScreen > MetricsDataTable {
        height: 1fr;
    }
    """

    def __init__(
        self,
        metrics: Iterable[MetricRecord | Mapping[str, Any]] | None,
        resource_kind: str | ResourceKind,
        *,
        presenter: MetricsTablePresenter | None = None,
        show_namespace_column: bool = True,
        show_name: bool = True,
        is_tcp_table: bool = False,
        name: str | None = None,
        id: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id)
        self._metrics = list(metrics or [])
        self._resource_kind = ResourceKind.parse(resource_kind)
        self._presenter = presenter or MetricsTablePresenter()
        self._show_namespace_column = show_namespace_column
        self._show_name = show_name
        self._is_tcp_table = is_tcp_table
        self._spec: TableSpec | None = None

    @property
    def screen_title(self) -> str:
        return friendly_title(self._resource_kind.name).plural

    @property
    def spec(self) -> TableSpec | None:
        return self._spec

    def compose(self) -> ComposeResult:
        yield Input(placeholder="Filter rows...", id=METRICS_FILTER_ID)
        yield MetricsDataTable(id=METRICS_TABLE_ID, max_rows=self._presenter.settings.max_rows)
        yield Footer()

    def on_mount(self) -> None:
        self.title = self.screen_title
        self.refresh_table()

    def refresh_table(self, metrics: Iterable[MetricRecord | Mapping[str, Any]] | None = None) -> None:
        """Rebuild the table spec, optionally from a new metrics snapshot."""
        if metrics is not None:
            self._metrics = list(metrics)
        self._spec = self._presenter.build_table_spec(
            self._metrics,
            self._resource_kind,
            show_namespace_column=self._show_namespace_column,
            show_name=self._show_name,
            is_tcp_table=self._is_tcp_table,
        )
        table = self.query_one(f"#{METRICS_TABLE_ID}", MetricsDataTable)
        table.load_spec(self._spec)
        filter_input = self.query_one(f"#{METRICS_FILTER_ID}", Input)
        if filter_input.value:
            table.set_filter(filter_input.value)

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id != METRICS_FILTER_ID:
            return
        self.query_one(f"#{METRICS_TABLE_ID}", MetricsDataTable).set_filter(event.value)

    def action_focus_filter(self) -> None:
        self.query_one(f"#{METRICS_FILTER_ID}", Input).focus()

    def action_clear_filter(self) -> None:
        # Setting the value posts Input.Changed, which clears the table filter.
        self.query_one(f"#{METRICS_FILTER_ID}", Input).value = ""

    def action_refresh(self) -> None:
        self.refresh_table()
