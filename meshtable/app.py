"""Main application class for MeshTable."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from textual.app import App

from meshtable.constants import APP_TITLE
from meshtable.controllers import MetricParser
from meshtable.keyboard import APP_BINDINGS
from meshtable.models.metrics import MetricRecord
from meshtable.models.state import ConfigManager, MetricsTableSettings
from meshtable.screens import MetricsTableScreen
from meshtable.screens.metrics.presenter import MetricsTablePresenter

logger = logging.getLogger(__name__)


class MeshTableApp(App[None]):
    """Textual app showing a metrics table for a metric snapshot file."""

    TITLE = APP_TITLE
    BINDINGS = APP_BINDINGS

    settings: MetricsTableSettings

    def __init__(
        self,
        resource_kind: str,
        metrics_path: Path | None = None,
        settings_path: Path | None = None,
        metrics: list[Any] | None = None,
        *,
        show_namespace_column: bool = True,
        show_name: bool = True,
        is_tcp_table: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.resource_kind = resource_kind
        self.metrics_path = metrics_path
        self.settings_path = settings_path
        self.show_namespace_column = show_namespace_column
        self.show_name = show_name
        self.is_tcp_table = is_tcp_table
        self._raw_metrics = metrics
        self._parser = MetricParser()

        # Load settings on startup
        self._load_settings()

    def _load_settings(self) -> None:
        """Load settings, using defaults if the file cannot be loaded."""
        self.settings = ConfigManager(self.settings_path).load_or_default()

    def load_metrics(self) -> list[MetricRecord]:
        """Parse metrics from the constructor payload or the snapshot file.

        The snapshot file holds either a JSON list of records or an object
        with the records under "rows".
        """
        raw: Any = self._raw_metrics
        if raw is None and self.metrics_path is not None:
            try:
                raw = json.loads(self.metrics_path.read_text(encoding="utf-8"))
            except (OSError, json.JSONDecodeError) as exc:
                logger.warning("Cannot read metrics snapshot %s: %s", self.metrics_path, exc)
                raw = []
        if isinstance(raw, dict):
            raw = raw.get("rows", [])
        return self._parser.parse_records(raw or [])

    def on_mount(self) -> None:
        self.push_screen(
            MetricsTableScreen(
                self.load_metrics(),
                self.resource_kind,
                presenter=MetricsTablePresenter(self.settings),
                show_namespace_column=self.show_namespace_column,
                show_name=self.show_name,
                is_tcp_table=self.is_tcp_table,
            )
        )
