"""Runtime smoke tests for MetricsTableScreen and MeshTableApp.

These tests run the app headless with App.run_test() and check that the
metrics table is populated, filtered and sorted the way a user sees it.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from textual.app import App
from textual.widgets import Input

from meshtable.app import MeshTableApp
from meshtable.constants.enums import SortDirection
from meshtable.models.state import MetricsTableSettings
from meshtable.screens import MetricsTableScreen
from meshtable.screens.metrics.presenter import MetricsTablePresenter
from meshtable.widgets import MetricsDataTable

METRICS = [
    {
        "name": "web",
        "namespace": "emojivoto",
        "type": "deployment",
        "added": True,
        "pods": {"meshedPods": 1, "totalPods": 1},
        "successRate": 0.99,
        "requestRate": 2.5,
        "latency": {"P50": 1.0, "P95": 4.0, "P99": 9.0},
    },
    {
        "name": "emoji",
        "namespace": "emojivoto",
        "type": "deployment",
        "added": True,
        "pods": {"meshedPods": 1, "totalPods": 1},
        "successRate": 1.0,
        "requestRate": 7.0,
    },
    {
        "name": "vote-bot",
        "namespace": "emojivoto",
        "type": "deployment",
        "added": False,
        "errors": {"vote-bot-1": ["proxy injection failed"]},
    },
]


class MetricsHostApp(App[None]):
    """Minimal host app that shows a single metrics screen."""

    def __init__(self, screen: MetricsTableScreen) -> None:
        super().__init__()
        self._metrics_screen = screen

    def on_mount(self) -> None:
        self.push_screen(self._metrics_screen)


def _names(table: MetricsDataTable) -> list[str]:
    return [row.name for row in table.visible_rows]


class TestMetricsTableScreenRuntime:
    """MetricsTableScreen behavior in a running app."""

    @pytest.mark.asyncio
    @pytest.mark.smoke
    async def test_rows_loaded_and_sorted_by_name(self) -> None:
        screen = MetricsTableScreen(METRICS, "deployment")
        app = MetricsHostApp(screen)

        async with app.run_test() as pilot:
            await pilot.pause()
            table = screen.query_one(MetricsDataTable)

            assert table.row_count == 3
            assert _names(table) == ["emoji", "vote-bot", "web"]
            assert table.sort_column == "name"
            assert screen.spec is not None
            assert screen.spec.column_keys[:3] == ["namespace", "name", "meshed"]
            assert screen.screen_title == "Deployments"

    @pytest.mark.asyncio
    @pytest.mark.smoke
    async def test_filter_input_filters_rows(self) -> None:
        screen = MetricsTableScreen(METRICS, "deployment")
        app = MetricsHostApp(screen)

        async with app.run_test() as pilot:
            await pilot.pause()
            table = screen.query_one(MetricsDataTable)

            screen.query_one(Input).value = "VOTE-"
            await pilot.pause()

            assert table.filter_query == "VOTE-"
            assert _names(table) == ["vote-bot"]
            assert table.row_count == 1

            # The namespace column takes part in filtering too.
            screen.query_one(Input).value = "emojivoto"
            await pilot.pause()

            assert _names(table) == ["emoji", "vote-bot", "web"]

            screen.query_one(Input).value = "booksapp"
            await pilot.pause()

            assert table.row_count == 0

            table.focus()
            await pilot.press("ctrl+l")
            await pilot.pause()

            assert table.filter_query == ""
            assert table.row_count == 3

    @pytest.mark.asyncio
    @pytest.mark.smoke
    async def test_sort_keybindings(self) -> None:
        screen = MetricsTableScreen(METRICS, "deployment")
        app = MetricsHostApp(screen)

        async with app.run_test() as pilot:
            await pilot.pause()
            table = screen.query_one(MetricsDataTable)
            table.focus()

            await pilot.press("s")
            await pilot.pause()
            assert table.sort_direction is SortDirection.DESC
            assert _names(table) == ["web", "vote-bot", "emoji"]

            assert table.sort_by_column("requestRate", reverse=True)
            assert _names(table) == ["emoji", "web", "vote-bot"]

            assert table.sort_by_column("grafanaDashboard") is False
            assert table.sort_column == "requestRate"

    @pytest.mark.asyncio
    @pytest.mark.smoke
    async def test_max_rows_limits_display(self) -> None:
        presenter = MetricsTablePresenter(MetricsTableSettings(max_rows=2))
        screen = MetricsTableScreen(METRICS, "deployment", presenter=presenter)
        app = MetricsHostApp(screen)

        async with app.run_test() as pilot:
            await pilot.pause()
            table = screen.query_one(MetricsDataTable)

            assert table.row_count == 2
            assert _names(table) == ["emoji", "vote-bot"]

    @pytest.mark.asyncio
    @pytest.mark.smoke
    async def test_refresh_with_new_snapshot(self) -> None:
        screen = MetricsTableScreen(METRICS, "deployment")
        app = MetricsHostApp(screen)

        async with app.run_test() as pilot:
            await pilot.pause()

            screen.refresh_table(METRICS[:1])
            await pilot.pause()

            assert screen.query_one(MetricsDataTable).row_count == 1


class TestMeshTableAppRuntime:
    """MeshTableApp startup with settings and snapshot files."""

    @pytest.mark.asyncio
    @pytest.mark.smoke
    async def test_app_shows_metrics_screen(self, tmp_path: Path) -> None:
        app = MeshTableApp(
            "deployment",
            settings_path=tmp_path / "missing.yaml",
            metrics=METRICS,
        )

        async with app.run_test() as pilot:
            await pilot.pause()

            assert isinstance(app.screen, MetricsTableScreen)
            assert app.screen.query_one(MetricsDataTable).row_count == 3
            assert app.settings == MetricsTableSettings()

    @pytest.mark.asyncio
    @pytest.mark.smoke
    async def test_app_reads_snapshot_and_settings(self, tmp_path: Path) -> None:
        snapshot = tmp_path / "metrics.json"
        snapshot.write_text(json.dumps({"rows": METRICS + ["not a record"]}), encoding="utf-8")
        settings = tmp_path / "meshtable.yaml"
        settings.write_text("selected_namespace: emojivoto\nmax_rows: [\n", encoding="utf-8")

        app = MeshTableApp("deployment", metrics_path=snapshot, settings_path=settings)

        async with app.run_test() as pilot:
            await pilot.pause()
            table = app.screen.query_one(MetricsDataTable)

            # Broken settings fall back to defaults; the bad record is skipped.
            assert app.settings == MetricsTableSettings()
            assert table.row_count == 3
            assert table.spec.column_keys[0] == "namespace"

    @pytest.mark.asyncio
    @pytest.mark.smoke
    async def test_app_missing_snapshot_gives_empty_table(self, tmp_path: Path) -> None:
        app = MeshTableApp(
            "trafficsplit",
            metrics_path=tmp_path / "missing.json",
            settings_path=tmp_path / "missing.yaml",
            show_name=False,
        )

        async with app.run_test() as pilot:
            await pilot.pause()
            table = app.screen.query_one(MetricsDataTable)

            assert table.row_count == 0
            assert table.sort_column == "leaf"
