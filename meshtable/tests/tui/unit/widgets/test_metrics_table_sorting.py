"""Unit tests for MetricsDataTable sorting and filtering helpers."""

from __future__ import annotations

import math

import pytest
from rich.text import Text

from meshtable.models.metrics import MetricRow
from meshtable.models.table import ColumnDescriptor
from meshtable.widgets.data.tables.metrics_data_table import (
    MetricsDataTable,
    cell_value,
    filter_rows,
    sort_rows,
    sort_value,
)


def _rows() -> list[MetricRow]:
    return [
        MetricRow(name="web", namespace="emojivoto", request_rate=2.0),
        MetricRow(name="Emoji", namespace="emojivoto", request_rate=None),
        MetricRow(name="books", namespace="booksapp", request_rate=10.0),
    ]


def _name_column() -> ColumnDescriptor:
    return ColumnDescriptor(
        title="Name",
        key="name",
        render=lambda row: row.name,
        sorter=lambda row: row.name,
        filter=lambda row: row.name,
    )


def _rps_column() -> ColumnDescriptor:
    return ColumnDescriptor(
        title="RPS",
        key="requestRate",
        render=lambda row: row.request_rate,
        is_numeric=True,
        sorter=lambda row: row.request_rate,
    )


@pytest.mark.unit
@pytest.mark.fast
class TestSortValue:
    """Tests for the total sort order."""

    def test_order(self) -> None:
        values = ["b", 3, None, "A", -1, 2.5, float("nan")]

        ordered = sorted(values, key=sort_value)

        assert ordered[0] is None or (isinstance(ordered[0], float) and math.isnan(ordered[0]))
        assert ordered[2:] == [-1, 2.5, 3, "A", "b"]

    def test_text_uses_plain(self) -> None:
        assert sort_value(Text("Web")) == sort_value("web")


@pytest.mark.unit
@pytest.mark.fast
class TestSortRows:
    """Tests for sort_rows."""

    def test_sort_by_name_case_insensitive(self) -> None:
        rows = sort_rows(_rows(), _name_column())

        assert [row.name for row in rows] == ["books", "Emoji", "web"]

    def test_sort_numeric_missing_first(self) -> None:
        rows = sort_rows(_rows(), _rps_column())

        assert [row.name for row in rows] == ["Emoji", "web", "books"]

    def test_sort_descending(self) -> None:
        rows = sort_rows(_rows(), _rps_column(), reverse=True)

        assert [row.name for row in rows] == ["books", "web", "Emoji"]

    def test_unsortable_column_keeps_order(self) -> None:
        column = ColumnDescriptor(title="Grafana", key="grafanaDashboard", render=lambda row: None)

        assert [row.name for row in sort_rows(_rows(), column)] == ["web", "Emoji", "books"]


@pytest.mark.unit
@pytest.mark.fast
class TestFilterRows:
    """Tests for filter_rows."""

    def test_empty_query_keeps_all(self) -> None:
        assert len(filter_rows(_rows(), [_name_column()], "  ")) == 3

    def test_case_insensitive_substring(self) -> None:
        rows = filter_rows(_rows(), [_name_column()], "EMO")

        assert [row.name for row in rows] == ["Emoji"]

    def test_regex_characters_are_literal(self) -> None:
        assert filter_rows(_rows(), [_name_column()], "w.b") == []

    def test_columns_without_filter_ignored(self) -> None:
        assert filter_rows(_rows(), [_rps_column()], "10") == []


@pytest.mark.unit
@pytest.mark.fast
def test_cell_value() -> None:
    assert cell_value(None) == ""
    assert isinstance(cell_value("[bold]web[/]"), Text)
    assert cell_value("[bold]web[/]").plain == "[bold]web[/]"
    text = Text("web")
    assert cell_value(text) is text
    assert cell_value(3) == 3


@pytest.mark.unit
@pytest.mark.fast
def test_table_defaults() -> None:
    table = MetricsDataTable(max_rows=5)

    assert table.has_class("widget-metrics-table")
    assert table.cursor_type == "row"
    assert table.spec is None
    assert table.visible_rows == []
    assert table.filter_query == ""
