"""Column descriptor and table spec models."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from meshtable.models.metrics.metric_record import MetricRow

CellRenderer = Callable[[MetricRow], Any]
SortKeyFn = Callable[[MetricRow], Any]
FilterFn = Callable[[MetricRow], Any]


@dataclass(frozen=True)
class ColumnDescriptor:
    """One column of a metrics table.

    ``render``, ``sorter`` and ``filter`` are pure functions of a row.
    A column without a sorter cannot be sorted; a column without a filter
    does not take part in text filtering.
    """

    title: str
    key: str
    render: CellRenderer
    is_numeric: bool = False
    data_index: str | None = None
    sorter: SortKeyFn | None = None
    filter: FilterFn | None = None
    tooltip: str = ""

    @property
    def sortable(self) -> bool:
        return self.sorter is not None


@dataclass(frozen=True)
class TableSpec:
    """Rows, columns and default sort key handed to the table widget."""

    rows: list[MetricRow] = field(default_factory=list)
    columns: list[ColumnDescriptor] = field(default_factory=list)
    default_sort_key: str = "name"

    @property
    def column_keys(self) -> list[str]:
        return [column.key for column in self.columns]

    @property
    def column_titles(self) -> list[str]:
        return [column.title for column in self.columns]

    def column(self, key: str) -> ColumnDescriptor | None:
        """Return the column with the given key, or None."""
        for column in self.columns:
            if column.key == key:
                return column
        return None
