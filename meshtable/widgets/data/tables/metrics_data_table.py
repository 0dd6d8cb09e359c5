"""MetricsDataTable - DataTable that renders a metrics TableSpec.

The table owns sorting and filtering of the rows it is given: rows are
sorted with the sorter of the active column and filtered with the filter
functions of every column that has one.

CSS Classes: widget-metrics-table
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable, Sequence
from typing import Any, ClassVar

from rich.text import Text
from textual.widgets import DataTable

from meshtable.constants.enums import SortDirection
from meshtable.constants.limits import MAX_ROWS_DISPLAY
from meshtable.keyboard import DATA_TABLE_BINDINGS
from meshtable.models.metrics import MetricRow
from meshtable.models.table import ColumnDescriptor, TableSpec

logger = logging.getLogger(__name__)


def sort_value(value: Any) -> tuple[int, Any]:
    """Map a sorter result onto a single total order.

    None (and NaN) < numbers < text; text compares case-insensitively.
    """
    if value is None:
        return (0, 0)
    if isinstance(value, (bool, int, float)):
        if isinstance(value, float) and math.isnan(value):
            return (0, 0)
        return (1, value)
    if isinstance(value, Text):
        value = value.plain
    return (2, str(value).casefold())


def sort_rows(
    rows: Iterable[MetricRow],
    column: ColumnDescriptor,
    reverse: bool = False,
) -> list[MetricRow]:
    """Return rows sorted by a column's sorter. Unsortable columns keep order."""
    if column.sorter is None:
        return list(rows)
    sorter = column.sorter
    return sorted(rows, key=lambda row: sort_value(sorter(row)), reverse=reverse)


def filter_rows(
    rows: Iterable[MetricRow],
    columns: Sequence[ColumnDescriptor],
    query: str,
) -> list[MetricRow]:
    """Keep rows where any filterable column contains the query (case-insensitive)."""
    query = (query or "").strip()
    if not query:
        return list(rows)
    pattern = re.compile(re.escape(query), re.IGNORECASE)
    filters = [column.filter for column in columns if column.filter is not None]

    def matches(row: MetricRow) -> bool:
        for filter_fn in filters:
            value = filter_fn(row)
            if value is not None and pattern.search(str(value)):
                return True
        return False

    return [row for row in rows if matches(row)]


def cell_value(rendered: Any) -> Any:
    """Convert a rendered cell into something DataTable can display."""
    if rendered is None:
        return ""
    if isinstance(rendered, str):
        # Plain text, not markup.
        return Text(rendered)
    return rendered


class MetricsDataTable(DataTable):
    """DataTable displaying the rows and columns of a TableSpec.

    CSS Classes: widget-metrics-table
    """

    BINDINGS = DATA_TABLE_BINDINGS

    _DEFAULT_CLASSES: ClassVar[str] = "widget-metrics-table"

    def __init__(self, *args: Any, max_rows: int = MAX_ROWS_DISPLAY, **kwargs: Any) -> None:
        """Initialize the metrics table.

        Args:
            max_rows: Maximum number of rows displayed after filtering.
        """
        if "classes" not in kwargs or not kwargs.get("classes"):
            kwargs["classes"] = self._DEFAULT_CLASSES
        kwargs.setdefault("cursor_type", "row")
        super().__init__(*args, **kwargs)
        self._spec: TableSpec | None = None
        self._sort_column: str | None = None
        self._sort_direction = SortDirection.ASC
        self._filter_query = ""
        self._max_rows = max_rows
        self._visible_rows: list[MetricRow] = []

    @property
    def spec(self) -> TableSpec | None:
        return self._spec

    @property
    def sort_column(self) -> str | None:
        return self._sort_column

    @property
    def sort_direction(self) -> SortDirection:
        return self._sort_direction

    @property
    def filter_query(self) -> str:
        return self._filter_query

    @property
    def visible_rows(self) -> list[MetricRow]:
        """Rows currently displayed, in display order."""
        return list(self._visible_rows)

    def load_spec(self, spec: TableSpec) -> None:
        """Replace columns and rows, sorting by the TableSpec default sort key."""
        self._spec = spec
        default_column = spec.column(spec.default_sort_key)
        self._sort_column = (
            default_column.key if default_column is not None and default_column.sortable else None
        )
        self._sort_direction = SortDirection.ASC
        self._rebuild()

    def sort_by_column(self, column_key: str, reverse: bool = False) -> bool:
        """Sort by a column.

        Returns:
            False if the column does not exist or cannot be sorted.
        """
        column = self._spec.column(column_key) if self._spec is not None else None
        if column is None or not column.sortable:
            logger.debug("Ignoring sort on unsortable column %r", column_key)
            return False
        self._sort_column = column_key
        self._sort_direction = SortDirection.DESC if reverse else SortDirection.ASC
        self._rebuild()
        return True

    def set_filter(self, query: str) -> None:
        """Filter rows by text across all filterable columns."""
        self._filter_query = query or ""
        self._rebuild()

    def action_toggle_sort(self) -> None:
        """Toggle sort direction of the current column, or sort by the first sortable one."""
        if self._spec is None:
            return
        if self._sort_column is None:
            first = next((c for c in self._spec.columns if c.sortable), None)
            if first is not None:
                self.sort_by_column(first.key)
            return
        self.sort_by_column(self._sort_column, self._sort_direction is SortDirection.ASC)

    def action_next_sort_column(self) -> None:
        """Move sorting to the next sortable column."""
        if self._spec is None:
            return
        sortable = [c.key for c in self._spec.columns if c.sortable]
        if not sortable:
            return
        if self._sort_column in sortable:
            next_key = sortable[(sortable.index(self._sort_column) + 1) % len(sortable)]
        else:
            next_key = sortable[0]
        self.sort_by_column(next_key)

    def _column_label(self, column: ColumnDescriptor) -> Text:
        label = column.title
        if self._sort_column == column.key:
            label = f"{label} [-]" if self._sort_direction is SortDirection.DESC else f"{label} [+]"
        return Text(label, justify="right" if column.is_numeric else "left")

    def _compute_rows(self) -> list[MetricRow]:
        if self._spec is None:
            return []
        rows = filter_rows(self._spec.rows, self._spec.columns, self._filter_query)
        column = self._spec.column(self._sort_column) if self._sort_column else None
        if column is not None:
            rows = sort_rows(rows, column, reverse=self._sort_direction is SortDirection.DESC)
        return rows[: self._max_rows]

    def _rebuild(self) -> None:
        self._visible_rows = self._compute_rows()
        self.clear(columns=True)
        if self._spec is None:
            return
        for column in self._spec.columns:
            self.add_column(self._column_label(column), key=column.key)
        for index, row in enumerate(self._visible_rows):
            self.add_row(
                *(cell_value(column.render(row)) for column in self._spec.columns),
                key=str(index),
            )
