"""Table composition models."""

from meshtable.models.table.column_descriptor import (
    CellRenderer,
    ColumnDescriptor,
    FilterFn,
    SortKeyFn,
    TableSpec,
)

__all__ = [
    "CellRenderer",
    "ColumnDescriptor",
    "FilterFn",
    "SortKeyFn",
    "TableSpec",
]
