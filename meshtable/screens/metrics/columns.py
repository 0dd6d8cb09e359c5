"""Column schema builder for metrics tables.

Columns are composed by an ordered pipeline of stages. Each stage owns one
column set and a predicate deciding whether it applies for the resource kind
and display flags of the current table:

1. name            - resource name column
2. traffic-split   - apex / leaf / weight columns
3. stats           - HTTP or TCP stat columns (always applies)
4. meshed          - meshed pod column, inserted at index 1
5. dashboards      - Grafana / Jaeger deep-link columns
6. namespace       - namespace column, prepended

The order of the stages is part of the table contract: the table widget and
stored column layouts rely on it.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, NamedTuple

from meshtable.constants.values import MULTI_RESOURCE_TITLE, NAMESPACE_PLACEHOLDER
from meshtable.models.metrics import MetricRow, ResourceKind
from meshtable.models.table import CellRenderer, ColumnDescriptor, FilterFn, SortKeyFn
from meshtable.screens.metrics.config import (
    COL_NAME,
    DASHBOARD_COLUMNS,
    DATA_INDEX,
    HTTP_STAT_COLUMNS,
    MESHED_COLUMN,
    METRICS_TABLE_HEADER_TOOLTIPS,
    NAMESPACE_COLUMN,
    TCP_STAT_COLUMNS,
    TRAFFIC_SPLIT_COLUMNS,
)
from meshtable.utils.formatters import format_byte_rate, format_count, format_latency
from meshtable.utils.links import LinkFactory, grafana_link, jaeger_link
from meshtable.utils.resource_names import display_name, friendly_title
from meshtable.widgets.display.metric_cells import success_rate_cell, with_error_indicator

logger = logging.getLogger(__name__)

# Leading integer of a weight string, e.g. "500m" -> 500.
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


@dataclass(frozen=True)
class ColumnContext:
    """Inputs shared by every column stage for one table."""

    kind: ResourceKind
    show_namespace_column: bool
    show_name_column: bool
    link_factory: LinkFactory
    is_tcp_table: bool
    grafana_base_url: str
    jaeger_base_url: str


def _column(
    definition: tuple[str, str],
    render: CellRenderer,
    *,
    is_numeric: bool = False,
    sorter: SortKeyFn | None = None,
    filter: FilterFn | None = None,
) -> ColumnDescriptor:
    title, key = definition
    return ColumnDescriptor(
        title=title,
        key=key,
        render=render,
        is_numeric=is_numeric,
        data_index=DATA_INDEX.get(key),
        sorter=sorter,
        filter=filter,
        tooltip=METRICS_TABLE_HEADER_TOOLTIPS.get(key, ""),
    )


# =============================================================================
# Stat column sets
# =============================================================================


def _latency_column(definition: tuple[str, str]) -> ColumnDescriptor:
    _, quantile = definition
    return _column(
        definition,
        lambda row: format_latency(row.quantile(quantile)),
        is_numeric=True,
        sorter=lambda row: row.quantile(quantile),
    )


def http_stat_columns() -> list[ColumnDescriptor]:
    """Success rate, RPS and latency percentile columns."""
    success_rate, request_rate, *latencies = HTTP_STAT_COLUMNS
    return [
        _column(
            success_rate,
            lambda row: success_rate_cell(row.success_rate),
            is_numeric=True,
            sorter=lambda row: row.success_rate,
        ),
        _column(
            request_rate,
            lambda row: format_count(row.request_rate),
            is_numeric=True,
            sorter=lambda row: row.request_rate,
        ),
        *(_latency_column(definition) for definition in latencies),
    ]


def _tcp_value(row: MetricRow, attribute: str) -> Any:
    return None if row.tcp is None else getattr(row.tcp, attribute)


def tcp_stat_columns() -> list[ColumnDescriptor]:
    """Open connection and byte rate columns."""
    connections, read_rate, write_rate = TCP_STAT_COLUMNS
    return [
        _column(
            connections,
            lambda row: format_count(_tcp_value(row, "open_connections")),
            is_numeric=True,
            sorter=lambda row: _tcp_value(row, "open_connections"),
        ),
        _column(
            read_rate,
            lambda row: format_byte_rate(_tcp_value(row, "read_rate")),
            is_numeric=True,
            sorter=lambda row: _tcp_value(row, "read_rate"),
        ),
        _column(
            write_rate,
            lambda row: format_byte_rate(_tcp_value(row, "write_rate")),
            is_numeric=True,
            sorter=lambda row: _tcp_value(row, "write_rate"),
        ),
    ]


# Selected by is_tcp_table.
STAT_COLUMN_SETS: dict[bool, Callable[[], list[ColumnDescriptor]]] = {
    False: http_stat_columns,
    True: tcp_stat_columns,
}


# =============================================================================
# Traffic split columns
# =============================================================================


def _ts_value(row: MetricRow, attribute: str) -> Any:
    return None if row.ts_stats is None else getattr(row.ts_stats, attribute)


def parse_weight(weight: Any) -> Any:
    """Return the integer part of a weight, or the raw weight if it has none.

    "100" -> 100, "500m" -> 500, 0.5 -> 0, "primary" -> "primary".
    """
    if isinstance(weight, bool):
        return weight
    if isinstance(weight, int):
        return weight
    if isinstance(weight, float):
        return int(weight) if math.isfinite(weight) else weight
    if isinstance(weight, str):
        match = _LEADING_INT_RE.match(weight)
        if match:
            return int(match.group(1))
    return weight


def weight_sort_key(row: MetricRow) -> Any:
    if row.ts_stats is None:
        return -1
    return parse_weight(row.ts_stats.weight)


def traffic_split_columns() -> list[ColumnDescriptor]:
    """Apex service, leaf service and weight columns."""
    apex, leaf, weight = TRAFFIC_SPLIT_COLUMNS
    columns = [
        _column(
            definition,
            lambda row, attr=attribute: _ts_value(row, attr),
            sorter=lambda row, attr=attribute: _ts_value(row, attr),
            filter=lambda row, attr=attribute: _ts_value(row, attr),
        )
        for definition, attribute in ((apex, "apex"), (leaf, "leaf"))
    ]
    columns.append(
        _column(
            weight,
            lambda row: _ts_value(row, "weight"),
            is_numeric=True,
            sorter=weight_sort_key,
            filter=lambda row: _ts_value(row, "weight"),
        )
    )
    return columns


# =============================================================================
# Identity columns
# =============================================================================


def name_column(context: ColumnContext) -> ColumnDescriptor:
    """Resource name column with detail link and error indicator."""
    kind = context.kind
    link = context.link_factory
    title = MULTI_RESOURCE_TITLE if kind.is_multi_resource else friendly_title(kind.name).singular
    resource_display_name: Callable[[MetricRow], str] = (
        display_name if kind.is_multi_resource else (lambda row: row.name)
    )

    def render(row: MetricRow) -> Any:
        if kind.is_namespace:
            contents = link(f"/namespaces/{row.name}", row.name)
        elif (not row.added and not kind.is_traffic_split) or not row.namespace:
            # No detail view to link to.
            contents = resource_display_name(row)
        else:
            contents = link(
                f"/namespaces/{row.namespace}/{row.type}s/{row.name}",
                resource_display_name(row),
            )
        return with_error_indicator(contents, row.errors)

    return _column(
        (title, COL_NAME),
        render,
        sorter=lambda row: resource_display_name(row) or -1,
        filter=lambda row: row.name,
    )


def meshed_column() -> ColumnDescriptor:
    """Meshed pods over total pods."""
    return _column(
        MESHED_COLUMN,
        lambda row: None if row.pods is None else f"{row.pods.meshed_pods}/{row.pods.total_pods}",
        is_numeric=True,
        sorter=lambda row: -1 if row.pods is None else row.pods.total_pods,
    )


def namespace_column(context: ColumnContext) -> ColumnDescriptor:
    """Namespace column linking to the namespace view."""
    link = context.link_factory
    return _column(
        NAMESPACE_COLUMN,
        lambda row: link(f"/namespaces/{row.namespace}", row.namespace) if row.namespace else NAMESPACE_PLACEHOLDER,
        sorter=lambda row: row.namespace or NAMESPACE_PLACEHOLDER,
        filter=lambda row: row.namespace,
    )


# =============================================================================
# Dashboard columns
# =============================================================================


def _dashboard_column(
    definition: tuple[str, str],
    builder: Callable[..., Any],
    context: ColumnContext,
) -> ColumnDescriptor:
    kind = context.kind
    link = context.link_factory

    def render(row: MetricRow) -> Any:
        no_pods = row.pods is not None and row.pods.total_pods == 0
        if not kind.is_authority and (not row.added or no_pods):
            return None
        return builder(
            link,
            name=row.name,
            namespace=row.namespace,
            resource_kind=row.type or kind.name,
        )

    return _column(definition, render, is_numeric=True)


def dashboard_columns(context: ColumnContext) -> list[ColumnDescriptor]:
    """Grafana and Jaeger columns for the integrations that are configured."""
    columns: list[ColumnDescriptor] = []
    if context.grafana_base_url != "":
        columns.append(_dashboard_column(DASHBOARD_COLUMNS["grafana"], grafana_link, context))
    if context.jaeger_base_url != "":
        columns.append(_dashboard_column(DASHBOARD_COLUMNS["jaeger"], jaeger_link, context))
    return columns


# =============================================================================
# Pipeline
# =============================================================================

ColumnList = list[ColumnDescriptor]


class ColumnStage(NamedTuple):
    """One step of the column pipeline."""

    name: str
    applies: Callable[[ColumnContext], bool]
    apply: Callable[[ColumnList, ColumnContext], ColumnList]


def _shows_name(context: ColumnContext) -> bool:
    return context.show_name_column


def _shows_traffic_split(context: ColumnContext) -> bool:
    return context.kind.is_traffic_split


def _always(context: ColumnContext) -> bool:
    return True


def _shows_meshed(context: ColumnContext) -> bool:
    return not (context.kind.is_authority or context.kind.is_traffic_split)


def _shows_dashboards(context: ColumnContext) -> bool:
    return not context.kind.is_traffic_split


def _shows_namespace(context: ColumnContext) -> bool:
    # The namespace kind already names the namespace in its name column.
    return context.show_namespace_column and not context.kind.is_namespace


COLUMN_STAGES: tuple[ColumnStage, ...] = (
    ColumnStage("name", _shows_name, lambda columns, ctx: [*columns, name_column(ctx)]),
    ColumnStage("traffic-split", _shows_traffic_split, lambda columns, ctx: [*columns, *traffic_split_columns()]),
    ColumnStage(
        "stats",
        _always,
        lambda columns, ctx: [*columns, *STAT_COLUMN_SETS[bool(ctx.is_tcp_table)]()],
    ),
    ColumnStage("meshed", _shows_meshed, lambda columns, ctx: [*columns[:1], meshed_column(), *columns[1:]]),
    ColumnStage("dashboards", _shows_dashboards, lambda columns, ctx: [*columns, *dashboard_columns(ctx)]),
    ColumnStage("namespace", _shows_namespace, lambda columns, ctx: [namespace_column(ctx), *columns]),
)


def build_columns(
    resource_kind: str | ResourceKind,
    show_namespace_column: bool,
    show_name_column: bool,
    link_factory: LinkFactory,
    is_tcp_table: bool,
    grafana_base_url: str,
    jaeger_base_url: str,
) -> list[ColumnDescriptor]:
    """Compose the ordered columns of a metrics table.

    The namespace column is never added for the namespace kind, even with
    show_namespace_column set: its name column is already titled
    "Namespace", and titles must stay unique.

    Args:
        resource_kind: Kind of the rows ("deployment", "authority", ...).
        show_namespace_column: Prepend the namespace column.
        show_name_column: Include the resource name column.
        link_factory: Builds navigation links for a path and label.
        is_tcp_table: Use TCP stat columns instead of HTTP stat columns.
        grafana_base_url: Grafana URL; empty string omits the Grafana column.
        jaeger_base_url: Jaeger URL; empty string omits the Jaeger column.

    Returns:
        A new list of column descriptors. Never empty.
    """
    context = ColumnContext(
        kind=ResourceKind.parse(resource_kind),
        show_namespace_column=show_namespace_column,
        show_name_column=show_name_column,
        link_factory=link_factory,
        is_tcp_table=is_tcp_table,
        grafana_base_url=grafana_base_url or "",
        jaeger_base_url=jaeger_base_url or "",
    )

    columns: ColumnList = []
    for stage in COLUMN_STAGES:
        if stage.applies(context):
            columns = stage.apply(columns, context)

    logger.debug(
        "Built %d columns for %s table: %s",
        len(columns),
        context.kind.name or "<unknown>",
        [column.key for column in columns],
    )
    return columns
