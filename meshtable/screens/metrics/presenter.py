"""Metrics table presenter - row normalization and table composition."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from meshtable.constants.values import ALL_NAMESPACES
from meshtable.models.metrics import MetricRecord, MetricRow, ResourceKind
from meshtable.models.state import MetricsTableSettings
from meshtable.models.table import TableSpec
from meshtable.screens.metrics.columns import build_columns
from meshtable.screens.metrics.config import DEFAULT_SORT_KEY, TRAFFIC_SPLIT_SORT_KEY
from meshtable.utils.links import LinkFactory, PrefixedLink

logger = logging.getLogger(__name__)

# Field names and aliases a quantile label may not overwrite.
_RESERVED_ROW_KEYS: frozenset[str] = frozenset(
    {name for name in MetricRecord.model_fields}
    | {field.alias for field in MetricRecord.model_fields.values() if field.alias}
)


def normalize_metrics(records: Iterable[MetricRecord | Mapping[str, Any]]) -> list[MetricRow]:
    """Copy records into rows with latency quantiles as top-level fields.

    The input records are never modified. The returned rows keep the input
    order and each row keeps its nested ``latency`` mapping.
    """
    rows: list[MetricRow] = []
    for record in records:
        if not isinstance(record, MetricRecord):
            record = MetricRecord.model_validate(record)
        payload = record.model_copy(deep=True).model_dump()
        for quantile, value in (record.latency or {}).items():
            if quantile in _RESERVED_ROW_KEYS:
                logger.debug("Not promoting latency quantile %r of %s: reserved field", quantile, record.name)
                continue
            payload[quantile] = value
        rows.append(MetricRow.model_validate(payload))
    return rows


def effective_namespace_column(
    resource_kind: str | ResourceKind,
    show_namespace_column: bool,
    selected_namespace: str,
) -> bool:
    """Namespace column is hidden for namespace tables and single-namespace views."""
    kind = ResourceKind.parse(resource_kind)
    if kind.is_namespace or selected_namespace != ALL_NAMESPACES:
        return False
    return show_namespace_column


def effective_name_column(resource_kind: str | ResourceKind, show_name: bool) -> bool:
    """Only traffic split tables may hide the name column."""
    if not ResourceKind.parse(resource_kind).is_traffic_split:
        return True
    return show_name


def default_sort_key(resource_kind: str | ResourceKind, show_name_column: bool) -> str:
    if ResourceKind.parse(resource_kind).is_traffic_split and not show_name_column:
        return TRAFFIC_SPLIT_SORT_KEY
    return DEFAULT_SORT_KEY


def render_metrics_table(
    metrics: Iterable[MetricRecord | Mapping[str, Any]] | None,
    resource_kind: str | ResourceKind,
    show_namespace_column: bool = True,
    show_name: bool = True,
    selected_namespace: str = ALL_NAMESPACES,
    is_tcp_table: bool = False,
    grafana_base_url: str = "",
    jaeger_base_url: str = "",
    link_factory: LinkFactory | None = None,
) -> TableSpec:
    """Compose the rows, columns and default sort key of a metrics table.

    Args:
        metrics: Metric records for the current window.
        resource_kind: Kind of the rows.
        show_namespace_column: Caller preference for the namespace column.
        show_name: Caller preference for the name column (traffic splits only).
        selected_namespace: Namespace in view, or "_all".
        is_tcp_table: Show TCP stats instead of HTTP stats.
        grafana_base_url: Grafana URL; empty disables the Grafana column.
        jaeger_base_url: Jaeger URL; empty disables the Jaeger column.
        link_factory: Navigation link factory. Defaults to unprefixed links.

    Returns:
        TableSpec for the table widget.
    """
    kind = ResourceKind.parse(resource_kind)
    show_ns_column = effective_namespace_column(kind, show_namespace_column, selected_namespace)
    show_name_column = effective_name_column(kind, show_name)
    order_by = default_sort_key(kind, show_name_column)

    columns = build_columns(
        kind,
        show_ns_column,
        show_name_column,
        link_factory if link_factory is not None else PrefixedLink(),
        is_tcp_table,
        grafana_base_url,
        jaeger_base_url,
    )
    rows = normalize_metrics(metrics or [])

    logger.debug(
        "Composed %s table: %d rows, %d columns, sorted by %s",
        kind.name,
        len(rows),
        len(columns),
        order_by,
    )
    return TableSpec(rows=rows, columns=columns, default_sort_key=order_by)


class MetricsTablePresenter:
    """Presenter for metrics tables, bound to the current settings."""

    def __init__(
        self,
        settings: MetricsTableSettings | None = None,
        link_factory: LinkFactory | None = None,
    ) -> None:
        self._settings = settings or MetricsTableSettings()
        self._link_factory = link_factory or PrefixedLink(self._settings.path_prefix)

    @property
    def settings(self) -> MetricsTableSettings:
        return self._settings

    @property
    def link_factory(self) -> LinkFactory:
        return self._link_factory

    def build_table_spec(
        self,
        metrics: Iterable[MetricRecord | Mapping[str, Any]] | None,
        resource_kind: str | ResourceKind,
        *,
        show_namespace_column: bool = True,
        show_name: bool = True,
        is_tcp_table: bool = False,
        selected_namespace: str | None = None,
    ) -> TableSpec:
        """Build a TableSpec using the dashboard URLs and namespace from settings."""
        return render_metrics_table(
            metrics,
            resource_kind,
            show_namespace_column=show_namespace_column,
            show_name=show_name,
            selected_namespace=(
                selected_namespace if selected_namespace is not None else self._settings.selected_namespace
            ),
            is_tcp_table=is_tcp_table,
            grafana_base_url=self._settings.grafana_base_url,
            jaeger_base_url=self._settings.jaeger_base_url,
            link_factory=self._link_factory,
        )
