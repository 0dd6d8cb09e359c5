"""Metrics table configuration - column keys, titles, sort keys and widget IDs."""

from __future__ import annotations

# =============================================================================
# Widget IDs
# =============================================================================

METRICS_TABLE_ID = "metrics-table"
METRICS_FILTER_ID = "metrics-filter"

# =============================================================================
# Column Keys
# =============================================================================

COL_NAMESPACE = "namespace"
COL_NAME = "name"
COL_MESHED = "meshed"
COL_APEX = "apex"
COL_LEAF = "leaf"
COL_WEIGHT = "weight"
COL_SUCCESS_RATE = "successRate"
COL_REQUEST_RATE = "requestRate"
COL_P50 = "P50"
COL_P95 = "P95"
COL_P99 = "P99"
COL_TCP_CONNECTIONS = "tcpOpenConnections"
COL_TCP_READ_RATE = "tcpReadRate"
COL_TCP_WRITE_RATE = "tcpWriteRate"
COL_GRAFANA = "grafanaDashboard"
COL_JAEGER = "jaegerDashboard"

# =============================================================================
# Default Sort Keys
# =============================================================================

DEFAULT_SORT_KEY = COL_NAME
# Traffic split tables without a name column sort by leaf service.
TRAFFIC_SPLIT_SORT_KEY = COL_LEAF

# =============================================================================
# Table Column Definitions: list[tuple[str, str]] = [(title, key), ...]
# =============================================================================

NAMESPACE_COLUMN: tuple[str, str] = ("Namespace", COL_NAMESPACE)
MESHED_COLUMN: tuple[str, str] = ("Meshed", COL_MESHED)

TRAFFIC_SPLIT_COLUMNS: list[tuple[str, str]] = [
    ("Apex Service", COL_APEX),
    ("Leaf Service", COL_LEAF),
    ("Weight", COL_WEIGHT),
]

HTTP_STAT_COLUMNS: list[tuple[str, str]] = [
    ("Success Rate", COL_SUCCESS_RATE),
    ("RPS", COL_REQUEST_RATE),
    ("P50 Latency", COL_P50),
    ("P95 Latency", COL_P95),
    ("P99 Latency", COL_P99),
]

TCP_STAT_COLUMNS: list[tuple[str, str]] = [
    ("Connections", COL_TCP_CONNECTIONS),
    ("Read Bytes / sec", COL_TCP_READ_RATE),
    ("Write Bytes / sec", COL_TCP_WRITE_RATE),
]

DASHBOARD_COLUMNS: dict[str, tuple[str, str]] = {
    "grafana": ("Grafana", COL_GRAFANA),
    "jaeger": ("Jaeger", COL_JAEGER),
}

# Nested record paths backing each stat column (used as data_index).
DATA_INDEX: dict[str, str] = {
    COL_NAMESPACE: "namespace",
    COL_NAME: "name",
    COL_MESHED: "pods.totalPods",
    COL_APEX: "tsStats.apex",
    COL_LEAF: "tsStats.leaf",
    COL_WEIGHT: "tsStats.weight",
    COL_SUCCESS_RATE: "successRate",
    COL_REQUEST_RATE: "requestRate",
    COL_P50: "P50",
    COL_P95: "P95",
    COL_P99: "P99",
    COL_TCP_CONNECTIONS: "tcp.openConnections",
    COL_TCP_READ_RATE: "tcp.readRate",
    COL_TCP_WRITE_RATE: "tcp.writeRate",
}

# =============================================================================
# Table Header Tooltips
# =============================================================================

METRICS_TABLE_HEADER_TOOLTIPS: dict[str, str] = {
    COL_NAMESPACE: "Namespace that owns this resource.",
    COL_NAME: "Resource name. Links to the resource detail view when meshed.",
    COL_MESHED: "Meshed pods over total pods.",
    COL_APEX: "Apex service receiving the traffic split.",
    COL_LEAF: "Leaf service traffic is routed to.",
    COL_WEIGHT: "Relative weight of the leaf service.",
    COL_SUCCESS_RATE: "Share of HTTP requests that succeeded.",
    COL_REQUEST_RATE: "HTTP requests per second.",
    COL_P50: "50th percentile request latency.",
    COL_P95: "95th percentile request latency.",
    COL_P99: "99th percentile request latency.",
    COL_TCP_CONNECTIONS: "Open TCP connections.",
    COL_TCP_READ_RATE: "Bytes read per second over TCP.",
    COL_TCP_WRITE_RATE: "Bytes written per second over TCP.",
    COL_GRAFANA: "Grafana dashboard for this resource.",
    COL_JAEGER: "Jaeger traces for this resource.",
}
