"""Scalar constants for the metrics table.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "MeshTable"

# ============================================================================
# Namespaces
# ============================================================================

# Selected-namespace value meaning "every namespace is shown".
ALL_NAMESPACES: Final = "_all"

# ============================================================================
# Placeholders
# ============================================================================

DEFAULT_METRIC_VALUE: Final = "---"
NAMESPACE_PLACEHOLDER: Final = "---"
MULTI_RESOURCE_TITLE: Final = "Resource"

# ============================================================================
# Latency quantiles
# ============================================================================

QUANTILE_LABELS: Final = ("P50", "P95", "P99")

# ============================================================================
# Success rate thresholds (fractions)
# ============================================================================

SUCCESS_RATE_POOR_BELOW: Final = 0.9
SUCCESS_RATE_WARNING_BELOW: Final = 0.95

# ============================================================================
# Status markup (rich style names)
# ============================================================================

SUCCESS_RATE_STYLES: Final = {
    "good": "green",
    "warning": "yellow",
    "poor": "red",
    "default": "dim",
}
ERROR_INDICATOR_STYLE: Final = "bold red"
ERROR_INDICATOR_GLYPH: Final = "⚠"
SUCCESS_RATE_GLYPH: Final = "●"

# ============================================================================
# Dashboard link paths (served behind the link factory prefix)
# ============================================================================

GRAFANA_DASHBOARD_PATH: Final = "/grafana/d/linkerd-{dashboard}"
JAEGER_SEARCH_PATH: Final = "/jaeger/search"
GRAFANA_LINK_LABEL: Final = "grafana"
JAEGER_LINK_LABEL: Final = "jaeger"

__all__ = [
    "ALL_NAMESPACES",
    "APP_TITLE",
    "DEFAULT_METRIC_VALUE",
    "ERROR_INDICATOR_GLYPH",
    "ERROR_INDICATOR_STYLE",
    "GRAFANA_DASHBOARD_PATH",
    "GRAFANA_LINK_LABEL",
    "JAEGER_LINK_LABEL",
    "JAEGER_SEARCH_PATH",
    "MULTI_RESOURCE_TITLE",
    "NAMESPACE_PLACEHOLDER",
    "QUANTILE_LABELS",
    "SUCCESS_RATE_GLYPH",
    "SUCCESS_RATE_POOR_BELOW",
    "SUCCESS_RATE_STYLES",
    "SUCCESS_RATE_WARNING_BELOW",
]
