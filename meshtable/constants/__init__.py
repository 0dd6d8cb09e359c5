"""Constants module for MeshTable.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, numbers with Final)
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings

Table column definitions live next to the table in screens/metrics/config.py.
"""

from meshtable.constants.defaults import (
    GRAFANA_BASE_URL_DEFAULT,
    JAEGER_BASE_URL_DEFAULT,
    PATH_PREFIX_DEFAULT,
    SELECTED_NAMESPACE_DEFAULT,
)
from meshtable.constants.enums import (
    ResourceVariant,
    SortDirection,
    SuccessRateStatus,
)
from meshtable.constants.limits import (
    MAX_ROWS_DISPLAY,
    MAX_ROWS_MIN,
)
from meshtable.constants.values import (
    ALL_NAMESPACES,
    APP_TITLE,
    DEFAULT_METRIC_VALUE,
    NAMESPACE_PLACEHOLDER,
    QUANTILE_LABELS,
)

__all__ = [
    # Namespaces
    "ALL_NAMESPACES",
    # Application
    "APP_TITLE",
    # Placeholders
    "DEFAULT_METRIC_VALUE",
    # Defaults
    "GRAFANA_BASE_URL_DEFAULT",
    "JAEGER_BASE_URL_DEFAULT",
    # Limits
    "MAX_ROWS_DISPLAY",
    "MAX_ROWS_MIN",
    "NAMESPACE_PLACEHOLDER",
    "PATH_PREFIX_DEFAULT",
    "QUANTILE_LABELS",
    # Enums
    "ResourceVariant",
    "SELECTED_NAMESPACE_DEFAULT",
    "SortDirection",
    "SuccessRateStatus",
]
