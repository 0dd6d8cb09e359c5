"""All enum definitions for the metrics table.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Resource Enums
# =============================================================================


class ResourceVariant(Enum):
    """Resource kinds that change how a metrics table is composed.

    Every kind string the mesh reports that is not one of the special
    values below is a plain workload kind (deployment, pod, service, ...).
    """

    AUTHORITY = "authority"
    TRAFFIC_SPLIT = "trafficsplit"
    MULTI_RESOURCE = "multi_resource"
    NAMESPACE = "namespace"
    WORKLOAD = "workload"


# =============================================================================
# Status Enums
# =============================================================================


class SuccessRateStatus(Enum):
    """Success rate classification used for the mini-chart cell."""

    GOOD = "good"
    WARNING = "warning"
    POOR = "poor"
    DEFAULT = "default"


# =============================================================================
# Sort Enums
# =============================================================================


class SortDirection(Enum):
    """Sort direction for data tables."""

    ASC = "asc"
    DESC = "desc"


__all__ = [
    "ResourceVariant",
    "SortDirection",
    "SuccessRateStatus",
]
