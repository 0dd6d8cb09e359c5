"""Default values for settings.

All default values used in MetricsTableSettings and validation fallback values.
"""

from typing import Final

from meshtable.constants.values import ALL_NAMESPACES

# ============================================================================
# Dashboard integration defaults (empty string disables the column)
# ============================================================================

GRAFANA_BASE_URL_DEFAULT: Final = ""
JAEGER_BASE_URL_DEFAULT: Final = ""

# ============================================================================
# Navigation defaults
# ============================================================================

PATH_PREFIX_DEFAULT: Final = ""
SELECTED_NAMESPACE_DEFAULT: Final = ALL_NAMESPACES

# ============================================================================
# Settings file
# ============================================================================

SETTINGS_FILENAME_DEFAULT: Final = "meshtable.yaml"

__all__ = [
    "GRAFANA_BASE_URL_DEFAULT",
    "JAEGER_BASE_URL_DEFAULT",
    "PATH_PREFIX_DEFAULT",
    "SELECTED_NAMESPACE_DEFAULT",
    "SETTINGS_FILENAME_DEFAULT",
]
