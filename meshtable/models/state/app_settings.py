"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field

from meshtable.constants.defaults import (
    GRAFANA_BASE_URL_DEFAULT,
    JAEGER_BASE_URL_DEFAULT,
    PATH_PREFIX_DEFAULT,
    SELECTED_NAMESPACE_DEFAULT,
)
from meshtable.constants.limits import MAX_ROWS_DISPLAY, MAX_ROWS_MIN


class MetricsTableSettings(BaseModel):
    """Metrics table settings model with validation."""

    model_config = ConfigDict(populate_by_name=True)

    # Dashboard integrations - empty string disables the column
    grafana_base_url: str = GRAFANA_BASE_URL_DEFAULT
    jaeger_base_url: str = JAEGER_BASE_URL_DEFAULT

    # Navigation
    path_prefix: str = PATH_PREFIX_DEFAULT
    selected_namespace: str = SELECTED_NAMESPACE_DEFAULT

    # Display
    max_rows: int = Field(default=MAX_ROWS_DISPLAY, ge=MAX_ROWS_MIN)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""
