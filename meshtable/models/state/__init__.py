"""Settings models and persistence."""

from meshtable.models.state.app_settings import (
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
    MetricsTableSettings,
)
from meshtable.models.state.config_manager import ConfigManager

__all__ = [
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
    "MetricsTableSettings",
]
