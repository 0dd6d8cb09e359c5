"""YAML-backed persistence for MetricsTableSettings."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from meshtable.constants.defaults import SETTINGS_FILENAME_DEFAULT
from meshtable.models.state.app_settings import (
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
    MetricsTableSettings,
)

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads and saves metrics table settings from a YAML file."""

    def __init__(self, path: str | Path | None = None) -> None:
        self._path = Path(path) if path is not None else Path.cwd() / SETTINGS_FILENAME_DEFAULT

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> MetricsTableSettings:
        """Load settings, returning defaults when the file does not exist.

        Raises:
            ConfigLoadError: If the file cannot be read, is not valid YAML,
                or holds invalid settings.
        """
        if not self._path.exists():
            logger.debug("Settings file %s not found, using defaults", self._path)
            return MetricsTableSettings()

        try:
            with open(self._path, encoding="utf-8") as handle:
                raw = yaml.safe_load(handle) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigLoadError(f"Cannot read settings from {self._path}: {exc}") from exc

        if not isinstance(raw, dict):
            raise ConfigLoadError(
                f"Settings file {self._path} must contain a mapping, got {type(raw).__name__}"
            )

        try:
            return MetricsTableSettings.model_validate(raw)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings in {self._path}: {exc}") from exc

    def load_or_default(self) -> MetricsTableSettings:
        """Load settings, falling back to defaults on any configuration error."""
        try:
            return self.load()
        except ConfigError as exc:
            logger.warning("Falling back to default settings: %s", exc)
            return MetricsTableSettings()

    def save(self, settings: MetricsTableSettings) -> None:
        """Write settings to the YAML file.

        Raises:
            ConfigSaveError: If the file cannot be written.
        """
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._path, "w", encoding="utf-8") as handle:
                yaml.safe_dump(settings.model_dump(), handle, default_flow_style=False, sort_keys=False)
        except OSError as exc:
            raise ConfigSaveError(f"Cannot write settings to {self._path}: {exc}") from exc
