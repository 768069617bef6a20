"""Configuration service for the Word Inverter.

Updates:
    v0.1.0 - 2025-11-09 - Expose app, logging and history settings from settings.yaml.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..core.config_loader import ConfigLoader
from .history import DEFAULT_CAPACITY

logger = logging.getLogger(__name__)

DEFAULT_APP_METADATA = {"name": "Word Inverter", "version": "0.1.0"}


@dataclass(slots=True, frozen=True)
class HistoryConfig:
    """Undo history parameters."""

    capacity: int = DEFAULT_CAPACITY


class ConfigService:
    """Loads and exposes configuration for Word Inverter components."""

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize configuration caches.

        A missing `settings.yaml` is not an error; built-in defaults apply.

        Args:
            config_path (Path | None): Optional override for the configuration directory.
        """

        self._loader = ConfigLoader(base_path=config_path)
        if self._loader.exists("settings"):
            self._settings = self._loader.load("settings")
        else:
            logger.debug("settings.yaml not found under %s; using defaults", self._loader.base_path)
            self._settings = {}

    @property
    def app_metadata(self) -> dict[str, Any]:
        """Return general application metadata."""
        app_section = self._settings.get("app", {})
        metadata = dict(DEFAULT_APP_METADATA)
        if isinstance(app_section, dict):
            metadata.update(app_section)
        return metadata

    @property
    def logging_config(self) -> dict[str, Any]:
        """Return logging configuration settings."""
        logging_section = self._settings.get("logging", {})
        return dict(logging_section) if isinstance(logging_section, dict) else {}

    @property
    def history_config(self) -> HistoryConfig:
        """Return undo history settings.

        Raises:
            ValueError: If the configured capacity is not a positive integer.
        """

        section = self._settings.get("history", {})
        if not isinstance(section, dict):
            return HistoryConfig()
        capacity = section.get("capacity", DEFAULT_CAPACITY)
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ValueError(
                f"history.capacity must be a positive integer, got {capacity!r}"
            )
        return HistoryConfig(capacity=capacity)

    def as_dict(self) -> dict[str, Any]:
        return {
            "app": self.app_metadata,
            "logging": self.logging_config,
            "history": {"capacity": self.history_config.capacity},
        }
