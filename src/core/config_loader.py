"""Configuration loader utilities.

Updates:
    v0.1.0 - 2025-11-09 - YAML loader rooted at the project config directory.
"""

from __future__ import annotations

import functools
import os
from pathlib import Path
from typing import Any, Dict

import yaml

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_ENV_VAR = "WORD_INVERTER_CONFIG_PATH"


def default_config_path() -> Path:
    """Return the configuration directory, honouring the environment override."""

    return Path(os.environ.get(CONFIG_ENV_VAR, PROJECT_ROOT / "config")).resolve()


class ConfigLoader:
    """Loads YAML configuration files from the project's config directory."""

    def __init__(self, base_path: Path | None = None) -> None:
        """Configure the loader with the base directory location.

        Args:
            base_path (Path | None): Custom configuration directory if provided.
        """

        self._base_path = Path(base_path) if base_path else default_config_path()

    @property
    def base_path(self) -> Path:
        return self._base_path

    def _resolve(self, name: str) -> Path:
        candidate = self._base_path / name
        if candidate.suffix != ".yaml":
            candidate = candidate.with_suffix(".yaml")
        return candidate

    def exists(self, name: str) -> bool:
        """Return whether the named configuration file is present."""

        return self._resolve(name).exists()

    @functools.lru_cache(maxsize=None)
    def load(self, name: str) -> Dict[str, Any]:
        """Load and cache a configuration file as a dictionary.

        Args:
            name (str): Logical configuration name (with or without `.yaml`).

        Returns:
            dict[str, Any]: Parsed YAML content from disk.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file does not hold a YAML mapping.
        """

        path = self._resolve(name)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping.")
        return data
