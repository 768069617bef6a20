"""Settings inspection workflow.

Updates:
    v0.1.0 - 2025-11-09 - Added module and method docstrings.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..services.config_service import ConfigService


@dataclass
class ShowSettingsWorkflow:
    name: str = "show_settings"
    config_path: Path | None = None

    def run(self, context: dict) -> dict:
        """Return configuration details suitable for CLI rendering.

        Args:
            context (dict): Unused, maintained for workflow interface compatibility.

        Returns:
            dict: Aggregated configuration data to display.
        """

        return ConfigService(config_path=self.config_path).as_dict()
