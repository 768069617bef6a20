"""Settings command group for the Word Inverter CLI."""

from __future__ import annotations

import sys

from src.cli.io import console


def _cli():
    return sys.modules["src.cli"]


def settings_show() -> None:
    """Display the current configuration payload."""

    orchestrator = _cli().get_orchestrator()
    config_summary = orchestrator.execute("show_settings", {})
    console.print_json(data=config_summary)


__all__ = ["settings_show"]
