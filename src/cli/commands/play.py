"""Interactive menu command for the Word Inverter CLI."""

from __future__ import annotations

import logging
import sys
from typing import Any

import typer

from src.cli.menu import ConsoleController
from src.cli.utils import apply_log_override

logger = logging.getLogger(__name__)


def _cli() -> Any:
    return sys.modules["src.cli"]


def play(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Override logging level for this invocation (e.g., DEBUG, INFO).",
    ),
) -> None:
    """Start the interactive word inverter menu."""

    cli_module = _cli()
    state = cli_module.get_state()
    apply_log_override(log_level)

    controller = ConsoleController(
        cli_module.get_orchestrator(), app_name=state.app_name
    )
    logger.info("Interactive session started.")
    controller.run()
    logger.info(
        "Interactive session ended.",
        extra={
            "phrases": len(state.transformer.registry),
            "history": len(state.transformer.history),
        },
    )


__all__ = ["play"]
