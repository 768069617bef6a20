"""Utility helpers shared across CLI command modules."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import typer

logger = logging.getLogger(__name__)


def _cli():
    return sys.modules["src.cli"]


def apply_log_override(log_level: Optional[str]) -> None:
    """Override logging level for the current invocation."""

    if not log_level or not isinstance(log_level, str):
        return
    try:
        _cli().set_runtime_level(log_level)
        logger.info("Log level overridden to %s", log_level.upper())
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def prompt_choice(label: str = "Choose an option") -> str:
    """Prompt for a raw menu choice; validation happens in the controller."""

    return typer.prompt(label, default="", show_default=False)


def prompt_phrase(label: str = "Enter a phrase") -> str:
    """Prompt for a phrase, accepting blank input so the caller can reject it."""

    return typer.prompt(label, default="", show_default=False)


__all__ = ["apply_log_override", "prompt_choice", "prompt_phrase"]
