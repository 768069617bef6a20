"""One-shot phrase commands for the Word Inverter CLI."""

from __future__ import annotations

import sys
from typing import Any

import typer

from src.cli.renderers import render_transformation_lines
from src.cli.utils import apply_log_override
from src.core.errors import InvalidInput


def _cli() -> Any:
    return sys.modules["src.cli"]


def _run_transform(workflow: str, phrase: str, log_level: str | None) -> None:
    apply_log_override(log_level)
    orchestrator = _cli().get_orchestrator()
    try:
        result = orchestrator.execute(workflow, {"phrase": phrase})
    except InvalidInput as exc:
        raise typer.BadParameter(str(exc), param_hint="PHRASE") from exc
    render_transformation_lines(result["result"])


def words(
    phrase: str = typer.Argument(..., help="Phrase whose word order is reversed."),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Override logging level for this invocation.",
    ),
) -> None:
    """Reverse the order of the words in PHRASE."""

    _run_transform("reverse_words", phrase, log_level)


def letters(
    phrase: str = typer.Argument(..., help="Phrase whose words are spelled backwards."),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Override logging level for this invocation.",
    ),
) -> None:
    """Reverse the letters of each word in PHRASE, keeping the word order."""

    _run_transform("reverse_letters", phrase, log_level)


__all__ = ["letters", "words"]
