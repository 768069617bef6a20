"""Word Inverter CLI package."""

from __future__ import annotations

import logging

import typer

from src.cli.commands.phrases import letters, words
from src.cli.commands.play import play
from src.cli.commands.settings import settings_show
from src.cli.io import console
from src.cli.menu import ConsoleController, MenuChoice, parse_menu_choice
from src.cli.renderers import (
    render_menu,
    render_phrase_list,
    render_transformation,
    render_transformation_lines,
    render_undo,
)
from src.cli.runtime import (
    ConfigService,
    build_orchestrator,
    get_orchestrator,
    get_runtime,
    get_state,
    initialize_runtime,
    set_runtime,
    set_runtime_level,
)
from src.cli.state import AppState, PROJECT_ROOT
from src.cli.utils import apply_log_override, prompt_choice, prompt_phrase
from src.core.errors import InvalidInput, MalformedMenuChoice
from src.core.logging_setup import configure_logging
from src.core.orchestrator import Orchestrator
from src.services.phrase_transformer import PhraseTransformer
from src.workflows.list_phrases import ListPhrasesWorkflow
from src.workflows.show_settings import ShowSettingsWorkflow
from src.workflows.undo_last import UndoLastWorkflow

logger = logging.getLogger(__name__)


# Typer applications ---------------------------------------------------------

app = typer.Typer(add_completion=False, help="Word Inverter CLI")
settings_app = typer.Typer(
    add_completion=False, help="Inspect application configuration."
)


@app.callback(invoke_without_command=True)
def _app_callback(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        play(log_level=None)


@settings_app.callback(invoke_without_command=True)
def _settings_callback(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        settings_show()


# Command registration -------------------------------------------------------

app.command()(play)
app.command()(words)
app.command()(letters)

settings_app.command("show")(settings_show)

app.add_typer(settings_app, name="settings")


def main() -> None:
    """CLI entry point."""

    app()


__all__: list[str] = [
    # Typer apps / entrypoints
    "app",
    "settings_app",
    "main",
    # Console & logging
    "console",
    "logger",
    "configure_logging",
    "set_runtime_level",
    # State & runtime
    "AppState",
    "PROJECT_ROOT",
    "build_orchestrator",
    "get_orchestrator",
    "get_runtime",
    "get_state",
    "initialize_runtime",
    "set_runtime",
    # Commands
    "play",
    "words",
    "letters",
    "settings_show",
    # Menu
    "ConsoleController",
    "MenuChoice",
    "parse_menu_choice",
    # Renderers
    "render_menu",
    "render_phrase_list",
    "render_transformation",
    "render_transformation_lines",
    "render_undo",
    # Utilities
    "apply_log_override",
    "prompt_choice",
    "prompt_phrase",
    # Classes re-exported for tests/compatibility
    "ConfigService",
    "InvalidInput",
    "MalformedMenuChoice",
    "ListPhrasesWorkflow",
    "Orchestrator",
    "PhraseTransformer",
    "ShowSettingsWorkflow",
    "UndoLastWorkflow",
]
