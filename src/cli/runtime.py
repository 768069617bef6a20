"""Runtime wiring for the Word Inverter CLI."""

from __future__ import annotations

import logging
from typing import Any

from src.cli.state import AppState
from src.core.logging_setup import configure_logging
from src.core.logging_setup import set_runtime_level  # re-export via utils
from src.core.orchestrator import Orchestrator
from src.services.config_service import ConfigService
from src.services.phrase_transformer import PhraseTransformer
from src.workflows.list_phrases import ListPhrasesWorkflow
from src.workflows.show_settings import ShowSettingsWorkflow
from src.workflows.transform_phrase import (
    reverse_letters_workflow,
    reverse_words_workflow,
)
from src.workflows.undo_last import UndoLastWorkflow

logger = logging.getLogger(__name__)

_RUNTIME_CACHE: tuple[Orchestrator, AppState] | None = None

_DEFAULT_CONFIG_SERVICE = ConfigService
_DEFAULT_CONFIGURE_LOGGING = configure_logging
_DEFAULT_PHRASE_TRANSFORMER = PhraseTransformer
_DEFAULT_ORCHESTRATOR = Orchestrator
_DEFAULT_LIST_WORKFLOW = ListPhrasesWorkflow
_DEFAULT_UNDO_WORKFLOW = UndoLastWorkflow
_DEFAULT_SETTINGS_WORKFLOW = ShowSettingsWorkflow


def build_orchestrator(transformer: PhraseTransformer) -> Orchestrator:
    """Register every menu workflow against a shared transformer."""

    list_workflow_cls = _resolve_dependency("ListPhrasesWorkflow", _DEFAULT_LIST_WORKFLOW)
    undo_workflow_cls = _resolve_dependency("UndoLastWorkflow", _DEFAULT_UNDO_WORKFLOW)
    settings_workflow_cls = _resolve_dependency(
        "ShowSettingsWorkflow", _DEFAULT_SETTINGS_WORKFLOW
    )
    orchestrator_cls = _resolve_dependency("Orchestrator", _DEFAULT_ORCHESTRATOR)

    orchestrator = orchestrator_cls(workflows={})
    for workflow in (
        reverse_words_workflow(transformer),
        reverse_letters_workflow(transformer),
        undo_workflow_cls(transformer=transformer),
        list_workflow_cls(transformer=transformer),
        settings_workflow_cls(),
    ):
        orchestrator.register(workflow)
    return orchestrator


def initialize_runtime() -> tuple[Orchestrator, AppState]:
    """Initialize configuration, logging and session state for CLI usage."""

    config_service_cls = _resolve_dependency("ConfigService", _DEFAULT_CONFIG_SERVICE)
    config_service = config_service_cls()
    _resolve_dependency("configure_logging", _DEFAULT_CONFIGURE_LOGGING)(
        config_service.logging_config
    )
    logger.debug("Runtime initialization starting.")

    history_config = config_service.history_config
    transformer_cls = _resolve_dependency("PhraseTransformer", _DEFAULT_PHRASE_TRANSFORMER)
    transformer = transformer_cls(history_capacity=history_config.capacity)
    orchestrator = build_orchestrator(transformer)

    state = AppState(transformer=transformer, app_metadata=config_service.app_metadata)
    logger.debug(
        "Runtime initialized (history capacity=%s).", history_config.capacity
    )
    return orchestrator, state


def get_runtime() -> tuple[Orchestrator, AppState]:
    """Return the lazily-initialized orchestrator and CLI state."""

    global _RUNTIME_CACHE
    if _RUNTIME_CACHE is None:
        _RUNTIME_CACHE = initialize_runtime()
    return _RUNTIME_CACHE


def set_runtime(runtime: tuple[Orchestrator, AppState] | None) -> None:
    """Replace the cached runtime tuple (None forces re-initialization)."""

    global _RUNTIME_CACHE
    _RUNTIME_CACHE = runtime


def get_orchestrator() -> Orchestrator:
    """Return the cached orchestrator instance."""

    orchestrator, _ = get_runtime()
    return orchestrator


def get_state() -> AppState:
    """Return the cached application state."""

    _, state = get_runtime()
    return state


def _resolve_dependency(name: str, default: Any) -> Any:
    """Return a dependency, preferring overrides on the cli package."""

    from sys import modules

    cli_module = modules.get("src.cli")
    if cli_module is not None and hasattr(cli_module, name):
        return getattr(cli_module, name)
    return default


__all__ = [
    "ConfigService",
    "build_orchestrator",
    "get_orchestrator",
    "get_runtime",
    "get_state",
    "initialize_runtime",
    "set_runtime",
    "set_runtime_level",
]
