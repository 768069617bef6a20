"""CLI runtime state management."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from src.core.config_loader import PROJECT_ROOT
from src.services.phrase_transformer import PhraseTransformer


def _default_metadata() -> dict[str, Any]:
    return {"name": "Word Inverter"}


@dataclass
class AppState:
    """In-memory state for one CLI process.

    Holds the transformer that owns the undo history and the phrase registry.
    Nothing here is written to disk; the session ends with the process.
    """

    transformer: PhraseTransformer = field(default_factory=PhraseTransformer)
    app_metadata: dict[str, Any] = field(default_factory=_default_metadata)

    @property
    def app_name(self) -> str:
        return str(self.app_metadata.get("name") or "Word Inverter")


__all__ = ["AppState", "PROJECT_ROOT"]
