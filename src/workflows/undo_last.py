"""Undo workflow definitions."""

from __future__ import annotations

from dataclasses import dataclass

from ..services.phrase_transformer import PhraseTransformer


@dataclass
class UndoLastWorkflow:
    transformer: PhraseTransformer
    name: str = "undo"

    def run(self, context: dict) -> dict:
        """Pop the most recent transformation.

        Returns:
            dict: `entry` is the undone phrase or None when history is empty,
            `remaining` is the number of entries still held.
        """

        entry = self.transformer.undo()
        return {"entry": entry, "remaining": len(self.transformer.history)}
