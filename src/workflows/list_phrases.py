"""Sorted phrase listing workflow."""

from __future__ import annotations

from dataclasses import dataclass

from ..services.phrase_transformer import PhraseTransformer


@dataclass
class ListPhrasesWorkflow:
    transformer: PhraseTransformer
    name: str = "list_phrases"

    def run(self, context: dict) -> dict:
        return {"phrases": self.transformer.sorted_phrases()}
