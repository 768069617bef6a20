"""Phrase transformation workflows.

Updates:
    v0.1.0 - 2025-11-09 - Added word-order and letter reversal workflows.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..services.phrase_transformer import PhraseTransformer, TransformMode


@dataclass
class TransformPhraseWorkflow:
    transformer: PhraseTransformer
    mode: TransformMode = TransformMode.WORDS
    name: str = "reverse_words"

    def run(self, context: dict) -> dict:
        """Transform the phrase found in context.

        Args:
            context (dict): Context payload containing `phrase`.

        Returns:
            dict: `result` holding the original and transformed phrase.

        Raises:
            InvalidInput: If the phrase is missing or blank.
        """

        result = self.transformer.transform(context.get("phrase"), self.mode)
        return {"result": result}


def reverse_words_workflow(transformer: PhraseTransformer) -> TransformPhraseWorkflow:
    return TransformPhraseWorkflow(
        transformer=transformer, mode=TransformMode.WORDS, name="reverse_words"
    )


def reverse_letters_workflow(transformer: PhraseTransformer) -> TransformPhraseWorkflow:
    return TransformPhraseWorkflow(
        transformer=transformer, mode=TransformMode.LETTERS, name="reverse_letters"
    )
