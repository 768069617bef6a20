"""Phrase transformations and the session state they feed.

Updates:
    v0.1.0 - 2025-11-09 - Added word-order and per-word letter reversal.
    v0.1.1 - 2025-11-10 - Record originals and results through a single transform call.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Optional

from ..core.phrase import Phrase
from .history import DEFAULT_CAPACITY, BoundedHistory
from .phrase_registry import PhraseRegistry

logger = logging.getLogger(__name__)


class TransformMode(str, Enum):
    """Supported phrase transformations."""

    WORDS = "words"
    LETTERS = "letters"


@dataclass(slots=True, frozen=True)
class TransformationResult:
    """Original phrase paired with its transformed form."""

    mode: TransformMode
    original: str
    transformed: str

    def as_dict(self) -> dict[str, str]:
        payload = asdict(self)
        payload["mode"] = self.mode.value
        return payload


def reverse_word_order(phrase: str | None) -> str:
    """Reverse the order of the words in a phrase.

    Args:
        phrase (str | None): Phrase to reverse.

    Returns:
        str: Words in reverse order, separated by single spaces.

    Raises:
        InvalidInput: If the phrase is absent or blank.
    """

    return " ".join(reversed(Phrase.parse(phrase).words))


def reverse_letters(phrase: str | None) -> str:
    """Reverse the letters of every word while keeping the word order.

    Args:
        phrase (str | None): Phrase whose words are reversed.

    Returns:
        str: Letter-reversed words separated by single spaces.

    Raises:
        InvalidInput: If the phrase is absent or blank.
    """

    return " ".join(word[::-1] for word in Phrase.parse(phrase).words)


_OPERATIONS = {
    TransformMode.WORDS: reverse_word_order,
    TransformMode.LETTERS: reverse_letters,
}


class PhraseTransformer:
    """Applies reversals and tracks the session history and registry."""

    def __init__(
        self,
        history: BoundedHistory | None = None,
        registry: PhraseRegistry | None = None,
        *,
        history_capacity: int = DEFAULT_CAPACITY,
    ) -> None:
        self.history = history if history is not None else BoundedHistory(history_capacity)
        self.registry = registry if registry is not None else PhraseRegistry()

    @staticmethod
    def reverse_word_order(phrase: str | None) -> str:
        return reverse_word_order(phrase)

    @staticmethod
    def reverse_letters(phrase: str | None) -> str:
        return reverse_letters(phrase)

    def transform(self, phrase: str | None, mode: TransformMode | str) -> TransformationResult:
        """Transform a phrase, register the original and record the result.

        Args:
            phrase (str | None): Phrase typed by the user.
            mode (TransformMode | str): Which reversal to apply.

        Returns:
            TransformationResult: The trimmed original and its transformed form.

        Raises:
            InvalidInput: If the phrase is absent or blank. No state changes.
            ValueError: If the mode is unknown.
        """

        resolved = TransformMode(mode)
        transformed = _OPERATIONS[resolved](phrase)
        original = phrase.strip()
        self.add_phrase(original)
        self.push_history(transformed)
        logger.debug(
            "phrase_transformed",
            extra={"mode": resolved.value, "words": len(transformed.split(" "))},
        )
        return TransformationResult(mode=resolved, original=original, transformed=transformed)

    def push_history(self, entry: str) -> None:
        self.history.push(entry)

    def undo(self) -> Optional[str]:
        """Remove and return the most recent transformation, or None if there is none."""

        return self.history.pop()

    def add_phrase(self, phrase: str | None) -> bool:
        return self.registry.add(phrase)

    def sorted_phrases(self) -> list[str]:
        return self.registry.list_sorted()


__all__ = [
    "PhraseTransformer",
    "TransformMode",
    "TransformationResult",
    "reverse_letters",
    "reverse_word_order",
]
