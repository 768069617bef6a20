"""Phrase parsing and normalization.

Updates:
    v0.1.0 - 2025-11-09 - Added Phrase value object and whitespace normalizer.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import InvalidInput


class WhitespaceNormalizer:
    """Trims a phrase and collapses runs of whitespace to a single space."""

    _whitespace_regex = re.compile(r"\s+")

    def normalize(self, text: str) -> str:
        """Normalize whitespace for a phrase, leaving casing untouched.

        Args:
            text (str): Raw user-provided phrase.

        Returns:
            str: Phrase with collapsed whitespace and no outer padding.
        """

        return self._whitespace_regex.sub(" ", text.strip())


def is_blank(text: str | None) -> bool:
    """Return True when `text` is absent or holds only whitespace."""

    return text is None or not text.strip()


@dataclass(slots=True, frozen=True)
class Phrase:
    """Immutable sequence of non-empty word tokens."""

    words: tuple[str, ...]

    @classmethod
    def parse(cls, text: str | None) -> "Phrase":
        """Tokenize a raw phrase on whitespace.

        Args:
            text (str | None): Phrase as typed by the user.

        Returns:
            Phrase: Parsed phrase with at least one word.

        Raises:
            InvalidInput: If the phrase is absent or blank.
        """

        if is_blank(text):
            raise InvalidInput()
        return cls(words=tuple(WhitespaceNormalizer().normalize(text).split(" ")))

    @property
    def text(self) -> str:
        return " ".join(self.words)

    def __len__(self) -> int:
        return len(self.words)


__all__ = ["Phrase", "WhitespaceNormalizer", "is_blank"]
