"""Registry of phrases submitted during a session."""

from __future__ import annotations

from typing import Iterator

from ..core.phrase import is_blank


class PhraseRegistry:
    """Unbounded, insertion-ordered record of original phrases."""

    def __init__(self) -> None:
        self._phrases: list[str] = []

    def add(self, phrase: str | None) -> bool:
        """Store the trimmed phrase; absent or blank input is ignored.

        Returns:
            bool: True when the phrase was recorded.
        """

        if is_blank(phrase):
            return False
        self._phrases.append(phrase.strip())
        return True

    def list_sorted(self) -> list[str]:
        """Return phrases in case-insensitive alphabetical order.

        The sort is stable, so phrases that differ only by case keep the order
        in which they were entered.
        """

        return sorted(self._phrases, key=str.lower)

    def __len__(self) -> int:
        return len(self._phrases)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._phrases))


__all__ = ["PhraseRegistry"]
