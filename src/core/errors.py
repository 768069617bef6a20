"""Domain errors raised by the Word Inverter.

Updates:
    v0.1.0 - 2025-11-09 - Added InvalidInput and MalformedMenuChoice.
"""

from __future__ import annotations


class WordInverterError(Exception):
    """Base class for errors raised by the Word Inverter."""


class InvalidInput(WordInverterError, ValueError):
    """Raised when a reversal operation receives an absent or blank phrase."""

    def __init__(self, message: str = "Phrase cannot be empty.") -> None:
        super().__init__(message)


class MalformedMenuChoice(WordInverterError, ValueError):
    """Raised when a menu selection is not one of the offered options.

    Attributes:
        raw (str | None): The value typed by the user.
    """

    def __init__(self, raw: str | None, message: str | None = None) -> None:
        self.raw = raw
        super().__init__(message or f"Invalid menu option: {raw!r}")


__all__ = ["InvalidInput", "MalformedMenuChoice", "WordInverterError"]
