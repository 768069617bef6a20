"""Shared console utilities for the Word Inverter CLI."""

from __future__ import annotations

from rich.console import Console

# Single Console instance reused across command modules; emoji codes stay literal.
console = Console(emoji=False)

__all__ = ["console"]
