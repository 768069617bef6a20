"""Interactive menu loop for the Word Inverter.

The controller reads a menu choice, dispatches it to the matching workflow
through the orchestrator and renders the outcome. Bad input never ends the
loop; only the exit option or the end of input does.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Any, Callable, Optional

import typer

from src.cli import renderers
from src.cli.utils import prompt_choice, prompt_phrase
from src.core.errors import InvalidInput, MalformedMenuChoice

logger = logging.getLogger(__name__)


class MenuChoice(IntEnum):
    REVERSE_WORDS = 1
    LIST_SORTED = 2
    UNDO = 3
    REVERSE_LETTERS = 4
    EXIT = 5


_TRANSFORM_WORKFLOWS = {
    MenuChoice.REVERSE_WORDS: ("reverse_words", "Enter a phrase"),
    MenuChoice.REVERSE_LETTERS: ("reverse_letters", "Enter a phrase to invert the letters"),
}


def parse_menu_choice(raw: Optional[str]) -> MenuChoice:
    """Convert raw user input into a menu choice.

    Args:
        raw (str | None): Text typed at the menu prompt.

    Returns:
        MenuChoice: The selected option.

    Raises:
        MalformedMenuChoice: If the input is not a number or not a listed option.
    """

    text = (raw or "").strip()
    if not (text.isascii() and text.isdigit()):
        raise MalformedMenuChoice(raw, "Please enter a valid number.")
    try:
        return MenuChoice(int(text))
    except ValueError as exc:
        raise MalformedMenuChoice(raw, "Invalid option! Try again.") from exc


class ConsoleController:
    """Drives the numbered menu until the user exits."""

    def __init__(
        self,
        orchestrator: Any,
        *,
        app_name: str = "Word Inverter",
        choice_prompt: Callable[[], str] = prompt_choice,
        phrase_prompt: Callable[[str], str] = prompt_phrase,
    ) -> None:
        self._orchestrator = orchestrator
        self._app_name = app_name
        self._choice_prompt = choice_prompt
        self._phrase_prompt = phrase_prompt

    def run(self) -> None:
        renderers.render_welcome(self._app_name)
        while self.step():
            pass

    def step(self) -> bool:
        """Show the menu and handle one choice.

        Returns:
            bool: False once the loop should stop.
        """

        renderers.render_menu(self._app_name)
        try:
            raw = self._choice_prompt()
            choice = parse_menu_choice(raw)
        except (EOFError, KeyboardInterrupt, typer.Abort):
            renderers.render_farewell()
            return False
        except MalformedMenuChoice as exc:
            logger.info("menu_choice_rejected", extra={"raw": exc.raw})
            renderers.render_invalid_choice(str(exc))
            return True

        try:
            return self.dispatch(choice)
        except (EOFError, KeyboardInterrupt, typer.Abort):
            renderers.render_farewell()
            return False
        except Exception as exc:  # logged by the orchestrator
            renderers.render_error(str(exc))
            return True

    def dispatch(self, choice: MenuChoice) -> bool:
        if choice is MenuChoice.EXIT:
            renderers.render_farewell()
            return False

        if choice in _TRANSFORM_WORKFLOWS:
            workflow, label = _TRANSFORM_WORKFLOWS[choice]
            phrase = self._phrase_prompt(label)
            try:
                result = self._orchestrator.execute(workflow, {"phrase": phrase})
            except InvalidInput:
                renderers.render_invalid_phrase()
                return True
            renderers.render_transformation(result["result"])
        elif choice is MenuChoice.LIST_SORTED:
            result = self._orchestrator.execute("list_phrases", {})
            renderers.render_phrase_list(result["phrases"])
        elif choice is MenuChoice.UNDO:
            result = self._orchestrator.execute("undo", {})
            renderers.render_undo(result.get("entry"))
        return True


__all__ = ["ConsoleController", "MenuChoice", "parse_menu_choice"]
