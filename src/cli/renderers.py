"""Rich renderers for CLI outputs."""

from __future__ import annotations

from typing import Optional, Sequence

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from src.cli.io import console
from src.services.phrase_transformer import TransformationResult, TransformMode

MENU_ITEMS: tuple[tuple[int, str], ...] = (
    (1, "Invert a new phrase"),
    (2, "View entered phrases (alphabetical order)"),
    (3, "Undo last inversion"),
    (4, "Invert the letters of each word"),
    (5, "Exit the program"),
)

_RESULT_LABELS = {
    TransformMode.WORDS: "Inverted phrase",
    TransformMode.LETTERS: "Inverted letters",
}


def render_welcome(app_name: str) -> None:
    console.print(f"[bold]Welcome to {escape(app_name)}![/]")


def render_menu(app_name: str) -> None:
    """Display the numbered main menu."""

    table = Table(title=app_name.upper(), show_header=False, show_lines=False)
    table.add_column("Option", justify="right", style="bold")
    table.add_column("Action")
    for number, label in MENU_ITEMS:
        table.add_row(f"{number}.", label)
    console.print(table)


def render_transformation(result: TransformationResult) -> None:
    """Show the original phrase next to its transformed form."""

    label = _RESULT_LABELS.get(result.mode, "Result")
    lines = [
        f"[bold]Original phrase:[/] {escape(result.original)}",
        f"[bold]{label}:[/] {escape(result.transformed)}",
    ]
    console.print(Panel("\n".join(lines), title="Inversion"))


def render_transformation_lines(result: TransformationResult) -> None:
    """Print the result as two unboxed lines that never wrap, for piped output."""

    label = _RESULT_LABELS.get(result.mode, "Result")
    console.print(f"Original phrase: {escape(result.original)}", soft_wrap=True)
    console.print(f"{label}: {escape(result.transformed)}", soft_wrap=True)


def render_phrase_list(phrases: Sequence[str]) -> None:
    """Render registered phrases, 1-indexed, in the order supplied."""

    if not phrases:
        console.print(Panel("No phrases entered yet.", title="Entered Phrases"))
        return

    lines = [f"{idx}. {escape(phrase)}" for idx, phrase in enumerate(phrases, start=1)]
    console.print(Panel("\n".join(lines), title="Entered Phrases (alphabetical order)"))


def render_undo(entry: Optional[str]) -> None:
    if entry is None:
        console.print("[yellow]Nothing to undo.[/]")
        return
    console.print(f"Undoing last inversion: {escape(entry)}")


def render_invalid_phrase() -> None:
    console.print("[red]Empty phrase! Try again.[/]")


def render_invalid_choice(message: str) -> None:
    console.print(f"[red]{escape(message)}[/]")


def render_error(message: str) -> None:
    console.print(f"[red]Error: {escape(message)}[/]")


def render_farewell() -> None:
    console.print("[green]Thanks for playing! See you soon![/]")


__all__ = [
    "MENU_ITEMS",
    "render_error",
    "render_farewell",
    "render_invalid_choice",
    "render_invalid_phrase",
    "render_menu",
    "render_phrase_list",
    "render_transformation",
    "render_transformation_lines",
    "render_undo",
    "render_welcome",
]
