from __future__ import annotations

import json
from typing import Any

import pytest
from typer.testing import CliRunner

import src.cli as cli
from tests.helpers.cli import make_cli_runtime, patch_runtime


@pytest.fixture()
def cli_session(monkeypatch: pytest.MonkeyPatch) -> tuple[CliRunner, cli.AppState, Any]:
    runner = CliRunner()
    orchestrator, state = make_cli_runtime()
    patch_runtime(monkeypatch, orchestrator, state)
    monkeypatch.setattr(cli, "set_runtime_level", lambda level: None)
    return runner, state, orchestrator


def test_interactive_session(cli_session: tuple[CliRunner, cli.AppState, Any]) -> None:
    runner, state, _ = cli_session
    script = "\n".join(
        [
            "1",
            "the quick brown fox",
            "4",
            "the quick brown fox",
            "oops",
            "2",
            "3",
            "5",
        ]
    )

    result = runner.invoke(cli.app, ["play"], input=script + "\n")

    assert result.exit_code == 0
    assert "Welcome to Test Inverter!" in result.output
    assert "fox brown quick the" in result.output
    assert "eht kciuq nworb xof" in result.output
    assert "Please enter a valid number." in result.output
    assert "1. the quick brown fox" in result.output
    assert "2. the quick brown fox" in result.output
    assert "Undoing last inversion: eht kciuq nworb xof" in result.output
    assert "Thanks for playing!" in result.output
    assert state.transformer.history.entries() == ["fox brown quick the"]


def test_no_subcommand_starts_menu(cli_session: tuple[CliRunner, cli.AppState, Any]) -> None:
    runner, _, _ = cli_session

    result = runner.invoke(cli.app, [], input="3\n5\n")

    assert result.exit_code == 0
    assert "Nothing to undo." in result.output
    assert "Thanks for playing!" in result.output


def test_menu_ends_on_end_of_input(cli_session: tuple[CliRunner, cli.AppState, Any]) -> None:
    runner, _, _ = cli_session

    result = runner.invoke(cli.app, ["play"], input="2\n")

    assert result.exit_code == 0
    assert "No phrases entered yet." in result.output
    assert "Thanks for playing!" in result.output


def test_one_shot_commands(cli_session: tuple[CliRunner, cli.AppState, Any]) -> None:
    runner, state, orchestrator = cli_session

    result = runner.invoke(cli.app, ["words", "the quick brown fox"])
    assert result.exit_code == 0
    assert "fox brown quick the" in result.output

    result = runner.invoke(cli.app, ["letters", "the quick brown fox"])
    assert result.exit_code == 0
    assert "eht kciuq nworb xof" in result.output

    assert state.transformer.sorted_phrases() == ["the quick brown fox"] * 2


def test_one_shot_blank_phrase_is_usage_error(
    cli_session: tuple[CliRunner, cli.AppState, Any]
) -> None:
    runner, state, _ = cli_session

    result = runner.invoke(cli.app, ["words", "   "])

    assert result.exit_code == 2
    assert len(state.transformer.registry) == 0


def test_settings_show_prints_json(cli_session: tuple[CliRunner, cli.AppState, Any]) -> None:
    runner, _, _ = cli_session

    result = runner.invoke(cli.app, ["settings", "show"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["history"]["capacity"] == 5


def test_emoji_codes_are_printed_as_typed(
    cli_session: tuple[CliRunner, cli.AppState, Any]
) -> None:
    runner, _, _ = cli_session

    result = runner.invoke(cli.app, ["words", "smile :smile: now"])

    assert result.exit_code == 0
    assert "Original phrase: smile :smile: now" in result.stdout
    assert "Inverted phrase: now :smile: smile" in result.stdout
    assert "\N{SMILING FACE WITH OPEN MOUTH AND SMILING EYES}" not in result.stdout


def test_emoji_codes_survive_the_menu(cli_session: tuple[CliRunner, cli.AppState, Any]) -> None:
    runner, _, _ = cli_session

    result = runner.invoke(cli.app, ["play"], input="4\n:smile: [bold]x\n2\n3\n5\n")

    assert result.exit_code == 0
    assert ":elims: x]dlob[" in result.stdout
    assert "1. :smile: [bold]x" in result.stdout
    assert "Undoing last inversion: :elims: x]dlob[" in result.stdout


def test_one_shot_output_is_not_wrapped(
    cli_session: tuple[CliRunner, cli.AppState, Any]
) -> None:
    runner, _, _ = cli_session
    phrase = " ".join(f"word{index}" for index in range(30))
    reversed_phrase = " ".join(f"word{index}" for index in reversed(range(30)))

    result = runner.invoke(cli.app, ["words", phrase])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        f"Original phrase: {phrase}",
        f"Inverted phrase: {reversed_phrase}",
    ]
