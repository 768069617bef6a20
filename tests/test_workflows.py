import logging
from dataclasses import dataclass
from pathlib import Path

import pytest

from src.core.errors import InvalidInput
from src.core.orchestrator import Orchestrator
from src.services.phrase_transformer import PhraseTransformer, TransformMode
from src.workflows.list_phrases import ListPhrasesWorkflow
from src.workflows.show_settings import ShowSettingsWorkflow
from src.workflows.transform_phrase import (
    reverse_letters_workflow,
    reverse_words_workflow,
)
from src.workflows.undo_last import UndoLastWorkflow


@dataclass
class DummyWorkflow:
    name: str = "dummy"

    def run(self, context: dict) -> dict:
        return {"echo": context}


@dataclass
class ExplodingWorkflow:
    name: str = "explode"

    def run(self, context: dict) -> dict:
        raise RuntimeError("boom")


def test_orchestrator_executes_registered_workflow():
    workflow = DummyWorkflow()
    orchestrator = Orchestrator(workflows={workflow.name: workflow})

    result = orchestrator.execute("dummy", {"value": 42})
    assert result["echo"]["value"] == 42


def test_orchestrator_rejects_unknown_workflow():
    with pytest.raises(KeyError):
        Orchestrator().execute("missing", {})


def test_orchestrator_logs_and_reraises_failures(caplog: pytest.LogCaptureFixture):
    orchestrator = Orchestrator()
    orchestrator.register(ExplodingWorkflow())

    with caplog.at_level(logging.ERROR, logger="src.core.orchestrator"):
        with pytest.raises(RuntimeError):
            orchestrator.execute("explode", {})

    record = next(r for r in caplog.records if r.getMessage() == "workflow_failed")
    assert record.tool == "explode"
    assert record.error == "boom"


def test_transform_workflows_feed_shared_transformer():
    transformer = PhraseTransformer()
    orchestrator = Orchestrator()
    orchestrator.register(reverse_words_workflow(transformer))
    orchestrator.register(reverse_letters_workflow(transformer))
    orchestrator.register(UndoLastWorkflow(transformer=transformer))
    orchestrator.register(ListPhrasesWorkflow(transformer=transformer))

    assert orchestrator.names() == ["list_phrases", "reverse_letters", "reverse_words", "undo"]

    words = orchestrator.execute("reverse_words", {"phrase": "the quick brown fox"})
    letters = orchestrator.execute("reverse_letters", {"phrase": "Banana split"})

    assert words["result"].transformed == "fox brown quick the"
    assert letters["result"].mode is TransformMode.LETTERS
    assert letters["result"].transformed == "ananaB tilps"
    assert orchestrator.execute("list_phrases", {}) == {
        "phrases": ["Banana split", "the quick brown fox"]
    }
    assert orchestrator.execute("undo", {}) == {"entry": "ananaB tilps", "remaining": 1}


def test_transform_workflow_requires_phrase():
    orchestrator = Orchestrator()
    orchestrator.register(reverse_words_workflow(PhraseTransformer()))

    with pytest.raises(InvalidInput):
        orchestrator.execute("reverse_words", {})


def test_undo_workflow_on_empty_history():
    workflow = UndoLastWorkflow(transformer=PhraseTransformer())

    assert workflow.run({}) == {"entry": None, "remaining": 0}


def test_show_settings_workflow_reads_config(tmp_path: Path):
    (tmp_path / "settings.yaml").write_text(
        "app: {name: Mirror}\nhistory: {capacity: 3}\n", encoding="utf-8"
    )

    result = ShowSettingsWorkflow(config_path=tmp_path).run({})

    assert result["app"]["name"] == "Mirror"
    assert result["history"] == {"capacity": 3}
