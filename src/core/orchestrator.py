"""Workflow orchestration utilities.

Updates:
    v0.1.0 - 2025-11-09 - Dispatch menu actions to named workflows with duration logging.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from time import perf_counter
from typing import Protocol

from .errors import WordInverterError


class Workflow(Protocol):
    """Protocol describing the workflow contract."""

    name: str

    def run(self, context: dict) -> dict:
        """Execute the workflow and return a response.

        Args:
            context (dict): Input data required by the workflow.

        Returns:
            dict: Workflow-specific result payload.
        """

        ...


@dataclass(slots=True)
class Orchestrator:
    workflows: dict[str, Workflow] = field(default_factory=dict)

    _logger = logging.getLogger(__name__)

    def execute(self, workflow_name: str, context: dict) -> dict:
        """Run a registered workflow with the supplied context.

        Domain errors (for example a blank phrase) are logged at INFO and
        re-raised; anything else is logged as a failure with its traceback.

        Args:
            workflow_name (str): Name of the workflow to execute.
            context (dict): Arbitrary payload to pass to the workflow.

        Returns:
            dict: Output produced by the workflow.

        Raises:
            KeyError: If the workflow name is unknown.
        """

        workflow = self.workflows.get(workflow_name)
        if not workflow:
            raise KeyError(f"Workflow '{workflow_name}' is not registered.")
        started = perf_counter()
        try:
            result = workflow.run(context)
        except WordInverterError as exc:
            self._logger.info(
                "workflow_rejected",
                extra={
                    "tool": workflow_name,
                    "duration_ms": _elapsed_ms(started),
                    "error": str(exc),
                },
            )
            raise
        except Exception as exc:
            self._logger.error(
                "workflow_failed",
                extra={
                    "tool": workflow_name,
                    "duration_ms": _elapsed_ms(started),
                    "error": str(exc),
                },
                exc_info=True,
            )
            raise

        self._logger.info(
            "workflow_completed",
            extra={
                "tool": workflow_name,
                "duration_ms": _elapsed_ms(started),
                "context_keys": sorted(context.keys()),
            },
        )
        return result

    def register(self, workflow: Workflow) -> None:
        """Register a workflow implementation with the orchestrator."""

        self.workflows[workflow.name] = workflow

    def names(self) -> list[str]:
        return sorted(self.workflows)


def _elapsed_ms(started: float) -> float:
    return round((perf_counter() - started) * 1000, 2)
