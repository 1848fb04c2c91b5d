"""Shared in-memory implementations for testing.

Lets API and service tests drive the workflow layer without a Temporal
server: executions are plain :class:`WorkflowState` objects that tests put
into whatever state they need.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from ..exceptions import WorkflowNotFound
from ..workflow.executor import WorkflowConfig, WorkflowExecutor, WorkflowState, WorkflowStatus

logger = logging.getLogger(__name__)


@dataclass
class StartedWorkflow:
    """Record of a start_workflow call."""

    workflow_name: str
    workflow_id: str
    arg: Any
    config: WorkflowConfig | None = None


@dataclass
class SentSignal:
    """Record of a signal_workflow call."""

    workflow_id: str
    signal_name: str
    data: Any = None


class InMemoryWorkflowExecutor(WorkflowExecutor):
    """Workflow executor keeping executions in a dict.

    Started workflows begin RUNNING with no custom status published.
    """

    def __init__(self) -> None:
        self.states: dict[str, WorkflowState] = {}
        self.started: list[StartedWorkflow] = []
        self.signals: list[SentSignal] = []
        self.cancelled: list[str] = []

    async def start_workflow(
        self,
        workflow_name: str,
        workflow_id: str,
        arg: Any,
        config: WorkflowConfig | None = None,
    ) -> str:
        self.started.append(StartedWorkflow(workflow_name, workflow_id, arg, config))
        self.states.setdefault(
            workflow_id, WorkflowState(workflow_id=workflow_id, status=WorkflowStatus.RUNNING)
        )
        logger.debug("Test workflow started: %s", workflow_id)
        return workflow_id

    async def get_workflow_state(
        self, workflow_id: str, result_type: type | None = None
    ) -> WorkflowState:
        try:
            return self.states[workflow_id]
        except KeyError:
            raise WorkflowNotFound(workflow_id) from None

    async def signal_workflow(self, workflow_id: str, signal_name: str, data: Any = None) -> None:
        if workflow_id not in self.states:
            raise WorkflowNotFound(workflow_id)
        self.signals.append(SentSignal(workflow_id, signal_name, data))

    async def cancel_workflow(self, workflow_id: str) -> bool:
        state = self.states.get(workflow_id)
        if state is None:
            return False
        state.status = WorkflowStatus.CANCELLED
        self.cancelled.append(workflow_id)
        return True

    def set_state(self, state: WorkflowState) -> None:
        """Install or replace the state of an execution."""
        self.states[state.workflow_id] = state


__all__ = ["InMemoryWorkflowExecutor", "SentSignal", "StartedWorkflow"]
