"""Abstract workflow executor interface.

This provides a clean abstraction over workflow engines like Temporal,
allowing the API layer to start, signal and inspect executions without
depending on a particular engine client.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Any

# Name of the query through which a running workflow serves its custom status
CUSTOM_STATUS_QUERY = "custom_status"


class WorkflowStatus(Enum):
    """Workflow execution status."""

    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"
    TIMED_OUT = "timed_out"
    CANCELLED = "cancelled"
    TERMINATED = "terminated"
    CONTINUED_AS_NEW = "continued_as_new"
    UNKNOWN = "unknown"


FAILED_STATUSES = frozenset({WorkflowStatus.FAILED, WorkflowStatus.TIMED_OUT})


@dataclass
class WorkflowState:
    """Engine-reported state of one workflow execution.

    ``output`` is only populated once the execution completed successfully;
    ``custom_status`` only while it has not. Both hold whatever the engine
    decoded, which may be a typed model or plain JSON data.
    """

    workflow_id: str
    status: WorkflowStatus
    output: Any = None
    custom_status: Any = None
    error: str | None = None
    start_time: str | None = None
    end_time: str | None = None

    @property
    def is_completed(self) -> bool:
        return self.status == WorkflowStatus.COMPLETED

    @property
    def is_failed(self) -> bool:
        return self.status in FAILED_STATUSES

    @property
    def is_running(self) -> bool:
        return self.status == WorkflowStatus.RUNNING


@dataclass
class WorkflowConfig:
    """Configuration for workflow execution."""

    task_queue: str = "default"
    timeout: timedelta | None = None


class WorkflowExecutor(ABC):
    """Abstract interface for workflow execution engines."""

    @abstractmethod
    async def start_workflow(
        self,
        workflow_name: str,
        workflow_id: str,
        arg: Any,
        config: WorkflowConfig | None = None,
    ) -> str:
        """Start a workflow execution.

        Args:
            workflow_name: Registered name of the workflow type
            workflow_id: Unique identifier for this workflow instance
            arg: Typed input passed to the workflow
            config: Optional workflow configuration

        Returns:
            Workflow execution ID (may be same as workflow_id)
        """

    @abstractmethod
    async def get_workflow_state(
        self, workflow_id: str, result_type: type | None = None
    ) -> WorkflowState:
        """Get the state of a workflow.

        Args:
            workflow_id: ID of the workflow to inspect
            result_type: Type the output and custom status are decoded into

        Returns:
            Current workflow state

        Raises:
            WorkflowNotFound: If the engine knows no such execution
        """

    @abstractmethod
    async def signal_workflow(self, workflow_id: str, signal_name: str, data: Any = None) -> None:
        """Deliver a named external event to a running workflow.

        Raises:
            WorkflowNotFound: If the engine knows no such execution
        """

    @abstractmethod
    async def cancel_workflow(self, workflow_id: str) -> bool:
        """Cancel a running workflow.

        Returns:
            True if cancellation was requested
        """
