"""Temporal implementation of the workflow executor interface."""

import logging
from typing import Any

from temporalio.client import (
    Client,
    WorkflowExecutionStatus,
    WorkflowFailureError,
    WorkflowHandle,
    WorkflowQueryFailedError,
    WorkflowQueryRejectedError,
)
from temporalio.common import WorkflowIDReusePolicy
from temporalio.contrib.pydantic import pydantic_data_converter
from temporalio.exceptions import WorkflowAlreadyStartedError
from temporalio.service import RPCError, RPCStatusCode

from ..exceptions import WorkflowEngineUnavailable, WorkflowNotFound
from .executor import (
    CUSTOM_STATUS_QUERY,
    WorkflowConfig,
    WorkflowExecutor,
    WorkflowState,
    WorkflowStatus,
)

logger = logging.getLogger(__name__)

_STATUS_MAPPING = {
    WorkflowExecutionStatus.RUNNING: WorkflowStatus.RUNNING,
    WorkflowExecutionStatus.COMPLETED: WorkflowStatus.COMPLETED,
    WorkflowExecutionStatus.FAILED: WorkflowStatus.FAILED,
    WorkflowExecutionStatus.TIMED_OUT: WorkflowStatus.TIMED_OUT,
    WorkflowExecutionStatus.CANCELED: WorkflowStatus.CANCELLED,
    WorkflowExecutionStatus.TERMINATED: WorkflowStatus.TERMINATED,
    WorkflowExecutionStatus.CONTINUED_AS_NEW: WorkflowStatus.CONTINUED_AS_NEW,
}


def _is_not_found(error: RPCError) -> bool:
    return error.status == RPCStatusCode.NOT_FOUND


class TemporalWorkflowExecutor(WorkflowExecutor):
    """Temporal implementation of WorkflowExecutor."""

    def __init__(
        self,
        client: Client | None = None,
        namespace: str = "default",
        server_url: str = "localhost:7233",
        task_queue: str = "default",
    ):
        self.client = client
        self.namespace = namespace
        self.server_url = server_url
        self.task_queue = task_queue

    async def _ensure_connected(self) -> Client:
        """Ensure client is connected to Temporal server."""
        if self.client is None:
            try:
                logger.info(
                    f"Connecting to Temporal server at {self.server_url} "
                    f"with namespace {self.namespace}"
                )
                self.client = await Client.connect(
                    self.server_url,
                    namespace=self.namespace,
                    data_converter=pydantic_data_converter,
                )
                logger.info("Successfully connected to Temporal server")
            except (RuntimeError, RPCError) as e:
                logger.error(f"Failed to connect to Temporal server at {self.server_url}: {e}")
                raise WorkflowEngineUnavailable(f"Cannot connect to Temporal server: {e}") from e
        return self.client

    def _temporal_status_to_workflow_status(
        self, temporal_status: WorkflowExecutionStatus | None
    ) -> WorkflowStatus:
        """Convert Temporal workflow status to our WorkflowStatus enum."""
        if temporal_status is None:
            return WorkflowStatus.UNKNOWN
        return _STATUS_MAPPING.get(temporal_status, WorkflowStatus.UNKNOWN)

    async def start_workflow(
        self,
        workflow_name: str,
        workflow_id: str,
        arg: Any,
        config: WorkflowConfig | None = None,
    ) -> str:
        """Start a Temporal workflow."""
        client = await self._ensure_connected()
        config = config or WorkflowConfig(task_queue=self.task_queue)

        try:
            handle = await client.start_workflow(
                workflow_name,
                arg,
                id=workflow_id,
                task_queue=config.task_queue,
                execution_timeout=config.timeout,
                id_reuse_policy=WorkflowIDReusePolicy.ALLOW_DUPLICATE_FAILED_ONLY,
            )
        except WorkflowAlreadyStartedError:
            logger.info(f"Workflow {workflow_id} already running - returning existing workflow ID")
            return workflow_id

        logger.info(f"Started Temporal workflow {workflow_id} ({workflow_name})")
        return handle.id

    async def get_workflow_state(
        self, workflow_id: str, result_type: type | None = None
    ) -> WorkflowState:
        """Describe a Temporal workflow and read its output or custom status."""
        client = await self._ensure_connected()
        handle = client.get_workflow_handle(workflow_id, result_type=result_type)

        try:
            description = await handle.describe()
        except RPCError as e:
            if _is_not_found(e):
                raise WorkflowNotFound(workflow_id) from e
            raise

        state = WorkflowState(
            workflow_id=workflow_id,
            status=self._temporal_status_to_workflow_status(description.status),
            start_time=description.start_time.isoformat() if description.start_time else None,
            end_time=description.close_time.isoformat() if description.close_time else None,
        )

        if state.is_completed:
            state.output = await handle.result()
        elif state.is_failed:
            try:
                await handle.result()
            except WorkflowFailureError as e:
                state.error = str(e.cause) if e.cause else str(e)
        else:
            # Running, or closed without output (cancelled/terminated). A run
            # whose query no worker answers reads as having published nothing.
            state.custom_status = await self._query_custom_status(handle, result_type)

        return state

    async def _query_custom_status(self, handle: WorkflowHandle, result_type: type | None) -> Any:
        try:
            return await handle.query(CUSTOM_STATUS_QUERY, result_type=result_type)
        except (WorkflowQueryFailedError, WorkflowQueryRejectedError, RPCError) as e:
            logger.warning(f"Could not read custom status of workflow {handle.id}: {e}")
            return None

    async def signal_workflow(self, workflow_id: str, signal_name: str, data: Any = None) -> None:
        """Send signal to Temporal workflow."""
        client = await self._ensure_connected()
        handle = client.get_workflow_handle(workflow_id)

        try:
            await handle.signal(signal_name, data)
        except RPCError as e:
            if _is_not_found(e):
                raise WorkflowNotFound(workflow_id) from e
            logger.error(f"Failed to signal workflow {workflow_id}: {e}")
            raise

        logger.debug(f"Sent signal {signal_name} to workflow {workflow_id}")

    async def cancel_workflow(self, workflow_id: str) -> bool:
        """Cancel a Temporal workflow."""
        client = await self._ensure_connected()
        handle = client.get_workflow_handle(workflow_id)

        try:
            await handle.cancel()
        except RPCError as e:
            if _is_not_found(e):
                logger.warning(f"Cannot cancel workflow {workflow_id}: not found")
                return False
            raise

        logger.info(f"Cancelled workflow {workflow_id}")
        return True
