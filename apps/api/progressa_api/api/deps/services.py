"""Service dependencies for FastAPI endpoints."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from progressa_common.config import get_settings
from progressa_common.workflow import WorkflowExecutor
from progressa_common.workflow.temporal_executor import TemporalWorkflowExecutor


@lru_cache
def get_workflow_executor() -> WorkflowExecutor:
    """Get the process-wide workflow executor.

    The Temporal client connects lazily on first use.
    """
    settings = get_settings().workflow
    return TemporalWorkflowExecutor(
        namespace=settings.TEMPORAL_NAMESPACE,
        server_url=settings.TEMPORAL_SERVER_URL,
        task_queue=settings.TEMPORAL_TASK_QUEUE,
    )


WorkflowExecutorDep = Annotated[WorkflowExecutor, Depends(get_workflow_executor)]
