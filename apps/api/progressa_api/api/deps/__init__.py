"""FastAPI dependencies for Progressa endpoints."""

from .services import WorkflowExecutorDep, get_workflow_executor

__all__ = ["WorkflowExecutorDep", "get_workflow_executor"]
