"""Exception classes for Progressa.

This module provides the error taxonomy shared by the execution library and
the API, plus FastAPI handlers translating it into HTTP responses.
"""

from .handlers import (
    WORKFLOW_ERROR_HANDLERS,
    progressa_error_handler,
    workflow_engine_unavailable_handler,
    workflow_execution_failed_handler,
    workflow_not_found_handler,
)
from .registration import register_workflow_error_handlers
from .workflow import (
    ProgressaError,
    ProgressFinalizedError,
    WorkflowEngineUnavailable,
    WorkflowExecutionFailed,
    WorkflowNotFound,
)

__all__ = [
    "WORKFLOW_ERROR_HANDLERS",
    "ProgressFinalizedError",
    # Exception classes
    "ProgressaError",
    "WorkflowEngineUnavailable",
    "WorkflowExecutionFailed",
    "WorkflowNotFound",
    # Error handlers
    "progressa_error_handler",
    # Registration utilities
    "register_workflow_error_handlers",
    "workflow_engine_unavailable_handler",
    "workflow_execution_failed_handler",
    "workflow_not_found_handler",
]
