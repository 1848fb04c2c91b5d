"""Error handlers for workflow-related exceptions."""

import logging
from typing import Any

from fastapi import Request, status
from fastapi.responses import JSONResponse

from .workflow import (
    ProgressaError,
    WorkflowEngineUnavailable,
    WorkflowExecutionFailed,
    WorkflowNotFound,
)

logger = logging.getLogger(__name__)


def _log_workflow_error(exc: ProgressaError, request: Request) -> None:
    """Log a workflow error with request context.

    Args:
        exc: The raised exception
        request: FastAPI request object
    """
    log_context: dict[str, Any] = {
        "error_type": type(exc).__name__,
        "error_message": str(exc),
        "request_method": request.method,
        "request_path": request.url.path,
    }
    if exc.workflow_id:
        log_context["workflow_id"] = exc.workflow_id
    if isinstance(exc, WorkflowExecutionFailed):
        log_context["runtime_status"] = exc.status

    # Unknown ids are client mistakes; everything else needs attention
    if isinstance(exc, WorkflowNotFound):
        logger.info("Workflow not found", extra=log_context)
    elif isinstance(exc, WorkflowExecutionFailed):
        logger.warning("Workflow execution failed", extra=log_context)
    else:
        logger.error("Workflow error occurred", extra=log_context)


async def workflow_not_found_handler(request: Request, exc: WorkflowNotFound) -> JSONResponse:
    """Handle unknown workflow ids.

    Returns:
        JSONResponse with 404 status
    """
    _log_workflow_error(exc, request)

    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "error": "Workflow not found",
            "detail": f"No workflow execution with id '{exc.workflow_id}'",
            "error_code": "WORKFLOW_NOT_FOUND",
        },
    )


async def workflow_execution_failed_handler(
    request: Request, exc: WorkflowExecutionFailed
) -> JSONResponse:
    """Handle workflow executions the engine reports as failed.

    Returns:
        JSONResponse with 500 status and a support message
    """
    _log_workflow_error(exc, request)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "The workflow execution failed. Seek support",
            "error_code": "WORKFLOW_FAILED",
        },
    )


async def workflow_engine_unavailable_handler(
    request: Request, exc: WorkflowEngineUnavailable
) -> JSONResponse:
    """Handle an unreachable workflow engine.

    Returns:
        JSONResponse with 503 status
    """
    _log_workflow_error(exc, request)

    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "error": "Workflow engine unavailable",
            "detail": "The workflow engine could not be reached, try again later",
            "error_code": "ENGINE_UNAVAILABLE",
        },
    )


async def progressa_error_handler(request: Request, exc: ProgressaError) -> JSONResponse:
    """Catch-all handler for ProgressaError instances without a specific handler.

    Returns:
        JSONResponse with 500 status
    """
    _log_workflow_error(exc, request)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "detail": "An unexpected workflow-related error occurred",
            "error_code": "PROGRESSA_ERROR",
        },
    )


# Registry of error handlers for easy registration
WORKFLOW_ERROR_HANDLERS = {
    WorkflowNotFound: workflow_not_found_handler,
    WorkflowExecutionFailed: workflow_execution_failed_handler,
    WorkflowEngineUnavailable: workflow_engine_unavailable_handler,
    ProgressaError: progressa_error_handler,  # Catch-all handler
}
