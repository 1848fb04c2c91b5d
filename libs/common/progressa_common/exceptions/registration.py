"""Utility functions for registering workflow error handlers."""

from fastapi import FastAPI

from .handlers import WORKFLOW_ERROR_HANDLERS


def register_workflow_error_handlers(app: FastAPI) -> None:
    """Register all workflow error handlers with the FastAPI app.

    Args:
        app: FastAPI application instance
    """
    for exception_class, handler in WORKFLOW_ERROR_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
