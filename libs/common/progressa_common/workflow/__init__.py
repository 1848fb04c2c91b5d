"""Workflow execution abstraction layer.

This module provides a generic interface for workflow execution that can be
implemented by different workflow engines (Temporal, etc.) to avoid vendor lock-in.
"""

from .executor import (
    CUSTOM_STATUS_QUERY,
    FAILED_STATUSES,
    WorkflowConfig,
    WorkflowExecutor,
    WorkflowState,
    WorkflowStatus,
)

__all__ = [
    "CUSTOM_STATUS_QUERY",
    "FAILED_STATUSES",
    "WorkflowConfig",
    "WorkflowExecutor",
    "WorkflowState",
    "WorkflowStatus",
]
