"""Structured logging with workflow context."""

from .config import WorkflowContextFormatter, setup_logging
from .context_logger import ContextLogger, get_context_logger

__all__ = [
    "ContextLogger",
    "WorkflowContextFormatter",
    "get_context_logger",
    "setup_logging",
]
