"""Context-aware logger that automatically includes workflow context."""

import logging
from typing import Any


class ContextLogger:
    """Logger wrapper that adds the workflow id to every message's extra."""

    def __init__(self, logger: logging.Logger, workflow_id: str | None = None):
        """Initialize context logger.

        Args:
            logger: The underlying logger to wrap
            workflow_id: Workflow execution the messages belong to
        """
        self.logger = logger
        self.workflow_id = workflow_id

    def _get_extra_context(self, extra: dict[str, Any] | None = None) -> dict[str, Any]:
        context = extra.copy() if extra else {}
        if self.workflow_id:
            context["workflow_id"] = self.workflow_id
        return context

    def debug(
        self, msg: str, *args: Any, extra: dict[str, Any] | None = None, **kwargs: Any
    ) -> None:
        """Log debug message with workflow context."""
        self.logger.debug(msg, *args, extra=self._get_extra_context(extra), **kwargs)

    def info(
        self, msg: str, *args: Any, extra: dict[str, Any] | None = None, **kwargs: Any
    ) -> None:
        """Log info message with workflow context."""
        self.logger.info(msg, *args, extra=self._get_extra_context(extra), **kwargs)

    def warning(
        self, msg: str, *args: Any, extra: dict[str, Any] | None = None, **kwargs: Any
    ) -> None:
        """Log warning message with workflow context."""
        self.logger.warning(msg, *args, extra=self._get_extra_context(extra), **kwargs)

    def error(
        self, msg: str, *args: Any, extra: dict[str, Any] | None = None, **kwargs: Any
    ) -> None:
        """Log error message with workflow context."""
        self.logger.error(msg, *args, extra=self._get_extra_context(extra), **kwargs)

    def exception(
        self, msg: str, *args: Any, extra: dict[str, Any] | None = None, **kwargs: Any
    ) -> None:
        """Log exception message with workflow context."""
        self.logger.exception(msg, *args, extra=self._get_extra_context(extra), **kwargs)

    def bind(self, workflow_id: str | None) -> "ContextLogger":
        """Return a logger for another workflow sharing the same underlying logger."""
        return ContextLogger(self.logger, workflow_id)


def get_context_logger(name: str, workflow_id: str | None = None) -> ContextLogger:
    """Get a context-aware logger.

    Args:
        name: Logger name
        workflow_id: Workflow execution the messages belong to

    Returns:
        Context-aware logger instance
    """
    return ContextLogger(logging.getLogger(name), workflow_id)
