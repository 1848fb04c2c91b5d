"""Logging configuration with workflow context support."""

import json
import logging
import logging.config
from typing import Any

_STANDARD_RECORD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "getMessage",
        "exc_info",
        "exc_text",
        "stack_info",
        "workflow_id",
    }
)


class WorkflowContextFormatter(logging.Formatter):
    """Formatter that renders records as JSON including workflow context."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with workflow context."""
        log_entry: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if hasattr(record, "workflow_id"):
            log_entry["workflow_id"] = record.workflow_id

        # Add any extra fields
        for key, value in record.__dict__.items():
            if key not in _STANDARD_RECORD_ATTRS and not key.startswith("_"):
                log_entry[key] = value

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


def setup_logging(
    level: str = "INFO",
    enable_structured_logging: bool = True,
) -> None:
    """Set up logging configuration.

    Workflow ids reach records through the ``extra`` a :class:`ContextLogger`
    adds, not through handler state.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_structured_logging: Whether to use structured JSON logging
    """
    level = level.upper()
    config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"},
            "structured": {
                "()": WorkflowContextFormatter,
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "structured" if enable_structured_logging else "standard",
                "stream": "ext://sys.stdout",
            }
        },
        "loggers": {
            "progressa": {"level": level, "handlers": ["console"], "propagate": False},
            # Temporal's core logs are noisy at DEBUG.
            "temporalio": {"level": max(logging.getLevelName(level), logging.INFO)},
        },
        "root": {"level": level, "handlers": ["console"]},
    }

    logging.config.dictConfig(config)

