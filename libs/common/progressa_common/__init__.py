"""Progressa Common Library."""

from . import (
    config,
    exceptions,
    logging,
    testing,
    workflow,
)

__version__ = "0.1.0"

__all__ = [
    "config",
    "exceptions",
    "logging",
    "testing",
    "workflow",
]
