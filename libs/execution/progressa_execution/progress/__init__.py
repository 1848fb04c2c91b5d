"""Progress tracking for durable workflows.

- ProgressRecord: serializable ``{output, status, logs}`` snapshot
- ProgressTracker: in-workflow accumulator publishing snapshots as custom status
- read_progress: client-side reconciliation of custom status and output
"""

from .context import ProgressContext
from .reader import read_logs, read_progress
from .record import LogEntry, ProgressRecord
from .tracker import ProgressTracker

__all__ = [
    "LogEntry",
    "ProgressContext",
    "ProgressRecord",
    "ProgressTracker",
    "read_logs",
    "read_progress",
]
