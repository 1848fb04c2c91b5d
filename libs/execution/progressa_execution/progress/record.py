"""Progress record data model.

A :class:`ProgressRecord` is the externally visible snapshot of a workflow
run: its current status, the append-only log trail, and the terminal output
once the run finished. The same shape travels through the engine's custom
status channel while the run is live and through its result once it ends.
"""

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

OutputT = TypeVar("OutputT")
StatusT = TypeVar("StatusT")


class LogEntry(BaseModel):
    """One line of a workflow's progress trail.

    ``timestamp`` comes from the engine's logical clock, so replays of the
    same step reproduce it exactly.
    """

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    message: str

    def __str__(self) -> str:
        return f"{self.timestamp.isoformat()} {self.message}"


class ProgressRecord(BaseModel, Generic[OutputT, StatusT]):
    """Snapshot of a workflow's progress.

    Parametrize with the workflow's output and status types, e.g.
    ``ProgressRecord[CertificateFile, CertificateStatus]``. A default
    constructed record (no status, no output, no logs) stands for an
    execution that has not published anything yet.
    """

    output: OutputT | None = None
    status: StatusT | None = None
    logs: list[LogEntry] = Field(default_factory=list)

    def log_lines(self) -> list[str]:
        """Render the log trail as ``"<timestamp> <message>"`` lines."""
        return [str(entry) for entry in self.logs]
