"""Replay-safe progress tracking for workflow code."""

from enum import Enum
from typing import Any, Generic

from progressa_common.exceptions import ProgressFinalizedError

from .context import ProgressContext
from .record import LogEntry, OutputT, ProgressRecord, StatusT


def _describe(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


class ProgressTracker(Generic[OutputT, StatusT]):
    """Accumulates the visible progress of one workflow execution.

    The tracker is owned by the orchestrating workflow function and is
    rebuilt on every replay; it persists nothing itself. Every mutation
    republishes a full snapshot of the record to the engine's custom status
    channel, and :meth:`set_output` clears that channel and returns the final
    record for the workflow to return as its result.

    Everything passed to :meth:`log`, :meth:`set_status` and
    :meth:`set_output` must be derived from replay-deterministic inputs
    (activity results, external events, ``context.now()``).

    Example::

        progress = ProgressTracker(
            context, CertificateStatus.STARTED, record_type=CertificateProgress
        )
        progress.set_status(CertificateStatus.SENDING_CODE)
        progress.log("sending code")
        return progress.set_output(certificate)
    """

    def __init__(
        self,
        context: ProgressContext,
        initial_status: StatusT,
        log_prefix: str | None = None,
        record_type: type[ProgressRecord[OutputT, StatusT]] = ProgressRecord,
    ):
        """Create a tracker and publish its initial status.

        Args:
            context: Execution context providing the logical clock and the
                custom status channel
            initial_status: Status the run starts in
            log_prefix: Text prepended (with a space) to every log message
            record_type: Concrete record class snapshots are built as
        """
        self._context = context
        self._log_prefix = log_prefix
        self._record_type = record_type
        self._record = record_type(status=initial_status)
        self._finalized = False

        self.log(f"Initial status set to '{_describe(initial_status)}'")

    @property
    def status(self) -> StatusT | None:
        return self._record.status

    @property
    def logs(self) -> list[LogEntry]:
        return list(self._record.logs)

    @property
    def is_finalized(self) -> bool:
        return self._finalized

    def snapshot(self) -> ProgressRecord[OutputT, StatusT]:
        """Return an independent copy of the current record."""
        return self._record.model_copy(deep=True)

    def log(self, message: str) -> None:
        """Append a log entry and publish the whole record as custom status."""
        self._ensure_live("log")

        if self._log_prefix:
            message = f"{self._log_prefix} {message}"

        self._record.logs.append(LogEntry(timestamp=self._context.now(), message=message))
        self._context.set_custom_status(self.snapshot())

    def set_status(self, new_status: StatusT) -> None:
        """Change the status and log the transition."""
        self._ensure_live("set status")

        old_status = self._record.status
        self._record.status = new_status
        self.log(f"Status changed from '{_describe(old_status)}' to '{_describe(new_status)}'")

    def set_output(self, output: OutputT | None) -> ProgressRecord[OutputT, StatusT]:
        """Finalize the record with the run's output.

        Clears the custom status channel; the returned record must be
        returned from the workflow as its result. The tracker rejects any
        further mutation.
        """
        self._ensure_live("set output")

        self._context.set_custom_status(None)
        self._record.output = output
        self._finalized = True
        return self.snapshot()

    def _ensure_live(self, operation: str) -> None:
        if self._finalized:
            raise ProgressFinalizedError(operation)
