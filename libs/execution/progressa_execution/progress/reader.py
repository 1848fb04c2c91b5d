"""Reading a workflow's progress from outside the workflow."""

from typing import Any, TypeVar

from progressa_common.exceptions import WorkflowExecutionFailed
from progressa_common.workflow import WorkflowState

from .record import ProgressRecord

RecordT = TypeVar("RecordT", bound=ProgressRecord)


def _coerce(value: Any, record_type: type[RecordT]) -> RecordT:
    if isinstance(value, record_type):
        return value
    if isinstance(value, ProgressRecord):
        return record_type.model_validate(value.model_dump())
    return record_type.model_validate(value)


def read_progress(state: WorkflowState, record_type: type[RecordT] = ProgressRecord) -> RecordT:
    """Reconcile an execution's custom status and output into one record.

    Completed runs are read from their output, live ones from the latest
    published custom status, and runs that have published nothing yet yield
    an empty record. Cancelled or terminated runs keep their last published
    status as the visible record.

    Raises:
        WorkflowExecutionFailed: If the engine reports the run failed; a
            failed run never surfaces as a record.
    """
    if state.is_failed:
        raise WorkflowExecutionFailed(state.workflow_id, state.status.value, state.error)

    if state.is_completed:
        if state.output is None:
            return record_type()
        return _coerce(state.output, record_type)

    if state.custom_status is not None:
        return _coerce(state.custom_status, record_type)

    return record_type()


def read_logs(state: WorkflowState, record_type: type[RecordT] = ProgressRecord) -> list[str]:
    """Return only the log trail of an execution as printable lines."""
    return read_progress(state, record_type).log_lines()
