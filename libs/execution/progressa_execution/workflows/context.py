"""Workflow execution context: the engine capabilities workflow code consumes.

Orchestration functions are written against :class:`WorkflowContext` rather
than the Temporal workflow API directly. The logical clock is a method of the
context, so workflow code has no reason to read the wall clock.
"""

from collections import defaultdict, deque
from datetime import datetime, timedelta
from typing import Any, Protocol, TypeVar

from temporalio import workflow
from temporalio.common import RawValue, RetryPolicy

from ..progress.context import ProgressContext
from .constants import ACTIVITY_TIMEOUT, DEFAULT_RETRY_ATTEMPTS

T = TypeVar("T")


class WorkflowContext(ProgressContext, Protocol):
    """Capabilities of a durable execution engine, as seen by workflow code."""

    async def call_activity(self, name: str, arg: Any, result_type: type[T]) -> T:
        """Schedule an activity and wait for its result."""
        ...

    async def wait_for_external_event(self, name: str, result_type: type[T] | None = None) -> T:
        """Suspend until the named external event arrives and return its payload."""
        ...


class TemporalWorkflowContext:
    """WorkflowContext backed by the Temporal workflow API.

    Must only be used from inside a running Temporal workflow. External
    events arrive as signals that the owning workflow class hands to
    :meth:`raise_event`; the custom status is served by the owning workflow
    class through a query handler reading :attr:`custom_status`.
    """

    def __init__(
        self,
        activity_timeout: timedelta = ACTIVITY_TIMEOUT,
        retry_attempts: int = DEFAULT_RETRY_ATTEMPTS,
    ):
        self.activity_timeout = activity_timeout
        self.retry_attempts = retry_attempts
        self.custom_status: Any | None = None
        self._pending_events: defaultdict[str, deque[RawValue | None]] = defaultdict(deque)

    def now(self) -> datetime:
        return workflow.now()

    def set_custom_status(self, status: Any | None) -> None:
        self.custom_status = status
        workflow.logger.debug(
            "Custom status cleared" if status is None else "Custom status published"
        )

    async def call_activity(self, name: str, arg: Any, result_type: type[T]) -> T:
        return await workflow.execute_activity(
            name,
            arg,
            start_to_close_timeout=self.activity_timeout,
            retry_policy=RetryPolicy(maximum_attempts=self.retry_attempts),
            result_type=result_type,
        )

    def raise_event(self, name: str, payload: RawValue | None) -> None:
        """Queue an external event delivered by a signal."""
        self._pending_events[name].append(payload)
        workflow.logger.info(f"External event received: {name}")

    async def wait_for_external_event(self, name: str, result_type: type[T] | None = None) -> T:
        pending = self._pending_events[name]
        await workflow.wait_condition(lambda: len(pending) > 0)

        raw = pending.popleft()
        if raw is None:
            return None  # type: ignore[return-value]
        return workflow.payload_converter().from_payload(raw.payload, result_type)
