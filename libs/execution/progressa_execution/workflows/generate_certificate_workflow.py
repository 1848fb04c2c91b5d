"""Temporal workflow issuing a certificate with tracked progress.

Runs the engine-neutral certificate flow and serves its latest progress
record through the custom status query.
"""

from typing import Sequence

from temporalio import workflow
from temporalio.common import RawValue

with workflow.unsafe.imports_passed_through():
    from progressa_common.workflow import CUSTOM_STATUS_QUERY

    from ..models import CertificateProgress, CertificateRequest
    from .certificate_flow import generate_certificate
    from .constants import WorkflowNames
    from .context import TemporalWorkflowContext


# Errors raised by workflow code fail the run instead of retrying the task
@workflow.defn(name=WorkflowNames.GENERATE_CERTIFICATE, failure_exception_types=[Exception])
class GenerateCertificateWorkflow:
    """Issues a certificate once the user redeems the code sent to them."""

    def __init__(self):
        self.context = TemporalWorkflowContext()

    @workflow.run
    async def run(self, request: CertificateRequest) -> CertificateProgress:
        """Main workflow execution method."""
        workflow.logger.info(f"Generating certificate for user {request.user_id}")
        return await generate_certificate(self.context, request)

    # Signals are external events addressed by name
    @workflow.signal(dynamic=True)
    def external_event(self, name: str, args: Sequence[RawValue]) -> None:
        self.context.raise_event(name, args[0] if args else None)

    @workflow.query(name=CUSTOM_STATUS_QUERY)
    def custom_status(self) -> CertificateProgress | None:
        """Latest published progress, or None once the run has finalized."""
        return self.context.custom_status
