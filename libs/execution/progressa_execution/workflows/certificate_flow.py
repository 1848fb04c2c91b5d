"""Certificate issuing orchestration.

The user receives a redeem code, proves they own it by sending it back, and
is then issued a PDF certificate. Every step is reported through a
:class:`ProgressTracker` so clients can poll the request's status and log.
"""

from ..models import CertificateFile, CertificateProgress, CertificateRequest, CertificateStatus
from ..progress.tracker import ProgressTracker
from .constants import Activities, ExternalEvents
from .context import WorkflowContext


async def generate_certificate(
    context: WorkflowContext, request: CertificateRequest
) -> CertificateProgress:
    """Run the certificate flow and return its final progress record."""
    progress: ProgressTracker[CertificateFile, CertificateStatus] = ProgressTracker(
        context, CertificateStatus.STARTED, record_type=CertificateProgress
    )

    progress.set_status(CertificateStatus.SENDING_CODE)
    progress.log(f"sending unique redeem code to '{request.user_friendly_name}'")

    code = await context.call_activity(Activities.SEND_REDEEM_CODE_TO_USER, request, str)
    progress.set_status(CertificateStatus.WAITING_FOR_REDEEM)
    progress.log(f"Waiting for user to supply code {code}...")

    code_attempt = await context.wait_for_external_event(ExternalEvents.REDEEM_CODE_ATTEMPT, str)
    if code_attempt != code:
        progress.set_status(CertificateStatus.CODE_INVALID)
        progress.log(f"User supplied incorrect code {code_attempt}")
        return progress.set_output(None)

    progress.set_status(CertificateStatus.REDEEMED)
    progress.log("Code redeemed successfully")

    start_time = context.now()
    certificate_base64 = await context.call_activity(
        Activities.GENERATE_CERTIFICATE_BASE64, request, str
    )
    progress.set_status(CertificateStatus.GENERATED)
    elapsed = (context.now() - start_time).total_seconds()
    progress.log(f"Certificate creation took {elapsed} seconds")

    return progress.set_output(
        CertificateFile(
            file_name=f"{request.user_friendly_name} - Certificate.pdf",
            file_data=certificate_base64,
        )
    )
