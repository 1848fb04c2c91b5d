"""Certificate workflow endpoints.

Start a certificate request, redeem the code the user received, and poll the
request's progress until the certificate can be downloaded.
"""

import base64
import logging
from urllib.parse import quote
from uuid import uuid4

from fastapi import APIRouter, HTTPException, Response, status
from progressa_common.config import get_settings
from progressa_common.workflow import WorkflowConfig
from progressa_execution.models import CertificateProgress, CertificateRequest, CertificateStatus
from progressa_execution.progress import read_progress
from progressa_execution.workflows.constants import ExternalEvents, WorkflowNames
from pydantic import BaseModel

from ..deps import WorkflowExecutorDep

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/certificates", tags=["certificates"])


class StartCertificateResponse(BaseModel):
    workflow_instance_id: str


class RedeemCodeRequest(BaseModel):
    code: str


class CertificateLogsResponse(BaseModel):
    logs: list[str]


async def _read_certificate_progress(
    executor: WorkflowExecutorDep, workflow_id: str
) -> CertificateProgress:
    state = await executor.get_workflow_state(workflow_id, result_type=CertificateProgress)
    return read_progress(state, CertificateProgress)


@router.post("/start", response_model=StartCertificateResponse)
async def start_certificate(
    request: CertificateRequest, executor: WorkflowExecutorDep
) -> StartCertificateResponse:
    """Start a certificate workflow for a user."""
    settings = get_settings()
    workflow_id = f"certificate-{uuid4()}"

    instance_id = await executor.start_workflow(
        WorkflowNames.GENERATE_CERTIFICATE,
        workflow_id,
        request,
        WorkflowConfig(task_queue=settings.workflow.TEMPORAL_TASK_QUEUE),
    )
    logger.info(
        "Certificate workflow started",
        extra={"workflow_id": instance_id, "user_id": request.user_id},
    )
    return StartCertificateResponse(workflow_instance_id=instance_id)


@router.post("/{workflow_id}/redeem", status_code=status.HTTP_202_ACCEPTED)
async def redeem_code(
    workflow_id: str, body: RedeemCodeRequest, executor: WorkflowExecutorDep
) -> dict[str, str]:
    """Send the code the user received to a waiting certificate workflow."""
    await executor.signal_workflow(workflow_id, ExternalEvents.REDEEM_CODE_ATTEMPT, body.code)
    return {"status": "accepted"}


@router.get("/{workflow_id}", response_model=None)
async def get_certificate_progress(
    workflow_id: str, executor: WorkflowExecutorDep, just_logs: bool = False
) -> CertificateProgress | CertificateLogsResponse:
    """Get the progress of a certificate request.

    Returns the full progress record, or only its log trail when
    ``just_logs`` is set. A failed workflow yields a 500 error response.
    """
    progress = await _read_certificate_progress(executor, workflow_id)

    if just_logs:
        return CertificateLogsResponse(logs=progress.log_lines())
    return progress


@router.get("/{workflow_id}/certificate")
async def download_certificate(workflow_id: str, executor: WorkflowExecutorDep) -> Response:
    """Download the generated certificate PDF."""
    progress = await _read_certificate_progress(executor, workflow_id)

    if progress.status != CertificateStatus.GENERATED or progress.output is None:
        current = progress.status.value if progress.status else "NotStarted"
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Certificate is not available yet, current status: {current}",
        )

    certificate = progress.output
    return Response(
        content=base64.b64decode(certificate.file_data),
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename*=UTF-8''{quote(certificate.file_name)}"
        },
    )
