"""Certificate activities for Temporal workflows.

These run outside the workflow sandbox and may be retried by the engine, so
they are free to use randomness and the wall clock.
"""

import base64
import secrets
from datetime import UTC, datetime

from progressa_common.logging import get_context_logger
from temporalio import activity

from ..interfaces import ActivityDependencies
from ..models import CertificateRequest
from ..workflows.constants import Activities
from .certificate_pdf import render_certificate_pdf

logger = get_context_logger(__name__)


def make_certificate_activities(dependencies: ActivityDependencies):
    """Create certificate activity functions with injected dependencies.

    Args:
        dependencies: Basic dependencies needed by the activities

    Returns:
        List of activity functions ready for worker registration
    """
    certificate_settings = dependencies.settings.certificate

    @activity.defn(name=Activities.SEND_REDEEM_CODE_TO_USER)
    async def send_redeem_code_to_user(request: CertificateRequest) -> str:
        """Generate a redeem code and deliver it to the user.

        Delivery is simulated; a real deployment would send the code over
        email or SMS here.
        """
        digits = certificate_settings.REDEEM_CODE_DIGITS
        code = str(secrets.randbelow(10**digits)).zfill(digits)

        activity_logger = logger.bind(activity.info().workflow_id)
        activity_logger.info(
            "Redeem code sent",
            extra={"user_id": request.user_id, "user_friendly_name": request.user_friendly_name},
        )
        return code

    @activity.defn(name=Activities.GENERATE_CERTIFICATE_BASE64)
    async def generate_certificate_base64(request: CertificateRequest) -> str:
        """Render the user's certificate and return it base64 encoded."""
        pdf = render_certificate_pdf(
            recipient=request.user_friendly_name,
            issuer=certificate_settings.ISSUER_NAME,
            issued_on=datetime.now(UTC).date(),
        )

        activity_logger = logger.bind(activity.info().workflow_id)
        activity_logger.info(
            "Certificate generated", extra={"user_id": request.user_id, "size_bytes": len(pdf)}
        )
        return base64.b64encode(pdf).decode("ascii")

    return [send_redeem_code_to_user, generate_certificate_base64]
