"""Constants and configuration for certificate workflows."""

from datetime import timedelta
from typing import Final

# Timeout configurations
ACTIVITY_TIMEOUT: Final[timedelta] = timedelta(minutes=5)

# Retry policies
DEFAULT_RETRY_ATTEMPTS: Final[int] = 3


# Activity names
class Activities:
    """Activity names to avoid hardcoded strings."""

    SEND_REDEEM_CODE_TO_USER: Final[str] = "send_redeem_code_to_user"
    GENERATE_CERTIFICATE_BASE64: Final[str] = "generate_certificate_base64"


# External event (signal) names
class ExternalEvents:
    """Names of events the certificate workflow waits for."""

    REDEEM_CODE_ATTEMPT: Final[str] = "RedeemCodeAttempt"


# Registered workflow type names
class WorkflowNames:
    GENERATE_CERTIFICATE: Final[str] = "GenerateCertificateWorkflow"
