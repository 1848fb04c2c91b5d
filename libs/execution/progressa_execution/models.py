"""Domain models for the certificate issuing workflow."""

from enum import Enum

from pydantic import BaseModel

from .progress.record import ProgressRecord


class CertificateStatus(str, Enum):
    """The business status of a certificate request."""

    STARTED = "Started"
    SENDING_CODE = "SendingCode"
    WAITING_FOR_REDEEM = "WaitingForRedeem"
    CODE_INVALID = "CodeInvalid"
    REDEEMED = "Redeemed"
    GENERATED = "Generated"


class CertificateRequest(BaseModel):
    """Input of the certificate workflow."""

    user_friendly_name: str
    user_id: str


class CertificateFile(BaseModel):
    """Output of the certificate workflow: a base64 encoded PDF."""

    file_name: str
    file_data: str


CertificateProgress = ProgressRecord[CertificateFile, CertificateStatus]
