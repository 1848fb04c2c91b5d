"""Certificate issuing configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CertificateSettings(BaseSettings):
    """Settings used by the certificate activities."""

    REDEEM_CODE_DIGITS: int = Field(default=4, ge=1, le=12)
    ISSUER_NAME: str = "Progressa Academy"

    model_config = SettingsConfigDict(env_prefix="CERTIFICATE__", env_file=".env", extra="ignore")
