"""Configuration management for Progressa.

Settings are split per concern (application, workflow engine, certificate
issuing) and assembled by :func:`get_settings`.
"""

from .app import AppSettings, get_app_settings
from .base import BaseAppSettings
from .certificate import CertificateSettings
from .settings import Settings, get_settings
from .workflow import WorkflowSettings

__all__ = [
    # App
    "AppSettings",
    # Base
    "BaseAppSettings",
    # Certificate
    "CertificateSettings",
    # Main settings
    "Settings",
    # Workflow
    "WorkflowSettings",
    "get_app_settings",
    "get_settings",
]
