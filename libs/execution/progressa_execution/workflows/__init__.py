"""Workflow definitions for Progressa.

Temporal workflows and the engine-neutral orchestration functions they run.
"""

from .certificate_flow import generate_certificate
from .context import TemporalWorkflowContext, WorkflowContext
from .generate_certificate_workflow import GenerateCertificateWorkflow

__all__ = [
    "GenerateCertificateWorkflow",
    "TemporalWorkflowContext",
    "WorkflowContext",
    "generate_certificate",
]
