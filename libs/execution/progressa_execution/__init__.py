"""Progressa Execution Library

Temporal workflow execution with replay-safe progress tracking.

Core Components:
- Progress: record, tracker and reader for workflow progress
- Models: data models of the certificate workflow
- Activities: out-of-process certificate operations
- Workflows: orchestration functions and their Temporal workflow classes

The library keeps a clean separation between:
- Workflows (orchestration logic, deterministic)
- Activities (side effects, retried by the engine)
- Progress tracking (engine-neutral, driven through a context protocol)
"""

from .interfaces import ActivityDependencies
from .models import CertificateFile, CertificateProgress, CertificateRequest, CertificateStatus
from .progress import LogEntry, ProgressRecord, ProgressTracker, read_logs, read_progress


def create_activities_for_worker(dependencies: ActivityDependencies):
    """Create activities instances for the Temporal worker.

    Args:
        dependencies: Basic dependencies needed by the activities

    Returns:
        List of activity functions ready for worker registration
    """
    from .activities.certificate_activities import make_certificate_activities

    return make_certificate_activities(dependencies)


__all__ = [
    "ActivityDependencies",
    "CertificateFile",
    "CertificateProgress",
    "CertificateRequest",
    "CertificateStatus",
    "LogEntry",
    "ProgressRecord",
    "ProgressTracker",
    "create_activities_for_worker",
    "read_logs",
    "read_progress",
]
