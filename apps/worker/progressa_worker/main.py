#!/usr/bin/env python3
"""Progressa Temporal Worker Application.

Hosts the certificate workflow and its activities. The workflow serves its
progress through a query handler, so the API can read it while a run is live.
"""

import asyncio
import logging
import signal

import dotenv
from progressa_common.config import Settings, get_settings
from progressa_common.logging import setup_logging
from progressa_execution import create_activities_for_worker
from progressa_execution.interfaces import ActivityDependencies
from progressa_execution.workflows.generate_certificate_workflow import (
    GenerateCertificateWorkflow,
)
from temporalio.client import Client
from temporalio.contrib.pydantic import pydantic_data_converter
from temporalio.worker import Worker
from temporalio.worker.workflow_sandbox import SandboxedWorkflowRunner, SandboxRestrictions

# Load environment variables
dotenv.load_dotenv()

logger = logging.getLogger(__name__)

# Progress models are plain pydantic and deterministic to share with the sandbox
PASSTHROUGH_MODULES = ("progressa_common", "progressa_execution", "pydantic")


def build_worker(client: Client, settings: Settings) -> Worker:
    """Create a worker for the certificate workflow and its activities."""
    activities = create_activities_for_worker(ActivityDependencies(settings=settings))

    return Worker(
        client,
        task_queue=settings.workflow.TEMPORAL_TASK_QUEUE,
        workflows=[GenerateCertificateWorkflow],
        activities=activities,
        workflow_runner=SandboxedWorkflowRunner(
            restrictions=SandboxRestrictions.default.with_passthrough_modules(
                *PASSTHROUGH_MODULES
            )
        ),
        max_concurrent_workflow_tasks=settings.workflow.TEMPORAL_MAX_CONCURRENT_WORKFLOWS,
        max_concurrent_activities=settings.workflow.TEMPORAL_MAX_CONCURRENT_ACTIVITIES,
    )


class ProgressaWorker:
    """Runs a Temporal worker until asked to stop."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.shutdown_requested = asyncio.Event()

    def request_shutdown(self, signum: int | None = None) -> None:
        if signum is not None:
            logger.info(f"Received signal {signum}, stopping worker")
        self.shutdown_requested.set()

    async def connect(self) -> Client:
        workflow_settings = self.settings.workflow
        client = await Client.connect(
            workflow_settings.TEMPORAL_SERVER_URL,
            namespace=workflow_settings.TEMPORAL_NAMESPACE,
            data_converter=pydantic_data_converter,
        )
        logger.info(
            f"Connected to Temporal at {workflow_settings.TEMPORAL_SERVER_URL} "
            f"(namespace {workflow_settings.TEMPORAL_NAMESPACE})"
        )
        return client

    async def start(self) -> None:
        """Connect, poll the task queue, and drain in-flight tasks on shutdown."""
        client = await self.connect()
        worker = build_worker(client, self.settings)

        # Leaving the context waits for running activities to finish
        async with worker:
            logger.info(f"Worker polling task queue {self.settings.workflow.TEMPORAL_TASK_QUEUE}")
            await self.shutdown_requested.wait()
            logger.info("Draining worker")

        logger.info("Worker shutdown complete")


async def main(settings: Settings | None = None) -> None:
    """Main entry point for the worker application."""
    settings = settings or get_settings()
    setup_logging(
        level=settings.app.LOG_LEVEL,
        enable_structured_logging=settings.app.STRUCTURED_LOGGING,
    )

    worker = ProgressaWorker(settings)
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGTERM, signal.SIGINT):
        loop.add_signal_handler(sig, worker.request_shutdown, sig)

    try:
        await worker.start()
    except Exception:
        logger.exception("Worker failed")
        raise


if __name__ == "__main__":
    asyncio.run(main())
