"""End-to-end test of the certificate workflow on a Temporal test server.

Downloads and runs Temporal's time-skipping test server, so it only runs
when PROGRESSA_TEMPORAL_E2E=1.
"""

import asyncio
import os
import uuid

import pytest
from progressa_common.exceptions import WorkflowExecutionFailed
from progressa_common.workflow import CUSTOM_STATUS_QUERY, WorkflowStatus
from progressa_common.workflow.temporal_executor import TemporalWorkflowExecutor
from progressa_execution.models import CertificateProgress, CertificateRequest, CertificateStatus
from progressa_execution.progress import read_progress
from progressa_execution.workflows.constants import Activities, ExternalEvents, WorkflowNames
from progressa_execution.workflows.generate_certificate_workflow import (
    GenerateCertificateWorkflow,
)
from temporalio import activity
from temporalio.client import WorkflowFailureError
from temporalio.contrib.pydantic import pydantic_data_converter
from temporalio.testing import WorkflowEnvironment
from temporalio.worker import Worker
from temporalio.worker.workflow_sandbox import SandboxedWorkflowRunner, SandboxRestrictions

pytestmark = [
    pytest.mark.asyncio,
    pytest.mark.skipif(
        os.environ.get("PROGRESSA_TEMPORAL_E2E") != "1",
        reason="set PROGRESSA_TEMPORAL_E2E=1 to run against a Temporal test server",
    ),
]

REDEEM_CODE = "2718"


@activity.defn(name=Activities.SEND_REDEEM_CODE_TO_USER)
async def send_fixed_code(request: CertificateRequest) -> str:
    return REDEEM_CODE


@activity.defn(name=Activities.GENERATE_CERTIFICATE_BASE64)
async def generate_fake_certificate(request: CertificateRequest) -> str:
    return "JVBERi0xLjQK"


@activity.defn(name=Activities.GENERATE_CERTIFICATE_BASE64)
async def generate_broken_certificate(request: CertificateRequest) -> str:
    raise RuntimeError("renderer unavailable")


async def _wait_for_status(handle, status: CertificateStatus) -> CertificateProgress:
    for _ in range(100):
        record = await handle.query(CUSTOM_STATUS_QUERY, result_type=CertificateProgress)
        if record is not None and record.status == status:
            return record
        await asyncio.sleep(0.1)
    raise AssertionError(f"workflow never reached {status.value}")


def _worker(env: WorkflowEnvironment, task_queue: str, certificate_activity) -> Worker:
    return Worker(
        env.client,
        task_queue=task_queue,
        workflows=[GenerateCertificateWorkflow],
        activities=[send_fixed_code, certificate_activity],
        workflow_runner=SandboxedWorkflowRunner(
            restrictions=SandboxRestrictions.default.with_passthrough_modules(
                "progressa_common", "progressa_execution", "pydantic"
            )
        ),
    )


class TestCertificateWorkflowE2E:
    async def test_progress_is_visible_while_running_and_after_completion(self):
        async with await WorkflowEnvironment.start_time_skipping(
            data_converter=pydantic_data_converter
        ) as env:
            task_queue = f"e2e-test-{uuid.uuid4()}"
            workflow_id = f"certificate-{uuid.uuid4()}"
            executor = TemporalWorkflowExecutor(client=env.client)
            request = CertificateRequest(user_friendly_name="Ada Lovelace", user_id="user-42")

            async with _worker(env, task_queue, generate_fake_certificate):
                handle = await env.client.start_workflow(
                    GenerateCertificateWorkflow.run, request, id=workflow_id, task_queue=task_queue
                )

                waiting = await _wait_for_status(handle, CertificateStatus.WAITING_FOR_REDEEM)
                assert waiting.logs[-1].message == (
                    f"Waiting for user to supply code {REDEEM_CODE}..."
                )

                live = read_progress(
                    await executor.get_workflow_state(workflow_id, CertificateProgress),
                    CertificateProgress,
                )
                assert live.status == CertificateStatus.WAITING_FOR_REDEEM
                assert live.output is None

                await executor.signal_workflow(
                    workflow_id, ExternalEvents.REDEEM_CODE_ATTEMPT, REDEEM_CODE
                )
                result = await handle.result()

            assert result.status == CertificateStatus.GENERATED
            assert result.output.file_name == "Ada Lovelace - Certificate.pdf"

            final = read_progress(
                await executor.get_workflow_state(workflow_id, CertificateProgress),
                CertificateProgress,
            )
            assert final == result
            assert len(final.logs) == 9

    async def test_failed_activity_surfaces_as_failure(self):
        async with await WorkflowEnvironment.start_time_skipping(
            data_converter=pydantic_data_converter
        ) as env:
            task_queue = f"e2e-test-{uuid.uuid4()}"
            workflow_id = f"certificate-{uuid.uuid4()}"
            executor = TemporalWorkflowExecutor(client=env.client)
            request = CertificateRequest(user_friendly_name="Ada Lovelace", user_id="user-42")

            async with _worker(env, task_queue, generate_broken_certificate):
                handle = await env.client.start_workflow(
                    GenerateCertificateWorkflow.run, request, id=workflow_id, task_queue=task_queue
                )
                await _wait_for_status(handle, CertificateStatus.WAITING_FOR_REDEEM)
                await handle.signal(ExternalEvents.REDEEM_CODE_ATTEMPT, REDEEM_CODE)

                with pytest.raises(Exception):  # noqa: B017
                    await handle.result()

            state = await executor.get_workflow_state(workflow_id, CertificateProgress)
            with pytest.raises(WorkflowExecutionFailed):
                read_progress(state, CertificateProgress)

    async def test_malformed_input_fails_the_run(self):
        async with await WorkflowEnvironment.start_time_skipping(
            data_converter=pydantic_data_converter
        ) as env:
            task_queue = f"e2e-test-{uuid.uuid4()}"
            workflow_id = f"certificate-{uuid.uuid4()}"
            executor = TemporalWorkflowExecutor(client=env.client)

            async with _worker(env, task_queue, generate_fake_certificate):
                handle = await env.client.start_workflow(
                    WorkflowNames.GENERATE_CERTIFICATE,
                    {"user_friendly_name": "Ada Lovelace"},
                    id=workflow_id,
                    task_queue=task_queue,
                )

                with pytest.raises(WorkflowFailureError):
                    await handle.result()

            state = await executor.get_workflow_state(workflow_id, CertificateProgress)
            assert state.status == WorkflowStatus.FAILED
            with pytest.raises(WorkflowExecutionFailed):
                read_progress(state, CertificateProgress)
