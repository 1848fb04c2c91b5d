"""Pytest configuration and fixtures for Progressa execution tests."""

from collections import defaultdict, deque
from datetime import UTC, datetime, timedelta
from typing import Any

import pytest
from progressa_common.config import CertificateSettings, Settings
from progressa_execution.interfaces import ActivityDependencies
from progressa_execution.models import CertificateRequest


class FakeWorkflowContext:
    """In-process workflow context with a manually driven logical clock.

    Every published custom status is kept in ``status_history`` so tests can
    check what a poller would have seen after each step.
    """

    def __init__(self, start: datetime | None = None, tick: timedelta = timedelta(seconds=1)):
        self.current_time = start or datetime(2024, 1, 1, 12, 0, tzinfo=UTC)
        self.tick = tick
        self.custom_status: Any | None = None
        self.status_history: list[Any | None] = []
        self.activity_calls: list[tuple[str, Any]] = []
        self.activity_results: dict[str, deque[Any]] = defaultdict(deque)
        self.events: dict[str, deque[Any]] = defaultdict(deque)

    def now(self) -> datetime:
        return self.current_time

    def advance(self, delta: timedelta | None = None) -> None:
        self.current_time += delta or self.tick

    def set_custom_status(self, status: Any | None) -> None:
        self.custom_status = status
        self.status_history.append(status)

    async def call_activity(self, name: str, arg: Any, result_type: type) -> Any:
        self.activity_calls.append((name, arg))
        # Activities take engine time to run
        self.advance()
        return self.activity_results[name].popleft()

    async def wait_for_external_event(self, name: str, result_type: type | None = None) -> Any:
        self.advance()
        return self.events[name].popleft()


@pytest.fixture
def fake_context():
    """Fixture providing a fresh fake workflow context."""
    return FakeWorkflowContext()


@pytest.fixture
def certificate_request():
    """Fixture providing a sample certificate request."""
    return CertificateRequest(user_friendly_name="Ada Lovelace", user_id="user-42")


@pytest.fixture
def activity_dependencies():
    """Fixture providing activity dependencies with six digit codes."""
    settings = Settings(certificate=CertificateSettings(REDEEM_CODE_DIGITS=6))
    return ActivityDependencies(settings=settings)


@pytest.fixture
def make_context():
    """Fixture providing a factory for independent fake workflow contexts."""
    return FakeWorkflowContext
