"""Pytest configuration and fixtures for Progressa API tests."""

import pytest
from fastapi.testclient import TestClient
from progressa_api.api.deps.services import get_workflow_executor
from progressa_api.main import create_app
from progressa_common.testing import InMemoryWorkflowExecutor


@pytest.fixture
def workflow_executor():
    """Fixture providing an in-memory workflow executor."""
    return InMemoryWorkflowExecutor()


@pytest.fixture
def client(workflow_executor):
    """Test client with the workflow executor dependency overridden."""
    app = create_app()
    app.dependency_overrides[get_workflow_executor] = lambda: workflow_executor
    with TestClient(app) as test_client:
        yield test_client
