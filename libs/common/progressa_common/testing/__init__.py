"""Testing utilities for Progressa.

This module provides shared test implementations to avoid duplication
across test files.
"""

from .mocks import InMemoryWorkflowExecutor, SentSignal, StartedWorkflow

__all__ = ["InMemoryWorkflowExecutor", "SentSignal", "StartedWorkflow"]
