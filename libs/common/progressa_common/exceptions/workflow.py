"""Workflow-related exception classes."""


class ProgressaError(Exception):
    """Base exception for Progressa errors.

    Carries the id of the workflow execution the error relates to, when known.
    """

    def __init__(self, message: str, workflow_id: str | None = None):
        """Initialize the error.

        Args:
            message: Error message
            workflow_id: ID of the workflow execution involved
        """
        super().__init__(message)
        self.message = message
        self.workflow_id = workflow_id

    def __str__(self) -> str:
        """Return string representation with context."""
        if self.workflow_id:
            return f"{self.message} (workflow_id={self.workflow_id})"
        return self.message


class WorkflowNotFound(ProgressaError):  # noqa: N818
    """Raised when the engine knows no execution with the given id."""

    def __init__(self, workflow_id: str):
        super().__init__(f"Workflow '{workflow_id}' not found", workflow_id=workflow_id)


class WorkflowExecutionFailed(ProgressaError):  # noqa: N818
    """Raised when the engine reports that an execution failed.

    A failed run is never represented as a progress record: its output may be
    absent, so callers must handle this outcome separately from a successful
    run without output.
    """

    def __init__(self, workflow_id: str | None, status: str, reason: str | None = None):
        """Initialize the error.

        Args:
            workflow_id: ID of the failed workflow execution
            status: Runtime status reported by the engine (e.g. 'failed')
            reason: Failure description from the engine, if any
        """
        message = f"Workflow execution ended with status '{status}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, workflow_id=workflow_id)
        self.status = status
        self.reason = reason


class ProgressFinalizedError(ProgressaError):
    """Raised when a progress tracker is mutated after its output was set."""

    def __init__(self, operation: str):
        super().__init__(f"Cannot {operation}: progress output has already been set")
        self.operation = operation


class WorkflowEngineUnavailable(ProgressaError):  # noqa: N818
    """Raised when the workflow engine cannot be reached."""
