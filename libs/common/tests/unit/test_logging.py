"""Tests for structured logging with workflow context."""

import json
import logging
import sys

from progressa_common.logging import (
    ContextLogger,
    WorkflowContextFormatter,
    get_context_logger,
    setup_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="progressa.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Redeem code %s",
        args=("sent",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestWorkflowContextFormatter:
    """Test the JSON formatter."""

    def test_renders_json_with_context(self):
        """Test that message, workflow id and extras land in the JSON."""
        formatted = WorkflowContextFormatter().format(
            _record(workflow_id="certificate-1", user_id="user-42")
        )

        data = json.loads(formatted)
        assert data["message"] == "Redeem code sent"
        assert data["level"] == "INFO"
        assert data["logger"] == "progressa.test"
        assert data["workflow_id"] == "certificate-1"
        assert data["user_id"] == "user-42"
        assert "args" not in data

    def test_includes_exception(self):
        try:
            raise ValueError("bad code")
        except ValueError:
            record = logging.LogRecord(
                "progressa.test", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
            )

        data = json.loads(WorkflowContextFormatter().format(record))
        assert "ValueError: bad code" in data["exception"]


class TestContextLogger:
    def test_adds_workflow_id_to_extra(self, caplog):
        logger = get_context_logger("progressa_tests.context", workflow_id="certificate-1")

        with caplog.at_level(logging.INFO, logger="progressa_tests.context"):
            logger.info("Redeem code sent", extra={"user_id": "user-42"})

        record = caplog.records[-1]
        assert record.workflow_id == "certificate-1"
        assert record.user_id == "user-42"

    def test_bind_shares_underlying_logger(self):
        logger = get_context_logger("progressa_tests.context")

        bound = logger.bind("certificate-9")

        assert isinstance(bound, ContextLogger)
        assert bound.logger is logger.logger
        assert bound.workflow_id == "certificate-9"
        assert logger.workflow_id is None


class TestSetupLogging:
    def test_structured_console_renders_bound_workflow_id(self, capsys):
        setup_logging(level="debug", enable_structured_logging=True)

        handlers = logging.getLogger().handlers
        assert any(isinstance(h.formatter, WorkflowContextFormatter) for h in handlers)
        assert logging.getLogger("temporalio").level == logging.INFO

        get_context_logger("progressa_tests.setup").bind("certificate-1").info("Redeem code sent")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        assert json.loads(line)["workflow_id"] == "certificate-1"

    def test_plain_format(self):
        setup_logging(level="info", enable_structured_logging=False)

        handlers = logging.getLogger().handlers
        assert handlers
        assert not any(isinstance(h.formatter, WorkflowContextFormatter) for h in handlers)
