"""Unit tests for structured logging."""

from __future__ import annotations

import io
import json
import logging

from agent_workflow_orchestrator.logging import JsonFormatter, configure_logging


def test_json_formatter_includes_extra_fields() -> None:
    record = logging.LogRecord(
        name="agent_workflow_orchestrator.workflow.runner",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Task completed",
        args=(),
        exc_info=None,
    )
    record.run_id = "abc"
    record.task_id = "A"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["message"] == "Task completed"
    assert payload["level"] == "INFO"
    assert payload["extra"] == {"run_id": "abc", "task_id": "A"}


def test_configure_logging_replaces_handlers() -> None:
    stream = io.StringIO()
    configure_logging("debug", stream=stream)
    configure_logging("info", stream=stream)

    logging.getLogger("agent_workflow_orchestrator.test").info(
        "hello", extra={"workflow_id": "w"}
    )

    lines = [json.loads(line) for line in stream.getvalue().splitlines()]
    assert len(lines) == 1
    assert lines[0]["extra"]["workflow_id"] == "w"
    assert logging.getLogger().level == logging.INFO
