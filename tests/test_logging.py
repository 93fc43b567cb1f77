# tests/test_logging.py

from __future__ import annotations

import json
import logging
from pathlib import Path

from fastapi.testclient import TestClient

from task_tracker.observability.logging import JsonFormatter, request_id_var, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.makeLogRecord({"name": "tracker.tasks", "levelname": "INFO", "msg": "task.create"})
    record.__dict__.update(extra)
    return record


def test_json_formatter_merges_extras() -> None:
    line = JsonFormatter().format(_record(category="tasks", event="task.create", task_id="t1"))
    payload = json.loads(line)

    assert payload["msg"] == "task.create"
    assert payload["logger"] == "tracker.tasks"
    assert payload["level"] == "INFO"
    assert payload["ts"].endswith("Z")
    assert payload["category"] == "tasks"
    assert payload["task_id"] == "t1"
    assert "args" not in payload
    assert "lineno" not in payload


def test_json_formatter_stamps_current_request_id() -> None:
    token = request_id_var.set("req-1")
    try:
        payload = json.loads(JsonFormatter().format(_record()))
    finally:
        request_id_var.reset(token)

    assert payload["request_id"] == "req-1"


def test_setup_logging_writes_jsonl(tmp_path: Path) -> None:
    log_path = setup_logging(level="debug", log_dir=str(tmp_path))
    assert log_path == tmp_path / "tasks.jsonl"

    logging.getLogger("tracker.system").info("hello", extra={"category": "system"})
    for handler in logging.getLogger().handlers:
        handler.flush()

    lines = log_path.read_text(encoding="utf-8").splitlines()
    assert json.loads(lines[-1])["msg"] == "hello"


def test_setup_logging_console_only_when_log_dir_empty() -> None:
    assert setup_logging(log_dir="") is None
    assert len(logging.getLogger().handlers) == 1


def test_requests_and_mutations_are_logged(client: TestClient, log_dir: Path) -> None:
    client.post(
        "/tasks",
        json={"title": "A", "description": "B", "priority": "low"},
        headers={"x-request-id": "req-42"},
    )
    for handler in logging.getLogger().handlers:
        handler.flush()

    records = [json.loads(line) for line in (log_dir / "tasks.jsonl").read_text(encoding="utf-8").splitlines()]
    events = {(r.get("event"), r.get("request_id")) for r in records}

    assert ("system.start", None) in events
    assert ("request.start", "req-42") in events
    assert ("task.create", "req-42") in events
    assert ("request.end", "req-42") in events
