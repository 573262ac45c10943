from __future__ import annotations

import io
import json

import pytest

from domain.ports import LoggerPort
from infra.runtime import StructuredLogger


def test_emits_one_json_line_per_event() -> None:
    stream = io.StringIO()
    logger = StructuredLogger(stream)

    logger.info("fetching candidate", email="ada@example.com")
    logger.error("job list fetch failed", error_type="ApiStatusError")

    lines = stream.getvalue().splitlines()
    assert len(lines) == 2
    first, second = (json.loads(line) for line in lines)
    assert first["level"] == "info"
    assert first["message"] == "fetching candidate"
    assert first["fields"] == {"email": "ada@example.com"}
    assert "ts" in first
    assert second["level"] == "error"


def test_component_is_included_when_set() -> None:
    stream = io.StringIO()
    StructuredLogger(stream, component="job-board").warning("application rejected", status=409)

    payload = json.loads(stream.getvalue())
    assert payload["component"] == "job-board"
    assert payload["fields"] == {"status": 409}


def test_defaults_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    StructuredLogger().info("hello")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert json.loads(captured.err)["message"] == "hello"


def test_satisfies_logger_port() -> None:
    assert isinstance(StructuredLogger(io.StringIO()), LoggerPort)
