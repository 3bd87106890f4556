"""
Contract test for event vocabulary enforcement.

The logging surface must reject unknown event types to keep aggregation stable.
"""

import io
import json

import pytest

from hostkit.logging import build_event, emit_event


def test_emit_event_rejects_invalid_event_type() -> None:
    """
    Unknown event types must raise ValueError.
    """
    with pytest.raises(ValueError, match="invalid event_type"):
        emit_event("not_a_real_event", tool_version="0.1.0")


def test_emit_event_writes_json_line_to_stderr(capsys) -> None:
    """
    Events go to stderr with stable required fields; stdout stays clean
    """
    emit_event("secret_reset", tool_version="0.1.0", path="state/secret")

    captured = capsys.readouterr()
    assert captured.out == ""

    payload = json.loads(captured.err.strip())
    assert payload["event_type"] == "secret_reset"
    assert payload["tool_version"] == "0.1.0"
    assert payload["path"] == "state/secret"
    assert "utc_now" in payload


def test_emit_event_truncates_long_messages(capsys) -> None:
    emit_event("disk_query_failed", tool_version="0.1.0", message="x" * 500)

    payload = json.loads(capsys.readouterr().err.strip())
    assert payload["message"].startswith("x" * 200)
    assert payload["message"].endswith("...[truncated 300 chars]")


def test_build_event_payload() -> None:
    payload = build_event("secret_dir_failed", tool_version="0.1.0", path="state")

    assert payload["event_type"] == "secret_dir_failed"
    assert payload["tool_version"] == "0.1.0"
    assert payload["path"] == "state"
    assert "utc_now" in payload


def test_emit_event_to_explicit_stream() -> None:
    stream = io.StringIO()

    emit_event("random_generated", tool_version="0.1.0", stream=stream, count=3)

    payload = json.loads(stream.getvalue())
    assert payload["event_type"] == "random_generated"
    assert payload["count"] == 3
