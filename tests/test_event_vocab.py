"""
Contract test for event vocabulary enforcement.

The logging surface must reject unknown event types to keep aggregation stable.
"""

import json

import pytest

from hostinfo.logging import emit_event


def test_emit_event_rejects_invalid_event_type() -> None:
    """
    Unknown event types must raise ValueError.
    """
    with pytest.raises(ValueError, match="invalid event_type"):
        emit_event("not_a_real_event", agent_version="0.1.0")


def test_emit_event_writes_to_stderr_only(capsys) -> None:
    """
    Events are diagnostics; stdout stays empty.
    """
    emit_event("disk_not_found", agent_version="0.1.0")

    captured = capsys.readouterr()
    assert captured.out == ""

    payload = json.loads(captured.err.strip())
    assert payload["event_type"] == "disk_not_found"
    assert payload["agent_version"] == "0.1.0"
    assert "utc_now" in payload


def test_emit_event_truncates_long_messages(capsys) -> None:
    """
    message fields are capped at 200 chars plus a truncation marker
    """
    emit_event("run_failed", agent_version="0.1.0", message="x" * 250)

    payload = json.loads(capsys.readouterr().err.strip())
    assert payload["message"] == "x" * 200 + "...[truncated 50 chars]"
