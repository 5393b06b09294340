from __future__ import annotations

import io
import json
from pathlib import Path

from msfs_layout.util import (
    MetricsEmitter,
    get_request_id,
    log_event,
    set_request_id,
    setup_json_logger,
)


def test_structured_log_contains_required_fields() -> None:
    stream = io.StringIO()
    logger = setup_json_logger("tests.observability", stream=stream)
    set_request_id("req-smoke-001")

    log_event(logger, "layout.scan.complete", file_count=3, total_size=10)

    payload = json.loads(stream.getvalue().strip())
    for key in ("event", "level", "logger", "message", "request_id", "ts"):
        assert key in payload
    assert payload["event"] == "layout.scan.complete"
    assert payload["request_id"] == "req-smoke-001"
    assert payload["file_count"] == 3


def test_metrics_emitter_buckets_latency(tmp_path: Path) -> None:
    set_request_id("req-smoke-002")
    out = tmp_path / "nested" / "metrics.jsonl"
    emitter = MetricsEmitter(out)

    emitter.emit(metric="msfs_layout.command", status="success", latency_ms=12.2, outcome="success")
    emitter.emit(
        metric="msfs_layout.command",
        status="error",
        latency_ms=4000.0,
        outcome="error",
        error="OSError",
    )

    first, second = [json.loads(x) for x in out.read_text(encoding="utf-8").splitlines()]
    assert first["latency_bucket"] == "le_50ms"
    assert first["success"] is True
    assert second["latency_bucket"] == "gt_1000ms"
    assert second["error"] == "OSError"
    assert second["request_id"] == "req-smoke-002"


def test_logger_defaults_to_stderr(capsys) -> None:
    logger = setup_json_logger("tests.observability.default_stream")
    set_request_id("req-smoke-003")

    log_event(logger, "package.write.complete", layout_path="layout.json")

    captured = capsys.readouterr()
    assert captured.out == ""
    payload = json.loads(captured.err.strip())
    assert payload["event"] == "package.write.complete"
    assert payload["request_id"] == "req-smoke-003"


def test_request_id_is_generated_when_unset() -> None:
    set_request_id(None)

    first = get_request_id()

    assert len(first) == 32
    assert get_request_id() == first
