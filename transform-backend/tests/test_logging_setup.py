import json
import logging

from ostransform.logging_setup import JsonFormatter, PlainFormatter


def _record(**extra):
    rec = logging.LogRecord("request", logging.INFO, __file__, 1, "request.end", None, None)
    for k, v in extra.items():
        setattr(rec, k, v)
    return rec


def test_json_formatter_includes_extras():
    out = json.loads(JsonFormatter().format(_record(request_id="abc12345", path="/health", status=200, duration_ms=1.5)))
    assert out["msg"] == "request.end"
    assert out["level"] == "INFO"
    assert out["logger"] == "request"
    assert out["request_id"] == "abc12345"
    assert out["status"] == 200
    assert out["duration_ms"] == 1.5
    assert "method" not in out


def test_plain_formatter():
    line = PlainFormatter().format(_record(request_id="abc12345", path="/health", status=404))
    assert "I request: request.end" in line
    assert "rid=abc12345" in line
    assert "path=/health" in line
    assert "status=404" in line


def test_request_logging(client, caplog):
    with caplog.at_level(logging.INFO, logger="request"):
        client.get("/health")
    ends = [r for r in caplog.records if r.getMessage() == "request.end"]
    assert ends
    assert ends[-1].status == 200
    assert ends[-1].path == "/health"
