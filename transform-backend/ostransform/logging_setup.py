"""Logging for the transform service.

Every request gets a short request id and a start/end line with its path,
method, status and duration. Declined conversions are logged by the transform
layer with a ``kind`` field naming the failure. Lines are JSON unless
ENABLE_JSON_LOGS=0, in which case a one-line plain format is used.
"""
from __future__ import annotations

import json
import logging
import os
import sys
import uuid
from time import time

_EXTRA_FIELDS = ("request_id", "path", "method", "status", "duration_ms", "kind")


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        base = {
            "ts": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        for attr in _EXTRA_FIELDS:
            if hasattr(record, attr):
                base[attr] = getattr(record, attr)
        if record.exc_info:
            base["exc_type"] = record.exc_info[0].__name__ if record.exc_info[0] else None
        return json.dumps(base, ensure_ascii=False)


class PlainFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        parts = [
            self.formatTime(record, datefmt="%H:%M:%S"),
            record.levelname[0],
            record.name + ":",
            record.getMessage(),
        ]
        if hasattr(record, "request_id"):
            parts.append(f"rid={getattr(record, 'request_id')}")
        if hasattr(record, "path"):
            parts.append(f"path={getattr(record, 'path')}")
        if hasattr(record, "status"):
            parts.append(f"status={getattr(record, 'status')}")
        if hasattr(record, "duration_ms"):
            parts.append(f"{getattr(record, 'duration_ms')}ms")
        return " ".join(parts)


def configure_logging() -> None:
    if getattr(configure_logging, "_configured", False):  # already set up
        return
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    json_enabled = os.getenv("ENABLE_JSON_LOGS", "1") == "1"
    root = logging.getLogger()
    root.setLevel(level)
    for h in list(root.handlers):  # one stdout handler for app and uvicorn lines
        root.removeHandler(h)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter() if json_enabled else PlainFormatter())
    root.addHandler(handler)
    configure_logging._configured = True  # type: ignore[attr-defined]


async def logging_middleware(request, call_next):
    rid = uuid.uuid4().hex[:8]
    start = time()
    request.state.request_id = rid
    logger = logging.getLogger("request")
    logger.info("request.start", extra={"request_id": rid, "path": request.url.path, "method": request.method})
    response = None
    try:
        response = await call_next(request)
        return response
    finally:
        dur = (time() - start) * 1000.0
        logger.info(
            "request.end",
            extra={
                "request_id": rid,
                "path": request.url.path,
                "method": request.method,
                "status": getattr(response, "status_code", 500),
                "duration_ms": round(dur, 2),
            },
        )
