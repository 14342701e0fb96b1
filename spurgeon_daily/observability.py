from __future__ import annotations

import json
import logging
import time
import uuid
from datetime import UTC, datetime
from typing import TextIO

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

LOGGER_NAME = "spurgeon_daily"

# attributes every LogRecord carries; anything else on a record came in via extra=
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "taskName"}


class RequestIdFilter(logging.Filter):
    """Ensure every record has a request_id attribute for JSON formatting."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = "-"
        return True


class JsonFormatter(logging.Formatter):
    """
    One JSON object per line:

      {"ts": "...", "level": "...", "msg": "...", "request_id": "...", ...extra fields}

    Fields passed through `extra=` are merged in after the fixed keys; values
    json can't encode are rendered with str().
    """

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "msg": record.getMessage(),
            "request_id": getattr(record, "request_id", "-"),
        }
        for key, value in vars(record).items():
            if key not in _RECORD_ATTRS and key not in payload:
                payload[key] = value
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, ensure_ascii=False)


def setup_json_logging(
    logger_name: str = LOGGER_NAME,
    level: int = logging.INFO,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Attach a JsonFormatter handler to the app logger.

    Idempotent: safe to call multiple times; the first call's stream wins.
    """
    logger = logging.getLogger(logger_name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter())
    handler.addFilter(RequestIdFilter())

    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


class RequestIdMiddleware(BaseHTTPMiddleware):
    """
    Propagate/assign X-Request-ID and emit one access record per request.

    The access record carries method, path, status, duration_ms and client
    as structured fields.
    """

    def __init__(self, app, logger: logging.Logger):
        super().__init__(app)
        self.log = logger

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        start = time.time()
        fields = {
            "request_id": rid,
            "method": request.method,
            "path": request.url.path,
            "client": request.client.host if request.client else "-",
        }
        try:
            response = await call_next(request)
        except Exception:
            fields["duration_ms"] = int((time.time() - start) * 1000)
            self.log.exception("unhandled_exception", extra=fields)
            raise

        response.headers["X-Request-ID"] = rid
        fields["status"] = response.status_code
        fields["duration_ms"] = int((time.time() - start) * 1000)
        self.log.info("access", extra=fields)
        return response
