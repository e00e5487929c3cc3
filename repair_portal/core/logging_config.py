# repair_portal/core/logging_config.py
"""Console logging for the API: request timing plus one JSON line per audit event."""
from __future__ import annotations

import json
import logging
import time
from datetime import datetime, timezone
from typing import Any, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

LOGGER_NAME = "repair_portal"
AUDIT_LOGGER_NAME = f"{LOGGER_NAME}.audit"

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_SLOW_REQUEST_SECONDS = 1.0

logger = logging.getLogger(f"{LOGGER_NAME}.http")
audit_logger = logging.getLogger(AUDIT_LOGGER_NAME)


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a ``Z`` suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(level.upper())
    if not any(getattr(h, "_repair_portal", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        handler._repair_portal = True
        root.addHandler(handler)


def audit(event: str, **fields: Any) -> dict[str, Any]:
    """Emit a structured audit line and return the record that was logged."""
    record = {"event": event, **fields}
    record.setdefault("timestamp", utc_timestamp())
    audit_logger.info(json.dumps(record))
    return record


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request with its status code and duration."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(f"Request error: {request.method} {request.url.path} - {exc}")
            raise

        duration = time.time() - start_time
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"({round(duration * 1000, 2)} ms)"
        )
        if duration > _SLOW_REQUEST_SECONDS:
            logger.warning(
                f"Slow request: {request.method} {request.url.path} "
                f"took {duration:.2f}s (status: {response.status_code})"
            )
        return response
