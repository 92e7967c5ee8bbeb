"""
Logging setup for the builder service.

Production writes one JSON object per line; other environments get a
compact console format. Both include the request ID bound by
RequestIdMiddleware.

Usage:
    from laradash.logging_config import get_logger
    logger = get_logger(__name__)
    logger.warning("Failed to render block", extra={"block_type": block_type})
"""

import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Optional

# Set by RequestIdMiddleware for the duration of a request
request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

# LogRecord attributes that never go into the JSON payload
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime", "request_id", "taskName"}

# Chatty third-party loggers capped at WARNING
_QUIET_LOGGERS = ("uvicorn.access", "httpx", "httpcore")

_base_record_factory = logging.getLogRecordFactory()


def get_request_id() -> Optional[str]:
    """Request ID bound to the current context, or None outside a request."""
    return request_id_var.get()


def _record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
    record = _base_record_factory(*args, **kwargs)
    record.request_id = get_request_id() or "-"  # type: ignore[attr-defined]
    return record


class JsonFormatter(logging.Formatter):
    """One JSON object per line, extra= fields included."""

    def __init__(self, service: Optional[str] = None):
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        log_obj: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if self.service:
            log_obj["service"] = self.service

        req_id = getattr(record, "request_id", None)
        if req_id and req_id != "-":
            log_obj["request_id"] = req_id

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key in _RECORD_ATTRS or value is None:
                continue
            try:
                json.dumps(value)
                log_obj[key] = value
            except (TypeError, ValueError):
                log_obj[key] = str(value)

        return json.dumps(log_obj)


def _console_formatter() -> logging.Formatter:
    return logging.Formatter(
        "%(asctime)s %(levelname)-5s [%(name)s] req=%(request_id)s %(message)s",
        datefmt="%H:%M:%S",
    )


def configure_logging(
    *,
    log_level: str = "INFO",
    environment: str = "development",
    debug: bool = False,
    service: Optional[str] = None,
) -> None:
    """
    Configure application-wide logging. Safe to call more than once.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        environment: "production" switches to JSON output
        debug: If True, use DEBUG level regardless of log_level
        service: Name stamped on every JSON log line
    """
    level = logging.DEBUG if debug else getattr(logging, log_level.upper(), logging.INFO)

    logging.setLogRecordFactory(_record_factory)

    root = logging.getLogger()
    root.setLevel(level)
    for h in root.handlers[:]:
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    if environment == "production":
        handler.setFormatter(JsonFormatter(service))
    else:
        handler.setFormatter(_console_formatter())
    root.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Module logger.

    Records carry request_id when logged inside a request. Use extra={}
    for additional structured fields:
        logger.info("Module enabled", extra={"module_name": name})
    """
    return logging.getLogger(name)
