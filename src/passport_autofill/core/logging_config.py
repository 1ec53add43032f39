"""
Logging setup for the Passport AutoFill service.

Parser modules log through ``logging.getLogger(__name__)`` and tag pipeline
records with ``extra={"stage": ...}``. ``setup_logging`` installs one stdout
handler on the root logger that renders those records as text or JSON lines,
stamped with the service name and, inside a traced request, the OpenTelemetry
trace and span ids.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

from opentelemetry import trace

HANDLER_NAME = "passport-autofill"
LOG_OFF = "OFF"

TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(service)s %(name)s [%(stage)s] %(message)s"

# Attributes copied from the record into JSON output when present
CONTEXT_FIELDS = ("stage", "layout", "trace_id", "span_id")


class RecordContextFilter(logging.Filter):
    """Stamp service name, pipeline stage and trace ids onto each record."""

    def __init__(self, service_name: str) -> None:
        super().__init__()
        self.service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:
        record.service = self.service_name
        if not hasattr(record, "stage"):
            record.stage = "-"

        span_context = trace.get_current_span().get_span_context()
        if span_context.is_valid:
            record.trace_id = trace.format_trace_id(span_context.trace_id)
            record.span_id = trace.format_span_id(span_context.span_id)
        else:
            record.trace_id = None
            record.span_id = None
        return True


class JSONLineFormatter(logging.Formatter):
    """One JSON object per record, with the context fields that are set."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "service": getattr(record, "service", None),
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in CONTEXT_FIELDS:
            value = getattr(record, name, None)
            if value not in (None, "-"):
                entry[name] = value
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def _resolve_level(level_name: str) -> int:
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(
    service_name: str = "passport-autofill",
    log_level: str = "INFO",
    log_format: str = "text",
) -> None:
    """
    Install the service log handler on the root logger.

    Calling it again replaces the handler it installed before; handlers added
    by anything else are left alone. ``log_level="OFF"`` silences the root
    logger without installing a handler.
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        if handler.get_name() == HANDLER_NAME:
            root_logger.removeHandler(handler)

    level_name = (log_level or "INFO").upper()
    if level_name == LOG_OFF:
        root_logger.setLevel(logging.CRITICAL + 1)
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.addFilter(RecordContextFilter(service_name))
    if (log_format or "").lower() == "json":
        handler.setFormatter(JSONLineFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    root_logger.addHandler(handler)
    root_logger.setLevel(_resolve_level(level_name))
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logging.getLogger(__name__).info("Logging configured at %s for %s", level_name, service_name)


__all__ = ["JSONLineFormatter", "RecordContextFilter", "setup_logging"]
