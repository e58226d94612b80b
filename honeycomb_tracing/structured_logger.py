import json
import os
from datetime import datetime, timezone
from typing import Optional, Dict, Any
from opentelemetry import trace

LEVELS = {
    "DEBUG": 10,
    "INFO": 20,
    "WARN": 30,
    "ERROR": 40,
}

LEVEL_ALIASES = {
    "WARNING": "WARN",
}


def _parse_level(value: Optional[str]) -> int:
    """Map a LOG_LEVEL value to its numeric threshold, defaulting to INFO."""
    name = (value or "info").strip().upper()
    name = LEVEL_ALIASES.get(name, name)
    return LEVELS.get(name, LEVELS["INFO"])


class StructuredLogger:
    def __init__(self, service_name: str, level: Optional[str] = None, fmt: Optional[str] = None):
        self.service_name = service_name
        self.threshold = _parse_level(level if level is not None else os.getenv("LOG_LEVEL"))
        self.fmt = (fmt or os.getenv("LOG_FORMAT", "text")).lower()

    def _extract_trace_info(self) -> tuple[Optional[str], Optional[str]]:
        """Extract trace and span IDs from the current OpenTelemetry context."""
        span = trace.get_current_span()
        if span and span.get_span_context().is_valid:
            span_context = span.get_span_context()
            trace_id = format(span_context.trace_id, '032x')
            span_id = format(span_context.span_id, '016x')
            return trace_id, span_id
        return None, None

    def _record_on_span(self, message: str, fields: Optional[Dict[str, Any]]):
        """Attach the log line to the active span as an event."""
        span = trace.get_current_span()
        if not span.is_recording():
            return
        attributes = {}
        for key, value in (fields or {}).items():
            if isinstance(value, (str, bool, int, float)):
                attributes[key] = value
            else:
                attributes[key] = str(value)
        span.add_event(message, attributes)

    def _format_text(self, entry: Dict[str, Any]) -> str:
        line = f"{entry['timestamp']} {entry['level']:>5} {entry['service_name']}: {entry['message']}"
        for key, value in entry.get("fields", {}).items():
            line += f" {key}={value}"
        if "trace_id" in entry:
            line += f" trace_id={entry['trace_id']} span_id={entry['span_id']}"
        return line

    def _log(self, level: str, message: str, fields: Optional[Dict[str, Any]] = None):
        """Write a structured log entry to stdout."""
        if LEVELS[level] < self.threshold:
            return

        trace_id, span_id = self._extract_trace_info()

        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": level,
            "service_name": self.service_name,
            "message": message
        }

        if trace_id:
            log_entry["trace_id"] = trace_id
        if span_id:
            log_entry["span_id"] = span_id
        if fields:
            log_entry["fields"] = fields

        if self.fmt == "json":
            print(json.dumps(log_entry, default=str), flush=True)
        else:
            print(self._format_text(log_entry), flush=True)

        self._record_on_span(message, fields)

    def debug(self, message: str, **kwargs):
        """Log a debug message."""
        self._log("DEBUG", message, kwargs if kwargs else None)

    def info(self, message: str, **kwargs):
        """Log an info message."""
        self._log("INFO", message, kwargs if kwargs else None)

    def warning(self, message: str, **kwargs):
        """Log a warning message."""
        self._log("WARN", message, kwargs if kwargs else None)

    def error(self, message: str, **kwargs):
        """Log an error message."""
        self._log("ERROR", message, kwargs if kwargs else None)
