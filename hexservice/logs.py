"""Structured JSON logging in the Cloud Logging format."""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone

TRACE_KEY = "logging.googleapis.com/trace"
SPAN_KEY = "logging.googleapis.com/spanId"
SOURCE_KEY = "logging.googleapis.com/sourceLocation"

_LEVELS = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "off": logging.CRITICAL + 10,
}


class StackdriverFormatter(logging.Formatter):
    """Formats records as one JSON object per line."""

    def __init__(self, project_id: str | None = None) -> None:
        super().__init__()
        self.project_id = project_id

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "time": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "target": record.name,
            "severity": record.levelname
            if record.levelno in (logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL)
            else "DEFAULT",
            "message": record.getMessage(),
            SOURCE_KEY: {"file": record.pathname, "line": str(record.lineno), "function": record.funcName},
        }
        trace_id = getattr(record, "trace_id", None)
        if self.project_id and trace_id:
            entry[TRACE_KEY] = f"projects/{self.project_id}/traces/{trace_id}"
            span_id = getattr(record, "span_id", None)
            if span_id:
                entry[SPAN_KEY] = str(span_id)
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class _ServiceHandler(logging.StreamHandler):
    """Marker type so a later call replaces the handler rather than adding one."""


def _install(formatter: StackdriverFormatter) -> logging.Logger:
    root_level = logging.ERROR
    targets: dict[str, int] = {}
    for directive in os.environ.get("DEBUG_LEVEL", "").split(","):
        target, sep, level_name = directive.strip().rpartition("=")
        level = _LEVELS.get(level_name.strip().lower())
        if level is None:
            continue
        if sep:
            targets[target.strip().replace("::", ".")] = level
        else:
            root_level = level

    root = logging.getLogger()
    for old in [h for h in root.handlers if isinstance(h, _ServiceHandler)]:
        root.removeHandler(old)
    handler = _ServiceHandler(sys.stdout)
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(root_level)
    for target, level in targets.items():
        logging.getLogger(target).setLevel(level)
    return root


def init_logger(project_id: str) -> logging.Logger:
    """Configure JSON logging that links records to traces of ``project_id``."""
    return _install(StackdriverFormatter(project_id))


def init_logger_without_trace() -> logging.Logger:
    """Configure JSON logging without trace links."""
    return _install(StackdriverFormatter())