import logging
import re
import sys
from datetime import datetime, timezone
from typing import IO, Any, Optional

# Extras rendered after the event, in this order; anything else is ignored.
LOG_EXTRA_FIELDS = (
    "method",
    "route",
    "status",
    "duration_ms",
    "attempt",
    "service",
    "compose",
    "url",
    "messages",
    "reason",
)

_TOKEN_PARAM = re.compile(r"(token=)[^&\s\"]+")


def redact(value: str) -> str:
    """Mask ``token=`` query parameters (log stream URLs carry one)."""
    return _TOKEN_PARAM.sub(r"\1***", value)


class LogfmtFormatter(logging.Formatter):
    """
    logfmt lines: ``level=... logger=... event=... key=value ...``.

    Missing extras are skipped. Strings are redacted and quoted when they
    contain spaces, ``=`` or quotes.
    """

    def __init__(self, *, with_time: bool = False):
        super().__init__()
        self.with_time = with_time

    def format(self, record: logging.LogRecord) -> str:
        pairs: list[tuple[str, Any]] = []
        if self.with_time:
            ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
            pairs.append(("ts", ts.isoformat(timespec="milliseconds")))
        pairs.append(("level", record.levelname.lower()))
        pairs.append(("logger", record.name))

        event = record.getMessage()
        if event:
            pairs.append(("event", event))

        pairs.extend(
            (key, getattr(record, key))
            for key in LOG_EXTRA_FIELDS
            if getattr(record, key, None) is not None
        )

        if record.exc_info and record.exc_info[0] is not None:
            pairs.append(("exc_type", record.exc_info[0].__name__))

        return " ".join(f"{key}={self.render(val)}" for key, val in pairs)

    @staticmethod
    def render(val: Any) -> str:
        if isinstance(val, bool):
            return "true" if val else "false"
        if isinstance(val, (int, float)):
            return str(val)
        s = redact(str(val))
        if not s:
            return '""'
        if any(ch in s for ch in ' ="'):
            s = '"' + s.replace('"', '\\"') + '"'
        return s


def setup_logging(
    level: str = "INFO",
    *,
    logger_name: str = "easypanel_sdk",
    stream: Optional[IO[str]] = None,
    with_time: bool = False,
) -> logging.Handler:
    """Attach a logfmt handler to the SDK logger (root logger if name is empty)."""
    log = logging.getLogger(logger_name or None)
    # replace what a previous call installed, leave foreign handlers alone
    for h in list(log.handlers):
        if isinstance(h.formatter, LogfmtFormatter):
            log.removeHandler(h)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(LogfmtFormatter(with_time=with_time))
    log.addHandler(handler)
    log.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler


__all__ = ["setup_logging", "LogfmtFormatter", "LOG_EXTRA_FIELDS", "redact"]
