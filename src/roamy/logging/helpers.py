from __future__ import annotations

"""Logger naming, base configuration and edit tracing for roamy.

Records may carry a `context` dict (passed as ``extra={"context": ...}``).
Both formatters render it: the JSON formatter as a nested "ctx" object,
the plain formatter as trailing ``key=value`` pairs.

Edit tracing is off unless ROAMY_TRACE_IO=1.
"""

import json
import logging
import os
from datetime import datetime, timezone
from typing import Any, Mapping, Optional, TextIO

from roamy.core.interfaces.logging import LoggerLikeProtocol

BASE_LOGGER = "roamy"


def _record_context(record: logging.LogRecord) -> Optional[Mapping[str, Any]]:
    ctx = getattr(record, "context", None)
    if isinstance(ctx, Mapping) and ctx:
        return ctx
    return None


class JsonLogFormatter(logging.Formatter):
    """One JSON object per record.

    Fields: ts (UTC, milliseconds), level, module (logger name), msg,
    version (roamy.__version__, resolved once) and ctx when present.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            from roamy import __version__ as _v  # type: ignore
            return str(_v)
        except ImportError:
            return os.getenv("ROAMY_VERSION", "unknown")

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload = {
            "ts": ts.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }
        ctx = _record_context(record)
        if ctx is not None:
            payload["ctx"] = dict(ctx)
        return json.dumps(payload, ensure_ascii=False, default=str)


class PlainLogFormatter(logging.Formatter):
    """``LEVEL: message key=value ...``"""

    def __init__(self) -> None:
        super().__init__("%(levelname)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        ctx = _record_context(record)
        if ctx is None:
            return line
        pairs = " ".join(f"{k}={v!r}" for k, v in ctx.items())
        return f"{line} {pairs}"


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Install a single stream handler on the 'roamy' logger.

    Later calls only adjust the level; the first call's format sticks.
    """
    base = logging.getLogger(BASE_LOGGER)
    base.setLevel(level)
    if base.handlers:
        return base

    import sys as _sys

    base.propagate = False
    handler = logging.StreamHandler(stream or _sys.stderr)
    handler.setFormatter(JsonLogFormatter() if json_logs else PlainLogFormatter())
    base.addHandler(handler)
    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return `name` as a child of the 'roamy' logger."""
    if not name or name == BASE_LOGGER:
        return logging.getLogger(BASE_LOGGER)
    if name.startswith(BASE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER}.{name}")


def is_trace_io_enabled() -> bool:
    return os.getenv("ROAMY_TRACE_IO") == "1"


def trace_io(logger: LoggerLikeProtocol, message: str, **ctx: Any) -> None:
    """Log `message` at debug level with `ctx` as the record context.

    No-op unless ROAMY_TRACE_IO=1.
    """
    if not is_trace_io_enabled():
        return
    if ctx:
        logger.debug("%s", message, extra={"context": ctx})
    else:
        logger.debug("%s", message)
