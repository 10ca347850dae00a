"""Logging initialiser for the command-line tool.

The library itself only creates module loggers and never configures handlers.
Call ``init()`` once at process start to see its DEBUG trace of each exchange.

Log format (human-readable, UTC timestamps)::

    2026-03-02T10:00:00.123Z [DEBUG   ] rpclib.client.client: Calling Calc.Add (id=1)
"""

from __future__ import annotations

import logging
import sys
import time


class _UtcFormatter(logging.Formatter):
    """Emit ISO-8601 UTC timestamps on every log record."""

    converter = time.gmtime

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        ct = self.converter(record.created)
        t = time.strftime("%Y-%m-%dT%H:%M:%S", ct)
        return f"{t}.{int(record.msecs):03d}Z"


_FMT = "%(asctime)s [%(levelname)-8s] %(name)s: %(message)s"


def init(level: str = "WARNING", *, log_levels: dict[str, str] | None = None) -> None:
    """Send log records to stderr.

    Parameters
    ----------
    level:
        Root logger level string (``"WARNING"``, ``"DEBUG"``, ...).
        Unknown names fall back to ``WARNING``.
    log_levels:
        Optional per-logger level overrides applied after the root level, e.g.
        ``{"httpx": "WARNING"}``.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_UtcFormatter(_FMT))

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    root.handlers.clear()
    root.addHandler(handler)

    for logger_name, level_str in (log_levels or {}).items():
        override = getattr(logging, level_str.upper(), None)
        if isinstance(override, int):
            logging.getLogger(logger_name).setLevel(override)
