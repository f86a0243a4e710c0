"""
Logging for the storefront.

The root logger is configured on import; modules only call
``get_logger(__name__)``. Anything typed by a visitor (search text,
slugs, session cookies) goes through one of the sanitize helpers first.
"""

import logging
import os
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
# Vercel timestamps every line itself
LOG_FORMAT_VERCEL = "%(levelname)s - %(name)s - %(message)s"

# Client libraries that log every Supabase round trip at INFO
QUIET_LOGGERS = ("httpx", "httpcore", "hpack")

# Visible prefix of a session or row id in log lines
ID_LOG_LENGTH = 8


def _configure_root_logger() -> None:
    root = logging.getLogger()
    if root.handlers:
        return

    level = getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO)
    fmt = LOG_FORMAT_VERCEL if os.environ.get("VERCEL") == "1" else LOG_FORMAT

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt))
    root.addHandler(handler)
    root.setLevel(level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


_configure_root_logger()


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def _escape(value) -> str:
    """Neutralize line breaks so one request cannot forge log entries (CWE-117)."""
    return str(value).replace("\n", "\\n").replace("\r", "\\r").replace("\t", "\\t").replace("\x00", "")


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """Escaped, truncated user text; "N/A" when empty."""
    if not value:
        return "N/A"
    safe = _escape(value)
    return safe if len(safe) <= max_length else safe[:max_length] + "..."


def sanitize_id_for_logging(id_value: str | int | None) -> str:
    """First few characters of an id, enough to correlate log lines."""
    if id_value is None or id_value == "":
        return "N/A"
    return _escape(id_value)[:ID_LOG_LENGTH]


__all__ = [
    "get_logger",
    "sanitize_id_for_logging",
    "sanitize_string_for_logging",
]
