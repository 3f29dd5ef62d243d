"""
Client Book — Logging configuration.

Call ``configure_logging()`` once at application startup (before any
``logging.getLogger`` calls) to install the shared handler configuration.
The engine modules themselves only ever call ``logging.getLogger(__name__)``.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from clientbook import config


_CONFIGURED = False

# Map string log-level names to logging constants
_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def resolve_level(level: Optional[str] = None) -> int:
    """Return the logging constant for ``level``, ``config.LOG_LEVEL``, or INFO."""
    name = level if level else config.LOG_LEVEL
    return _LEVEL_MAP.get(name.strip().upper(), logging.INFO)


def configure_logging(
    level: Optional[str] = None,
    fmt: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt: str = "%Y-%m-%d %H:%M:%S",
) -> None:
    """Configure the root logger exactly once.

    Parameters
    ----------
    level:
        Log level string (DEBUG, INFO, WARNING, …).  Falls back to
        ``config.LOG_LEVEL`` (the ``LOG_LEVEL`` env var), then ``INFO``.
    fmt:
        Log format string.
    datefmt:
        Date format string for the formatter.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    root = logging.getLogger()
    root.setLevel(resolve_level(level))

    # Host applications (web servers, notebooks) may already own the root
    # handlers; only install ours when nothing is there.
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))
        root.addHandler(handler)

    _CONFIGURED = True


def reset_logging_for_tests() -> None:
    """Allow ``configure_logging`` to run again (test helper)."""
    global _CONFIGURED
    _CONFIGURED = False

