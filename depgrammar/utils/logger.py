"""
Logging for depgrammar.

Grammar modules log each parse decision at debug level under the
``depgrammar`` namespace and emit nothing on their own: the namespace
carries a :class:`logging.NullHandler` so host applications decide where
records go. The CLI maps its ``-v`` count onto a stderr handler with
:func:`configure_cli_logging`.
"""

from __future__ import annotations

import os
import sys
import logging
import threading
from typing import IO, Optional

from depgrammar.constants import (
    LOG_DATE_FORMAT,
    LOG_DEFAULT_FORMAT,
    LOG_VERBOSE_FORMAT,
)

NAMESPACE = "depgrammar"

#: Level shown for ``-v`` counts 0, 1 and 2+.
VERBOSITY_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)

logging.getLogger(NAMESPACE).addHandler(logging.NullHandler())

_cli_handler: Optional[logging.Handler] = None
_lock = threading.Lock()


def supports_color(stream: IO[str]) -> bool:
    """Return True when ANSI colors may be written to ``stream``.

    ``NO_COLOR`` and ``CI`` turn colors off; otherwise only terminals get them.
    """
    if os.environ.get("NO_COLOR") or os.environ.get("CI"):
        return False
    try:
        return stream.isatty()
    except (AttributeError, OSError, ValueError):
        return False


class LevelColorFormatter(logging.Formatter):
    """Formatter that colors the level name of each record."""

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, fmt: str, *, color: bool, datefmt: Optional[str] = None) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.color = color

    def formatMessage(self, record: logging.LogRecord) -> str:
        code = self.LEVEL_COLORS.get(record.levelno) if self.color else None
        if code is None:
            return super().formatMessage(record)

        # The record is shared with other handlers, so color a copy
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{code}{record.levelname}{self.RESET}"
        return super().formatMessage(colored)


def level_for_verbosity(verbosity: int) -> int:
    """Map a ``-v`` count onto a logging level."""
    return VERBOSITY_LEVELS[max(0, min(verbosity, len(VERBOSITY_LEVELS) - 1))]


def configure_cli_logging(
    verbosity: int = 0,
    *,
    stream: Optional[IO[str]] = None,
    color: Optional[bool] = None,
) -> logging.Handler:
    """Route depgrammar records to ``stream`` for a CLI run.

    ``-v`` shows command progress; ``-vv`` adds grammar decisions with
    timestamps and logger names. Calling again replaces the handler.

    Args:
        verbosity: Number of ``-v`` flags given.
        stream: Destination; defaults to ``sys.stderr``.
        color: Force colors on or off; ``None`` detects from ``stream``.

    Returns:
        The installed handler.
    """
    global _cli_handler

    stream = stream or sys.stderr
    if color is None:
        color = supports_color(stream)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        LevelColorFormatter(
            LOG_VERBOSE_FORMAT if verbosity > 1 else LOG_DEFAULT_FORMAT,
            color=color,
            datefmt=LOG_DATE_FORMAT,
        )
    )

    with _lock:
        namespace = logging.getLogger(NAMESPACE)
        if _cli_handler is not None:
            namespace.removeHandler(_cli_handler)
        namespace.addHandler(handler)
        namespace.setLevel(level_for_verbosity(verbosity))
        namespace.propagate = False
        _cli_handler = handler

    return handler


def reset_cli_logging() -> None:
    """Detach the CLI handler and hand the namespace back to the host."""
    global _cli_handler

    with _lock:
        namespace = logging.getLogger(NAMESPACE)
        if _cli_handler is not None:
            namespace.removeHandler(_cli_handler)
            _cli_handler = None
        namespace.setLevel(logging.NOTSET)
        namespace.propagate = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a depgrammar module.

    Args:
        name: Dotted module path, relative (``"core.normalizer"``) or
            qualified (``"depgrammar.core.normalizer"``).
    """
    if name == NAMESPACE or name.startswith(f"{NAMESPACE}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{NAMESPACE}.{name}")
