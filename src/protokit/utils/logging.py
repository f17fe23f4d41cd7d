"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain configured loggers.
    - Offer the ``msg:[value]`` shortcuts used while prototyping.
    - Provide a process-wide one-shot logger.

Inputs/Outputs:
    - Inputs: module name, message and values, verbosity settings.
    - Outputs: configured `logging.Logger` instances and log records.

Public contracts:
    - `get_logger(name)`: Return a logger in the package namespace.
    - `configure_logging(level, trace)`: Set the package log level and trace switch.
    - `log(msg, value)`: Emit ``msg:[value]`` at INFO.
    - `trace_log(msg, value, enabled)`: Emit at DEBUG only when enabled.
    - `log_once(msg, value1, value2)`: Emit once for the life of the process.

Notes/Edge cases:
    - Logging configuration is idempotent; only one handler is installed.
    - The handler is installed lazily by `configure_logging`, `log`, `log_once`
      and emitting `trace_log` calls, never on import or by `get_logger`.
    - The one-shot latch is never reset.

Dependencies:
    - Python `logging` module.
"""

from __future__ import annotations

import logging
import sys
import threading
from typing import Any

__all__ = [
    "PACKAGE_LOGGER",
    "OnceLatch",
    "configure_logging",
    "get_logger",
    "log",
    "log_once",
    "trace_log",
]

PACKAGE_LOGGER = "protokit"
TRACE_LOGGER = PACKAGE_LOGGER + ".trace"
_FORMAT = "%(message)s"
_configured = False
_trace_enabled = False
_config_lock = threading.Lock()


def _ensure_handler() -> logging.Logger:
    global _configured
    root = logging.getLogger(PACKAGE_LOGGER)
    with _config_lock:
        if not _configured:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(_FORMAT))
            root.addHandler(handler)
            if root.level == logging.NOTSET:
                root.setLevel(logging.INFO)
            _configured = True
    return root


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger below the ``protokit`` namespace.

    No handler is attached here; see :func:`configure_logging`.
    """

    if not name or name == PACKAGE_LOGGER:
        return logging.getLogger(PACKAGE_LOGGER)
    if name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


def configure_logging(level: int | str, *, trace: bool = False) -> logging.Logger:
    """Set the package logger ``level`` (name or number) and return it.

    ``trace`` switches on the DEBUG records emitted through :func:`trace_log`.
    """

    global _trace_enabled
    root = _ensure_handler()
    _trace_enabled = trace
    logging.getLogger(TRACE_LOGGER).setLevel(logging.DEBUG if trace else logging.NOTSET)
    if isinstance(level, str):
        level = level.upper()
    root.setLevel(level)
    return root


def log(msg: Any, value: Any) -> None:
    """Emit ``msg:[value]`` at INFO level."""

    _ensure_handler().info("%s:[%s]", msg, value)


def trace_log(msg: Any, value: Any, enabled: bool | None = None) -> None:
    """Emit ``msg:[value]`` at DEBUG level when tracing is enabled.

    ``enabled`` overrides the flag set by :func:`configure_logging`.
    """

    if enabled is None:
        enabled = _trace_enabled
    if enabled:
        _ensure_handler()
        logging.getLogger(TRACE_LOGGER).debug("%s:[%s]", msg, value)


class OnceLatch:
    """A latch that lets exactly one caller through, ever."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._fired = False

    @property
    def fired(self) -> bool:
        return self._fired

    def claim(self) -> bool:
        """Return ``True`` for the first caller only."""

        with self._lock:
            if self._fired:
                return False
            self._fired = True
            return True


_ONCE = OnceLatch()


def log_once(msg: Any, value1: Any, value2: Any) -> bool:
    """Emit ``msg:[value1] [value2]`` the first time this is called.

    Returns ``True`` when the message was emitted.
    """

    if not _ONCE.claim():
        return False
    _ensure_handler().info("%s:[%s] [%s]", msg, value1, value2)
    return True
