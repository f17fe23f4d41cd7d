"""Platform lookup and shell command execution.

Both helpers are thin wrappers over what the interpreter and operating system
already provide.  :func:`get_platform_name` reads ``sys.platform``, which is
fixed when the interpreter is built, and maps it onto a closed set of labels.
:func:`execute` runs a command through the host shell and returns its
standard output.
"""

from __future__ import annotations

import subprocess
import sys

from .utils.errors import CommandTimeoutError, ExecutionError
from .utils.logging import get_logger

__all__ = ["get_platform_name", "execute"]

logger = get_logger(__name__)

# Ordered: Cygwin reports as windows and Android must win over Linux.
_PLATFORM_PREFIXES: tuple[tuple[str, str], ...] = (
    ("win32", "windows"),
    ("cygwin", "windows"),
    ("msys", "windows"),
    ("android", "android"),
    ("linux", "linux"),
    ("freebsd", "bsd"),
    ("openbsd", "bsd"),
    ("netbsd", "bsd"),
    ("dragonfly", "bsd"),
    ("hp-ux", "hp-ux"),
    ("aix", "aix"),
    ("ios", "ios"),
    ("darwin", "osx"),
    ("sunos", "solaris"),
)


def _is_android() -> bool:
    return hasattr(sys, "getandroidapilevel")


def get_platform_name(platform: str | None = None) -> str:
    """Return the short name of the host operating system, or ``""``.

    One of ``windows``, ``linux``, ``android``, ``bsd``, ``hp-ux``, ``aix``,
    ``ios``, ``osx`` or ``solaris``.  ``platform`` overrides ``sys.platform``.
    """

    if platform is None:
        platform = sys.platform
        if platform == "linux" and _is_android():
            return "android"
    platform = platform.lower()
    for prefix, label in _PLATFORM_PREFIXES:
        if platform.startswith(prefix):
            return label
    return ""


def execute(command: str, *, timeout: float | None = None, encoding: str = "utf-8") -> str:
    """Run ``command`` through the shell and return its standard output.

    Blocks until the command exits.  A non-zero exit status is not an error;
    the output produced is returned either way.  Standard error is not
    captured.

    Raises
    ------
    ExecutionError
        If the shell cannot be started.
    CommandTimeoutError
        If ``timeout`` seconds pass before the command exits.
    """

    logger.debug("Executing %r (timeout=%s)", command, timeout)
    try:
        proc = subprocess.run(
            command,
            shell=True,
            stdout=subprocess.PIPE,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as exc:
        raise CommandTimeoutError(f"command timed out after {timeout}s: {command}") from exc
    except OSError as exc:
        raise ExecutionError(f"failed to run command: {command}: {exc}") from exc

    if proc.returncode != 0:
        logger.debug("Command %r exited with status %d", command, proc.returncode)
    return proc.stdout.decode(encoding, errors="replace")
