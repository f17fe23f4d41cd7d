"""Typed exceptions for argument validation and external process failures."""


class ToolboxError(Exception):
    """Base class for all protokit errors."""


class ConfigurationError(ToolboxError, ValueError):
    """Raised when arguments or configuration are invalid."""


class LengthOutOfRangeError(ConfigurationError, IndexError):
    """Raised when a requested digit length does not fit the integer type."""


class ExecutionError(ToolboxError, RuntimeError):
    """Raised when an external command cannot be run."""


class CommandTimeoutError(ExecutionError):
    """Raised when an external command exceeds its timeout."""


class KeyValueParseError(ToolboxError, ValueError):
    """Raised when key-value text is malformed or repeats a key.

    ``partial`` holds the pairs that were parsed before the failure.
    """

    def __init__(self, message: str, partial: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.partial: dict[str, str] = dict(partial or {})
