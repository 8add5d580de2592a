"""Error types for the measure runner."""

import logging
from typing import Any, Dict, Optional

from mcp.types import ErrorData, INTERNAL_ERROR, INVALID_PARAMS, INVALID_REQUEST

from measure_runner.logging import get_logger

_logger = get_logger("errors")


class MeasureRunnerError(Exception):
    """Base error class for the measure runner."""

    def __init__(
        self,
        message: str,
        code: int = INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.code = code
        self.details = details or {}

    def to_error_data(self) -> ErrorData:
        """Convert to ErrorData format."""
        return ErrorData(code=self.code, message=str(self), data=self.details)


class SetupError(MeasureRunnerError):
    """A project directory could not be prepared for running commands."""

    def __init__(
        self,
        message: str,
        code: int = INVALID_PARAMS,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, code=code, details=details)


class WorkingDirectoryError(SetupError):
    """Changing into a project directory failed."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Cannot change into directory {path}: {reason}",
            details={"path": path, "reason": reason},
        )


class ToolNotAvailableError(SetupError):
    """The bundler tool could not be invoked."""

    def __init__(self, tool: str):
        super().__init__(
            f"Failed to run '{tool} -v', check that {tool} is installed",
            code=INVALID_REQUEST,
            details={"tool": tool},
        )


def log_error(
    error: Exception,
    context: Optional[Dict[str, Any]] = None,
    logger: Optional[logging.Logger] = None,
) -> None:
    """Log an error with context."""
    logger = logger or _logger

    error_info: Dict[str, Any] = {
        "event": "error",
        "error_type": error.__class__.__name__,
        "error_message": str(error),
    }
    if context:
        error_info["context"] = context
    if isinstance(error, MeasureRunnerError):
        error_info["code"] = error.code
        error_info["details"] = error.details

    logger.error(error_info)
