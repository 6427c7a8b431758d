from __future__ import annotations

import logging

from ..logging_config import log_structured_error
from .internal import InternalError, ParseError


def error_type_for(error: Exception) -> str:
    """Map an exception to the error type used in structured error logs."""
    if isinstance(error, ParseError):
        return "parsing"
    if isinstance(error, UnicodeError):
        return "encoding"
    if isinstance(error, InternalError):
        return "internal"
    return "unknown"


def log_error(
    message: str,
    error: Exception,
    context: dict | None = None,
    level: int = logging.ERROR,
) -> None:
    """Logs an error message with the associated exception details.

    Parse errors contribute their kind, position and offending line to the
    structured context.

    Args:
        message: A descriptive message about the error context.
        error: The exception instance to be logged.
        context: Optional additional context data for debugging.
        level: Logging level for the record.
    """
    merged: dict = {}
    if isinstance(error, ParseError):
        merged["kind"] = error.kind.value
        if error.position is not None:
            merged["position"] = error.position
        if error.line is not None:
            merged["line"] = error.line
    if context:
        merged.update(context)

    log_structured_error(
        error_type=error_type_for(error),
        message=f"{message}: {error}",
        exception=error,
        context=merged or None,
        level=level,
    )
