"""Error hierarchy and error reporting helpers."""

from .handling import error_type_for, log_error
from .internal import (
    InternalError,
    InvalidNumericError,
    LineTooLongError,
    MalformedArgumentError,
    MissingModeValueError,
    ParseError,
    ParseErrorKind,
    UnknownModeLetterError,
    UnknownVerbError,
    UnterminatedMessageError,
)

__all__ = [
    "InternalError",
    "ParseError",
    "ParseErrorKind",
    "MalformedArgumentError",
    "UnknownVerbError",
    "UnknownModeLetterError",
    "MissingModeValueError",
    "InvalidNumericError",
    "UnterminatedMessageError",
    "LineTooLongError",
    "error_type_for",
    "log_error",
]
