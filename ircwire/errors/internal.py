"""Centralized error hierarchy for the IRC wire grammar.

Every failure the parser can report is a ``ParseError`` subclass carrying a
``ParseErrorKind`` so callers can branch on the category without string
matching. Errors are raised once, at the point the grammar gives up; nothing
inside the package retries.

Classes:
  InternalError            – Base for all package errors (structured data).
  ParseError               – Base for grammar / framing failures.
  MalformedArgumentError   – Required parameter absent or malformed.
  UnknownVerbError         – Command token is not a recognized verb.
  UnknownModeLetterError   – Mode run contains a letter outside the table.
  MissingModeValueError    – Value-bearing mode letter has no value.
  InvalidNumericError      – Numeric field is not an unsigned decimal.
  UnterminatedMessageError – Line lacks its CRLF terminator.
  LineTooLongError         – Framed line exceeds the configured limit.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum


class InternalError(Exception):
    """Base class for all package errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class ParseErrorKind(Enum):
    MALFORMED_ARGUMENT = "malformed_argument"
    UNKNOWN_VERB = "unknown_verb"
    UNKNOWN_MODE_LETTER = "unknown_mode_letter"
    MISSING_MODE_VALUE = "missing_mode_value"
    INVALID_NUMERIC = "invalid_numeric"
    UNTERMINATED_MESSAGE = "unterminated_message"
    LINE_TOO_LONG = "line_too_long"


class ParseError(InternalError):
    """Raised when a line cannot be turned into a message.

    Attributes:
        position: Offset into the line where the grammar gave up, or None
            when the failure is not tied to one position.
        kind: Category of the failure.
    """

    kind: ParseErrorKind = ParseErrorKind.MALFORMED_ARGUMENT

    def __init__(
        self,
        message: str,
        *,
        position: int | None = None,
        data: Mapping[str, object] | None = None,
    ) -> None:
        super().__init__(message, data=data)
        self.position = position

    @property
    def line(self) -> str | None:
        line = self.data.get("line")
        return line if isinstance(line, str) else None

    def with_line(self, line: str) -> ParseError:
        """Attach the full offending line to the error and return it."""
        self.data.setdefault("line", line)
        return self

    def __str__(self) -> str:
        msg = super().__str__()
        if self.position is not None:
            msg = f"{msg} at position {self.position}"
        return msg


class MalformedArgumentError(ParseError):
    """A required parameter is absent, malformed, or extra data follows."""

    kind = ParseErrorKind.MALFORMED_ARGUMENT


class UnknownVerbError(ParseError):
    """The command token does not match any recognized verb."""

    kind = ParseErrorKind.UNKNOWN_VERB

    def __init__(self, verb: str, *, position: int | None = None) -> None:
        super().__init__(
            f"Unknown command {verb!r}", position=position, data={"verb": verb}
        )
        self.verb = verb


class UnknownModeLetterError(ParseError):
    """A channel mode run contains a letter outside the mode table."""

    kind = ParseErrorKind.UNKNOWN_MODE_LETTER

    def __init__(self, letter: str, *, position: int | None = None) -> None:
        super().__init__(
            f"Unknown channel mode {letter!r}",
            position=position,
            data={"letter": letter},
        )
        self.letter = letter


class MissingModeValueError(ParseError):
    """A value-bearing mode letter has no parameter left to bind to."""

    kind = ParseErrorKind.MISSING_MODE_VALUE

    def __init__(
        self, sign: str, letter: str, *, position: int | None = None
    ) -> None:
        super().__init__(
            f"Channel mode {sign}{letter} requires a value",
            position=position,
            data={"sign": sign, "letter": letter},
        )
        self.sign = sign
        self.letter = letter


class InvalidNumericError(ParseError):
    """A numeric field is present but not an unsigned decimal."""

    kind = ParseErrorKind.INVALID_NUMERIC

    def __init__(self, value: str, *, position: int | None = None) -> None:
        super().__init__(
            f"Expected an unsigned integer, got {value!r}",
            position=position,
            data={"value": value},
        )
        self.value = value


class UnterminatedMessageError(ParseError):
    """Input does not end with CRLF."""

    kind = ParseErrorKind.UNTERMINATED_MESSAGE


class LineTooLongError(ParseError):
    """A framed line exceeds the configured maximum length."""

    kind = ParseErrorKind.LINE_TOO_LONG

    def __init__(self, length: int, limit: int) -> None:
        super().__init__(
            f"Line of {length} bytes exceeds limit of {limit}",
            data={"length": length, "limit": limit},
        )
        self.length = length
        self.limit = limit


__all__ = [
    "InternalError",
    "ParseErrorKind",
    "ParseError",
    "MalformedArgumentError",
    "UnknownVerbError",
    "UnknownModeLetterError",
    "MissingModeValueError",
    "InvalidNumericError",
    "UnterminatedMessageError",
    "LineTooLongError",
]
