"""Argument lexer for IRC lines.

Each function reads one token starting at ``pos`` in ``text`` and returns
``(value, new_pos)``. Failures raise a ``ParseError`` subclass; nothing
here keeps state between calls.
"""

from __future__ import annotations

from ..errors.internal import InvalidNumericError, MalformedArgumentError

# Characters that end any argument.
LINE_END = "\0\r\n"
# Characters that end a middle argument.
MIDDLE_END = " " + LINE_END

_DIGITS = frozenset("0123456789")
# Numeric fields are unsigned 64-bit on the wire.
MAX_UNSIGNED = 2**64 - 1


def _scan_until(text: str, pos: int, stop: str) -> int:
    end = pos
    length = len(text)
    while end < length and text[end] not in stop:
        end += 1
    return end


def argument_middle(text: str, pos: int) -> tuple[str, int]:
    """Read a space-delimited parameter that does not start with ``:``."""
    if pos >= len(text) or text[pos] in MIDDLE_END:
        raise MalformedArgumentError("Expected a parameter", position=pos)
    if text[pos] == ":":
        raise MalformedArgumentError(
            "Middle parameter cannot start with ':'", position=pos
        )
    end = _scan_until(text, pos, MIDDLE_END)
    return text[pos:end], end


def argument_trailing(text: str, pos: int) -> tuple[str, int]:
    """Read a ``:``-prefixed parameter running to the end of the line.

    The value may be empty and may contain spaces.
    """
    if pos >= len(text) or text[pos] != ":":
        raise MalformedArgumentError("Expected a trailing parameter", position=pos)
    end = _scan_until(text, pos + 1, LINE_END)
    return text[pos + 1 : end], end


def is_trailing(text: str, pos: int) -> bool:
    return pos < len(text) and text[pos] == ":"


def argument_maybe_last(text: str, pos: int) -> tuple[str, int]:
    """Read a parameter in either form, middle first."""
    if is_trailing(text, pos):
        return argument_trailing(text, pos)
    return argument_middle(text, pos)


def to_unsigned(value: str, pos: int | None = None) -> int:
    """Convert ``value`` to an int, accepting ASCII decimal digits only.

    Values above ``MAX_UNSIGNED`` are rejected like any other bad numeric.
    """
    if not value or not _DIGITS.issuperset(value):
        raise InvalidNumericError(value, position=pos)
    digits = value.lstrip("0") or "0"
    if len(digits) > len(str(MAX_UNSIGNED)) or int(digits) > MAX_UNSIGNED:
        raise InvalidNumericError(value, position=pos)
    return int(digits)


def numeric(text: str, pos: int, lexer=argument_maybe_last) -> tuple[int, int]:
    """Read a parameter with ``lexer`` and parse it as an unsigned integer."""
    value, end = lexer(text, pos)
    return to_unsigned(value, pos), end


def read_verb(text: str, pos: int) -> tuple[str, int]:
    end = _scan_until(text, pos, MIDDLE_END)
    if end == pos:
        raise MalformedArgumentError("Missing command", position=pos)
    return text[pos:end], end


def read_prefix(text: str, pos: int) -> tuple[str, int]:
    """Read ``:origin`` followed by at least one space.

    The origin is kept as an opaque token; it ends at the first space.
    """
    if pos >= len(text) or text[pos] != ":":
        raise MalformedArgumentError("Expected a prefix", position=pos)
    end = _scan_until(text, pos + 1, MIDDLE_END)
    if end == pos + 1:
        raise MalformedArgumentError("Empty prefix", position=pos)
    if end >= len(text) or text[end] != " ":
        raise MalformedArgumentError("Prefix must be followed by a command", position=end)
    origin = text[pos + 1 : end]
    while end < len(text) and text[end] == " ":
        end += 1
    return origin, end


def needs_trailing(value: str) -> bool:
    """True when ``value`` can only be sent as a trailing parameter."""
    return not value or value[0] == ":" or " " in value


def render_last(value: object, *, trailing: bool = False) -> str:
    """Render the final parameter of a line.

    ``trailing`` forces the ``:`` form; otherwise it is added only when the
    plain form would not read back as the same value.
    """
    text = str(value)
    if trailing or needs_trailing(text):
        return f":{text}"
    return text
