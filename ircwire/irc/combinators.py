"""Reusable sub-parsers layered on top of the argument lexer."""

from __future__ import annotations

from collections.abc import Callable

from ..errors.internal import MalformedArgumentError
from .lexer import argument_maybe_last

Lexer = Callable[[str, int], tuple[object, int]]


def skip_spaces(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] == " ":
        pos += 1
    return pos


def require_spaces(text: str, pos: int) -> int:
    """Consume one or more spaces, failing if there are none."""
    end = skip_spaces(text, pos)
    if end == pos:
        if pos >= len(text):
            raise MalformedArgumentError("Missing required parameter", position=pos)
        raise MalformedArgumentError("Expected a space", position=pos)
    return end


def required(lexer: Lexer, text: str, pos: int):
    """Consume the separating spaces and then one parameter."""
    return lexer(text, require_spaces(text, pos))


def optional(lexer: Lexer, text: str, pos: int):
    """Try to read one more parameter after intervening spaces.

    Returns ``(None, pos)`` with ``pos`` unchanged when no parameter can be
    read there. Only a missing/malformed parameter counts as absent; other
    errors, such as a present but non-numeric value, propagate.
    """
    start = skip_spaces(text, pos)
    if start == pos:
        return None, pos
    try:
        return lexer(text, start)
    except MalformedArgumentError:
        return None, pos


def optional_chain(
    lexer: Lexer, text: str, pos: int, count: int | None = None
) -> tuple[list, int]:
    """Read up to ``count`` optional parameters, stopping at the first gap.

    ``count`` of None reads until the line runs out of parameters.
    """
    values = []
    while count is None or len(values) < count:
        value, pos = optional(lexer, text, pos)
        if value is None:
            break
        values.append(value)
    return values, pos


def comma_list(value: str | None) -> list[str]:
    """Split a parameter on ``,``; an absent parameter is an empty list."""
    if value is None:
        return []
    return value.split(",")


def optional_list(text: str, pos: int, lexer: Lexer = argument_maybe_last):
    value, pos = optional(lexer, text, pos)
    return comma_list(value), pos


def at_end(text: str, pos: int) -> bool:
    """True when only spaces remain."""
    return skip_spaces(text, pos) == len(text)
