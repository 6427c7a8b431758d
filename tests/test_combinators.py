"""Tests for parameter sequencing helpers."""

from __future__ import annotations

import pytest

from ircwire.errors.internal import InvalidNumericError, MalformedArgumentError
from ircwire.irc.combinators import (
    at_end,
    comma_list,
    optional,
    optional_chain,
    optional_list,
    require_spaces,
    skip_spaces,
)
from ircwire.irc.lexer import argument_maybe_last, argument_middle, numeric


def test_skip_spaces_consumes_runs():
    assert skip_spaces("a   b", 1) == 4
    assert skip_spaces("ab", 1) == 1


def test_require_spaces():
    assert require_spaces("a  b", 1) == 3
    with pytest.raises(MalformedArgumentError):
        require_spaces("ab", 1)
    with pytest.raises(MalformedArgumentError):
        require_spaces("a", 1)


class TestOptional:
    def test_present(self):
        assert optional(argument_middle, "a b", 1) == ("b", 3)

    def test_absent_at_end(self):
        assert optional(argument_middle, "a", 1) == (None, 1)
        assert optional(argument_middle, "a   ", 1) == (None, 1)

    def test_absent_when_form_does_not_match(self):
        assert optional(argument_middle, "a :b", 1) == (None, 1)

    def test_empty_trailing_is_present(self):
        assert optional(argument_maybe_last, "a :", 1) == ("", 3)

    def test_invalid_numeric_propagates(self):
        with pytest.raises(InvalidNumericError):
            optional(numeric, "a x", 1)


def test_optional_chain_stops_at_count():
    assert optional_chain(argument_maybe_last, "U a b c", 1, 2) == (["a", "b"], 5)


def test_optional_chain_unbounded_with_trailing():
    assert optional_chain(argument_maybe_last, "U a :b c", 1) == (["a", "b c"], 8)


def test_comma_list():
    assert comma_list(None) == []
    assert comma_list("#a,#b") == ["#a", "#b"]
    assert comma_list("") == [""]


def test_optional_list_absent_is_empty():
    assert optional_list("JOIN", 4) == ([], 4)
    assert optional_list("JOIN a,b", 4) == (["a", "b"], 8)


def test_at_end():
    assert at_end("a  ", 1)
    assert not at_end("a b", 1)
