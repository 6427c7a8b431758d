"""Tests for channel mode parsing, serialization and construction rules."""

from __future__ import annotations

import pytest

from ircwire.errors.internal import (
    InvalidNumericError,
    MalformedArgumentError,
    MissingModeValueError,
    UnknownModeLetterError,
)
from ircwire.irc.modes import (
    MODE_TYPES,
    VALUED_WHEN_ADDED,
    VALUED_WHEN_REMOVED,
    Added,
    Ban,
    BanException,
    InviteException,
    InviteOnly,
    Key,
    Limit,
    ModeLetter,
    Moderated,
    NoExternal,
    Op,
    OpsTopic,
    Private,
    Quiet,
    Removed,
    Secret,
    Voice,
    parse_mode_changes,
    serialize_mode_changes,
    takes_value,
)


def parse(text: str):
    changes, pos = parse_mode_changes(text, 0)
    assert pos == len(text)
    return changes


class TestParseModeChanges:
    def test_interleaved_runs_bind_values_in_order(self):
        assert parse("+b-q+l-i foo bar!*@* 42") == [
            Added(Ban("foo")),
            Removed(Quiet("bar!*@*")),
            Added(Limit(42)),
            Removed(InviteOnly()),
        ]

    def test_valueless_letters(self):
        assert parse("+imnpst") == [
            Added(InviteOnly()),
            Added(Moderated()),
            Added(NoExternal()),
            Added(Private()),
            Added(Secret()),
            Added(OpsTopic()),
        ]

    def test_every_value_letter_when_added(self):
        assert parse("+ovqkbeI a b c d e f g") == [
            Added(Op("a")),
            Added(Voice("b")),
            Added(Quiet("c")),
            Added(Key("d")),
            Added(Ban("e")),
            Added(BanException("f")),
            Added(InviteException("g")),
        ]

    @pytest.mark.parametrize(
        "text, expected",
        [("-k", Removed(Key())), ("-l", Removed(Limit()))],
    )
    def test_removing_key_or_limit_takes_no_value(self, text, expected):
        assert parse(text) == [expected]

    @pytest.mark.parametrize("text", ["+k", "+l", "-o", "-b", "+o-v nick"])
    def test_missing_value(self, text):
        with pytest.raises(MissingModeValueError):
            parse_mode_changes(text, 0)

    def test_missing_value_reports_letter(self):
        with pytest.raises(MissingModeValueError) as exc:
            parse_mode_changes("+l", 0)
        assert exc.value.sign == "+"
        assert exc.value.letter == "l"

    def test_key_removal_does_not_consume_following_value(self):
        assert parse("-k+o nick") == [Removed(Key()), Added(Op("nick"))]

    def test_limit_must_be_numeric(self):
        with pytest.raises(InvalidNumericError):
            parse_mode_changes("+l many", 0)

    def test_unknown_letter(self):
        with pytest.raises(UnknownModeLetterError) as exc:
            parse_mode_changes("+ox nick", 0)
        assert exc.value.letter == "x"
        assert exc.value.position == 2

    @pytest.mark.parametrize("text", ["o nick", "+", "+-o nick", ""])
    def test_sign_and_letters_required(self, text):
        with pytest.raises(MalformedArgumentError):
            parse_mode_changes(text, 0)

    def test_leading_colon_is_skipped(self):
        assert parse(":+i") == [Added(InviteOnly())]

    def test_multiple_spaces_between_values(self):
        assert parse("+ov  a   b") == [Added(Op("a")), Added(Voice("b"))]

    def test_value_may_be_trailing(self):
        assert parse("+b :mask with space") == [Added(Ban("mask with space"))]

    def test_stops_before_extra_parameters(self):
        changes, pos = parse_mode_changes("+i extra", 0)
        assert changes == [Added(InviteOnly())]
        assert pos == 2


class TestSerializeModeChanges:
    def test_groups_additions_before_removals(self):
        changes = [
            Added(Ban("foo")),
            Removed(Quiet("bar!*@*")),
            Added(Limit(42)),
            Removed(InviteOnly()),
        ]
        assert serialize_mode_changes(changes) == "+bl-qi foo 42 bar!*@*"

    def test_omits_empty_side(self):
        assert serialize_mode_changes([Removed(Key())]) == "-k"
        assert serialize_mode_changes([Added(Op("nick"))]) == "+o nick"

    def test_empty(self):
        assert serialize_mode_changes([]) == ""

    def test_key_added_limit_removed(self):
        assert serialize_mode_changes([Added(Key("secret")), Removed(Limit())]) == "+k-l secret"

    def test_last_value_needing_trailing_form(self):
        assert serialize_mode_changes([Added(Ban(":x"))]) == "+b ::x"
        assert parse("+b ::x") == [Added(Ban(":x"))]


class TestModeTypes:
    def test_letter_table_is_complete(self):
        assert set(MODE_TYPES) == {m.value for m in ModeLetter}
        assert len(MODE_TYPES) == 14

    def test_asymmetry_sets(self):
        assert VALUED_WHEN_ADDED - VALUED_WHEN_REMOVED == {ModeLetter.KEY, ModeLetter.LIMIT}
        assert takes_value(ModeLetter.KEY, "+")
        assert not takes_value(ModeLetter.KEY, "-")
        assert takes_value(ModeLetter.BAN, "-")
        assert not takes_value(ModeLetter.SECRET, "+")

    def test_construction_enforces_asymmetry(self):
        with pytest.raises(ValueError):
            Added(Key())
        with pytest.raises(ValueError):
            Added(Limit())
        with pytest.raises(ValueError):
            Removed(Key("secret"))
        with pytest.raises(ValueError):
            Removed(Limit(5))

    def test_to_tuple(self):
        assert Added(InviteOnly()).to_tuple() == ("+", "i", None)
        assert Added(Limit(5)).to_tuple() == ("+", "l", "5")
        assert Removed(Op("nick")).to_tuple() == ("-", "o", "nick")

    def test_polarity_is_part_of_equality(self):
        assert Added(Ban("x")) != Removed(Ban("x"))
        assert InviteOnly() == InviteOnly()
