"""Tests for construction rules on command values."""

from __future__ import annotations

import pytest

from ircwire.irc import commands as cmd


@pytest.mark.parametrize(
    "factory",
    [
        lambda: cmd.Stats(server="eff.org"),
        lambda: cmd.Links(remote_server="*.edu"),
        lambda: cmd.Connect("eff.org", remote_server="csd.bu.edu"),
        lambda: cmd.Whowas("Trillian", server="*.edu"),
        lambda: cmd.Who(name="jto*"),
    ],
    ids=["stats", "links", "connect", "whowas", "who"],
)
def test_later_optional_field_requires_earlier(factory):
    with pytest.raises(ValueError):
        factory()


def test_error_names_the_missing_field():
    with pytest.raises(ValueError, match="CONNECT remote_server requires port"):
        cmd.Connect("eff.org", remote_server="csd.bu.edu")


@pytest.mark.parametrize(
    "command",
    [
        cmd.Stats(),
        cmd.Stats("m"),
        cmd.Stats("c", "eff.org"),
        cmd.Links(),
        cmd.Links(server_mask="*.au"),
        cmd.Links("*.edu", "*.bu.edu"),
        cmd.Connect("eff.org"),
        cmd.Connect("eff.org", 0),
        cmd.Connect("eff.org", 6667, "csd.bu.edu"),
        cmd.Whowas("Wiz", 1, "*.edu"),
        cmd.Who(),
        cmd.Who(o="kyrias"),
        cmd.Who("jto*", "o"),
    ],
)
def test_valid_combinations(command):
    assert command.verb in cmd.COMMAND_TYPES


def test_commands_are_immutable():
    command = cmd.Who(o="kyrias")
    with pytest.raises(AttributeError):
        command.o = "other"
