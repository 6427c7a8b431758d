"""Channel mode changes (RFC 2811 section 4).

A MODE line carries a block such as ``+o-b+l nick mask!*@* 42``: one or
more sign-prefixed runs of letters followed by the values for the letters
that take one. Letters are collected for every run first and then bound to
values strictly in the order they appeared.

Which letters take a value depends on the polarity: removing a key or a
limit takes no argument, every other value-bearing letter needs one both
ways.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import ClassVar

from ..errors.internal import (
    MalformedArgumentError,
    MissingModeValueError,
    UnknownModeLetterError,
)
from .combinators import required
from .lexer import MIDDLE_END, argument_maybe_last, render_last, to_unsigned

ADDED = "+"
REMOVED = "-"
SIGNS = ADDED + REMOVED


class ModeLetter(Enum):
    OP = "o"
    VOICE = "v"
    INVITE_ONLY = "i"
    MODERATED = "m"
    NO_EXTERNAL = "n"
    QUIET = "q"
    PRIVATE = "p"
    SECRET = "s"
    OPS_TOPIC = "t"
    KEY = "k"
    LIMIT = "l"
    BAN = "b"
    BAN_EXCEPTION = "e"
    INVITE_EXCEPTION = "I"


VALUED_WHEN_ADDED = frozenset(
    {
        ModeLetter.OP,
        ModeLetter.VOICE,
        ModeLetter.QUIET,
        ModeLetter.KEY,
        ModeLetter.LIMIT,
        ModeLetter.BAN,
        ModeLetter.BAN_EXCEPTION,
        ModeLetter.INVITE_EXCEPTION,
    }
)
VALUED_WHEN_REMOVED = VALUED_WHEN_ADDED - {ModeLetter.KEY, ModeLetter.LIMIT}


def takes_value(letter: ModeLetter, sign: str) -> bool:
    if sign == ADDED:
        return letter in VALUED_WHEN_ADDED
    return letter in VALUED_WHEN_REMOVED


@dataclass(frozen=True, slots=True)
class ChannelMode:
    """Base for a single channel mode, with or without its value."""

    letter: ClassVar[ModeLetter]

    @property
    def value(self) -> str | int | None:
        for field in fields(self):
            return getattr(self, field.name)
        return None


@dataclass(frozen=True, slots=True)
class Op(ChannelMode):
    letter = ModeLetter.OP
    nick: str


@dataclass(frozen=True, slots=True)
class Voice(ChannelMode):
    letter = ModeLetter.VOICE
    nick: str


@dataclass(frozen=True, slots=True)
class InviteOnly(ChannelMode):
    letter = ModeLetter.INVITE_ONLY


@dataclass(frozen=True, slots=True)
class Moderated(ChannelMode):
    letter = ModeLetter.MODERATED


@dataclass(frozen=True, slots=True)
class NoExternal(ChannelMode):
    letter = ModeLetter.NO_EXTERNAL


@dataclass(frozen=True, slots=True)
class Quiet(ChannelMode):
    letter = ModeLetter.QUIET
    mask: str


@dataclass(frozen=True, slots=True)
class Private(ChannelMode):
    letter = ModeLetter.PRIVATE


@dataclass(frozen=True, slots=True)
class Secret(ChannelMode):
    letter = ModeLetter.SECRET


@dataclass(frozen=True, slots=True)
class OpsTopic(ChannelMode):
    letter = ModeLetter.OPS_TOPIC


@dataclass(frozen=True, slots=True)
class Key(ChannelMode):
    """Channel key; carries the key only when added."""

    letter = ModeLetter.KEY
    key: str | None = None


@dataclass(frozen=True, slots=True)
class Limit(ChannelMode):
    """Channel user limit; carries the count only when added."""

    letter = ModeLetter.LIMIT
    limit: int | None = None


@dataclass(frozen=True, slots=True)
class Ban(ChannelMode):
    letter = ModeLetter.BAN
    mask: str


@dataclass(frozen=True, slots=True)
class BanException(ChannelMode):
    letter = ModeLetter.BAN_EXCEPTION
    mask: str


@dataclass(frozen=True, slots=True)
class InviteException(ChannelMode):
    letter = ModeLetter.INVITE_EXCEPTION
    mask: str


# Single letter table shared by the parser and the serializer.
MODE_TYPES: dict[str, type[ChannelMode]] = {
    cls.letter.value: cls
    for cls in (
        Op,
        Voice,
        InviteOnly,
        Moderated,
        NoExternal,
        Quiet,
        Private,
        Secret,
        OpsTopic,
        Key,
        Limit,
        Ban,
        BanException,
        InviteException,
    )
}


@dataclass(frozen=True, slots=True)
class ChannelModeChange:
    """One mode adjustment: a polarity wrapping a channel mode."""

    sign: ClassVar[str]
    mode: ChannelMode

    def __post_init__(self) -> None:
        valued = takes_value(self.mode.letter, self.sign)
        if valued and self.mode.value is None:
            raise ValueError(f"{self.sign}{self.mode.letter.value} requires a value")
        if not valued and self.mode.value is not None:
            raise ValueError(f"{self.sign}{self.mode.letter.value} takes no value")

    def to_tuple(self) -> tuple[str, str, str | None]:
        value = self.mode.value
        return self.sign, self.mode.letter.value, None if value is None else str(value)


@dataclass(frozen=True, slots=True)
class Added(ChannelModeChange):
    sign = ADDED


@dataclass(frozen=True, slots=True)
class Removed(ChannelModeChange):
    sign = REMOVED


def _read_letters(text: str, pos: int) -> tuple[list[tuple[str, ModeLetter]], int]:
    if pos >= len(text) or text[pos] not in SIGNS:
        raise MalformedArgumentError(
            "Mode change must start with '+' or '-'", position=pos
        )
    pending: list[tuple[str, ModeLetter]] = []
    while pos < len(text) and text[pos] in SIGNS:
        sign = text[pos]
        pos += 1
        start = pos
        while pos < len(text) and text[pos] not in SIGNS + MIDDLE_END:
            cls = MODE_TYPES.get(text[pos])
            if cls is None:
                raise UnknownModeLetterError(text[pos], position=pos)
            pending.append((sign, cls.letter))
            pos += 1
        if pos == start:
            raise MalformedArgumentError(
                f"Mode sign {sign!r} without letters", position=start
            )
    return pending, pos


def parse_mode_changes(text: str, pos: int) -> tuple[list[ChannelModeChange], int]:
    """Parse a mode block starting at ``pos`` and bind values in order."""
    if pos < len(text) and text[pos] == ":":
        pos += 1
    pending, pos = _read_letters(text, pos)

    changes: list[ChannelModeChange] = []
    for sign, letter in pending:
        cls = MODE_TYPES[letter.value]
        if takes_value(letter, sign):
            try:
                value, end = required(argument_maybe_last, text, pos)
            except MalformedArgumentError:
                raise MissingModeValueError(sign, letter.value, position=pos) from None
            mode = cls(to_unsigned(value, pos) if letter is ModeLetter.LIMIT else value)
            pos = end
        else:
            mode = cls()
        changes.append(Added(mode) if sign == ADDED else Removed(mode))
    return changes, pos


def serialize_mode_changes(changes: list[ChannelModeChange]) -> str:
    """Render changes as ``+letters-letters value ...``.

    Additions are grouped before removals, so an interleaved sequence such
    as ``+b-q+l-i`` comes back as ``+bl-qi``. Values follow in the same
    grouped order.
    """
    added_letters, added_values = [], []
    removed_letters, removed_values = [], []
    for change in changes:
        sign, letter, value = change.to_tuple()
        letters, values = (
            (added_letters, added_values)
            if sign == ADDED
            else (removed_letters, removed_values)
        )
        letters.append(letter)
        if value is not None:
            values.append(value)

    out = ""
    if added_letters:
        out += ADDED + "".join(added_letters)
    if removed_letters:
        out += REMOVED + "".join(removed_letters)
    values = added_values + removed_values
    if values:
        values[-1] = render_last(values[-1])
        out += " " + " ".join(values)
    return out


__all__ = [
    "ModeLetter",
    "VALUED_WHEN_ADDED",
    "VALUED_WHEN_REMOVED",
    "MODE_TYPES",
    "takes_value",
    "ChannelMode",
    "Op",
    "Voice",
    "InviteOnly",
    "Moderated",
    "NoExternal",
    "Quiet",
    "Private",
    "Secret",
    "OpsTopic",
    "Key",
    "Limit",
    "Ban",
    "BanException",
    "InviteException",
    "ChannelModeChange",
    "Added",
    "Removed",
    "parse_mode_changes",
    "serialize_mode_changes",
]
