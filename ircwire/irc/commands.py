"""Typed IRC commands (RFC 1459 section 4, RFC 2812 section 3).

One frozen dataclass per verb. Each carries only the fields meaningful to
that verb; comma-separated targets are ordered lists, optional parameters
are ``None`` when absent.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from .modes import ChannelModeChange


@dataclass(frozen=True, slots=True)
class Command:
    """Base for every command variant."""

    verb: ClassVar[str]


def _check_positional(command: Command, *names: str) -> None:
    """Reject an optional field that is set while an earlier one is not.

    ``names`` are listed in the order the parser fills them from a line, so
    a value set without the ones before it would not read back the same.
    """
    missing = None
    for name in names:
        if getattr(command, name) is None:
            missing = missing or name
        elif missing is not None:
            raise ValueError(f"{command.verb} {name} requires {missing}")


@dataclass(frozen=True, slots=True)
class Pass(Command):
    verb = "PASS"
    password: str


@dataclass(frozen=True, slots=True)
class Nick(Command):
    verb = "NICK"
    nickname: str
    hopcount: int | None = None


@dataclass(frozen=True, slots=True)
class User(Command):
    verb = "USER"
    username: str
    hostname: str
    servername: str
    realname: str


@dataclass(frozen=True, slots=True)
class Server(Command):
    verb = "SERVER"
    servername: str
    hopcount: int
    info: str


@dataclass(frozen=True, slots=True)
class Oper(Command):
    verb = "OPER"
    user: str
    password: str


@dataclass(frozen=True, slots=True)
class Quit(Command):
    verb = "QUIT"
    message: str | None = None


@dataclass(frozen=True, slots=True)
class Squit(Command):
    verb = "SQUIT"
    server: str
    comment: str


@dataclass(frozen=True, slots=True)
class Join(Command):
    verb = "JOIN"
    channels: list[str]
    keys: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class Part(Command):
    verb = "PART"
    channels: list[str]
    message: str | None = None


@dataclass(frozen=True, slots=True)
class Mode(Command):
    """MODE query or change; an empty ``modechanges`` is a bare query."""

    verb = "MODE"
    target: str
    modechanges: list[ChannelModeChange] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class Topic(Command):
    verb = "TOPIC"
    channel: str
    topic: str | None = None


@dataclass(frozen=True, slots=True)
class Names(Command):
    verb = "NAMES"
    channels: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class List(Command):
    verb = "LIST"
    channels: list[str] = field(default_factory=list)
    server: str | None = None


@dataclass(frozen=True, slots=True)
class Invite(Command):
    verb = "INVITE"
    nickname: str
    channel: str


@dataclass(frozen=True, slots=True)
class Kick(Command):
    verb = "KICK"
    channel: str
    user: str
    comment: str | None = None


@dataclass(frozen=True, slots=True)
class Version(Command):
    verb = "VERSION"
    server: str | None = None


@dataclass(frozen=True, slots=True)
class Stats(Command):
    verb = "STATS"
    query: str | None = None
    server: str | None = None

    def __post_init__(self) -> None:
        _check_positional(self, "query", "server")


@dataclass(frozen=True, slots=True)
class Links(Command):
    """LINKS [[remote_server] server_mask]; a lone token is the mask."""

    verb = "LINKS"
    remote_server: str | None = None
    server_mask: str | None = None

    def __post_init__(self) -> None:
        # A lone token is always the mask.
        _check_positional(self, "server_mask", "remote_server")


@dataclass(frozen=True, slots=True)
class Time(Command):
    verb = "TIME"
    server: str | None = None


@dataclass(frozen=True, slots=True)
class Connect(Command):
    verb = "CONNECT"
    target_server: str
    port: int | None = None
    remote_server: str | None = None

    def __post_init__(self) -> None:
        _check_positional(self, "port", "remote_server")


@dataclass(frozen=True, slots=True)
class Trace(Command):
    verb = "TRACE"
    server: str | None = None


@dataclass(frozen=True, slots=True)
class Admin(Command):
    verb = "ADMIN"
    server: str | None = None


@dataclass(frozen=True, slots=True)
class Info(Command):
    verb = "INFO"
    server: str | None = None


@dataclass(frozen=True, slots=True)
class Privmsg(Command):
    verb = "PRIVMSG"
    receivers: list[str]
    message: str


@dataclass(frozen=True, slots=True)
class Notice(Command):
    verb = "NOTICE"
    nickname: str
    text: str


@dataclass(frozen=True, slots=True)
class Who(Command):
    verb = "WHO"
    name: str | None = None
    o: str | None = None

    def __post_init__(self) -> None:
        # A lone token is always ``o``.
        _check_positional(self, "o", "name")


@dataclass(frozen=True, slots=True)
class Whois(Command):
    """WHOIS [server] nickmasks; a lone token is the nickmask list."""

    verb = "WHOIS"
    nickmasks: list[str]
    server: str | None = None


@dataclass(frozen=True, slots=True)
class Whowas(Command):
    verb = "WHOWAS"
    nickname: str
    count: int | None = None
    server: str | None = None

    def __post_init__(self) -> None:
        _check_positional(self, "count", "server")


@dataclass(frozen=True, slots=True)
class Kill(Command):
    verb = "KILL"
    nickname: str
    comment: str


@dataclass(frozen=True, slots=True)
class Ping(Command):
    verb = "PING"
    server1: str
    server2: str | None = None


@dataclass(frozen=True, slots=True)
class Pong(Command):
    verb = "PONG"
    daemon1: str
    daemon2: str | None = None


@dataclass(frozen=True, slots=True)
class Error(Command):
    verb = "ERROR"
    message: str


@dataclass(frozen=True, slots=True)
class Away(Command):
    verb = "AWAY"
    message: str | None = None


@dataclass(frozen=True, slots=True)
class Rehash(Command):
    verb = "REHASH"


@dataclass(frozen=True, slots=True)
class Restart(Command):
    verb = "RESTART"


@dataclass(frozen=True, slots=True)
class Summon(Command):
    verb = "SUMMON"
    user: str
    server: str | None = None


@dataclass(frozen=True, slots=True)
class Users(Command):
    verb = "USERS"
    server: str | None = None


@dataclass(frozen=True, slots=True)
class Wallops(Command):
    verb = "WALLOPS"
    text: str


@dataclass(frozen=True, slots=True)
class Userhost(Command):
    verb = "USERHOST"
    nicknames: list[str]


@dataclass(frozen=True, slots=True)
class Ison(Command):
    verb = "ISON"
    nicknames: list[str]


COMMAND_TYPES: dict[str, type[Command]] = {
    cls.verb: cls
    for cls in (
        Pass,
        Nick,
        User,
        Server,
        Oper,
        Quit,
        Squit,
        Join,
        Part,
        Mode,
        Topic,
        Names,
        List,
        Invite,
        Kick,
        Version,
        Stats,
        Links,
        Time,
        Connect,
        Trace,
        Admin,
        Info,
        Privmsg,
        Notice,
        Who,
        Whois,
        Whowas,
        Kill,
        Ping,
        Pong,
        Error,
        Away,
        Rehash,
        Restart,
        Summon,
        Users,
        Wallops,
        Userhost,
        Ison,
    )
}

__all__ = ["Command", "COMMAND_TYPES", *(cls.__name__ for cls in COMMAND_TYPES.values())]
