"""Render typed commands back to protocol text (without CRLF)."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from . import commands as cmd
from .lexer import render_last
from .modes import serialize_mode_changes


def _line(verb: str, params: Iterable[object], last: object = None, *, trailing: bool = False) -> str:
    """Join ``verb``, plain ``params`` and an optional final parameter.

    ``None`` entries are skipped. When ``last`` is None the final plain
    parameter takes its place so it still gets the ``:`` form if needed.
    """
    parts = [str(p) for p in params if p is not None]
    if last is None and parts and not trailing:
        last = parts.pop()
    if last is not None:
        parts.append(render_last(last, trailing=trailing))
    return " ".join([verb, *parts])


def _opt(verb: str, *values: object) -> str:
    return _line(verb, values)


Serializer = Callable[[cmd.Command], str]

SERIALIZERS: dict[type[cmd.Command], Serializer] = {}


def _register(kind: type[cmd.Command]) -> Callable[[Serializer], Serializer]:
    def decorator(func: Serializer) -> Serializer:
        SERIALIZERS[kind] = func
        return func

    return decorator


@_register(cmd.Pass)
def _(c: cmd.Pass) -> str:
    return _line(c.verb, (), c.password, trailing=True)


@_register(cmd.Nick)
def _(c: cmd.Nick) -> str:
    return _opt(c.verb, c.nickname, c.hopcount)


@_register(cmd.User)
def _(c: cmd.User) -> str:
    return _line(c.verb, (c.username, c.hostname, c.servername), c.realname, trailing=True)


@_register(cmd.Server)
def _(c: cmd.Server) -> str:
    return _line(c.verb, (c.servername, c.hopcount), c.info, trailing=True)


@_register(cmd.Oper)
def _(c: cmd.Oper) -> str:
    return _line(c.verb, (c.user,), c.password, trailing=True)


@_register(cmd.Quit)
def _(c: cmd.Quit) -> str:
    return _line(c.verb, (), c.message, trailing=True)


@_register(cmd.Squit)
def _(c: cmd.Squit) -> str:
    return _line(c.verb, (c.server,), c.comment, trailing=True)


@_register(cmd.Join)
def _(c: cmd.Join) -> str:
    channels = ",".join(c.channels)
    if not c.keys:
        return _opt(c.verb, channels)
    return _line(c.verb, (channels,), ",".join(c.keys), trailing=True)


@_register(cmd.Part)
def _(c: cmd.Part) -> str:
    channels = ",".join(c.channels)
    if c.message is None:
        return _opt(c.verb, channels)
    return _line(c.verb, (channels,), c.message, trailing=True)


@_register(cmd.Mode)
def _(c: cmd.Mode) -> str:
    if not c.modechanges:
        return _opt(c.verb, c.target)
    return f"{c.verb} {c.target} {serialize_mode_changes(c.modechanges)}"


@_register(cmd.Topic)
def _(c: cmd.Topic) -> str:
    if c.topic is None:
        return _opt(c.verb, c.channel)
    return _line(c.verb, (c.channel,), c.topic, trailing=True)


@_register(cmd.Names)
def _(c: cmd.Names) -> str:
    return _opt(c.verb, ",".join(c.channels) or None)


@_register(cmd.List)
def _(c: cmd.List) -> str:
    channels = ",".join(c.channels) or None
    if c.server is None:
        return _opt(c.verb, channels)
    return _line(c.verb, (channels,), c.server, trailing=True)


@_register(cmd.Invite)
def _(c: cmd.Invite) -> str:
    return _opt(c.verb, c.nickname, c.channel)


@_register(cmd.Kick)
def _(c: cmd.Kick) -> str:
    if c.comment is None:
        return _opt(c.verb, c.channel, c.user)
    return _line(c.verb, (c.channel, c.user), c.comment, trailing=True)


@_register(cmd.Version)
@_register(cmd.Time)
@_register(cmd.Trace)
@_register(cmd.Admin)
@_register(cmd.Info)
@_register(cmd.Users)
def _(c) -> str:
    return _opt(c.verb, c.server)


@_register(cmd.Stats)
def _(c: cmd.Stats) -> str:
    return _opt(c.verb, c.query, c.server)


@_register(cmd.Links)
def _(c: cmd.Links) -> str:
    return _opt(c.verb, c.remote_server, c.server_mask)


@_register(cmd.Connect)
def _(c: cmd.Connect) -> str:
    return _opt(c.verb, c.target_server, c.port, c.remote_server)


@_register(cmd.Privmsg)
def _(c: cmd.Privmsg) -> str:
    return _line(c.verb, (",".join(c.receivers),), c.message, trailing=True)


@_register(cmd.Notice)
def _(c: cmd.Notice) -> str:
    return _line(c.verb, (c.nickname,), c.text, trailing=True)


@_register(cmd.Who)
def _(c: cmd.Who) -> str:
    return _opt(c.verb, c.name, c.o)


@_register(cmd.Whois)
def _(c: cmd.Whois) -> str:
    return _opt(c.verb, c.server, ",".join(c.nickmasks))


@_register(cmd.Whowas)
def _(c: cmd.Whowas) -> str:
    return _opt(c.verb, c.nickname, c.count, c.server)


@_register(cmd.Kill)
def _(c: cmd.Kill) -> str:
    return _line(c.verb, (c.nickname,), c.comment, trailing=True)


@_register(cmd.Ping)
def _(c: cmd.Ping) -> str:
    return _opt(c.verb, c.server1, c.server2)


@_register(cmd.Pong)
def _(c: cmd.Pong) -> str:
    return _opt(c.verb, c.daemon1, c.daemon2)


@_register(cmd.Error)
def _(c: cmd.Error) -> str:
    return _line(c.verb, (), c.message, trailing=True)


@_register(cmd.Away)
def _(c: cmd.Away) -> str:
    return _line(c.verb, (), c.message, trailing=True)


@_register(cmd.Rehash)
@_register(cmd.Restart)
def _(c) -> str:
    return c.verb


@_register(cmd.Summon)
def _(c: cmd.Summon) -> str:
    return _opt(c.verb, c.user, c.server)


@_register(cmd.Wallops)
def _(c: cmd.Wallops) -> str:
    return _line(c.verb, (), c.text, trailing=True)


@_register(cmd.Userhost)
@_register(cmd.Ison)
def _(c) -> str:
    return _opt(c.verb, *c.nicknames)


def serialize_command(command: cmd.Command) -> str:
    """Render ``command`` as protocol text without the CRLF terminator."""
    serializer = SERIALIZERS.get(type(command))
    if serializer is None:
        raise TypeError(f"Cannot serialize {type(command).__name__}")
    return serializer(command)
