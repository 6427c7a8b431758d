"""Command grammar: one sub-parser per verb and the dispatch table.

Every sub-parser takes the line and the offset just past the verb and
returns ``(command, offset)``. A parameter followed by another required
parameter is read with ``argument_middle``; one that may end the line is
read with ``argument_maybe_last``.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import partial

from ..errors.internal import MalformedArgumentError, UnknownVerbError
from . import commands as cmd
from .combinators import (
    comma_list,
    optional,
    optional_chain,
    optional_list,
    required,
    skip_spaces,
)
from .lexer import argument_maybe_last, argument_middle, numeric, read_verb
from .modes import parse_mode_changes

CommandParser = Callable[[str, int], tuple[cmd.Command, int]]

middle = argument_middle
last = argument_maybe_last
numeric_middle = partial(numeric, lexer=argument_middle)
numeric_last = partial(numeric, lexer=argument_maybe_last)


def parse_pass(text: str, pos: int):
    password, pos = required(last, text, pos)
    return cmd.Pass(password), pos


def parse_nick(text: str, pos: int):
    nickname, pos = required(last, text, pos)
    hopcount, pos = optional(numeric_last, text, pos)
    return cmd.Nick(nickname, hopcount), pos


def parse_user(text: str, pos: int):
    username, pos = required(middle, text, pos)
    hostname, pos = required(middle, text, pos)
    servername, pos = required(middle, text, pos)
    realname, pos = required(last, text, pos)
    return cmd.User(username, hostname, servername, realname), pos


def parse_server(text: str, pos: int):
    servername, pos = required(middle, text, pos)
    hopcount, pos = required(numeric_middle, text, pos)
    info, pos = required(last, text, pos)
    return cmd.Server(servername, hopcount, info), pos


def parse_oper(text: str, pos: int):
    user, pos = required(middle, text, pos)
    password, pos = required(last, text, pos)
    return cmd.Oper(user, password), pos


def parse_quit(text: str, pos: int):
    message, pos = optional(last, text, pos)
    return cmd.Quit(message), pos


def parse_squit(text: str, pos: int):
    server, pos = required(middle, text, pos)
    comment, pos = required(last, text, pos)
    return cmd.Squit(server, comment), pos


def parse_join(text: str, pos: int):
    channels, pos = required(last, text, pos)
    keys, pos = optional_list(text, pos)
    return cmd.Join(comma_list(channels), keys), pos


def parse_part(text: str, pos: int):
    channels, pos = required(last, text, pos)
    message, pos = optional(last, text, pos)
    return cmd.Part(comma_list(channels), message), pos


def parse_mode(text: str, pos: int):
    target, pos = required(last, text, pos)
    start = skip_spaces(text, pos)
    if start == pos or start == len(text):
        return cmd.Mode(target), pos
    modechanges, pos = parse_mode_changes(text, start)
    return cmd.Mode(target, modechanges), pos


def parse_topic(text: str, pos: int):
    channel, pos = required(last, text, pos)
    topic, pos = optional(last, text, pos)
    return cmd.Topic(channel, topic), pos


def parse_names(text: str, pos: int):
    channels, pos = optional_list(text, pos)
    return cmd.Names(channels), pos


def parse_list(text: str, pos: int):
    channels, pos = optional_list(text, pos, middle)
    server, pos = optional(last, text, pos)
    return cmd.List(channels, server), pos


def parse_invite(text: str, pos: int):
    nickname, pos = required(middle, text, pos)
    channel, pos = required(last, text, pos)
    return cmd.Invite(nickname, channel), pos


def parse_kick(text: str, pos: int):
    channel, pos = required(middle, text, pos)
    user, pos = required(last, text, pos)
    comment, pos = optional(last, text, pos)
    return cmd.Kick(channel, user, comment), pos


def _server_only(command: type[cmd.Command]) -> CommandParser:
    def parse(text: str, pos: int):
        server, pos = optional(last, text, pos)
        return command(server), pos

    parse.__name__ = f"parse_{command.verb.lower()}"
    return parse


def parse_stats(text: str, pos: int):
    query, pos = optional(last, text, pos)
    server, pos = optional(last, text, pos)
    return cmd.Stats(query, server), pos


def parse_links(text: str, pos: int):
    first, pos = optional(last, text, pos)
    second, pos = optional(last, text, pos)
    if second is None:
        return cmd.Links(server_mask=first), pos
    return cmd.Links(remote_server=first, server_mask=second), pos


def parse_connect(text: str, pos: int):
    target_server, pos = required(last, text, pos)
    port, pos = optional(numeric_last, text, pos)
    remote_server, pos = optional(last, text, pos)
    return cmd.Connect(target_server, port, remote_server), pos


def parse_privmsg(text: str, pos: int):
    receivers, pos = required(middle, text, pos)
    message, pos = required(last, text, pos)
    return cmd.Privmsg(comma_list(receivers), message), pos


def parse_notice(text: str, pos: int):
    nickname, pos = required(middle, text, pos)
    message, pos = required(last, text, pos)
    return cmd.Notice(nickname, message), pos


def parse_who(text: str, pos: int):
    # The first token is the name only when a second one follows it.
    first, pos = optional(last, text, pos)
    second, pos = optional(last, text, pos)
    if second is None:
        return cmd.Who(o=first), pos
    return cmd.Who(first, second), pos


def parse_whois(text: str, pos: int):
    # The first token names a server only when a nickmask list follows it.
    first, pos = required(last, text, pos)
    second, pos = optional(last, text, pos)
    if second is None:
        return cmd.Whois(comma_list(first)), pos
    return cmd.Whois(comma_list(second), server=first), pos


def parse_whowas(text: str, pos: int):
    nickname, pos = required(last, text, pos)
    count, pos = optional(numeric_last, text, pos)
    server, pos = optional(last, text, pos)
    return cmd.Whowas(nickname, count, server), pos


def parse_kill(text: str, pos: int):
    nickname, pos = required(middle, text, pos)
    comment, pos = required(last, text, pos)
    return cmd.Kill(nickname, comment), pos


def parse_ping(text: str, pos: int):
    server1, pos = required(last, text, pos)
    server2, pos = optional(last, text, pos)
    return cmd.Ping(server1, server2), pos


def parse_pong(text: str, pos: int):
    daemon1, pos = required(last, text, pos)
    daemon2, pos = optional(last, text, pos)
    return cmd.Pong(daemon1, daemon2), pos


def parse_error(text: str, pos: int):
    message, pos = required(last, text, pos)
    return cmd.Error(message), pos


def parse_away(text: str, pos: int):
    message, pos = optional(last, text, pos)
    return cmd.Away(message), pos


def parse_rehash(text: str, pos: int):
    return cmd.Rehash(), pos


def parse_restart(text: str, pos: int):
    return cmd.Restart(), pos


def parse_summon(text: str, pos: int):
    user, pos = required(last, text, pos)
    server, pos = optional(last, text, pos)
    return cmd.Summon(user, server), pos


def parse_wallops(text: str, pos: int):
    message, pos = required(last, text, pos)
    return cmd.Wallops(message), pos


def parse_userhost(text: str, pos: int):
    first, pos = required(last, text, pos)
    rest, pos = optional_chain(last, text, pos, 4)
    return cmd.Userhost([first, *rest]), pos


def parse_ison(text: str, pos: int):
    first, pos = required(last, text, pos)
    rest, pos = optional_chain(last, text, pos)
    # A trailing parameter may carry several space-separated nicknames.
    nicknames = [nick for param in (first, *rest) for nick in param.split(" ") if nick]
    if not nicknames:
        raise MalformedArgumentError("ISON requires at least one nickname", position=pos)
    return cmd.Ison(nicknames), pos


VERB_PARSERS: dict[str, CommandParser] = {
    "PASS": parse_pass,
    "NICK": parse_nick,
    "USER": parse_user,
    "SERVER": parse_server,
    "OPER": parse_oper,
    "QUIT": parse_quit,
    "SQUIT": parse_squit,
    "JOIN": parse_join,
    "PART": parse_part,
    "MODE": parse_mode,
    "TOPIC": parse_topic,
    "NAMES": parse_names,
    "LIST": parse_list,
    "INVITE": parse_invite,
    "KICK": parse_kick,
    "VERSION": _server_only(cmd.Version),
    "STATS": parse_stats,
    "LINKS": parse_links,
    "TIME": _server_only(cmd.Time),
    "CONNECT": parse_connect,
    "TRACE": _server_only(cmd.Trace),
    "ADMIN": _server_only(cmd.Admin),
    "INFO": _server_only(cmd.Info),
    "PRIVMSG": parse_privmsg,
    "NOTICE": parse_notice,
    "WHO": parse_who,
    "WHOIS": parse_whois,
    "WHOWAS": parse_whowas,
    "KILL": parse_kill,
    "PING": parse_ping,
    "PONG": parse_pong,
    "ERROR": parse_error,
    "AWAY": parse_away,
    "REHASH": parse_rehash,
    "RESTART": parse_restart,
    "SUMMON": parse_summon,
    "USERS": _server_only(cmd.Users),
    "WALLOPS": parse_wallops,
    "USERHOST": parse_userhost,
    "ISON": parse_ison,
}


def parse_command(text: str, pos: int = 0) -> tuple[cmd.Command, int]:
    """Read the verb at ``pos`` and dispatch to its sub-parser.

    Verbs match exactly as transmitted; there is no catch-all variant.
    """
    verb, end = read_verb(text, pos)
    parser = VERB_PARSERS.get(verb)
    if parser is None:
        raise UnknownVerbError(verb, position=pos)
    return parser(text, end)
