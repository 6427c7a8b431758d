"""Message envelope: optional prefix, command and CRLF terminator."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors.internal import MalformedArgumentError, ParseError, UnterminatedMessageError
from .commands import Command
from .combinators import at_end, skip_spaces
from .grammar import parse_command
from .lexer import read_prefix
from .serializer import serialize_command

CRLF = "\r\n"


@dataclass(frozen=True, slots=True)
class Prefix:
    """Message origin, kept as the opaque token sent on the wire.

    ``nick``/``user``/``host`` split the common ``nick!user@host`` form for
    convenience; a server name comes back as ``nick`` with no user or host.
    """

    origin: str

    @property
    def nick(self) -> str:
        return self.origin.split("!", 1)[0].split("@", 1)[0]

    @property
    def user(self) -> str | None:
        if "!" not in self.origin:
            return None
        return self.origin.split("!", 1)[1].split("@", 1)[0]

    @property
    def host(self) -> str | None:
        if "@" not in self.origin:
            return None
        return self.origin.split("@", 1)[1]

    def __str__(self) -> str:
        return self.origin


@dataclass(frozen=True, slots=True)
class Message:
    command: Command
    prefix: Prefix | None = None

    def __str__(self) -> str:
        return serialize_message(self)


def parse_message(line: str) -> Message:
    """Parse one CRLF-terminated line into a ``Message``.

    Raises a ``ParseError`` subclass on any failure; the full line is
    attached to the error's ``data["line"]``.
    """
    if not line.endswith(CRLF):
        raise UnterminatedMessageError(
            "Message is not terminated by CRLF", data={"line": line}
        )
    body = line[: -len(CRLF)]
    try:
        prefix = None
        pos = 0
        if body.startswith(":"):
            origin, pos = read_prefix(body, pos)
            prefix = Prefix(origin)
        command, pos = parse_command(body, pos)
        if not at_end(body, pos):
            raise MalformedArgumentError(
                "Unexpected trailing data", position=skip_spaces(body, pos)
            )
    except ParseError as e:
        e.with_line(line)
        raise
    return Message(command, prefix)


def serialize_message(message: Message) -> str:
    """Render ``message`` as exactly one CRLF-terminated line."""
    command = serialize_command(message.command)
    if message.prefix is None:
        return command + CRLF
    return f":{message.prefix.origin} {command}{CRLF}"
