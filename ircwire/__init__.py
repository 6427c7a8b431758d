r"""Parser and serializer for the IRC client/server wire protocol.

    >>> from ircwire import parse_message, serialize_message
    >>> msg = parse_message("PRIVMSG #foo :bar baz\r\n")
    >>> msg.command.receivers, msg.command.message
    (['#foo'], 'bar baz')
    >>> serialize_message(msg)
    'PRIVMSG #foo :bar baz\r\n'
"""

from .config import WireSettings
from .errors import (
    InternalError,
    InvalidNumericError,
    LineTooLongError,
    MalformedArgumentError,
    MissingModeValueError,
    ParseError,
    ParseErrorKind,
    UnknownModeLetterError,
    UnknownVerbError,
    UnterminatedMessageError,
)
from .irc.commands import *  # noqa: F401,F403
from .irc.commands import COMMAND_TYPES, Command
from .irc.message import Message, Prefix, parse_message, serialize_message
from .irc.modes import *  # noqa: F401,F403
from .irc.stream import LineBuffer, encode_message, iter_messages, read_messages

__version__ = "0.1.0"
