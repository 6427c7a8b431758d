"""IRC wire grammar package.

Lexer, combinators, channel mode grammar, command grammar, message
envelope, serializer and line framing.
"""

from .commands import COMMAND_TYPES, Command  # noqa: F401
from .grammar import VERB_PARSERS, parse_command  # noqa: F401
from .message import Message, Prefix, parse_message, serialize_message  # noqa: F401
from .modes import (  # noqa: F401
    Added,
    ChannelMode,
    ChannelModeChange,
    ModeLetter,
    Removed,
    parse_mode_changes,
    serialize_mode_changes,
)
from .serializer import serialize_command  # noqa: F401
from .stream import (  # noqa: F401
    LineBuffer,
    decode_line,
    encode_message,
    iter_messages,
    read_messages,
)

__all__ = [
    "COMMAND_TYPES",
    "Command",
    "VERB_PARSERS",
    "parse_command",
    "Message",
    "Prefix",
    "parse_message",
    "serialize_message",
    "serialize_command",
    "Added",
    "Removed",
    "ChannelMode",
    "ChannelModeChange",
    "ModeLetter",
    "parse_mode_changes",
    "serialize_mode_changes",
    "LineBuffer",
    "decode_line",
    "encode_message",
    "iter_messages",
    "read_messages",
]
