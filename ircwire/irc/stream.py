"""Line framing between a byte stream and the message parser.

Splits received bytes on CRLF, enforces the line length limit, decodes
text and applies the configured error policy. Anything beyond splitting
lines (sockets, TLS, reconnection) belongs to the caller.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Iterable, Iterator

from ..config.model import WireSettings
from ..constants import IRCWIRE_MAX_LINE_LENGTH
from ..errors.handling import log_error
from ..errors.internal import LineTooLongError, ParseError, UnterminatedMessageError
from ..logs.logger import logger
from .message import CRLF, Message, parse_message, serialize_message

_CRLF = CRLF.encode("ascii")


class LineBuffer:
    """Accumulates received bytes and hands out complete CRLF lines.

    ``pop_line`` returns lines including their CRLF. A line longer than
    ``max_line_length`` (CRLF included) is dropped and reported with
    ``LineTooLongError``; the buffer stays usable afterwards. An overlong
    partial line is reported as soon as it crosses the limit and the rest
    of it is discarded as it arrives.
    """

    def __init__(self, max_line_length: int = IRCWIRE_MAX_LINE_LENGTH) -> None:
        self.max_line_length = max_line_length
        self._buffer = bytearray()
        self._discarding = False

    def feed(self, data: bytes) -> None:
        self._buffer.extend(data)

    @property
    def pending(self) -> bytes:
        """Bytes received but not yet part of a complete line."""
        return bytes(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)

    def _too_long(self, length: int) -> bool:
        return bool(self.max_line_length) and length > self.max_line_length

    def pop_line(self) -> bytes | None:
        """Return the next complete line, or None if none is buffered."""
        index = self._buffer.find(_CRLF)
        if self._discarding:
            if index == -1:
                self._buffer.clear()
                return None
            del self._buffer[: index + len(_CRLF)]
            self._discarding = False
            index = self._buffer.find(_CRLF)

        if index == -1:
            if self._too_long(len(self._buffer)):
                length = len(self._buffer)
                self._buffer.clear()
                self._discarding = True
                raise LineTooLongError(length, self.max_line_length)
            return None

        end = index + len(_CRLF)
        line = bytes(self._buffer[:end])
        del self._buffer[:end]
        if self._too_long(len(line)):
            raise LineTooLongError(len(line), self.max_line_length)
        return line

    def lines(self) -> Iterator[bytes]:
        while (line := self.pop_line()) is not None:
            yield line

    def __iter__(self) -> Iterator[bytes]:
        return self.lines()


def decode_line(raw: bytes, settings: WireSettings | None = None) -> str:
    """Decode with the primary encoding, falling back per ``settings``."""
    settings = settings or WireSettings()
    try:
        return raw.decode(settings.encoding)
    except UnicodeDecodeError:
        logger.log_event(
            "stream",
            "line_decode_fallback",
            level=logging.DEBUG,
            encoding=settings.encoding,
            fallback=settings.fallback_encoding,
        )
        return raw.decode(settings.fallback_encoding, errors="replace")


def encode_message(message: Message, encoding: str = "utf-8") -> bytes:
    return serialize_message(message).encode(encoding)


def _handle_error(error: ParseError, settings: WireSettings) -> None:
    if settings.on_error == "raise":
        raise error
    log_error("Skipping line", error, level=logging.WARNING)
    logger.log_event(
        "stream", "line_skipped", level=logging.DEBUG, kind=error.kind.value
    )


def _parse_one(line: str | bytes, settings: WireSettings) -> Message | None:
    text = decode_line(line, settings) if isinstance(line, bytes) else line
    try:
        message = parse_message(text)
    except ParseError as e:
        _handle_error(e, settings)
        return None
    logger.log_event(
        "stream", "line_parsed", level=logging.DEBUG, verb=message.command.verb
    )
    return message


def _drain(buffer: LineBuffer, settings: WireSettings) -> Iterator[Message]:
    while True:
        try:
            raw = buffer.pop_line()
        except LineTooLongError as e:
            logger.log_event(
                "stream",
                "line_too_long",
                level=logging.WARNING,
                length=e.length,
                limit=e.limit,
            )
            _handle_error(e, settings)
            continue
        if raw is None:
            return
        message = _parse_one(raw, settings)
        if message is not None:
            yield message


def iter_messages(
    lines: Iterable[str | bytes], settings: WireSettings | None = None
) -> Iterator[Message]:
    """Parse already framed lines, applying the error policy."""
    settings = settings or WireSettings()
    for line in lines:
        message = _parse_one(line, settings)
        if message is not None:
            yield message


async def read_messages(
    reader: asyncio.StreamReader, settings: WireSettings | None = None
) -> AsyncIterator[Message]:
    """Yield messages read from ``reader`` until end of input.

    Bytes left over at EOF without a CRLF are reported as
    ``UnterminatedMessageError`` under the same error policy.
    """
    settings = settings or WireSettings()
    buffer = LineBuffer(settings.max_line_length)
    while True:
        data = await reader.read(settings.read_chunk_size)
        if not data:
            break
        buffer.feed(data)
        for message in _drain(buffer, settings):
            yield message

    if len(buffer):
        logger.log_event(
            "stream", "eof_partial", level=logging.WARNING, length=len(buffer)
        )
        _handle_error(
            UnterminatedMessageError(
                "Input ended inside a line", data={"pending": buffer.pending}
            ),
            settings,
        )
    logger.log_event("stream", "eof", level=logging.DEBUG)
