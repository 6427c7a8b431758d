"""Tests for line framing, decoding and the error policy."""

from __future__ import annotations

import asyncio
import logging

import pytest

from ircwire.config.model import WireSettings
from ircwire.errors.internal import (
    LineTooLongError,
    UnknownVerbError,
    UnterminatedMessageError,
)
from ircwire.irc import commands as cmd
from ircwire.irc.message import Message, Prefix
from ircwire.irc.stream import (
    LineBuffer,
    decode_line,
    encode_message,
    iter_messages,
    read_messages,
)


class TestLineBuffer:
    def test_splits_on_crlf(self):
        buffer = LineBuffer()
        buffer.feed(b"PING a\r\nPING")
        assert buffer.pop_line() == b"PING a\r\n"
        assert buffer.pop_line() is None
        assert buffer.pending == b"PING"
        buffer.feed(b" b\r\n")
        assert list(buffer) == [b"PING b\r\n"]
        assert len(buffer) == 0

    def test_lone_lf_does_not_end_a_line(self):
        buffer = LineBuffer()
        buffer.feed(b"PING a\nPING b\r\n")
        assert buffer.pop_line() == b"PING a\nPING b\r\n"

    def test_complete_line_too_long_is_dropped(self):
        buffer = LineBuffer(max_line_length=10)
        buffer.feed(b"PRIVMSG #a :hello\r\nPING x\r\n")
        with pytest.raises(LineTooLongError) as exc:
            buffer.pop_line()
        assert exc.value.length == 19
        assert exc.value.limit == 10
        assert buffer.pop_line() == b"PING x\r\n"

    def test_partial_line_too_long_is_discarded_until_crlf(self):
        buffer = LineBuffer(max_line_length=10)
        buffer.feed(b"x" * 11)
        with pytest.raises(LineTooLongError):
            buffer.pop_line()
        assert len(buffer) == 0
        buffer.feed(b"yy\r\nPING\r\n")
        assert buffer.pop_line() == b"PING\r\n"

    def test_zero_disables_limit(self):
        buffer = LineBuffer(max_line_length=0)
        buffer.feed(b"x" * 1000 + b"\r\n")
        assert len(buffer.pop_line()) == 1002


class TestCodec:
    def test_decode_utf8(self):
        assert decode_line(b"caf\xc3\xa9\r\n") == "café\r\n"

    def test_decode_falls_back(self):
        assert decode_line(b"caf\xe9\r\n") == "café\r\n"

    def test_encode_message(self):
        assert encode_message(Message(cmd.Ping("a"))) == b"PING a\r\n"


class TestIterMessages:
    def test_text_and_bytes(self):
        messages = list(iter_messages(["PING a\r\n", b"PONG b\r\n"]))
        assert messages == [Message(cmd.Ping("a")), Message(cmd.Pong("b"))]

    def test_raise_policy(self):
        with pytest.raises(UnknownVerbError):
            list(iter_messages(["FOO\r\n", "PING a\r\n"]))

    def test_skip_policy_logs_and_continues(self, skip_settings, caplog):
        caplog.set_level(logging.DEBUG)
        messages = list(iter_messages(["FOO\r\n", "PING a\r\n"], skip_settings))
        assert messages == [Message(cmd.Ping("a"))]
        assert "[PARSING] Skipping line" in caplog.text
        assert "kind='unknown_verb'" in caplog.text
        skipped = [r for r in caplog.records if getattr(r, "error_type", None) == "parsing"]
        assert len(skipped) == 1
        assert skipped[0].levelno == logging.WARNING

    def test_skip_policy_never_escalates(self, skip_settings, caplog):
        caplog.set_level(logging.DEBUG)
        lines = ["FOO\r\n"] * 12 + ["PING a\r\n"]
        messages = list(iter_messages(lines, skip_settings))
        assert messages == [Message(cmd.Ping("a"))]
        assert not [r for r in caplog.records if r.levelno >= logging.ERROR]
        assert len([r for r in caplog.records if getattr(r, "error_type", None) == "parsing"]) == 12


def _reader(*chunks: bytes) -> asyncio.StreamReader:
    reader = asyncio.StreamReader()
    for chunk in chunks:
        reader.feed_data(chunk)
    reader.feed_eof()
    return reader


class TestReadMessages:
    @pytest.mark.asyncio
    async def test_reassembles_lines_across_chunks(self):
        reader = _reader(b"PING a\r\nPO", b"NG b\r", b"\n")
        messages = [m async for m in read_messages(reader)]
        assert messages == [Message(cmd.Ping("a")), Message(cmd.Pong("b"))]

    @pytest.mark.asyncio
    async def test_small_reads(self):
        reader = _reader(b":srv PRIVMSG #a :hello world\r\n")
        settings = WireSettings(read_chunk_size=3)
        messages = [m async for m in read_messages(reader, settings)]
        assert messages == [Message(cmd.Privmsg(["#a"], "hello world"), Prefix("srv"))]

    @pytest.mark.asyncio
    async def test_unterminated_at_eof_raises(self):
        reader = _reader(b"PING a\r\nQUIT")
        received = []
        with pytest.raises(UnterminatedMessageError):
            async for message in read_messages(reader):
                received.append(message)
        assert received == [Message(cmd.Ping("a"))]

    @pytest.mark.asyncio
    async def test_skip_policy(self, skip_settings, caplog):
        caplog.set_level(logging.DEBUG)
        reader = _reader(b"BOGUS\r\nPING a\r\nQUIT")
        messages = [m async for m in read_messages(reader, skip_settings)]
        assert messages == [Message(cmd.Ping("a"))]
        assert "4 unterminated bytes" in caplog.text

    @pytest.mark.asyncio
    async def test_line_too_long_is_skipped(self, caplog):
        caplog.set_level(logging.DEBUG)
        settings = WireSettings(max_line_length=16, on_error="skip")
        reader = _reader(b"PRIVMSG #a :" + b"x" * 40 + b"\r\nPING a\r\n")
        messages = [m async for m in read_messages(reader, settings)]
        assert messages == [Message(cmd.Ping("a"))]
        assert "Dropped line" in caplog.text
