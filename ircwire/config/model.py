from __future__ import annotations

import codecs
from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constants import (
    _get_env_int,
    _get_env_str,
    IRCWIRE_ENCODING,
    IRCWIRE_FALLBACK_ENCODING,
    IRCWIRE_MAX_LINE_LENGTH,
    IRCWIRE_ON_ERROR,
    IRCWIRE_READ_CHUNK_SIZE,
)

ErrorPolicy = Literal["raise", "skip"]


class WireSettings(BaseModel):
    """Settings for the line framing layer.

    The grammar itself takes no configuration; these only affect how raw
    input is split, decoded and how failures are reported.

    Attributes:
        max_line_length: Maximum framed line length in bytes including CRLF.
            0 disables the check.
        encoding: Primary text encoding of the connection.
        fallback_encoding: Encoding tried when a line is not valid in
            ``encoding``.
        on_error: "raise" propagates the first parse error, "skip" logs it
            and drops the line.
        read_chunk_size: Bytes requested per read from a stream.
    """

    model_config = ConfigDict(frozen=True)

    max_line_length: int = Field(default=IRCWIRE_MAX_LINE_LENGTH, ge=0)
    encoding: str = IRCWIRE_ENCODING
    fallback_encoding: str = IRCWIRE_FALLBACK_ENCODING
    on_error: ErrorPolicy = "raise"
    read_chunk_size: int = Field(default=IRCWIRE_READ_CHUNK_SIZE, gt=0)

    @field_validator("encoding", "fallback_encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Reject codec names Python does not know."""
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {v}") from e
        return v

    @field_validator("on_error", mode="before")
    @classmethod
    def normalize_policy(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> WireSettings:
        """Create WireSettings from a dictionary, ignoring unknown keys.

        Args:
            data: Dictionary containing settings values.

        Returns:
            WireSettings instance.
        """
        known = {k: v for k, v in data.items() if k in cls.model_fields}
        return cls.model_validate(known)

    @classmethod
    def from_env(cls) -> WireSettings:
        """Create WireSettings from the ``IRCWIRE_*`` environment variables.

        Variables are read at call time; unset ones fall back to the module
        defaults.
        """
        return cls(
            max_line_length=_get_env_int(
                "IRCWIRE_MAX_LINE_LENGTH", IRCWIRE_MAX_LINE_LENGTH
            ),
            encoding=_get_env_str("IRCWIRE_ENCODING", IRCWIRE_ENCODING),
            fallback_encoding=_get_env_str(
                "IRCWIRE_FALLBACK_ENCODING", IRCWIRE_FALLBACK_ENCODING
            ),
            on_error=_get_env_str("IRCWIRE_ON_ERROR", IRCWIRE_ON_ERROR),
            read_chunk_size=_get_env_int(
                "IRCWIRE_READ_CHUNK_SIZE", IRCWIRE_READ_CHUNK_SIZE
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()
