"""
Configuration constants for the IRC wire library

Defaults for the line framing layer. Each constant can be overridden by
setting an environment variable with the same name.
"""

import os


def _get_env_int(name: str, default: int) -> int:
    """Retrieve an integer value from an environment variable.

    Attempts to parse the environment variable as an integer. If the variable
    is not set or cannot be parsed, prints a warning and returns the default.

    Args:
        name: The name of the environment variable to read.
        default: The default integer value to return if parsing fails.

    Returns:
        The parsed integer value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            print(
                f"Warning: Invalid integer value for {name}='{value}', using default {default}"
            )
    return default


def _get_env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value else default


# Line framing (RFC 1459 section 2.3: 512 bytes including CRLF)
IRCWIRE_MAX_LINE_LENGTH = _get_env_int("IRCWIRE_MAX_LINE_LENGTH", 512)
IRCWIRE_READ_CHUNK_SIZE = _get_env_int(
    "IRCWIRE_READ_CHUNK_SIZE", 4096
)  # Bytes requested per StreamReader.read call

# Text decoding
IRCWIRE_ENCODING = _get_env_str("IRCWIRE_ENCODING", "utf-8")
IRCWIRE_FALLBACK_ENCODING = _get_env_str(
    "IRCWIRE_FALLBACK_ENCODING", "latin-1"
)  # Used when a line is not valid in the primary encoding

# Error policy for framed input: "raise" or "skip"
IRCWIRE_ON_ERROR = _get_env_str("IRCWIRE_ON_ERROR", "raise")
