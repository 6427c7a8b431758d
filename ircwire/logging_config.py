r"""
Logging configuration for applications embedding ircwire.

Provides a colorlog console setup plus structured error logging on the
``ircwire`` logger. The library never configures logging on import; call
``LoggerConfigurator().configure()`` from the application.
"""

import logging
import os
import sys
from typing import Any

import colorlog


def log_structured_error(
    error_type: str,
    message: str,
    exception: Exception = None,
    context: dict[str, Any] = None,
    level: int = logging.ERROR
) -> None:
    """Log an error with structured context.

    The record carries ``error_type`` and ``error_context`` attributes so
    handlers can filter or count errors without parsing the message.

    Args:
        error_type: Category of the error (e.g., 'parsing', 'encoding')
        message: Descriptive error message
        exception: The exception that occurred (optional)
        context: Additional context data for debugging
        level: Logging level (default: ERROR)
    """
    structured_message = f"[{error_type.upper()}] {message}"

    if exception:
        structured_message += f" | Exception: {type(exception).__name__}: {str(exception)}"

    if context:
        context_str = " | ".join(f"{k}={v!r}" for k, v in context.items())
        structured_message += f" | Context: {context_str}"

    logging.getLogger("ircwire").log(
        level,
        structured_message,
        extra={"error_type": error_type, "error_context": dict(context or {})},
    )


class LoggerConfigurator:
    """Handles logging configuration cleanly using colorlog.

    Supports environment variable configuration for log levels.
    """

    def __init__(self, config=None):
        """Initialize the configurator.

        Args:
            config: Optional dict; ``stream`` overrides the output stream.
        """
        self.config = config or {}

    def build_formatter(self) -> colorlog.ColoredFormatter:
        return colorlog.ColoredFormatter(
            "%(asctime)s %(log_color)s%(levelname)-8s%(reset)s %(message_log_color)s%(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "magenta",
            },
            secondary_log_colors={
                "message": {
                    "ERROR": "red",
                    "CRITICAL": "magenta",
                }
            },
            reset=True,
        )

    def configure(self) -> logging.Handler:
        """Attach a colored console handler to the ``ircwire`` logger.

        Uses environment variables:
        - DEBUG: Set to 'true', '1', or 'yes' for DEBUG level, otherwise INFO
        """
        debug_env = os.environ.get("DEBUG", "").lower()
        log_level = logging.DEBUG if debug_env in ("true", "1", "yes") else logging.INFO

        handler = logging.StreamHandler(self.config.get("stream", sys.stderr))
        handler.setFormatter(self.build_formatter())

        package_logger = logging.getLogger("ircwire")
        package_logger.setLevel(log_level)
        # Replace a handler from an earlier configure() call rather than stacking.
        for existing in list(package_logger.handlers):
            if getattr(existing, "_ircwire_handler", False):
                package_logger.removeHandler(existing)
        handler._ircwire_handler = True
        package_logger.addHandler(handler)
        return handler
