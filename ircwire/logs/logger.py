"""Domain/action event logger used by the framing layer."""

from __future__ import annotations

import logging
import os

from .event_catalog import EVENT_TEMPLATES


class WireLogger:
    """Renders ``domain_action`` events through a stdlib logger.

    The human-readable line comes from the event catalog when a template
    exists for ``(domain, action)``, otherwise it is derived from the names.
    No handlers are attached here; output goes wherever the application
    configured logging (see ``LoggerConfigurator``).
    """

    def __init__(self, name: str = "ircwire") -> None:
        # Fixed width for event name column when in debug (alignment)
        self._event_name_width = 32
        self.logger = logging.getLogger(name)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)

    def log_event(
        self,
        domain: str,
        action: str,
        level: int = logging.INFO,
        human: str | None = None,
        *,
        exc_info: bool = False,
        **kwargs: object,
    ) -> None:
        if not self.logger.isEnabledFor(level):
            return
        event_name = f"{domain}_{action}".lower()
        human_text = human
        if human_text is None:
            template = EVENT_TEMPLATES.get((domain, action))
            if template:
                try:
                    human_text = template.format(**kwargs)
                except (KeyError, IndexError, ValueError):
                    human_text = template
            else:
                human_text = f"{domain.replace('_', ' ')}: {action.replace('_', ' ')}"
                kwargs.setdefault("derived", True)
        msg = (
            self._build_debug_message(event_name, human_text, kwargs)
            if self._is_debug_enabled()
            else human_text
        )
        self.logger.log(level, msg, exc_info=exc_info)

    @staticmethod
    def _is_debug_enabled() -> bool:
        return os.environ.get("DEBUG", "false").lower() in ("true", "1", "yes")

    def _build_debug_message(
        self, event_name: str, human_text: str, kwargs: dict[str, object]
    ) -> str:
        context = ", ".join(f"{k}={v}" for k, v in kwargs.items())
        width = self._event_name_width
        if len(event_name) <= width:
            ev = event_name.ljust(width)
        else:  # truncate but keep rightmost indicator
            ev = event_name[: width - 1] + "…"
        base = f"{ev} {human_text}"
        if context:
            base = f"{base} ({context})"
        return base


logger = WireLogger()
