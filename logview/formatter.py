"""Rendering of log records into display blocks."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from .constants import (
    DEFAULT_COLOR,
    ERROR_NOTICE,
    PAYLOAD_INDENT,
    PRIORITY_COLORS,
    UNRENDERABLE_PAYLOAD,
)
from .record import LogRecord

if TYPE_CHECKING:
    from blessed import Terminal


def priority_color(priority: str) -> str:
    """Get the blessed color name for a priority label (case-insensitive)."""
    return PRIORITY_COLORS.get(priority.lower(), DEFAULT_COLOR)


def format_payload(payload: Any) -> str:
    """Render a payload as display text.

    Strings are shown verbatim, anything else as indented JSON with sorted
    keys. A missing payload renders as an empty string.
    """
    if payload is None:
        return ""
    if isinstance(payload, str):
        return payload
    try:
        return json.dumps(
            payload, indent=PAYLOAD_INDENT, sort_keys=True, ensure_ascii=False
        )
    except (ValueError, RecursionError):
        # Decodable but too deep to pretty-print
        return UNRENDERABLE_PAYLOAD


class LineFormatter:
    """Builds the multi-line block shown for each log record."""

    def __init__(self, terminal: "Terminal"):
        self.term = terminal

    def _colorize(self, text: str, color_name: str) -> str:
        color_fn = getattr(self.term, color_name, None)
        if color_fn:
            return str(color_fn(text))
        return text

    def format(self, record: LogRecord) -> str:
        """Format a record as a header line followed by its payload."""
        header = " | ".join(
            (
                self._colorize(record.time, priority_color(record.priority)),
                record.namespace,
                record.priority,
            )
        )
        return f"{header}\n{format_payload(record.payload)}"

    def notice(self, message: str = ERROR_NOTICE) -> str:
        """Format a diagnostic message as a block."""
        return self._colorize(message, priority_color("error"))
