"""Interactive terminal viewer for newline-delimited JSON logs.

Example usage:

    my-service 2>&1 | logview
    logview --log /tmp/logview.log service.jsonl
"""

from .controller import InputController
from .formatter import LineFormatter, format_payload, priority_color
from .producer import IngestionProducer
from .record import LogRecord, RecordDecodeError, decode_record
from .scroll_buffer import ScrollBuffer, ScrollState
from .viewport import Viewport, render

__version__ = "0.1.0"

__all__ = [
    "InputController",
    "IngestionProducer",
    "LineFormatter",
    "LogRecord",
    "RecordDecodeError",
    "ScrollBuffer",
    "ScrollState",
    "Viewport",
    "decode_record",
    "format_payload",
    "priority_color",
    "render",
]
