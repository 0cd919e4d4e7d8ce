"""Event-driven state machine owning the scrollback buffer."""

from __future__ import annotations

import logging

from .events import Event, KeyPress, NewBlock, Resize
from .input_handler import is_quit_key, is_scroll_down_key, is_scroll_up_key
from .scroll_buffer import ScrollBuffer

_logger = logging.getLogger(__name__)


class InputController:
    """Applies new-data, key and resize events to the scroll buffer.

    The controller is either running or stopped. Once stopped (quit key),
    every further event is ignored.
    """

    def __init__(self, buffer: ScrollBuffer | None = None) -> None:
        self.buffer = buffer if buffer is not None else ScrollBuffer()
        self.running = True

    def handle(self, event: Event) -> bool:
        """Apply an event.

        Returns:
            True if the frame should be re-rendered.
        """
        if not self.running:
            return False

        if isinstance(event, NewBlock):
            self.buffer.append(event.block)
            return True

        if isinstance(event, Resize):
            _logger.debug(f"Viewport resized to {event.width}x{event.height}")
            self.buffer.resize(event.width, event.height)
            return True

        if isinstance(event, KeyPress):
            return self._handle_key(event)

        return False

    def _handle_key(self, event: KeyPress) -> bool:
        key = event.key
        if is_quit_key(key):
            _logger.info("Quit requested")
            self.running = False
            return False

        if is_scroll_up_key(key):
            self.buffer.scroll_up()
            return True

        if is_scroll_down_key(key):
            self.buffer.scroll_down()
            return True

        return False
