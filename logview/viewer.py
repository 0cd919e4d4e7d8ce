"""Asyncio host loop wiring ingestion, input handling and rendering."""

from __future__ import annotations

import asyncio
import concurrent.futures
import logging
import warnings
from typing import Any, TextIO

from blessed import Terminal

from .constants import FRAME_INTERVAL
from .controller import InputController
from .events import Event, KeyPress, Resize
from .formatter import LineFormatter
from .producer import IngestionProducer
from .terminal_ui import TerminalUI
from .viewport import render

_logger = logging.getLogger(__name__)


class HostStartupError(RuntimeError):
    """Raised when the terminal host cannot be initialized."""


def _asyncio_exception_handler(
    loop: asyncio.AbstractEventLoop, context: dict[str, Any]
) -> None:
    """Log unhandled task exceptions instead of printing over the TUI."""
    exception = context.get("exception")
    message = context.get("message", "Unhandled exception in asyncio task")
    if exception:
        _logger.error(f"{message}: {exception}", exc_info=exception)
    else:
        _logger.error(message)


class LogViewer:
    """Interactive viewer for a stream of JSON log lines."""

    def __init__(self, stream: TextIO, terminal: Terminal | None = None) -> None:
        self.stream = stream
        self.term: Any = terminal if terminal is not None else Terminal()
        self.ui = TerminalUI(self.term)
        self.controller = InputController()
        self.formatter = LineFormatter(self.term)
        self._loop: asyncio.AbstractEventLoop | None = None
        # One-way channel from the producer thread; maxsize=1 keeps one event in flight
        self._events: asyncio.Queue[Event] | None = None
        self._producer: IngestionProducer | None = None
        self._size: tuple[int, int] = (0, 0)
        self._needs_render = True

    def check_terminal(self) -> None:
        """Fail early when there is no usable terminal to draw on."""
        if not self.term.is_a_tty:
            raise HostStartupError("output is not a terminal")

    def dispatch(self, event: Event) -> None:
        """Apply one event on the event-loop thread."""
        if self.controller.handle(event):
            self._needs_render = True

    def _emit_threadsafe(self, event: Event) -> None:
        """Hand an event to the loop from the producer thread and wait for it."""
        assert self._loop is not None and self._events is not None
        try:
            future = asyncio.run_coroutine_threadsafe(
                self._events.put(event), self._loop
            )
            future.result()
        except (RuntimeError, concurrent.futures.CancelledError):
            # The loop went away after quit; the producer is being abandoned
            if self._producer is None or not self._producer.stopped:
                raise

    async def _consume_events(self) -> None:
        assert self._events is not None
        while self.controller.running:
            event = await self._events.get()
            self.dispatch(event)

    def _poll_size(self) -> None:
        size = self.ui.size()
        if size != self._size:
            self._size = size
            self.dispatch(Resize(width=size[0], height=size[1]))

    def _poll_keys(self) -> None:
        while self.controller.running:
            key = self.term.inkey(timeout=0)
            if not key:
                break
            self.dispatch(KeyPress(key))

    async def run(self) -> None:
        """Main viewer loop; returns when the user quits."""
        self.check_terminal()
        self._loop = asyncio.get_running_loop()
        self._events = asyncio.Queue(maxsize=1)

        # Keep asyncio errors and Python warnings off the screen
        self._loop.set_exception_handler(_asyncio_exception_handler)
        logging.captureWarnings(True)
        warnings.filterwarnings("always")

        self._producer = IngestionProducer(
            self.stream, self.formatter, self._emit_threadsafe
        )
        self._producer.start()
        consumer_task = asyncio.create_task(self._consume_events())

        try:
            with self.term.fullscreen(), self.term.cbreak(), self.term.hidden_cursor():
                while self.controller.running:
                    self._poll_size()
                    self._poll_keys()
                    if not self.controller.running:
                        break

                    if self._needs_render:
                        self.ui.paint(render(self.controller.buffer.state))
                        self._needs_render = False

                    await asyncio.sleep(FRAME_INTERVAL)
        finally:
            # The producer's blocking read is abandoned, not interrupted
            self._producer.stop()
            consumer_task.cancel()
            try:
                await consumer_task
            except asyncio.CancelledError:
                pass
            self.ui.cleanup()
