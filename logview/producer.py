"""Background ingestion of the JSON log stream."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import TextIO

from .constants import ERROR_NOTICE
from .events import Event, NewBlock
from .formatter import LineFormatter
from .record import RecordDecodeError, decode_record

_logger = logging.getLogger(__name__)


class IngestionProducer:
    """Reads lines from a stream and emits a NewBlock event per decoded record.

    The read loop blocks on the stream, so it runs on its own daemon thread.
    ``emit`` must not return until the event has been accepted; this keeps
    at most one event in flight and preserves line order.
    """

    def __init__(
        self,
        stream: TextIO,
        formatter: LineFormatter,
        emit: Callable[[Event], None],
    ) -> None:
        self.stream = stream
        self.formatter = formatter
        self.emit = emit
        self.lines_read = 0
        self.lines_skipped = 0
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    def start(self) -> threading.Thread:
        """Run the read loop on a daemon thread."""
        self._thread = threading.Thread(
            target=self.run, name="logview-ingest", daemon=True
        )
        self._thread.start()
        return self._thread

    def stop(self) -> None:
        """Ask the read loop to stop emitting.

        A read already blocked on the stream is not interrupted.
        """
        self._stop_event.set()

    @property
    def stopped(self) -> bool:
        return self._stop_event.is_set()

    def _emit(self, block: str) -> bool:
        if self._stop_event.is_set():
            return False
        self.emit(NewBlock(block))
        return True

    def run(self) -> None:
        """Read until end of stream, a read error, or stop()."""
        while True:
            try:
                line = self.stream.readline()
            except (OSError, ValueError) as e:
                _logger.error(f"Error reading input: {e}", exc_info=e)
                self._emit(self.formatter.notice(ERROR_NOTICE))
                return
            if not line:
                break

            self.lines_read += 1
            try:
                record = decode_record(line.rstrip("\r\n"))
            except RecordDecodeError as e:
                self.lines_skipped += 1
                _logger.debug(f"Skipping line {self.lines_read}: {e}")
                continue
            if not self._emit(self.formatter.format(record)):
                return

        _logger.info(
            f"End of input after {self.lines_read} lines "
            f"({self.lines_skipped} skipped)"
        )
