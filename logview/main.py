"""Viewer entry point."""

import argparse
import asyncio
import logging
import os
import sys
from typing import TextIO

from blessed import Terminal

from . import __version__
from .constants import LOG_FILE_ENV
from .viewer import HostStartupError, LogViewer

_logger = logging.getLogger(__name__)


def setup_logging(log_file: str | None) -> None:
    """Configure logging; the terminal belongs to the viewer, so never stderr."""
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
        root.addHandler(file_handler)
    else:
        root.addHandler(logging.NullHandler())


def attach_keyboard(keep_data: bool = True) -> int | None:
    """Make sure stdin is a terminal so blessed can read keys.

    When log data is piped into stdin, descriptor 0 is re-pointed at the
    controlling terminal.

    Args:
        keep_data: Duplicate the piped data descriptor before replacing it.

    Returns:
        The duplicated data descriptor, or None if stdin already was a TTY
        or keep_data is False.

    Raises:
        HostStartupError: There is no controlling terminal to read keys from.
    """
    stdin_fd = sys.__stdin__.fileno()
    if os.isatty(stdin_fd):
        return None
    try:
        tty_fd = os.open("/dev/tty", os.O_RDONLY)
    except OSError as e:
        raise HostStartupError(f"cannot open controlling terminal: {e}") from e
    data_fd = os.dup(stdin_fd) if keep_data else None
    os.dup2(tty_fd, stdin_fd)
    os.close(tty_fd)
    return data_fd


def open_input(path: str) -> TextIO:
    """Open the log stream: a file path, or '-' for standard input."""
    if path != "-":
        try:
            stream = open(path, encoding="utf-8", errors="replace")
        except OSError as e:
            raise HostStartupError(f"cannot open {path}: {e}") from e
        try:
            attach_keyboard(keep_data=False)
        except HostStartupError:
            stream.close()
            raise
        return stream

    data_fd = attach_keyboard()
    if data_fd is None:
        return sys.stdin
    return os.fdopen(data_fd, "r", encoding="utf-8", errors="replace")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Interactive viewer for newline-delimited JSON logs"
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Log file to read (default: standard input)",
    )
    parser.add_argument(
        "--log",
        default=os.environ.get(LOG_FILE_ENV),
        help=f"Debug log file path (default: ${LOG_FILE_ENV})",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    args = parser.parse_args()

    setup_logging(args.log)

    try:
        stream = open_input(args.input)
        viewer = LogViewer(stream, Terminal())
        asyncio.run(viewer.run())
    except HostStartupError as e:
        _logger.error(f"Startup failed: {e}")
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
