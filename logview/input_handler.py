"""Keyboard command classification."""

from __future__ import annotations

from blessed.keyboard import Keystroke

_QUIT_CHARS = ("q", "\x03")  # q or Ctrl+C


def is_quit_key(key: Keystroke) -> bool:
    """Check if key quits the viewer."""
    return not key.is_sequence and str(key) in _QUIT_CHARS


def is_scroll_up_key(key: Keystroke) -> bool:
    """Check if key scrolls the view up by one block."""
    return key.name == "KEY_UP"


def is_scroll_down_key(key: Keystroke) -> bool:
    """Check if key scrolls the view down by one block."""
    return key.name == "KEY_DOWN"
