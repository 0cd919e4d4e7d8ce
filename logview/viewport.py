"""Viewport management for rendering a window of the scrollback buffer."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .scroll_buffer import ScrollState


@dataclass
class Viewport:
    """Visible window (in blocks) into the scrollback buffer."""

    width: int = 0
    height: int = 0

    def max_offset(self, total: int) -> int:
        """Largest valid top offset for a buffer of `total` blocks."""
        return max(0, total - self.height)

    def clamp(self, offset: int, total: int) -> int:
        """Clamp an offset to the buffer bounds."""
        return max(0, min(offset, self.max_offset(total)))


def render_window(blocks: Sequence[str], offset: int, height: int) -> str:
    """Concatenate the visible blocks, each followed by a line break."""
    if height <= 0 or not blocks:
        return ""
    end = min(offset + height, len(blocks))
    return "".join(block + "\n" for block in blocks[offset:end])


def render(state: ScrollState) -> str:
    """Render the frame for the current scroll state.

    Width is tracked but not enforced: blocks are emitted verbatim.
    """
    return render_window(state.blocks, state.offset, state.height)
