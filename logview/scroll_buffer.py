"""Append-only scrollback buffer with a clamped scroll offset."""

from __future__ import annotations

from dataclasses import dataclass, field

from .viewport import Viewport


@dataclass
class ScrollState:
    """Blocks seen so far plus the current scroll position."""

    blocks: list[str] = field(default_factory=list)
    offset: int = 0  # index of the first visible block
    viewport: Viewport = field(default_factory=Viewport)

    @property
    def width(self) -> int:
        return self.viewport.width

    @property
    def height(self) -> int:
        return self.viewport.height


class ScrollBuffer:
    """Stores formatted blocks and tracks which of them are visible.

    The offset always stays within ``0..max(0, len(blocks) - height)``.
    """

    def __init__(self, state: ScrollState | None = None) -> None:
        self.state = state if state is not None else ScrollState()

    def __len__(self) -> int:
        return len(self.state.blocks)

    @property
    def offset(self) -> int:
        return self.state.offset

    @property
    def max_offset(self) -> int:
        return self.state.viewport.max_offset(len(self.state.blocks))

    def append(self, block: str) -> None:
        """Add a block at the end and follow the bottom of the buffer.

        The view snaps to the newest block whenever the buffer is taller than
        the viewport, even if the user had scrolled up.
        """
        state = self.state
        state.blocks.append(block)
        if len(state.blocks) > state.height:
            state.offset = len(state.blocks) - state.height

    def scroll_up(self) -> None:
        """Move the view one block towards the start."""
        self.state.offset = max(0, self.state.offset - 1)

    def scroll_down(self) -> None:
        """Move the view one block towards the end."""
        self.state.offset = min(self.state.offset + 1, self.max_offset)

    def resize(self, width: int, height: int) -> None:
        """Update the viewport size; existing blocks are not re-wrapped."""
        state = self.state
        state.viewport = Viewport(width=max(0, width), height=max(0, height))
        state.offset = state.viewport.clamp(state.offset, len(state.blocks))

    def current_window(self, height: int | None = None) -> list[str]:
        """Get the visible blocks, oldest first.

        Args:
            height: Number of blocks to return. None uses the viewport height.
        """
        if height is None:
            height = self.state.height
        if height <= 0:
            return []
        start = self.state.offset
        return self.state.blocks[start : start + height]
