"""Tests for viewport clamping and frame rendering."""

from __future__ import annotations

from logview.scroll_buffer import ScrollState
from logview.viewport import Viewport, render, render_window


def make_state(blocks: list[str], offset: int, height: int) -> ScrollState:
    return ScrollState(blocks=blocks, offset=offset, viewport=Viewport(80, height))


class TestViewport:
    """Tests for Viewport clamp helpers."""

    def test_max_offset(self) -> None:
        viewport = Viewport(width=80, height=3)
        assert viewport.max_offset(10) == 7
        assert viewport.max_offset(2) == 0

    def test_clamp(self) -> None:
        viewport = Viewport(width=80, height=3)
        assert viewport.clamp(-4, 10) == 0
        assert viewport.clamp(5, 10) == 5
        assert viewport.clamp(9, 10) == 7


class TestRender:
    """Tests for render."""

    def test_empty_buffer(self) -> None:
        assert render(make_state([], 0, 10)) == ""

    def test_zero_height(self) -> None:
        assert render(make_state(["a", "b"], 0, 0)) == ""

    def test_negative_height(self) -> None:
        assert render_window(["a", "b"], 0, -1) == ""

    def test_each_block_followed_by_newline(self) -> None:
        assert render(make_state(["a", "b"], 0, 5)) == "a\nb\n"

    def test_window_slice(self) -> None:
        blocks = ["b0", "b1", "b2", "b3", "b4"]
        assert render(make_state(blocks, 2, 2)) == "b2\nb3\n"

    def test_window_at_end(self) -> None:
        blocks = ["b0", "b1", "b2"]
        assert render(make_state(blocks, 1, 5)) == "b1\nb2\n"

    def test_multiline_blocks_verbatim(self) -> None:
        blocks = ["t1 | svc | info\nhello", "t2 | svc | error\n{\n  \"code\": 500\n}"]
        frame = render(make_state(blocks, 0, 2))
        assert frame == blocks[0] + "\n" + blocks[1] + "\n"

    def test_width_not_enforced(self) -> None:
        state = ScrollState(blocks=["x" * 200], offset=0, viewport=Viewport(10, 1))
        assert render(state) == "x" * 200 + "\n"

    def test_idempotent(self) -> None:
        state = make_state(["a", "b", "c"], 1, 2)
        assert render(state) == render(state)
