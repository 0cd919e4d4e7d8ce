"""Terminal frame painting with blessed."""

from blessed import Terminal


class TerminalUI:
    def __init__(self, terminal: Terminal):
        self.term = terminal

    def size(self) -> tuple[int, int]:
        """Current terminal (width, height)."""
        return self.term.width, self.term.height

    def paint(self, frame: str) -> None:
        """Replace the screen contents with a rendered frame."""
        print(self.term.home + self.term.clear + frame, end="", flush=True)

    def cleanup(self) -> None:
        """Restore terminal state."""
        print(self.term.normal + self.term.clear, end="", flush=True)
