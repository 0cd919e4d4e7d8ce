"""Events delivered to the input controller."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from blessed.keyboard import Keystroke


@dataclass(frozen=True)
class NewBlock:
    """A formatted block is ready for display."""

    block: str


@dataclass(frozen=True)
class KeyPress:
    """The user pressed a key."""

    key: "Keystroke"


@dataclass(frozen=True)
class Resize:
    """The terminal changed size."""

    width: int
    height: int


Event = Union[NewBlock, KeyPress, Resize]
