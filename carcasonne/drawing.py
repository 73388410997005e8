"""Box-drawing characters and the colours a text frame can use."""

from __future__ import annotations

import enum


class CharDrawing(enum.Enum):
    """Characters used to draw borders, each valued by its Unicode symbol."""

    NONE = " "
    CORNER_TOP_LEFT = "┌"
    CORNER_TOP_RIGHT = "┐"
    CORNER_BOTTOM_LEFT = "└"
    CORNER_BOTTOM_RIGHT = "┘"
    HORIZONTAL = "─"
    VERTICAL = "│"

    @property
    def char(self) -> str:
        """The character this drawing element is shown as."""
        return self.value

    def __str__(self) -> str:
        return self.value


class Color(enum.Enum):
    """A basic cell colour, valued by its 256-colour terminal palette index."""

    BLACK = 0
    WHITE = 15
    RED = 9
    BLUE = 12

    def ansi_foreground(self) -> str:
        """Return the escape sequence that sets this colour as the foreground."""
        return f"\x1b[38;5;{self.value}m"

    def ansi_background(self) -> str:
        """Return the escape sequence that sets this colour as the background."""
        return f"\x1b[48;5;{self.value}m"