"""Terminal output of layout trees and blocking keyboard input."""

from __future__ import annotations

import os
import sys
from abc import ABC, abstractmethod
from typing import Any, Optional, TextIO, Tuple

from carcasonne.actions import InputEvent
from carcasonne.layout import Node
from carcasonne.render import frame_from_node

try:
    import termios
    import tty
except ImportError:  # no POSIX terminal control on this platform
    termios = None  # type: ignore[assignment]
    tty = None  # type: ignore[assignment]

CLEAR_SCREEN = "\x1b[2J"
CURSOR_HOME = "\x1b[H"
RESET_COLOR = "\x1b[0m"

_ARROW_KEYS = {
    "A": InputEvent.UP,
    "B": InputEvent.DOWN,
    "C": InputEvent.RIGHT,
    "D": InputEvent.LEFT,
}


class Renderer(ABC):
    """Something that shows a layout tree."""

    @abstractmethod
    def render(self, node: Node) -> None:
        """Show ``node`` as the whole screen."""


class TextRenderer(Renderer):
    """Draw layout trees as coloured text on a terminal.

    Puts the controlling terminal in raw mode while open, when standard input
    is a terminal; `close` (or leaving the ``with`` block) restores it.
    """

    def __init__(self, out: TextIO) -> None:
        self._out = out
        self._saved: Optional[Tuple[int, Any]] = None
        self._enable_raw_mode()

    def _enable_raw_mode(self) -> None:
        if termios is None:
            return
        try:
            fd = sys.stdin.fileno()
        except (AttributeError, OSError, ValueError):
            return
        if not os.isatty(fd):
            return
        try:
            attrs = termios.tcgetattr(fd)
            tty.setraw(fd)
        except termios.error:
            return
        self._saved = (fd, attrs)

    @property
    def raw_mode(self) -> bool:
        """Whether the terminal is currently in raw mode."""
        return self._saved is not None

    def render(self, node: Node) -> None:
        out = self._out
        out.write(CLEAR_SCREEN + CURSOR_HOME)
        out.flush()

        frame = frame_from_node(node)
        newline = "\r\n" if self.raw_mode else "\n"
        for row in frame.cells:
            out.write(
                "".join(
                    f"{cell.foreground_color.ansi_foreground()}{cell.symbol}{RESET_COLOR}"
                    for cell in row
                )
            )
            out.write(newline)
        out.flush()

    def close(self) -> None:
        """Restore the terminal mode saved at creation."""
        if self._saved is None:
            return
        fd, attrs = self._saved
        self._saved = None
        termios.tcsetattr(fd, termios.TCSADRAIN, attrs)

    def __enter__(self) -> TextRenderer:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def _read_char(stream: TextIO) -> str:
    char = stream.read(1)
    if not char:
        raise EOFError("input stream closed")
    return char


def read_input_event(stream: Optional[TextIO] = None) -> InputEvent:
    """Block until a mapped key is read from ``stream`` (standard input by default).

    Arrow keys give directions, Enter gives ``ENTER`` and ``q`` gives ``QUIT``;
    every other key is ignored. Raises EOFError when the stream ends.
    """
    source = sys.stdin if stream is None else stream
    while True:
        char = _read_char(source)
        if char in ("\r", "\n"):
            return InputEvent.ENTER
        if char == "q":
            return InputEvent.QUIT
        if char == "\x1b" and _read_char(source) in ("[", "O"):
            event = _ARROW_KEYS.get(_read_char(source))
            if event is not None:
                return event