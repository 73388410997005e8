"""High-level actions and raw input events, and the interface that maps one to the other."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod


class Action(enum.Enum):
    """A high-level intent that drives state transitions in the game."""

    START_GAME = enum.auto()
    STOP_GAME = enum.auto()
    BOTTOM = enum.auto()
    TOP = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    VALIDATE = enum.auto()
    QUIT = enum.auto()
    NONE = enum.auto()


class InputEvent(enum.Enum):
    """A low-level user input event, typically a key press."""

    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    ENTER = enum.auto()
    QUIT = enum.auto()


class InputHandler(ABC):
    """Something that turns input events into actions."""

    @abstractmethod
    def handle_input(self, event: InputEvent) -> Action:
        """Interpret ``event`` in context and return the resulting action."""