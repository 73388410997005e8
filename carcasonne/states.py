"""Game states: the main menu, the playing phase with its sub-states, and the end."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from carcasonne.actions import Action, InputEvent
from carcasonne.factory import build_base_game
from carcasonne.layout import (
    EmptyNode,
    Framed,
    HorizontalContainer,
    Node,
    TextNode,
    TileNode,
    VerticalContainer,
)
from carcasonne.tiles import GameContext, GameTiles, Tile

_S = TypeVar("_S")

MENU_TEXT = "Press <Enter> to start playing"
PLAYING_TITLE = "Game Is Running"
STOP_TEXT = "Fin du jeu"


@dataclass(frozen=True)
class Skip:
    """Keep the current state active."""


@dataclass(frozen=True)
class Continue(Generic[_S]):
    """Replace the current state with ``state``."""

    state: _S


@dataclass(frozen=True)
class ExitToStop:
    """Stop the state machine."""


StateResult = Union[Skip, "Continue[State]", ExitToStop]
PlayingStateResult = Union["Continue[PlayingState]", ExitToStop]


class State(ABC):
    """One state of the application's state machine."""

    @abstractmethod
    def update(self, action: Action) -> StateResult:
        """Apply ``action`` and say which state comes next."""

    @abstractmethod
    def draw(self) -> Node:
        """Return the layout tree showing this state."""

    @abstractmethod
    def handle_input(self, event: InputEvent) -> Action:
        """Turn an input event into an action for this state."""

    def need_input(self) -> bool:
        """Whether this state waits for user input before updating."""
        return False


class MenuState(State):
    """The start menu: Enter starts a game, q quits."""

    def update(self, action: Action) -> StateResult:
        if action is Action.START_GAME:
            return Continue(PlayingPhase(SelectTileState(), build_base_game()))
        return Skip()

    def draw(self) -> Node:
        return TextNode(MENU_TEXT)

    def handle_input(self, event: InputEvent) -> Action:
        if event is InputEvent.QUIT:
            return Action.QUIT
        if event is InputEvent.ENTER:
            return Action.START_GAME
        return Action.NONE

    def need_input(self) -> bool:
        return True


class StopState(State):
    """The end of the game: stops the state machine on its first update."""

    def update(self, action: Action) -> StateResult:
        return ExitToStop()

    def draw(self) -> Node:
        return TextNode(STOP_TEXT)

    def handle_input(self, event: InputEvent) -> Action:
        return Action.NONE

    def need_input(self) -> bool:
        return False


class PlayingState(ABC):
    """A step of the playing phase, working on the shared game context."""

    @abstractmethod
    def update_game(self, action: Action, context: GameContext) -> PlayingStateResult:
        """Apply ``action`` to ``context`` and say which step comes next."""

    @abstractmethod
    def draw(self) -> Node:
        """Return the layout tree showing this step."""

    @abstractmethod
    def handle_input(self, event: InputEvent) -> Action:
        """Turn an input event into an action for this step."""

    def need_input(self) -> bool:
        """Whether this step waits for user input."""
        return True


class PlayingPhase(State):
    """The running game: drives its playing states over a shared context."""

    def __init__(self, default_state: PlayingState, tiles: GameTiles) -> None:
        self.current_state = default_state
        self.context = GameContext(list(tiles.available_tiles), tiles.rng)

    def update(self, action: Action) -> StateResult:
        result = self.current_state.update_game(action, self.context)
        if isinstance(result, Continue):
            self.current_state = result.state
            return Skip()
        return Continue(StopState())

    def draw(self) -> Node:
        inner = self.current_state.draw()
        if isinstance(inner, EmptyNode):
            return EmptyNode()
        return VerticalContainer(
            (
                TextNode(PLAYING_TITLE),
                Framed(inner),
                HorizontalContainer((inner,) * 4),
            )
        )

    def handle_input(self, event: InputEvent) -> Action:
        return self.current_state.handle_input(event)

    def need_input(self) -> bool:
        return self.current_state.need_input()


class SelectTileState(PlayingState):
    """Draw a random tile; stop the game when none is left."""

    def update_game(self, action: Action, context: GameContext) -> PlayingStateResult:
        tile = context.select_random_tile()
        if tile is None:
            return ExitToStop()
        return Continue(PlaceTileState(tile))

    def draw(self) -> Node:
        return EmptyNode()

    def handle_input(self, event: InputEvent) -> Action:
        return Action.NONE

    def need_input(self) -> bool:
        return False


class PlaceTileState(PlayingState):
    """Show the drawn tile and wait for it to be placed."""

    def __init__(self, tile: Tile) -> None:
        self.tile = tile

    def update_game(self, action: Action, context: GameContext) -> PlayingStateResult:
        return Continue(SelectTileState())

    def draw(self) -> Node:
        return TileNode(self.tile)

    def handle_input(self, event: InputEvent) -> Action:
        if event is InputEvent.ENTER:
            return Action.VALIDATE
        return Action.NONE

    def need_input(self) -> bool:
        return True