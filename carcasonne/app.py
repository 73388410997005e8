"""The game loop and the command-line entry point."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, List, Optional

from carcasonne.actions import Action, InputEvent
from carcasonne.states import Continue, ExitToStop, MenuState, Skip, State
from carcasonne.terminal import Renderer, TextRenderer, read_input_event


class Game:
    """Run the state machine, feeding it input and rendering each state."""

    def __init__(
        self,
        renderer: Renderer,
        read_event: Optional[Callable[[], InputEvent]] = None,
    ) -> None:
        self._renderer = renderer
        self._read_event = read_event if read_event is not None else read_input_event
        self._state: State = MenuState()

    @property
    def state(self) -> State:
        """The state currently active."""
        return self._state

    def _rerender(self) -> None:
        self._renderer.render(self._state.draw())

    def _change_state(self, new_state: State) -> None:
        self._state = new_state
        self._rerender()

    def run(self) -> None:
        """Loop until the player quits or the game reaches its end."""
        self._rerender()
        while True:
            state = self._state
            if state.need_input():
                action = state.handle_input(self._read_event())
            else:
                action = Action.NONE

            if action is Action.QUIT:
                return

            match state.update(action):
                case Continue(state=next_state):
                    self._change_state(next_state)
                case Skip():
                    self._change_state(state)
                case ExitToStop():
                    return
                case other:
                    raise TypeError(f"unexpected state result {other!r}")


def main(argv: Optional[List[str]] = None) -> int:
    """Play a game in the terminal."""
    parser = argparse.ArgumentParser(
        prog="carcasonne",
        description="Play Carcassonne in the terminal: Enter confirms, q quits.",
    )
    parser.parse_args(argv)
    try:
        with TextRenderer(sys.stdout) as renderer:
            Game(renderer).run()
    except EOFError as exc:
        print(f"Fail to read input: {exc}", file=sys.stderr)
        return 1
    return 0