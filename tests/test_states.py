import random

import pytest

from carcasonne.actions import Action, InputEvent
from carcasonne.builders import TileBuilder
from carcasonne.factory import build_base_game
from carcasonne.layout import (
    EmptyNode,
    Framed,
    HorizontalContainer,
    TextNode,
    TileNode,
    VerticalContainer,
)
from carcasonne.states import (
    Continue,
    ExitToStop,
    MenuState,
    PlaceTileState,
    PlayingPhase,
    SelectTileState,
    Skip,
    State,
    StopState,
)
from carcasonne.tiles import Edge, GameContext, GameTiles


def _tile():
    return TileBuilder().add_town([Edge.NORTH]).build()


@pytest.mark.parametrize(
    "event, expected",
    [
        (InputEvent.ENTER, Action.START_GAME),
        (InputEvent.QUIT, Action.QUIT),
        (InputEvent.UP, Action.NONE),
        (InputEvent.LEFT, Action.NONE),
    ],
)
def test_menu_handle_input(event, expected):
    assert MenuState().handle_input(event) is expected


def test_menu_draw_and_need_input():
    menu = MenuState()
    assert menu.draw() == TextNode("Press <Enter> to start playing")
    assert menu.need_input() is True


def test_menu_update_skips_other_actions():
    assert MenuState().update(Action.NONE) == Skip()
    assert MenuState().update(Action.VALIDATE) == Skip()


def test_menu_start_game_builds_playing_phase_with_base_game():
    result = MenuState().update(Action.START_GAME)
    assert isinstance(result, Continue)
    phase = result.state
    assert isinstance(phase, PlayingPhase)
    assert isinstance(phase.current_state, SelectTileState)
    assert len(phase.context) == len(build_base_game())


def test_stop_state():
    stop = StopState()
    assert stop.update(Action.VALIDATE) == ExitToStop()
    assert stop.draw() == TextNode("Fin du jeu")
    assert stop.handle_input(InputEvent.ENTER) is Action.NONE
    assert stop.need_input() is False


def test_state_default_need_input_is_false():
    class Minimal(State):
        def update(self, action):
            return Skip()

        def draw(self):
            return EmptyNode()

        def handle_input(self, event):
            return Action.NONE

    minimal = Minimal()
    assert minimal.need_input() is False
    assert minimal.update(Action.NONE) == Skip()
    assert minimal.draw() == EmptyNode()


def test_select_tile_from_empty_context_stops():
    context = GameContext([])
    assert SelectTileState().update_game(Action.NONE, context) == ExitToStop()


def test_select_tile_draws_tile_into_place_state():
    tile = _tile()
    context = GameContext([tile])
    result = SelectTileState().update_game(Action.NONE, context)
    assert isinstance(result, Continue)
    assert isinstance(result.state, PlaceTileState)
    assert result.state.draw() == TileNode(tile)
    assert len(context) == 0


def test_select_tile_state_needs_no_input_and_draws_nothing():
    state = SelectTileState()
    assert state.need_input() is False
    assert state.draw() == EmptyNode()
    assert state.handle_input(InputEvent.ENTER) is Action.NONE


@pytest.mark.parametrize(
    "event, expected",
    [
        (InputEvent.ENTER, Action.VALIDATE),
        (InputEvent.QUIT, Action.NONE),
        (InputEvent.DOWN, Action.NONE),
    ],
)
def test_place_tile_handle_input(event, expected):
    assert PlaceTileState(_tile()).handle_input(event) is expected


def test_place_tile_update_returns_to_select():
    state = PlaceTileState(_tile())
    context = GameContext([_tile()])
    result = state.update_game(Action.VALIDATE, context)
    assert isinstance(result, Continue)
    assert isinstance(result.state, SelectTileState)
    assert len(context) == 1
    assert state.need_input() is True


def test_playing_phase_cycle_with_one_tile():
    tile = _tile()
    phase = PlayingPhase(SelectTileState(), GameTiles([tile]))
    assert phase.need_input() is False
    assert phase.draw() == EmptyNode()

    assert phase.update(Action.NONE) == Skip()
    assert isinstance(phase.current_state, PlaceTileState)
    assert phase.need_input() is True
    assert phase.handle_input(InputEvent.ENTER) is Action.VALIDATE
    assert phase.draw() == VerticalContainer(
        (
            TextNode("Game Is Running"),
            Framed(TileNode(tile)),
            HorizontalContainer((TileNode(tile),) * 4),
        )
    )

    assert phase.update(Action.VALIDATE) == Skip()
    assert isinstance(phase.current_state, SelectTileState)

    result = phase.update(Action.NONE)
    assert isinstance(result, Continue)
    assert isinstance(result.state, StopState)


def test_playing_phase_does_not_consume_source_tiles():
    tiles = GameTiles([_tile(), _tile()])
    phase = PlayingPhase(SelectTileState(), tiles)
    phase.update(Action.NONE)
    assert len(tiles) == 2
    assert len(phase.context) == 1


def test_playing_phase_places_every_tile_then_stops():
    tiles = build_base_game()
    total = len(tiles)
    phase = PlayingPhase(SelectTileState(), tiles)
    placed = 0
    result = phase.update(Action.NONE)
    while result == Skip():
        if isinstance(phase.current_state, PlaceTileState):
            placed += 1
        result = phase.update(Action.VALIDATE)
    assert placed == total
    assert isinstance(result, Continue)
    assert isinstance(result.state, StopState)
    assert len(phase.context) == 0


def test_playing_phase_same_seed_same_draw_order():
    def drawn_tiles(seed):
        phase = PlayingPhase(
            SelectTileState(),
            GameTiles(build_base_game().available_tiles, random.Random(seed)),
        )
        order = []
        while phase.update(Action.NONE) == Skip():
            if isinstance(phase.current_state, PlaceTileState):
                order.append(phase.current_state.tile)
        return order

    first = drawn_tiles(7)
    assert first == drawn_tiles(7)
    assert sorted(map(repr, first)) == sorted(
        map(repr, build_base_game().available_tiles)
    )