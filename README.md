# carcasonne

A small tile-laying board game engine that runs in the terminal. It builds
the base-game tile bag, draws tiles from it at random one at a time, and shows
each drawn tile as text until the bag is empty.

It needs nothing beyond the Python standard library (Python 3.10 or later).

## Installing

```
pip install .
```

## Playing

```
carcasonne
```

The command takes no options other than `--help`.

- At the menu, `Enter` starts a game and `q` quits.
- While playing, each drawn tile is shown under a "Game Is Running" title,
  once inside a border and four more times side by side. `Enter`, an arrow
  key or `q` moves on to the next tile; every other key is ignored.
- When the bag is empty the closing screen ("Fin du jeu") is shown and the
  program exits.

If standard input ends, the command prints an error and exits with status 1.
On a POSIX terminal the terminal is put in raw mode while the game runs and
restored afterwards.

## Using the library

- `carcasonne.tiles` holds the model: `Edge`, `FeatureType` (town, road),
  `Enhancement` (shield), `Extension` (abbey), `TileFeature` and `Tile`, plus
  `GameTiles` and `GameContext`, whose `select_random_tile()` shuffles the
  pool and removes one tile, or returns `None` when it is empty.
- `carcasonne.builders` has `TileFeatureBuilder`, `TileBuilder` and
  `GameBuilder` for chained construction, for example
  `TileBuilder().add_town([Edge.NORTH]).add_road([Edge.SOUTH]).build()`.
- `carcasonne.factory` has one function per base-game tile
  (`build_a_abbey()` ... `build_t_town()`) and `build_base_game()`, which
  returns a `GameTiles` bag of 72 tiles.
- `carcasonne.layout` describes what to draw as a tree of nodes
  (`EmptyNode`, `CharNode`, `TextNode`, `TileNode`, `VerticalContainer`,
  `HorizontalContainer`, `Framed`), with `Point` and `Size` for geometry.
- `carcasonne.render` lays out and draws such a tree: `node_size()`,
  `render_node()` and `frame_from_node()`, which returns a
  `carcasonne.frame.Frame` of coloured `Cell`s exactly the size of the tree.
- `carcasonne.terminal.TextRenderer` writes a node tree to a text stream
  with ANSI colours (use it as a context manager or call `close()`), and
  `read_input_event()` reads one key from a stream as an `InputEvent`.
- `carcasonne.states` holds the state machine (`MenuState`, `PlayingPhase`
  with `SelectTileState` and `PlaceTileState`, `StopState`), and
  `carcasonne.app.Game` runs it with any `Renderer` and any function that
  returns `InputEvent`s.

## What it does not do

This is the skeleton of a game, not a playable one. There is no board and
drawn tiles are never placed anywhere; there are no players, followers or
scores; and a tile is drawn as a 5×5 block of dots, without its towns, roads
or abbey. Arrow keys are read but nothing moves with them.

## Running the tests

```
pip install ".[test]"
pytest
```