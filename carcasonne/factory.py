"""Predefined tiles of the base game and the full base tile set."""

from __future__ import annotations

from typing import Callable, Tuple

from carcasonne.builders import GameBuilder, TileBuilder
from carcasonne.tiles import Edge, GameTiles, Tile

NORTH, WEST, EAST, SOUTH = Edge.NORTH, Edge.WEST, Edge.EAST, Edge.SOUTH


def build_a_abbey() -> Tile:
    """Abbey with a road leaving on the south edge."""
    return TileBuilder().add_road([SOUTH]).add_abbey().build()


def build_b_abbey() -> Tile:
    """Abbey with no other feature."""
    return TileBuilder().add_abbey().build()


def build_u_road() -> Tile:
    """Straight road from north to south."""
    return TileBuilder().add_road([NORTH, SOUTH]).build()


def build_v_road() -> Tile:
    """Road bending from north to west."""
    return TileBuilder().add_road([NORTH, WEST]).build()


def build_w_road() -> Tile:
    """T-junction of roads to the north, west and south."""
    return (
        TileBuilder()
        .add_road([NORTH])
        .add_road([WEST])
        .add_road([SOUTH])
        .build()
    )


def build_x_road() -> Tile:
    """Crossroads with a road on every edge."""
    return (
        TileBuilder()
        .add_road([NORTH])
        .add_road([WEST])
        .add_road([SOUTH])
        .add_road([EAST])
        .build()
    )


def build_c_town() -> Tile:
    """Shielded town covering all four edges."""
    return TileBuilder().add_shielded_town([NORTH, WEST, SOUTH, EAST]).build()


def build_d_town() -> Tile:
    """Town to the north with a road from west to east."""
    return TileBuilder().add_town([NORTH]).add_road([WEST, EAST]).build()


def build_e_town() -> Tile:
    """Town on the north edge only."""
    return TileBuilder().add_town([NORTH]).build()


def build_f_town() -> Tile:
    """Shielded town spanning west to east."""
    return TileBuilder().add_shielded_town([WEST, EAST]).build()


def build_g_town() -> Tile:
    """Town spanning west to east."""
    return TileBuilder().add_town([WEST, EAST]).build()


def build_h_town() -> Tile:
    """Two separate towns, west and east."""
    return TileBuilder().add_town([WEST]).add_town([EAST]).build()


def build_i_town() -> Tile:
    """Two separate towns, north and west."""
    return TileBuilder().add_town([NORTH]).add_town([WEST]).build()


def build_j_town() -> Tile:
    """Town to the north with a road from south to east."""
    return TileBuilder().add_town([NORTH]).add_road([SOUTH, EAST]).build()


def build_k_town() -> Tile:
    """Town to the north with a road from west to east."""
    return TileBuilder().add_town([NORTH]).add_road([WEST, EAST]).build()


def build_l_town() -> Tile:
    """Town to the north with three road ends west, south and east."""
    return (
        TileBuilder()
        .add_town([NORTH])
        .add_road([WEST])
        .add_road([SOUTH])
        .add_road([EAST])
        .build()
    )


def build_m_town() -> Tile:
    """Shielded town spanning north and west."""
    return TileBuilder().add_shielded_town([NORTH, WEST]).build()


def build_n_town() -> Tile:
    """Town spanning north and west."""
    return TileBuilder().add_town([NORTH, WEST]).build()


def build_o_town() -> Tile:
    """Shielded town north and west with a road from south to east."""
    return (
        TileBuilder()
        .add_shielded_town([NORTH, WEST])
        .add_road([SOUTH, EAST])
        .build()
    )


def build_p_town() -> Tile:
    """Town north and west with a road from south to east."""
    return TileBuilder().add_town([NORTH, WEST]).add_road([SOUTH, EAST]).build()


def build_q_town() -> Tile:
    """Shielded town spanning north, west and east."""
    return TileBuilder().add_shielded_town([NORTH, WEST, EAST]).build()


def build_r_town() -> Tile:
    """Town spanning north, west and east."""
    return TileBuilder().add_town([NORTH, WEST, EAST]).build()


def build_s_town() -> Tile:
    """Shielded town north, west and east with a road to the south."""
    return (
        TileBuilder()
        .add_shielded_town([NORTH, WEST, EAST])
        .add_road([SOUTH])
        .build()
    )


def build_t_town() -> Tile:
    """Town north, west and east with a road to the south."""
    return TileBuilder().add_town([NORTH, WEST, EAST]).add_road([SOUTH]).build()


_BASE_GAME: Tuple[Tuple[Callable[[], Tile], int], ...] = (
    # Abbeys
    (build_a_abbey, 2),
    (build_b_abbey, 4),
    # Roads
    (build_u_road, 8),
    (build_v_road, 9),
    (build_x_road, 1),
    (build_w_road, 4),
    # Towns
    (build_c_town, 1),
    (build_d_town, 4),
    (build_e_town, 5),
    (build_f_town, 2),
    (build_g_town, 1),
    (build_h_town, 3),
    (build_i_town, 2),
    (build_j_town, 3),
    (build_k_town, 3),
    (build_l_town, 3),
    (build_m_town, 2),
    (build_n_town, 3),
    (build_o_town, 2),
    (build_p_town, 3),
    (build_q_town, 1),
    (build_r_town, 3),
    (build_s_town, 2),
    (build_t_town, 1),
)


def build_base_game() -> GameTiles:
    """Return the standard tile set of the base game."""
    builder = GameBuilder()
    for make_tile, quantity in _BASE_GAME:
        builder.add_tiles(make_tile(), quantity)
    return builder.build()