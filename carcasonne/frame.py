"""A fixed-size grid of coloured character cells for text rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from carcasonne.drawing import CharDrawing, Color
from carcasonne.layout import Point, Size


@dataclass(frozen=True)
class Cell:
    """One character of a frame with its colours."""

    symbol: str = CharDrawing.NONE.char
    background_color: Color = Color.BLACK
    foreground_color: Color = Color.WHITE


class Frame:
    """A rectangular grid of cells, indexed as ``cells[y][x]``."""

    def __init__(self, size: Size) -> None:
        self.size = size
        blank = Cell()
        self.cells: List[List[Cell]] = [
            [blank] * size.width for _ in range(size.height)
        ]

    def _set_cell(self, point: Point, cell: Cell) -> None:
        if not (point.y < self.size.height and point.x < self.size.width):
            raise IndexError("Point out of bounds")
        self.cells[point.y][point.x] = cell

    def char(
        self,
        point: Point,
        c: str,
        foreground_color: Color,
        background_color: Color,
    ) -> None:
        """Put character ``c`` at ``point`` with the given colours."""
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        self._set_cell(
            point,
            Cell(
                symbol=c,
                background_color=background_color,
                foreground_color=foreground_color,
            ),
        )

    def char_simple(self, point: Point, c: str) -> None:
        """Put character ``c`` at ``point``, white on black."""
        self.char(point, c, Color.WHITE, Color.BLACK)

    def __repr__(self) -> str:
        return f"Frame(size={self.size!r})"