"""Geometry primitives and the layout tree used for rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Sequence

if TYPE_CHECKING:
    from carcasonne.tiles import Tile


def _check_non_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must be non-negative, got {value}")


@dataclass(frozen=True)
class Point:
    """A 2D point with non-negative integer coordinates."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _check_non_negative(x=self.x, y=self.y)

    @classmethod
    def zero(cls) -> Point:
        """Return the origin ``(0, 0)``."""
        return cls(0, 0)

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)


@dataclass(frozen=True)
class Size:
    """A rectangular size with non-negative width and height."""

    width: int
    height: int

    def __post_init__(self) -> None:
        _check_non_negative(width=self.width, height=self.height)

    def __add__(self, other: Size) -> Size:
        if not isinstance(other, Size):
            return NotImplemented
        return Size(self.width + other.width, self.height + other.height)

    @classmethod
    def total(cls, sizes: Iterable[Size]) -> Size:
        """Sum sizes component-wise; an empty iterable gives ``Size(0, 0)``."""
        return sum(sizes, cls(0, 0))


class Node:
    """Base class of every element in the layout tree."""

    __slots__ = ()


@dataclass(frozen=True)
class EmptyNode(Node):
    """Nothing to display."""


@dataclass(frozen=True)
class CharNode(Node):
    """A single character."""

    char: str

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError(f"expected a single character, got {self.char!r}")


@dataclass(frozen=True)
class TextNode(Node):
    """A single horizontal line of text."""

    text: str


@dataclass(frozen=True)
class TileNode(Node):
    """A tile to draw."""

    tile: Tile


@dataclass(frozen=True)
class VerticalContainer(Node):
    """Children stacked top to bottom."""

    children: Sequence[Node] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))


@dataclass(frozen=True)
class HorizontalContainer(Node):
    """Children laid out left to right."""

    children: Sequence[Node] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))


@dataclass(frozen=True)
class Framed(Node):
    """A border drawn around a single child."""

    child: Node