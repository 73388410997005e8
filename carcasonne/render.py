"""Layout and drawing of layout-tree nodes onto a text `Frame`."""

from __future__ import annotations

from typing import Iterable

from carcasonne.drawing import CharDrawing
from carcasonne.frame import Frame
from carcasonne.layout import (
    CharNode,
    EmptyNode,
    Framed,
    HorizontalContainer,
    Node,
    Point,
    Size,
    TextNode,
    TileNode,
    VerticalContainer,
)

TILE_SIZE = 5
"""Width and height, in characters, of a drawn tile."""

_TILE_FILL = "."
_BORDER = Size(2, 2)


def node_size(node: Node) -> Size:
    """Return the width and height ``node`` takes up when drawn."""
    match node:
        case EmptyNode():
            return Size(0, 0)
        case CharNode():
            return Size(1, 1)
        case TextNode(text):
            return Size(len(text), 1)
        case TileNode():
            return Size(TILE_SIZE, TILE_SIZE)
        case VerticalContainer(children):
            sizes = [node_size(child) for child in children]
            return Size(
                max((s.width for s in sizes), default=0),
                sum(s.height for s in sizes),
            )
        case HorizontalContainer(children):
            sizes = [node_size(child) for child in children]
            return Size(
                sum(s.width for s in sizes),
                max((s.height for s in sizes), default=0),
            )
        case Framed(child):
            return node_size(child) + _BORDER
    raise TypeError(f"cannot lay out {type(node).__name__}")


def render_node(node: Node, frame: Frame, point: Point) -> None:
    """Draw ``node`` onto ``frame`` with its top-left corner at ``point``."""
    match node:
        case EmptyNode():
            pass
        case CharNode(char):
            frame.char_simple(point, char)
        case TextNode(text):
            for offset, char in enumerate(text):
                frame.char_simple(point + Point(offset, 0), char)
        case TileNode():
            _render_tile(frame, point)
        case VerticalContainer(children):
            _render_vertical(frame, point, children)
        case HorizontalContainer(children):
            _render_horizontal(frame, point, children)
        case Framed(child):
            _render_framed(frame, point, child)
        case _:
            raise TypeError(f"cannot render {type(node).__name__}")


def frame_from_node(node: Node) -> Frame:
    """Return a frame exactly the size of ``node`` with the node drawn in it."""
    frame = Frame(node_size(node))
    render_node(node, frame, Point.zero())
    return frame


def _render_tile(frame: Frame, point: Point) -> None:
    # Placeholder drawing: tile features are not shown yet.
    for row in range(TILE_SIZE):
        for col in range(TILE_SIZE):
            frame.char_simple(point + Point(col, row), _TILE_FILL)


def _render_vertical(frame: Frame, point: Point, children: Iterable[Node]) -> None:
    y = point.y
    for child in children:
        render_node(child, frame, Point(point.x, y))
        y += node_size(child).height


def _render_horizontal(frame: Frame, point: Point, children: Iterable[Node]) -> None:
    x = point.x
    for child in children:
        render_node(child, frame, Point(x, point.y))
        x += node_size(child).width


def _render_framed(frame: Frame, point: Point, child: Node) -> None:
    outer = node_size(child) + _BORDER
    x0, y0 = point.x, point.y
    x1 = x0 + outer.width - 1
    y1 = y0 + outer.height - 1

    frame.char_simple(Point(x0, y0), CharDrawing.CORNER_TOP_LEFT.char)
    frame.char_simple(Point(x1, y0), CharDrawing.CORNER_TOP_RIGHT.char)
    frame.char_simple(Point(x0, y1), CharDrawing.CORNER_BOTTOM_LEFT.char)
    frame.char_simple(Point(x1, y1), CharDrawing.CORNER_BOTTOM_RIGHT.char)
    for x in range(x0 + 1, x1):
        frame.char_simple(Point(x, y0), CharDrawing.HORIZONTAL.char)
        frame.char_simple(Point(x, y1), CharDrawing.HORIZONTAL.char)
    for y in range(y0 + 1, y1):
        frame.char_simple(Point(x0, y), CharDrawing.VERTICAL.char)
        frame.char_simple(Point(x1, y), CharDrawing.VERTICAL.char)

    render_node(child, frame, point + Point(1, 1))