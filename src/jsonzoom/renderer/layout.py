"""Grid layout for class nodes."""

from __future__ import annotations

from dataclasses import dataclass

from jsonzoom.config import Settings


@dataclass(frozen=True)
class NodePosition:
    x: int
    y: int


def grid_position(index: int, settings: Settings) -> NodePosition:
    """Return the position of the *index*-th class node.

    Nodes fill rows left to right, wrapping after ``settings.columns``.
    """
    row, col = divmod(index, settings.columns)
    return NodePosition(x=col * settings.x_spacing, y=row * settings.y_spacing)


def grid_layout(count: int, settings: Settings) -> list[NodePosition]:
    return [grid_position(i, settings) for i in range(count)]


def visible_count(total: int, pages: int, settings: Settings) -> int:
    """Return how many nodes are shown after *pages* pages have been revealed."""
    return min(total, max(pages, 1) * settings.page_size)
