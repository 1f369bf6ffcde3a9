"""Geometry utilities for rectangle placement."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator

if TYPE_CHECKING:
    from .models import PlacedItem, Rect


def fits(item: "Rect", into: "Rect") -> bool:
    """True if `item` is no wider and no taller than `into`. Origins are ignored."""
    return item.width <= into.width and item.height <= into.height


def contains(outer: "Rect", inner: "Rect") -> bool:
    """True if the full extent of `inner` lies within `outer` on both axes."""
    if inner.x >= outer.x and inner.x + inner.width <= outer.x + outer.width:
        if inner.y >= outer.y and inner.y + inner.height <= outer.y + outer.height:
            return True
    return False


def is_occupied(point: tuple[int, int], placed_items: Iterable["PlacedItem"]) -> bool:
    """
    Check if the cell at `point` is covered by any placed item.

    Intervals are half-open on both axes: [origin, origin + size).
    Plain linear scan; canvases are small and the free-space rescan dominates anyway.
    """
    px, py = point
    for item in placed_items:
        if item.x <= px < item.x + item.width and item.y <= py < item.y + item.height:
            return True
    return False


def cells(rect: "Rect") -> Iterator[tuple[int, int]]:
    """Yield every integer cell (x, y) covered by `rect`."""
    for y in range(rect.y, rect.y + rect.height):
        for x in range(rect.x, rect.x + rect.width):
            yield (x, y)
