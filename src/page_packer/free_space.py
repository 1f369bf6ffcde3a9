"""
Free-space bookkeeping: rebuild the list of maximal free rectangles.

The canvas is rescanned from scratch after every placement. Every cell is used
as a candidate origin, rectangles are grown down-right from it, and candidates
contained in another candidate are discarded. The cost is roughly
O(width^2 * height^2) per rescan, so this is meant for small canvases only
(see Settings.max_canvas_cells).
"""

from __future__ import annotations

import logging
from typing import Iterable, NamedTuple, Sequence, TypeVar

from page_packer.geometry import contains, is_occupied
from page_packer.models import Canvas, FreeRect, PlacedItem

logger = logging.getLogger(__name__)

Grid = list[list[bool]]
R = TypeVar("R")


class Candidate(NamedTuple):
    """Potential free space found while scanning. Cheap stand-in for FreeRect."""

    x: int
    y: int
    width: int
    height: int

    @property
    def area(self) -> int:
        return self.width * self.height


def occupancy_grid(canvas: Canvas, placed_items: Sequence[PlacedItem]) -> Grid:
    """grid[y][x] is True when the cell is covered by a placed item."""
    return [
        [is_occupied((x, y), placed_items) for x in range(canvas.width)]
        for y in range(canvas.height)
    ]


def grow_from_origin(origin: tuple[int, int], grid: Grid) -> list[Candidate]:
    """
    Grow free rectangles down-right from `origin`.

    For each row starting at the origin row, scan right until an occupied cell or
    the running width bound is hit. The bound shrinks to the narrowest row seen so
    far, since a rectangle cannot be wider than its narrowest row. Growth stops at
    the first row whose origin column is occupied.

    Returns one candidate per achievable height, each at its maximal width.
    """
    ox, oy = origin
    height = len(grid)
    max_x = len(grid[0]) if height else 0

    spaces: list[Candidate] = []
    row = oy
    while row < height and not grid[row][ox]:
        col = ox
        while col < max_x and not grid[row][col]:
            col += 1
        max_x = col
        if col > ox:
            spaces.append(Candidate(ox, oy, col - ox, row - oy + 1))
        row += 1
    return spaces


def potential_spaces(grid: Grid) -> list[Candidate]:
    """Collect candidates from every cell of the grid, in row-major discovery order."""
    spaces: list[Candidate] = []
    for y, cells_row in enumerate(grid):
        for x in range(len(cells_row)):
            spaces.extend(grow_from_origin((x, y), grid))
    return spaces


def eliminate_redundant(candidates: Iterable[Candidate]) -> list[Candidate]:
    """
    Keep a candidate only if no other distinct candidate contains it.

    Duplicates collapse to their first occurrence. Candidates are checked largest
    first against the rectangles kept so far: containment is transitive, so a
    candidate covered by any other one is also covered by a kept one. Survivors
    are returned in their original discovery order.
    """
    unique = list(dict.fromkeys(candidates))

    kept: list[Candidate] = []
    for cand in sorted(unique, key=lambda c: c.area, reverse=True):
        if not any(contains(k, cand) for k in kept):
            kept.append(cand)

    kept_set = set(kept)
    return [c for c in unique if c in kept_set]


def order_free_rects(rects: Iterable[R]) -> list[R]:
    """Stable sort by (y, x): lowest rows first, then leftmost."""
    return sorted(rects, key=lambda r: (r.y, r.x))


def recompute_free_space(canvas: Canvas, placed_items: Sequence[PlacedItem]) -> list[FreeRect]:
    """Rebuild the ordered list of maximal free rectangles for `placed_items`."""
    grid = occupancy_grid(canvas, placed_items)
    candidates = potential_spaces(grid)
    maximal = eliminate_redundant(candidates)
    free_rects = [FreeRect(**c._asdict()) for c in order_free_rects(maximal)]

    logger.debug(
        "Free space recomputed: canvas=%sx%s items=%d candidates=%d free_rects=%d",
        canvas.width, canvas.height, len(placed_items), len(candidates), len(free_rects),
    )
    return free_rects
