from __future__ import annotations

from typing import Iterable

from page_packer.geometry import cells
from page_packer.models import Canvas, FreeRect, PlacedItem


def compute_used_area(placed_items: Iterable[PlacedItem]) -> int:
    """Total placed area in cells."""
    return sum(item.area for item in placed_items)


def free_cell_count(free_rects: Iterable[FreeRect]) -> int:
    """
    Number of distinct cells covered by the free list.

    Maximal free rectangles may overlap, so their areas cannot simply be summed.
    """
    covered: set[tuple[int, int]] = set()
    for rect in free_rects:
        covered.update(cells(rect))
    return len(covered)


def compute_metrics(canvas: Canvas, placed_items: list[PlacedItem]) -> tuple[int, int, float]:
    used_area = compute_used_area(placed_items)
    canvas_area = canvas.area
    fill_rate = 0.0 if canvas_area == 0 else used_area / canvas_area
    return used_area, canvas_area, fill_rate
