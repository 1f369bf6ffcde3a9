from __future__ import annotations

from page_packer.free_space import (
    Candidate,
    eliminate_redundant,
    grow_from_origin,
    occupancy_grid,
    order_free_rects,
    potential_spaces,
    recompute_free_space,
)
from page_packer.models import Canvas, FreeRect, PlacedItem


def free_tuples(free_rects):
    return [(f.x, f.y, f.width, f.height) for f in free_rects]


def test_occupancy_grid() -> None:
    grid = occupancy_grid(Canvas(width=3, height=2), [PlacedItem(x=1, y=0, width=2, height=1)])

    assert grid == [[False, True, True], [False, False, False]]


def test_grow_from_origin_empty_grid() -> None:
    grid = [[False] * 3 for _ in range(2)]

    assert grow_from_origin((0, 0), grid) == [Candidate(0, 0, 3, 1), Candidate(0, 0, 3, 2)]
    assert grow_from_origin((2, 1), grid) == [Candidate(2, 1, 1, 1)]


def test_grow_from_origin_width_clamped_by_narrowest_row() -> None:
    grid = [[False] * 3 for _ in range(3)]
    grid[1][2] = True

    # Row 2 is free across, but the rectangle cannot be wider than row 1
    assert grow_from_origin((0, 0), grid) == [
        Candidate(0, 0, 3, 1),
        Candidate(0, 0, 2, 2),
        Candidate(0, 0, 2, 3),
    ]


def test_grow_from_origin_stops_at_occupied_origin_column() -> None:
    grid = [[False] * 2 for _ in range(3)]
    grid[1][0] = True

    assert grow_from_origin((0, 0), grid) == [Candidate(0, 0, 2, 1)]
    assert grow_from_origin((0, 1), grid) == []


def test_potential_spaces_row_major() -> None:
    grid = [[False, False]]

    assert potential_spaces(grid) == [Candidate(0, 0, 2, 1), Candidate(1, 0, 1, 1)]


def test_eliminate_redundant_drops_contained_and_duplicates() -> None:
    candidates = [
        Candidate(0, 0, 3, 1),
        Candidate(0, 0, 3, 2),
        Candidate(1, 0, 2, 2),
        Candidate(0, 0, 3, 2),
    ]

    assert eliminate_redundant(candidates) == [Candidate(0, 0, 3, 2)]


def test_eliminate_redundant_keeps_overlapping_in_discovery_order() -> None:
    candidates = [Candidate(2, 0, 2, 4), Candidate(2, 0, 2, 1), Candidate(0, 2, 4, 2)]

    assert eliminate_redundant(candidates) == [Candidate(2, 0, 2, 4), Candidate(0, 2, 4, 2)]


def test_order_free_rects_y_then_x() -> None:
    rects = [Candidate(0, 1, 3, 1), Candidate(2, 0, 1, 2), Candidate(0, 0, 1, 2)]

    assert order_free_rects(rects) == [Candidate(0, 0, 1, 2), Candidate(2, 0, 1, 2), Candidate(0, 1, 3, 1)]


def test_recompute_empty_canvas_is_single_rect() -> None:
    free = recompute_free_space(Canvas(width=5, height=3), [])

    assert free == [FreeRect(x=0, y=0, width=5, height=3)]


def test_recompute_l_shape() -> None:
    free = recompute_free_space(Canvas(width=4, height=4), [PlacedItem(x=0, y=0, width=2, height=2)])

    assert free_tuples(free) == [(2, 0, 2, 4), (0, 2, 4, 2)]


def test_recompute_around_single_cell() -> None:
    free = recompute_free_space(Canvas(width=3, height=2), [PlacedItem(x=1, y=0, width=1, height=1)])

    assert free_tuples(free) == [(0, 0, 1, 2), (2, 0, 1, 2), (0, 1, 3, 1)]


def test_recompute_full_canvas_is_empty() -> None:
    free = recompute_free_space(Canvas(width=2, height=2), [PlacedItem(x=0, y=0, width=2, height=2)])

    assert free == []


def test_recompute_is_idempotent() -> None:
    canvas = Canvas(width=6, height=5)
    items = [
        PlacedItem(x=0, y=0, width=2, height=3),
        PlacedItem(x=3, y=1, width=2, height=2),
        PlacedItem(x=1, y=4, width=4, height=1),
    ]

    first = recompute_free_space(canvas, items)
    second = recompute_free_space(canvas, items)

    assert set(first) == set(second)
    assert first == second
