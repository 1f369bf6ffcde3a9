# src/page_packer/packing/first_fit.py

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Iterable, Optional

from page_packer.config import get_settings
from page_packer.errors import InvalidSize, NoSpace, PackingError
from page_packer.free_space import recompute_free_space
from page_packer.geometry import fits
from page_packer.metrics import compute_metrics, free_cell_count
from page_packer.models import Canvas, FreeRect, ItemRequest, PackingResult, PlacedItem

logger = logging.getLogger(__name__)

# Receives each placed item once the free list is consistent again.
RenderSink = Callable[[PlacedItem], None]


class PageAllocator:
    """
    First-fit allocator over a fixed canvas.

    Holds the placed items and the ordered list of maximal free rectangles. The
    only mutation is `place`, which anchors the item at the origin of the first
    free rectangle it fits in and then rebuilds the free list from scratch.
    """

    def __init__(self, canvas: Canvas, sink: Optional[RenderSink] = None, max_canvas_cells: Optional[int] = None):
        self.canvas = canvas
        self._sink = sink
        self._lock = threading.Lock()
        self._placed: list[PlacedItem] = []
        # An empty canvas is one free rectangle
        self._free: list[FreeRect] = [FreeRect(x=0, y=0, width=canvas.width, height=canvas.height)]

        limit = max_canvas_cells if max_canvas_cells is not None else get_settings().max_canvas_cells
        if canvas.area > limit:
            logger.warning(
                "Canvas %sx%s has %d cells (limit %d); free-space rescans will be slow",
                canvas.width, canvas.height, canvas.area, limit,
            )

    @property
    def placed_items(self) -> tuple[PlacedItem, ...]:
        with self._lock:
            return tuple(self._placed)

    @property
    def free_rects(self) -> tuple[FreeRect, ...]:
        with self._lock:
            return tuple(self._free)

    def _check_size(self, width: Any, height: Any) -> None:
        for value in (width, height):
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidSize(width, height, "dimensions must be integers")
        if width <= 0 or height <= 0:
            raise InvalidSize(width, height, "dimensions must be positive")
        if width > self.canvas.width or height > self.canvas.height:
            raise InvalidSize(
                width, height, f"larger than the {self.canvas.width}x{self.canvas.height} canvas"
            )

    def _find_space(self, width: int, height: int) -> Optional[FreeRect]:
        probe = ItemRequest(width=width, height=height)
        for space in self._free:
            if fits(probe, into=space):
                return space
        return None

    def can_place(self, width: int, height: int) -> bool:
        """True if `place(width, height)` would succeed right now. Never mutates."""
        try:
            self._check_size(width, height)
        except InvalidSize:
            return False
        with self._lock:
            return self._find_space(width, height) is not None

    def place(self, width: int, height: int, payload: Any = None) -> PlacedItem:
        """
        Place a width x height item at the first free rectangle it fits in.

        Raises InvalidSize for non-positive or oversized requests and NoSpace when
        no free rectangle is large enough. Nothing changes on failure.
        """
        self._check_size(width, height)

        with self._lock:
            space = self._find_space(width, height)
            if space is None:
                logger.debug("No space for %sx%s item (%d free rects)", width, height, len(self._free))
                raise NoSpace(width, height)

            item = PlacedItem(x=space.x, y=space.y, width=width, height=height, payload=payload)
            self._placed.append(item)
            self._free = recompute_free_space(self.canvas, self._placed)

        logger.debug("Placed %sx%s item at (%d, %d)", width, height, item.x, item.y)
        if self._sink is not None:
            self._sink(item)
        return item

    def recompute_free_space(self) -> tuple[FreeRect, ...]:
        """Rebuild the free list from the current placed items and return it."""
        with self._lock:
            self._free = recompute_free_space(self.canvas, self._placed)
            return tuple(self._free)


def pack_items(canvas: Canvas, items: Iterable[ItemRequest], sink: Optional[RenderSink] = None) -> PackingResult:
    """
    Place items one by one, in the given order.
    - Items that do not fit (or have an invalid size) are reported as unplaced
    - No sorting, no rotation
    - Deterministic
    """
    allocator = PageAllocator(canvas, sink=sink)
    unplaced: list[ItemRequest] = []

    for request in items:
        try:
            allocator.place(request.width, request.height, payload=request.payload)
        except PackingError as e:
            logger.debug("Item left unplaced: %s", e)
            unplaced.append(request)

    placed = list(allocator.placed_items)
    free_rects = list(allocator.free_rects)
    used_area, canvas_area, fill_rate = compute_metrics(canvas, placed)
    logger.info(
        "Packed %d/%d items on %sx%s canvas, fill rate %.2f%%",
        len(placed), len(placed) + len(unplaced), canvas.width, canvas.height, fill_rate * 100,
    )

    return PackingResult(
        placed=placed,
        unplaced=unplaced,
        free_rects=free_rects,
        used_area=used_area,
        canvas_area=canvas_area,
        fill_rate=fill_rate,
        free_cells=free_cell_count(free_rects),
    )
