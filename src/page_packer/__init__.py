"""Maximal free-rectangle allocator for fixed-size 2D canvases."""

from page_packer.errors import CanvasTooLarge, InvalidSize, NoSpace, PackingError
from page_packer.models import Canvas, FreeRect, ItemRequest, PackingResult, PlacedItem, Rect
from page_packer.packing.first_fit import PageAllocator, pack_items

__all__ = [
    "Canvas",
    "CanvasTooLarge",
    "FreeRect",
    "InvalidSize",
    "ItemRequest",
    "NoSpace",
    "PackingError",
    "PackingResult",
    "PageAllocator",
    "PlacedItem",
    "Rect",
    "pack_items",
]
