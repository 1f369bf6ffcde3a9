"""Data schemas for input/output operations."""

from typing import Any, List, Optional

from pydantic import BaseModel, Field

from page_packer.errors import CanvasTooLarge
from page_packer.models import Canvas, ItemRequest, PackingResult


class CanvasSchema(BaseModel):
    """Schema for a canvas."""
    width: int = Field(gt=0, description="Width of the canvas in cells")
    height: int = Field(gt=0, description="Height of the canvas in cells")


class ItemSchema(BaseModel):
    """Schema for an item; `quantity` expands into that many identical requests."""
    width: int = Field(gt=0, description="Width of the item in cells")
    height: int = Field(gt=0, description="Height of the item in cells")
    id: Optional[str] = Field(None, description="Caller identifier, echoed back as payload")
    quantity: int = Field(1, ge=1, description="Number of copies to place")
    payload: Any = Field(None, description="Opaque data echoed back with the placement")


class PackRequestSchema(BaseModel):
    """Schema for a packing request."""
    canvas: CanvasSchema
    items: List[ItemSchema] = Field(default_factory=list, description="Items to place, in order")


class PlacementSchema(BaseModel):
    """Schema for a placed item."""
    x: int
    y: int
    width: int
    height: int
    payload: Any = None


class FreeRectSchema(BaseModel):
    """Schema for a maximal free rectangle."""
    x: int
    y: int
    width: int
    height: int


class UnplacedSchema(BaseModel):
    """Schema for an item that could not be placed."""
    width: int
    height: int
    payload: Any = None


class PackResponseSchema(BaseModel):
    """Schema for a packing result."""
    placements: List[PlacementSchema]
    unplaced: List[UnplacedSchema]
    free_rects: List[FreeRectSchema]
    used_area: int = Field(ge=0)
    canvas_area: int = Field(gt=0)
    fill_rate: float = Field(ge=0, le=1, description="Canvas utilization ratio")
    free_cells: int = Field(ge=0, description="Distinct cells covered by the free rectangles")


def build_canvas(canvas: CanvasSchema, max_canvas_cells: int) -> Canvas:
    """
    Turn the requested canvas into a Canvas, refusing sizes the rescan cannot handle.

    Every placement rescans the whole canvas (about width^2 * height^2 steps), so
    the limit is enforced before any packing starts.
    """
    if canvas.width * canvas.height > max_canvas_cells:
        raise CanvasTooLarge(canvas.width, canvas.height, max_canvas_cells)
    return Canvas(width=canvas.width, height=canvas.height)


def expand_items(items: List[ItemSchema]) -> List[ItemRequest]:
    """
    Turn input items into placement requests.

    Items larger than the canvas are not rejected here; the packer reports them
    as unplaced, like items that do not fit.
    """
    requests: List[ItemRequest] = []
    for item in items:
        for i in range(item.quantity):
            payload = item.payload
            if payload is None and item.id is not None:
                payload = item.id if item.quantity == 1 else f"{item.id}_{i + 1:04d}"
            requests.append(ItemRequest(width=item.width, height=item.height, payload=payload))
    return requests


def to_response(result: PackingResult) -> PackResponseSchema:
    return PackResponseSchema(
        placements=[PlacementSchema(**p.model_dump()) for p in result.placed],
        unplaced=[UnplacedSchema(**u.model_dump()) for u in result.unplaced],
        free_rects=[FreeRectSchema(**f.model_dump()) for f in result.free_rects],
        used_area=result.used_area,
        canvas_area=result.canvas_area,
        fill_rate=result.fill_rate,
        free_cells=result.free_cells,
    )
