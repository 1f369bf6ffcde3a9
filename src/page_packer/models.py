from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Canvas(BaseModel):
    """Canvas model with integer cell dimensions."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(gt=0, description="Width of the canvas in cells")
    height: int = Field(gt=0, description="Height of the canvas in cells")

    @property
    def area(self) -> int:
        return self.width * self.height


class Rect(BaseModel):
    """Axis-aligned rectangle: origin (x, y) plus size, in canvas cells."""

    model_config = ConfigDict(frozen=True)

    x: int = Field(ge=0, description="X coordinate of the origin")
    y: int = Field(ge=0, description="Y coordinate of the origin")
    width: int = Field(gt=0, description="Width in cells")
    height: int = Field(gt=0, description="Height in cells")

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height


class FreeRect(Rect):
    """Maximal empty region of the canvas. Rebuilt on every placement."""


class PlacedItem(Rect):
    """Item anchored on the canvas, with an opaque payload for the rendering sink."""

    # Payload is application data; it is never inspected by the packer.
    payload: Any = Field(default=None, description="Opaque application payload")


class ItemRequest(BaseModel):
    """Item waiting to be placed."""

    width: int = Field(gt=0, description="Requested width in cells")
    height: int = Field(gt=0, description="Requested height in cells")
    payload: Any = Field(default=None, description="Opaque application payload")


class PackingResult(BaseModel):
    """Standard result returned by pack_items."""

    placed: list[PlacedItem] = Field(default_factory=list)
    unplaced: list[ItemRequest] = Field(default_factory=list)
    free_rects: list[FreeRect] = Field(default_factory=list)
    used_area: int = 0
    canvas_area: int = 0
    fill_rate: float = 0.0
    free_cells: int = 0
