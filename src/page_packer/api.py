"""FastAPI endpoint for the page packer."""

from __future__ import annotations

import logging
import time
from typing import Any

from fastapi import FastAPI, HTTPException

from page_packer.config import get_settings
from page_packer.errors import CanvasTooLarge
from page_packer.io.schemas import PackRequestSchema, PackResponseSchema, build_canvas, expand_items, to_response
from page_packer.packing.first_fit import pack_items

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Page Packer API",
    description="First-fit rectangle placement on a fixed canvas",
)


@app.post("/pack", response_model=PackResponseSchema)
def pack(request: PackRequestSchema) -> PackResponseSchema:
    """
    Place the requested items in order and return placements plus remaining free space.

    Items that do not fit are listed under `unplaced`; this is not an error.
    Canvases above PAGE_PACKER_MAX_CANVAS_CELLS are rejected with 422.
    """
    try:
        canvas = build_canvas(request.canvas, get_settings().max_canvas_cells)
    except CanvasTooLarge as e:
        logger.warning(f"Rejected /pack request: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    try:
        start = time.perf_counter()
        items = expand_items(request.items)
        result = pack_items(canvas, items)
        logger.info(
            "/pack canvas=%sx%s items=%d placed=%d elapsed_ms=%.1f",
            canvas.width, canvas.height, len(items), len(result.placed),
            (time.perf_counter() - start) * 1000,
        )
        return to_response(result)
    except Exception as e:
        logger.error(f"ERROR in /pack endpoint: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/health")
async def health() -> dict[str, Any]:
    return {"status": "ok"}
