from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from page_packer.config import LOG_LEVELS, get_settings
from page_packer.io.schemas import PackRequestSchema, PackResponseSchema, build_canvas, expand_items, to_response
from page_packer.models import Canvas
from page_packer.packing.first_fit import pack_items

logger = logging.getLogger(__name__)


def load_input(path: Path) -> PackRequestSchema:
    """
    Read a packing request.

    Expected shape:
      {"canvas": {"width": 10, "height": 8},
       "items": [{"width": 2, "height": 3, "id": "A", "quantity": 4}, ...]}
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if "canvas" not in data:
        raise ValueError("Input must include a 'canvas' object")
    return PackRequestSchema.model_validate(data)


def run(canvas: Canvas, request: PackRequestSchema) -> PackResponseSchema:
    items = expand_items(request.items)
    logger.info("Packing %d items onto %sx%s canvas", len(items), canvas.width, canvas.height)
    return to_response(pack_items(canvas, items))


def write_plan(path: Path, response: PackResponseSchema) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(response.model_dump(), indent=2), encoding="utf-8")
    logger.info("Plan written to %s", path)


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Page Packer CLI")
    parser.add_argument("--input", required=True, help="Input request JSON file")
    parser.add_argument("--output", required=True, help="Output plan JSON file")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level,
        help="Logging level (default from PAGE_PACKER_LOG_LEVEL)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        request = load_input(Path(args.input))
        canvas = build_canvas(request.canvas, settings.max_canvas_cells)
    except (OSError, ValueError) as e:
        # pydantic ValidationError is a ValueError
        print(f"error: invalid input {args.input}: {e}", file=sys.stderr)
        return 1

    response = run(canvas, request)
    write_plan(Path(args.output), response)

    print(
        f"Placed {len(response.placements)} item(s), "
        f"unplaced {len(response.unplaced)}, "
        f"fill rate {response.fill_rate * 100:.2f}%"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
