"""Errors raised by the placement engine."""

from __future__ import annotations


class PackingError(Exception):
    """Base class for placement failures."""


class NoSpace(PackingError):
    """No free rectangle is large enough for the requested item."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        super().__init__(f"No free space for a {width}x{height} item")


class InvalidSize(PackingError, ValueError):
    """Requested size is non-positive or larger than the canvas."""

    def __init__(self, width, height, reason: str):
        self.width = width
        self.height = height
        super().__init__(f"Invalid item size {width}x{height}: {reason}")


class CanvasTooLarge(PackingError, ValueError):
    """Canvas has more cells than the configured rescan limit."""

    def __init__(self, width: int, height: int, max_cells: int):
        self.width = width
        self.height = height
        self.max_cells = max_cells
        super().__init__(
            f"Canvas {width}x{height} has {width * height} cells, above the limit of {max_cells}"
        )
