"""Runtime settings; loads .env locally via python-dotenv."""

from __future__ import annotations

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

# Does not override variables already set in the environment
load_dotenv()

DEFAULT_MAX_CANVAS_CELLS = 4096  # 64 x 64
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    log_level: str = Field(default="INFO", description="Root log level for the CLI and API")
    max_canvas_cells: int = Field(
        default=DEFAULT_MAX_CANVAS_CELLS,
        gt=0,
        description="Largest canvas the CLI and API accept; PageAllocator warns above it",
    )
    debug: bool = Field(default=False, description="Force DEBUG logging")


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def get_settings() -> Settings:
    """Read settings from the environment (PAGE_PACKER_* variables)."""
    debug = os.getenv("PAGE_PACKER_DEBUG", "0") == "1"
    log_level = "DEBUG" if debug else os.getenv("PAGE_PACKER_LOG_LEVEL", "INFO").strip().upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"PAGE_PACKER_LOG_LEVEL must be one of {LOG_LEVELS}, got {log_level!r}")
    return Settings(
        log_level=log_level,
        max_canvas_cells=_int_env("PAGE_PACKER_MAX_CANVAS_CELLS", DEFAULT_MAX_CANVAS_CELLS),
        debug=debug,
    )
