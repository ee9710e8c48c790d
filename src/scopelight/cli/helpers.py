"""Shared helpers for CLI commands."""

import logging
import random
import sys
from pathlib import Path
from typing import NoReturn, Optional

import click

from scopelight.core import ControlSurface
from scopelight.exceptions import format_error_for_display
from scopelight.models import GRID_SIZE, AppConfig, PixelGrid, RenderedPixel
from scopelight.services import StateService

logger = logging.getLogger(__name__)


def load_app_config() -> AppConfig:
    """Load ~/.scopelight/config.json, or defaults if it doesn't exist."""
    try:
        return AppConfig.load_or_default()
    except Exception as e:
        fail(e)


def fail(error: Exception) -> NoReturn:
    """Print an error (and its recovery hint) to stderr and exit 1."""
    logger.error(f"Command failed: {error}")
    user_message, recovery_hint = format_error_for_display(error)
    click.echo(f"Error: {user_message}", err=True)
    if recovery_hint:
        click.echo(recovery_hint, err=True)
    sys.exit(1)


def open_surface(
    service: StateService, path: Optional[Path] = None, seed: Optional[int] = None
) -> ControlSurface:
    """
    Build a control surface from a saved state file.

    A missing file yields the default state. Invalid files abort the command.
    """
    try:
        state = service.load_or_default(path)
    except Exception as e:
        fail(e)
    return ControlSurface(state=state, rng=random.Random(seed))


def save_surface(service: StateService, surface: ControlSurface, path: Optional[Path] = None) -> Path:
    """Save a surface's state, aborting the command on failure."""
    try:
        return service.export_surface(surface, path)
    except Exception as e:
        fail(e)


def format_grid(frame: list[RenderedPixel]) -> str:
    """Lay out a rendered frame as 8 rows of 'color@opacity' cells."""
    rows = []
    for row in range(GRID_SIZE):
        cells = [frame[PixelGrid.row_col_to_index(row, col)] for col in range(GRID_SIZE)]
        rows.append("  ".join(f"{pixel.to_hex()}@{pixel.opacity:.2f}" for pixel in cells))
    return "\n".join(rows)
