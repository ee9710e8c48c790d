"""Pixel cell and 8x8 pixel grid models."""

import logging
import random
from collections.abc import Sequence
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

from .color import Color

logger = logging.getLogger(__name__)


# Constants defined at module level for use in default_factory
GRID_SIZE = 8
TOTAL_PIXELS = 64


class PixelCell(BaseModel):
    """Override state of a single LED.

    A cell is either inactive (follows the global pattern) or active with
    a manually painted ``override_color``. The color is present exactly
    when the cell is active.
    """

    model_config = ConfigDict(frozen=True)

    active: bool = Field(default=False, strict=True, description="Whether a manual override is set")
    override_color: Color | None = Field(default=None, description="Override color (active only)")

    @model_validator(mode="after")
    def check_override_consistency(self) -> "PixelCell":
        """Reject orphaned override colors and active cells without a color."""
        if self.active and self.override_color is None:
            raise ValueError("Active pixel must have an override_color")
        if not self.active and self.override_color is not None:
            raise ValueError("Inactive pixel cannot have an override_color")
        return self

    @field_serializer("override_color")
    def serialize_override_color(self, color: Color | None) -> str | None:
        """Serialize override color as '#rrggbb'."""
        return color.to_hex() if color is not None else None

    @classmethod
    def inactive(cls) -> "PixelCell":
        """Create a cell with no override."""
        return cls()

    @classmethod
    def with_override(cls, color: Color) -> "PixelCell":
        """Create an active cell painted with ``color``."""
        return cls(active=True, override_color=color)


def _create_default_cells() -> list[PixelCell]:
    """Create 64 inactive cells."""
    return [PixelCell.inactive() for _ in range(TOTAL_PIXELS)]


class PixelGrid(BaseModel):
    """The 8x8 LED grid, indexed 0-63 row-major.

    Owns the per-pixel override state machine::

        Inactive --click--> Active(random palette color)
        Active(c) --click--> Active(c')   # c' drawn independently, may equal c

    Clicking never deactivates a cell; only ``clear_all`` does.
    """

    GRID_SIZE: ClassVar[int] = GRID_SIZE
    TOTAL_PIXELS: ClassVar[int] = TOTAL_PIXELS

    cells: list[PixelCell] = Field(
        default_factory=_create_default_cells, description="64 pixel cells, row-major"
    )

    @field_validator("cells")
    @classmethod
    def validate_cell_count(cls, v: list[PixelCell]) -> list[PixelCell]:
        """Ensure exactly 64 cells."""
        if len(v) != TOTAL_PIXELS:
            raise ValueError(
                f"Pixel grid must have exactly {TOTAL_PIXELS} cells ({GRID_SIZE}x{GRID_SIZE})"
            )
        return v

    @staticmethod
    def index_to_row_col(index: int) -> tuple[int, int]:
        """Convert pixel index to (row, col)."""
        return (index // GRID_SIZE, index % GRID_SIZE)

    @staticmethod
    def row_col_to_index(row: int, col: int) -> int:
        """Convert (row, col) to pixel index."""
        if not (0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE):
            raise IndexError(f"Invalid position: ({row}, {col}). Must be 0-{GRID_SIZE - 1}.")
        return row * GRID_SIZE + col

    def _validate_index(self, index: int) -> None:
        """
        Validate that a pixel index is within range.

        Raises:
            IndexError: If index is out of range
        """
        if not 0 <= index < TOTAL_PIXELS:
            raise IndexError(f"Pixel index {index} out of range (0-{TOTAL_PIXELS - 1})")

    def get_cell(self, index: int) -> PixelCell:
        """Get the cell at ``index`` (0-63)."""
        self._validate_index(index)
        return self.cells[index]

    def click(self, index: int, rng: random.Random, palette: Sequence[Color]) -> PixelCell:
        """
        Apply a click to one pixel.

        Activates an inactive cell, or re-randomizes an active cell's color.
        The color is drawn uniformly from ``palette`` using ``rng``.

        Args:
            index: Pixel index (0-63)
            rng: Random source (inject a seeded instance for deterministic tests)
            palette: Colors to draw from

        Returns:
            The new cell state

        Raises:
            IndexError: If index is out of range
        """
        self._validate_index(index)
        cell = PixelCell.with_override(rng.choice(palette))
        self.cells[index] = cell
        logger.debug(f"Pixel {index} override -> {cell.override_color.to_hex()}")
        return cell

    def clear_all(self) -> None:
        """Return every cell to the inactive state."""
        self.cells = _create_default_cells()

    @property
    def active_indices(self) -> list[int]:
        """Indices of all cells that currently have an override."""
        return [i for i, cell in enumerate(self.cells) if cell.active]

    @classmethod
    def create_empty(cls) -> "PixelGrid":
        """Create a grid with no overrides."""
        return cls()
