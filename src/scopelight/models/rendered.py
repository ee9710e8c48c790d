"""Render output types."""

from dataclasses import dataclass

from .color import Color, HSLColor


@dataclass(frozen=True, slots=True)
class RenderedPixel:
    """
    Displayable color and opacity for one LED at one instant.

    This is NOT a Pydantic model: it is derived output recomputed every
    frame, never stored as ground truth.
    """

    color: Color | HSLColor  # RGB, or HSL for the rainbow pattern
    opacity: float           # 0.0-1.0

    @property
    def rgb(self) -> Color:
        """Color converted to RGB."""
        return self.color.to_rgb()

    def to_hex(self) -> str:
        """Color as '#rrggbb'."""
        return self.color.to_hex()

    def to_dict(self) -> dict[str, str | float]:
        """JSON-friendly representation."""
        return {"color": self.to_hex(), "opacity": round(self.opacity, 4)}
