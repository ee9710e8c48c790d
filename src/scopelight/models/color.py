"""Color models for LED rendering."""

import colorsys
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{6})$")


class Color(BaseModel):
    """Standard 8-bit RGB color model.

    Uses standard 8-bit RGB (0-255) as the application's color representation.
    Accepts either explicit channels or a ``#rrggbb`` string on input, so
    saved state and presets can store colors the way users type them.

    The model is frozen to ensure hashability and so that configs holding
    a Color can be shared between threads safely.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, strict=True, description="Red (0-255)")
    g: int = Field(ge=0, le=255, strict=True, description="Green (0-255)")
    b: int = Field(ge=0, le=255, strict=True, description="Blue (0-255)")

    @model_validator(mode="before")
    @classmethod
    def parse_hex_string(cls, data: Any) -> Any:
        """Allow ``Color.model_validate("#00d4ff")``."""
        if isinstance(data, str):
            match = _HEX_PATTERN.match(data.strip())
            if not match:
                raise ValueError(f"Color must be a '#rrggbb' hex string, got {data!r}")
            value = int(match.group(1), 16)
            return {"r": (value >> 16) & 0xFF, "g": (value >> 8) & 0xFF, "b": value & 0xFF}
        return data

    @field_validator("r", "g", "b")
    @classmethod
    def validate_rgb(cls, v: int) -> int:
        """Ensure RGB values are in valid range."""
        if not 0 <= v <= 255:
            raise ValueError("RGB values must be between 0 and 255")
        return v

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Create a color from a ``#rrggbb`` (or ``rrggbb``) string.

        Raises:
            pydantic.ValidationError: If the string is not a 6-digit hex color
        """
        return cls.model_validate(value)

    def to_rgb(self) -> "Color":
        """Return this color (RGB is already the device representation)."""
        return self

    def to_hex(self) -> str:
        """Convert to CSS hex color string (e.g., '#00d4ff').

        Example:
            >>> Color(r=0, g=212, b=255).to_hex()
            '#00d4ff'
        """
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


class HSLColor(BaseModel):
    """Hue/saturation/lightness color, as produced by the rainbow pattern.

    Hue is in degrees [0, 360); saturation and lightness are percentages.
    """

    model_config = ConfigDict(frozen=True)

    hue: float = Field(ge=0.0, lt=360.0, description="Hue in degrees")
    saturation: float = Field(ge=0.0, le=100.0, description="Saturation percent")
    lightness: float = Field(ge=0.0, le=100.0, description="Lightness percent")

    def to_rgb(self) -> Color:
        """Convert to an 8-bit RGB color."""
        r, g, b = colorsys.hls_to_rgb(
            self.hue / 360.0, self.lightness / 100.0, self.saturation / 100.0
        )
        return Color(r=round(r * 255), g=round(g * 255), b=round(b * 255))

    def to_hex(self) -> str:
        """Convert to CSS hex color string via RGB."""
        return self.to_rgb().to_hex()

    def to_css(self) -> str:
        """Format as a CSS ``hsl()`` expression, e.g. ``hsl(45, 100%, 50%)``."""
        return f"hsl({self.hue:g}, {self.saturation:g}%, {self.lightness:g}%)"
