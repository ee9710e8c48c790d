"""Global lighting configuration model."""

import math

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from .color import Color
from .enums import Pattern

DEFAULT_BRIGHTNESS = 75
DEFAULT_COLOR = Color(r=0, g=212, b=255)  # #00d4ff
DEFAULT_PATTERN = Pattern.SOLID
DEFAULT_SPEED = 50


def clamp_percent(value: float, fallback: int) -> int:
    """
    Clamp a percentage to the integer range 0-100.

    Infinities clamp to the nearest bound. NaN has no nearest bound, so it
    yields ``fallback`` (the current value) and the write is a no-op.
    """
    if math.isnan(value):
        return fallback
    return int(round(max(0.0, min(100.0, float(value)))))


class LightingConfig(BaseModel):
    """Global lighting parameters shared by all 64 pixels.

    The model is frozen: every mutation produces a new instance via
    ``model_copy`` so readers on other threads always see a complete config.

    ``speed`` is stored and persisted but no pattern consumes it yet.

    Numeric and boolean fields are strict: imported JSON must carry real
    ints and bools, so ``"75"`` or ``true`` for brightness is rejected.
    """

    model_config = ConfigDict(frozen=True)

    brightness: int = Field(
        default=DEFAULT_BRIGHTNESS, ge=0, le=100, strict=True, description="Brightness percent (0-100)"
    )
    color: Color = Field(default=DEFAULT_COLOR, description="Base color for solid/pulse/strobe")
    pattern: Pattern = Field(default=DEFAULT_PATTERN, description="Active lighting pattern")
    speed: int = Field(
        default=DEFAULT_SPEED, ge=0, le=100, strict=True, description="Animation speed (0-100, reserved)"
    )
    enabled: bool = Field(default=True, strict=True, description="Master switch")

    @field_serializer("color")
    def serialize_color(self, color: Color) -> str:
        """Serialize color as '#rrggbb'."""
        return color.to_hex()

    @property
    def intensity(self) -> float:
        """Brightness as a fraction (0.0-1.0)."""
        return self.brightness / 100

    @property
    def is_animated(self) -> bool:
        """Whether rendered output currently changes over time."""
        return self.enabled and self.pattern.is_animated

    def with_brightness(self, value: float) -> "LightingConfig":
        """Return a copy with brightness clamped to 0-100 (NaN keeps the current value)."""
        return self.model_copy(update={"brightness": clamp_percent(value, self.brightness)})

    def with_speed(self, value: float) -> "LightingConfig":
        """Return a copy with speed clamped to 0-100 (NaN keeps the current value)."""
        return self.model_copy(update={"speed": clamp_percent(value, self.speed)})

    @classmethod
    def defaults(cls) -> "LightingConfig":
        """Create the documented default configuration."""
        return cls()
