"""Lighting preset model."""

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from .color import Color
from .enums import Pattern


class Preset(BaseModel):
    """A named, partial snapshot of the lighting config.

    Only brightness, color and pattern are captured; applying a preset never
    touches ``enabled``, ``speed`` or any pixel override. Names are display
    labels and are not required to be unique.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Display label")
    brightness: int = Field(ge=0, le=100, strict=True, description="Brightness percent (0-100)")
    color: Color = Field(description="Base color")
    pattern: Pattern = Field(description="Lighting pattern")

    @field_serializer("color")
    def serialize_color(self, color: Color) -> str:
        """Serialize color as '#rrggbb'."""
        return color.to_hex()


class PresetCollection(BaseModel):
    """On-disk preset catalog: ``{"presets": [...]}``."""

    presets: list[Preset] = Field(default_factory=list, description="Presets in display order")
