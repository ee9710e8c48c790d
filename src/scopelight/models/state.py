"""Complete control surface state (the save/export format)."""

from pydantic import BaseModel, Field

from .lighting import LightingConfig
from .pixel import PixelGrid


class ControlSurfaceState(BaseModel):
    """Everything the control surface owns: global config plus the 64 cells.

    This is also the persisted/exported layout::

        {
          "config": {"brightness": 75, "color": "#00d4ff", "pattern": "solid",
                     "speed": 50, "enabled": true},
          "grid": {"cells": [{"active": false, "override_color": null}, ...]}
        }
    """

    config: LightingConfig = Field(default_factory=LightingConfig, description="Lighting config")
    grid: PixelGrid = Field(default_factory=PixelGrid, description="Pixel override grid")
