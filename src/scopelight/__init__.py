"""ScopeLight: control surface for a microscope's 8x8 addressable LED ring."""

__version__ = "0.1.0"

from .core import ControlSurface, PresetCatalog, render_frame, render_pixel
from .models import ControlSurfaceState, LightingConfig, Pattern, RenderedPixel

__all__ = [
    "ControlSurface",
    "ControlSurfaceState",
    "LightingConfig",
    "Pattern",
    "PresetCatalog",
    "RenderedPixel",
    "render_frame",
    "render_pixel",
]
