"""Data models for the lighting controller."""

from .color import Color, HSLColor
from .config import AppConfig
from .enums import Pattern
from .lighting import LightingConfig, clamp_percent
from .pixel import GRID_SIZE, TOTAL_PIXELS, PixelCell, PixelGrid
from .preset import Preset, PresetCollection
from .rendered import RenderedPixel
from .state import ControlSurfaceState
from .telemetry import TelemetryReading, format_uptime

__all__ = [
    "GRID_SIZE",
    "TOTAL_PIXELS",
    "AppConfig",
    # Models
    "Color",
    "ControlSurfaceState",
    "HSLColor",
    "LightingConfig",
    # Enums
    "Pattern",
    "PixelCell",
    "PixelGrid",
    "Preset",
    "PresetCollection",
    "RenderedPixel",
    "TelemetryReading",
    "clamp_percent",
    "format_uptime",
]
