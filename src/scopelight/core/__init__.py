"""Core lighting engine: rendering, pixel overrides and periodic loops."""

from .animation import AnimationScheduler
from .control_surface import ControlSurface
from .pattern_engine import render_frame, render_pixel
from .periodic import PeriodicTask
from .presets import BUILTIN_PRESETS, PresetCatalog
from .telemetry import TelemetrySimulator

__all__ = [
    "BUILTIN_PRESETS",
    "AnimationScheduler",
    "ControlSurface",
    "PeriodicTask",
    "PresetCatalog",
    "TelemetrySimulator",
    "render_frame",
    "render_pixel",
]
