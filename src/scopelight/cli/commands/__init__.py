"""CLI commands for scopelight."""

from .config import config
from .presets import presets_group
from .render import render
from .state import state_group
from .telemetry import telemetry

__all__ = ["config", "presets_group", "render", "state_group", "telemetry"]
