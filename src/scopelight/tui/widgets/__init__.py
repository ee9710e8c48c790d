"""TUI widgets for the control surface."""

from .led_grid import LedGrid
from .pixel_widget import PixelWidget
from .reset_confirmation_modal import ResetConfirmationModal
from .status_bar import StatusBar, TelemetryBar

__all__ = [
    "LedGrid",
    "PixelWidget",
    "ResetConfirmationModal",
    "StatusBar",
    "TelemetryBar",
]
