"""Enumerations for the lighting controller."""

from enum import Enum


class Pattern(str, Enum):
    """Global lighting patterns."""

    SOLID = "solid"      # Base color at configured brightness
    PULSE = "pulse"      # Sine-modulated brightness, phase-shifted per pixel
    RAINBOW = "rainbow"  # Static hue wheel across the grid
    STROBE = "strobe"    # Synchronous 200 ms on/off square wave

    @property
    def is_animated(self) -> bool:
        """Whether the rendered output depends on wall-clock time."""
        return self in (Pattern.PULSE, Pattern.STROBE)
