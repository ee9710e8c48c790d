"""Pattern engine: maps (pixel, time, config, override) to what the LED shows.

Everything here is a pure function of its arguments. Callers pass ``now``
explicitly (seconds since the epoch, as from ``time.time()``), so the same
inputs always give the same frame.

Evaluation order for one pixel:

1. Master switch off -> inactive baseline (gray, 0.3), overrides hidden
2. Cell has an override -> override color at config brightness
3. Otherwise the global pattern formula
4. Opacity clamped to [0, 1]
"""

import math
from collections.abc import Sequence

from scopelight.colors import INACTIVE_COLOR, INACTIVE_OPACITY
from scopelight.models import HSLColor, LightingConfig, Pattern, PixelCell, RenderedPixel

# Rainbow: hue advances 45 degrees per pixel index, fixed saturation/lightness
RAINBOW_HUE_STEP = 45
RAINBOW_SATURATION = 100.0
RAINBOW_LIGHTNESS = 50.0

# Pulse: opacity = k * (PULSE_FLOOR + PULSE_DEPTH * sin(now + index * PULSE_PHASE_STEP))
PULSE_FLOOR = 0.3
PULSE_DEPTH = 0.7
PULSE_PHASE_STEP = 0.1  # radians per index

# Strobe: synchronous square wave, on for even half-periods
STROBE_HALF_PERIOD_MS = 200
STROBE_OFF_OPACITY = 0.1

_INACTIVE_PIXEL = RenderedPixel(color=INACTIVE_COLOR, opacity=INACTIVE_OPACITY)


def _clamp_unit(value: float) -> float:
    return min(1.0, max(0.0, value))


def rainbow_color(index: int) -> HSLColor:
    """Static rainbow hue for a pixel index."""
    return HSLColor(
        hue=(index * RAINBOW_HUE_STEP) % 360,
        saturation=RAINBOW_SATURATION,
        lightness=RAINBOW_LIGHTNESS,
    )


def pulse_opacity(index: int, now: float, intensity: float) -> float:
    """Traveling sine wave; each index lags the previous by 0.1 rad."""
    phase = now + index * PULSE_PHASE_STEP
    return intensity * (PULSE_FLOOR + PULSE_DEPTH * math.sin(phase))


def strobe_opacity(now: float, intensity: float) -> float:
    """Full intensity on even 200 ms slots, dim on odd ones."""
    slot = math.floor(now * 1000.0 / STROBE_HALF_PERIOD_MS)
    return intensity if slot % 2 == 0 else STROBE_OFF_OPACITY


def render_pixel(index: int, now: float, config: LightingConfig, cell: PixelCell) -> RenderedPixel:
    """
    Compute the rendered color and opacity of one pixel.

    Args:
        index: Pixel index (0-63); only used as a phase/hue offset
        now: Wall-clock time in seconds
        config: Global lighting configuration
        cell: Override state of this pixel

    Returns:
        RenderedPixel with opacity in [0, 1]
    """
    if not config.enabled:
        return _INACTIVE_PIXEL

    intensity = config.intensity

    if cell.active:
        # Overrides bypass pattern timing entirely
        return RenderedPixel(color=cell.override_color, opacity=_clamp_unit(intensity))

    if config.pattern == Pattern.RAINBOW:
        return RenderedPixel(color=rainbow_color(index), opacity=_clamp_unit(intensity))

    if config.pattern == Pattern.PULSE:
        opacity = pulse_opacity(index, now, intensity)
    elif config.pattern == Pattern.STROBE:
        opacity = strobe_opacity(now, intensity)
    else:
        opacity = intensity

    return RenderedPixel(color=config.color, opacity=_clamp_unit(opacity))


def render_frame(
    now: float, config: LightingConfig, cells: Sequence[PixelCell]
) -> list[RenderedPixel]:
    """Render every pixel of the grid, in index order."""
    return [render_pixel(index, now, config, cell) for index, cell in enumerate(cells)]
