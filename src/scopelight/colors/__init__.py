"""Color constants - single source of truth for fixed colors.

All colors are standard 8-bit RGB ``Color`` objects. Two groups live here:

- ``COLORS``: named swatches. The first sixteen form the quick-pick palette
  shown next to the color picker and double as the pool that per-pixel
  overrides are drawn from.
- Fixed render colors such as the inactive baseline shown while the
  lighting master switch is off.

Example:
    ```python
    from scopelight.colors import COLORS, OVERRIDE_PALETTE

    surface.set_color(COLORS.ORANGE)
    assert COLORS.ORANGE in OVERRIDE_PALETTE
    ```

The palette is a static constant; it is not user-extensible at runtime.
"""

from scopelight.models.color import Color


class COLORS:
    """Standard color constants - 8-bit RGB (0-255)."""

    # ============================================================================
    # SWATCHES (quick-pick palette, in display order)
    # ============================================================================

    WHITE: Color = Color(r=255, g=255, b=255)
    RED: Color = Color(r=255, g=0, b=0)
    LIME: Color = Color(r=0, g=255, b=0)
    BLUE: Color = Color(r=0, g=0, b=255)
    YELLOW: Color = Color(r=255, g=255, b=0)
    MAGENTA: Color = Color(r=255, g=0, b=255)
    CYAN: Color = Color(r=0, g=255, b=255)
    ORANGE: Color = Color(r=255, g=165, b=0)
    PURPLE: Color = Color(r=128, g=0, b=128)
    GREEN: Color = Color(r=0, g=128, b=0)
    NAVY: Color = Color(r=0, g=0, b=128)
    MAROON: Color = Color(r=128, g=0, b=0)
    OLIVE: Color = Color(r=128, g=128, b=0)
    TEAL: Color = Color(r=0, g=128, b=128)
    SILVER: Color = Color(r=192, g=192, b=192)
    GREY: Color = Color(r=128, g=128, b=128)

    # ============================================================================
    # ACCENTS
    # ============================================================================

    SKY: Color = Color(r=0, g=212, b=255)
    """Default base color (#00d4ff)"""

    AMBER: Color = Color(r=251, g=191, b=36)
    """Warm white used by the "Warm" preset (#fbbf24)"""

    SLATE: Color = Color(r=55, g=65, b=81)
    """Neutral gray (#374151) shown while lighting is disabled"""


# Pool for per-pixel override colors (drawn uniformly on each click)
OVERRIDE_PALETTE: tuple[Color, ...] = (
    COLORS.WHITE,
    COLORS.RED,
    COLORS.LIME,
    COLORS.BLUE,
    COLORS.YELLOW,
    COLORS.MAGENTA,
    COLORS.CYAN,
    COLORS.ORANGE,
    COLORS.PURPLE,
    COLORS.GREEN,
    COLORS.NAVY,
    COLORS.MAROON,
    COLORS.OLIVE,
    COLORS.TEAL,
    COLORS.SILVER,
    COLORS.GREY,
)

# Inactive baseline: what every pixel shows while the master switch is off
INACTIVE_COLOR = COLORS.SLATE
INACTIVE_OPACITY = 0.3


__all__ = ["COLORS", "INACTIVE_COLOR", "INACTIVE_OPACITY", "OVERRIDE_PALETTE"]
