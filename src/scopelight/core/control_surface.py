"""Control surface: the single owner of lighting config and pixel overrides."""

import logging
import random
import time
from collections.abc import Callable, Sequence
from threading import Lock
from typing import Optional

from pydantic import ValidationError

from scopelight.colors import OVERRIDE_PALETTE
from scopelight.exceptions import wrap_state_error
from scopelight.models import (
    Color,
    ControlSurfaceState,
    LightingConfig,
    Pattern,
    PixelCell,
    PixelGrid,
    Preset,
    RenderedPixel,
)

from .animation import AnimationScheduler
from .pattern_engine import render_frame, render_pixel
from .presets import PresetCatalog

logger = logging.getLogger(__name__)


class ControlSurface:
    """
    Owns a ``ControlSurfaceState`` and exposes every mutation on it.

    Mutations (brightness, color, pattern, power, speed, preset, click,
    clear, reset, import) are applied atomically under a lock: the config
    is immutable and swapped as a whole, and pixel cells are replaced, never
    edited in place. ``render_frame`` snapshots config and cells under the
    same lock, so a render never observes half a mutation, and a click is
    always visible to the next render of that pixel.

    Rendering is never implicit. Callers invoke ``render_frame`` after each
    mutation and on every animation tick. If an ``AnimationScheduler`` is
    attached, it is re-synced whenever the config changes so that animated
    patterns get a frame loop and static ones do not.
    """

    def __init__(
        self,
        state: Optional[ControlSurfaceState] = None,
        rng: Optional[random.Random] = None,
        palette: Sequence[Color] = OVERRIDE_PALETTE,
        scheduler: Optional[AnimationScheduler] = None,
        clock: Callable[[], float] = time.time,
    ):
        """
        Initialize the control surface.

        Args:
            state: Initial state (defaults to documented defaults, no overrides)
            rng: Random source for override colors (inject a seeded one for tests)
            palette: Colors that pixel clicks draw from
            scheduler: Optional animation scheduler kept in sync with the config
            clock: Time source used when ``render_frame`` gets no timestamp
        """
        self._state = state.model_copy(deep=True) if state else ControlSurfaceState()
        self._rng = rng or random.Random()
        self._palette = tuple(palette)
        self._scheduler = scheduler
        self._clock = clock
        self._lock = Lock()
        logger.debug("ControlSurface initialized")

    # =================================================================
    # Read access
    # =================================================================

    @property
    def config(self) -> LightingConfig:
        """Current lighting config (immutable snapshot)."""
        return self._state.config

    @property
    def palette(self) -> tuple[Color, ...]:
        """Override color palette."""
        return self._palette

    @property
    def scheduler(self) -> Optional[AnimationScheduler]:
        """Attached animation scheduler, if any."""
        return self._scheduler

    def attach_scheduler(self, scheduler: Optional[AnimationScheduler]) -> None:
        """Attach (or detach with None) a scheduler and sync it immediately."""
        if self._scheduler is not None and self._scheduler is not scheduler:
            self._scheduler.stop()
        self._scheduler = scheduler
        self._sync_animation()

    def get_cell(self, index: int) -> PixelCell:
        """
        Get the override state of one pixel.

        Raises:
            IndexError: If index is out of range
        """
        with self._lock:
            return self._state.grid.get_cell(index)

    def cells(self) -> list[PixelCell]:
        """Snapshot of all 64 cells."""
        with self._lock:
            return list(self._state.grid.cells)

    def export_state(self) -> ControlSurfaceState:
        """Deep copy of the current state, safe to serialize or keep."""
        with self._lock:
            return self._state.model_copy(deep=True)

    # =================================================================
    # Rendering
    # =================================================================

    def render_frame(self, now: Optional[float] = None) -> list[RenderedPixel]:
        """
        Render all 64 pixels.

        Args:
            now: Timestamp in seconds (defaults to the surface clock)

        Returns:
            64 RenderedPixel values in index order
        """
        if now is None:
            now = self._clock()
        with self._lock:
            config = self._state.config
            cells = list(self._state.grid.cells)
        return render_frame(now, config, cells)

    def render_pixel(self, index: int, now: Optional[float] = None) -> RenderedPixel:
        """
        Render a single pixel.

        Raises:
            IndexError: If index is out of range
        """
        if now is None:
            now = self._clock()
        with self._lock:
            config = self._state.config
            cell = self._state.grid.get_cell(index)
        return render_pixel(index, now, config, cell)

    # =================================================================
    # Config mutations
    # =================================================================

    def set_brightness(self, value: float) -> LightingConfig:
        """Set brightness, clamped to 0-100."""
        return self._update_config(lambda config: config.with_brightness(value))

    def set_color(self, color: Color | str) -> LightingConfig:
        """
        Set the base color.

        Args:
            color: Color or '#rrggbb' string

        Raises:
            pydantic.ValidationError: If a string is not a valid hex color
        """
        if isinstance(color, str):
            color = Color.from_hex(color)
        return self._update_config(lambda config: config.model_copy(update={"color": color}))

    def set_pattern(self, pattern: Pattern | str) -> LightingConfig:
        """
        Select the global pattern.

        Raises:
            ValueError: If ``pattern`` is not one of solid/pulse/rainbow/strobe
        """
        pattern = Pattern(pattern)
        return self._update_config(lambda config: config.model_copy(update={"pattern": pattern}))

    def set_enabled(self, enabled: bool) -> LightingConfig:
        """Turn the lighting master switch on or off."""
        return self._update_config(
            lambda config: config.model_copy(update={"enabled": bool(enabled)})
        )

    def toggle_power(self) -> LightingConfig:
        """Flip the master switch."""
        return self._update_config(
            lambda config: config.model_copy(update={"enabled": not config.enabled})
        )

    def set_speed(self, value: float) -> LightingConfig:
        """Set animation speed, clamped to 0-100. Stored only; no pattern uses it."""
        return self._update_config(lambda config: config.with_speed(value))

    def apply_preset(self, preset: Preset) -> LightingConfig:
        """Apply a preset's brightness, color and pattern. Pixel overrides are untouched."""
        logger.info(f"Applying preset '{preset.name}'")
        return self._update_config(lambda config: PresetCatalog.apply(config, preset))

    # =================================================================
    # Pixel mutations
    # =================================================================

    def click_pixel(self, index: int) -> PixelCell:
        """
        Paint a pixel with a random palette color (activating it if needed).

        Raises:
            IndexError: If index is out of range
        """
        with self._lock:
            return self._state.grid.click(index, self._rng, self._palette)

    def clear_all_pixels(self) -> None:
        """Remove every pixel override."""
        with self._lock:
            self._state.grid.clear_all()
        logger.info("Cleared all pixel overrides")

    def reset(self) -> LightingConfig:
        """Clear all overrides and restore the default lighting config."""
        with self._lock:
            self._state = ControlSurfaceState(
                config=LightingConfig.defaults(), grid=PixelGrid.create_empty()
            )
            config = self._state.config
        logger.info("Control surface reset to defaults")
        self._sync_animation()
        return config

    # =================================================================
    # State import
    # =================================================================

    def load_state(self, state: ControlSurfaceState) -> None:
        """Replace the whole state with a copy of an already-validated ``state``."""
        new_state = state.model_copy(deep=True)
        with self._lock:
            self._state = new_state
        logger.info(
            f"Loaded state: pattern={new_state.config.pattern.value}, "
            f"overrides={len(new_state.grid.active_indices)}"
        )
        self._sync_animation()

    def import_state_json(self, payload: str, source: str = "<input>") -> None:
        """
        Validate a JSON state payload and load it.

        The payload is rejected as a whole if anything is invalid; in that
        case the current state is left untouched.

        Raises:
            StateFileInvalidError: If the payload is not valid JSON
            StateValidationError: If any field is invalid
        """
        try:
            state = ControlSurfaceState.model_validate_json(payload)
        except ValidationError as e:
            logger.warning(f"Rejected state import from {source}")
            raise wrap_state_error(e, source) from e
        self.load_state(state)

    # =================================================================
    # Internals
    # =================================================================

    def _update_config(
        self, change: Callable[[LightingConfig], LightingConfig]
    ) -> LightingConfig:
        """Swap in ``change(config)`` atomically and resync animation."""
        with self._lock:
            new_config = change(self._state.config)
            self._state.config = new_config
        logger.debug(
            f"Config updated: brightness={new_config.brightness}, "
            f"color={new_config.color.to_hex()}, pattern={new_config.pattern.value}, "
            f"enabled={new_config.enabled}"
        )
        self._sync_animation()
        return new_config

    def _sync_animation(self) -> None:
        if self._scheduler is not None:
            self._scheduler.sync(self.config)
