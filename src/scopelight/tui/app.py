"""Textual control surface for the LED ring."""

import logging
from typing import TYPE_CHECKING, Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.message import Message
from textual.widgets import Footer, Header

from scopelight.models import Pattern, RenderedPixel, TelemetryReading

from .decorators import handle_action_errors
from .widgets import LedGrid, ResetConfirmationModal, StatusBar, TelemetryBar

if TYPE_CHECKING:
    from scopelight.app import ScopeLightSession

logger = logging.getLogger(__name__)

BRIGHTNESS_STEP = 5


class FrameRendered(Message):
    """Posted from the animation thread with a freshly rendered frame."""

    def __init__(self, frame: list[RenderedPixel]):
        super().__init__()
        self.frame = frame


class TelemetryUpdated(Message):
    """Posted from the telemetry thread with a new reading."""

    def __init__(self, reading: TelemetryReading):
        super().__init__()
        self.reading = reading


class ScopeLightApp(App):
    """
    Textual TUI for the LED control surface.

    This is a PURE UI layer: the session owns the control surface, the
    animation scheduler and the telemetry simulator. Every user action
    mutates the surface, then re-renders the grid explicitly.

    Animation and telemetry callbacks arrive on background threads and are
    forwarded with ``post_message``, which never blocks the caller. The
    scheduler may cancel its loop while a frame is in flight, so a blocking
    hand-off to the UI thread is not an option.
    """

    TITLE = "ScopeLight"

    BINDINGS = [
        Binding("p", "toggle_power", "Power", show=True),
        Binding("1", "set_pattern('solid')", "Solid", show=True),
        Binding("2", "set_pattern('pulse')", "Pulse", show=True),
        Binding("3", "set_pattern('rainbow')", "Rainbow", show=True),
        Binding("4", "set_pattern('strobe')", "Strobe", show=True),
        Binding("up", "brightness_up", "Brighter", show=False),
        Binding("down", "brightness_down", "Dimmer", show=False),
        Binding("f1", "apply_preset(0)", "Preset 1", show=False),
        Binding("f2", "apply_preset(1)", "Preset 2", show=False),
        Binding("f3", "apply_preset(2)", "Preset 3", show=False),
        Binding("f4", "apply_preset(3)", "Preset 4", show=False),
        Binding("c", "clear_pixels", "Clear", show=True),
        Binding("ctrl+r", "reset", "Reset", show=True),
        Binding("ctrl+s", "save", "Save", show=True),
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(self, session: "ScopeLightSession"):
        """
        Initialize the Textual UI application.

        The session should NOT be initialized yet; the app initializes it
        once its widgets exist and shuts it down on unmount.

        Args:
            session: The ScopeLightSession to drive
        """
        super().__init__()
        self.session = session
        self.surface = session.surface
        self._startup_error: Optional[Exception] = None
        logger.info("ScopeLight TUI created")

    # =================================================================
    # Lifecycle
    # =================================================================

    def compose(self) -> ComposeResult:
        """Create the main layout."""
        yield Header(show_clock=True)
        yield LedGrid()
        yield StatusBar()
        yield TelemetryBar()
        yield Footer()

    def on_mount(self) -> None:
        """Wire callbacks, start the session and draw the first frame."""
        self.session.on_frame = self._post_frame
        self.session.on_telemetry = self._post_telemetry

        try:
            self.session.initialize()
        except Exception as e:
            logger.error(f"Failed to initialize session: {e}")
            self._startup_error = e
            self.exit(1)
            return

        self.query_one(TelemetryBar).update_reading(self.session.telemetry.reading)
        self.refresh_surface()
        logger.info("TUI mount complete")

    def on_unmount(self) -> None:
        """Stop animation and telemetry loops."""
        self.session.on_frame = None
        self.session.on_telemetry = None
        self.session.shutdown()
        logger.info("TUI unmounted")

    @property
    def startup_error(self) -> Optional[Exception]:
        """Error raised while starting the session, if any."""
        return self._startup_error

    # =================================================================
    # Rendering
    # =================================================================

    def refresh_surface(self) -> None:
        """Render a frame now and update the grid and status bar."""
        self._show_frame(self.surface.render_frame())
        config = self.surface.config
        self.sub_title = f"{config.pattern.value.title()} {config.brightness}%"

    def _show_frame(self, frame: list[RenderedPixel]) -> None:
        active = {i for i, cell in enumerate(self.surface.cells()) if cell.active}
        self.query_one(LedGrid).show_frame(frame, active)
        self.query_one(StatusBar).update_state(self.surface.config, len(active))

    def _post_frame(self, frame: list[RenderedPixel]) -> None:
        self.post_message(FrameRendered(frame))

    def _post_telemetry(self, reading: TelemetryReading) -> None:
        self.post_message(TelemetryUpdated(reading))

    def on_frame_rendered(self, message: FrameRendered) -> None:
        """Show an animation frame."""
        self._show_frame(message.frame)

    def on_telemetry_updated(self, message: TelemetryUpdated) -> None:
        """Show a telemetry reading."""
        self.query_one(TelemetryBar).update_reading(message.reading)

    # =================================================================
    # Event handlers
    # =================================================================

    def on_led_grid_pixel_clicked(self, message: LedGrid.PixelClicked) -> None:
        """Paint the clicked pixel."""
        cell = self.surface.click_pixel(message.index)
        logger.debug(f"Pixel {message.index} painted {cell.override_color.to_hex()}")
        self.refresh_surface()

    # =================================================================
    # Actions
    # =================================================================

    def action_toggle_power(self) -> None:
        """Flip the master switch."""
        config = self.surface.toggle_power()
        self.notify(f"Power {'on' if config.enabled else 'off'}", timeout=2)
        self.refresh_surface()

    def action_set_pattern(self, pattern: str) -> None:
        """Select a pattern."""
        self.surface.set_pattern(Pattern(pattern))
        self.refresh_surface()

    def action_brightness_up(self) -> None:
        """Increase brightness."""
        self.surface.set_brightness(self.surface.config.brightness + BRIGHTNESS_STEP)
        self.refresh_surface()

    def action_brightness_down(self) -> None:
        """Decrease brightness."""
        self.surface.set_brightness(self.surface.config.brightness - BRIGHTNESS_STEP)
        self.refresh_surface()

    def action_apply_preset(self, position: int) -> None:
        """Apply the preset at ``position`` in the catalog."""
        presets = self.session.presets
        if position >= len(presets):
            self.notify(f"No preset in slot {position + 1}", severity="warning")
            return

        preset = presets[position]
        self.surface.apply_preset(preset)
        self.notify(f"Preset: {preset.name}", timeout=2)
        self.refresh_surface()

    def action_clear_pixels(self) -> None:
        """Remove all painted pixels."""
        self.surface.clear_all_pixels()
        self.refresh_surface()

    def action_reset(self) -> None:
        """Reset everything to defaults, after confirmation."""
        if len(self.screen_stack) > 1:
            return

        def handle_confirmation(confirmed: bool) -> None:
            if not confirmed:
                return
            self.surface.reset()
            self.notify("Reset to defaults")
            self.refresh_surface()

        overrides = sum(1 for cell in self.surface.cells() if cell.active)
        self.push_screen(ResetConfirmationModal(overrides), handle_confirmation)

    @handle_action_errors("save lighting state")
    def action_save(self) -> None:
        """Save the lighting state to the configured state file."""
        path = self.session.save_state()
        self.notify(f"Saved to {path}")
