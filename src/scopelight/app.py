"""
Top-level ScopeLight session orchestrator.

Ties the control surface to its periodic loops and persistence. The session
can run headless (CLI, tests) or underneath the Textual TUI, which only
registers callbacks for frames and telemetry readings.
"""

import logging
import random
from collections.abc import Callable
from pathlib import Path
from typing import Optional

from scopelight.core import AnimationScheduler, ControlSurface, PresetCatalog, TelemetrySimulator
from scopelight.exceptions import ScopeLightError
from scopelight.models import AppConfig, RenderedPixel, TelemetryReading
from scopelight.services import StateService

logger = logging.getLogger(__name__)

FrameCallback = Callable[[list[RenderedPixel]], None]
TelemetryCallback = Callable[[TelemetryReading], None]


class ScopeLightSession:
    """
    Owns everything a running control surface needs.

    Architecture:
        ScopeLightSession (this class)
        ├── surface: ControlSurface (config + pixel overrides)
        ├── scheduler: AnimationScheduler (pulse/strobe frame loop)
        ├── telemetry: TelemetrySimulator (status readings)
        ├── presets: PresetCatalog
        └── state_service: StateService (save/restore)

    Both periodic loops are session-scoped: ``initialize()`` starts
    telemetry and restores saved state, ``shutdown()`` stops both loops and
    saves the state if ``auto_save`` is on. Frame and telemetry callbacks
    run on the loops' own threads.
    """

    def __init__(
        self,
        config: AppConfig,
        on_frame: Optional[FrameCallback] = None,
        on_telemetry: Optional[TelemetryCallback] = None,
        rng: Optional[random.Random] = None,
        restore_state: bool = True,
    ):
        """
        Initialize the session (nothing runs until ``initialize``).

        Args:
            config: Application configuration
            on_frame: Receives each animation frame (64 rendered pixels)
            on_telemetry: Receives each telemetry reading
            rng: Random source shared by pixel clicks and telemetry
            restore_state: Load the saved state file on initialize
        """
        self.config = config
        self.on_frame = on_frame
        self.on_telemetry = on_telemetry
        self._restore_state = restore_state
        self._initialized = False

        rng = rng or random.Random()
        self.state_service = StateService(config)
        self.presets = PresetCatalog()
        self.surface = ControlSurface(rng=rng)
        self.scheduler = AnimationScheduler(self._handle_frame, frame_interval=config.frame_interval)
        self.telemetry = TelemetrySimulator(
            on_update=self._handle_telemetry, interval=config.telemetry_interval, rng=rng
        )

    @property
    def is_initialized(self) -> bool:
        """Whether ``initialize`` has run and ``shutdown`` has not."""
        return self._initialized

    def initialize(self) -> None:
        """Load presets and saved state, then start the periodic loops."""
        if self._initialized:
            logger.warning("ScopeLightSession already initialized")
            return

        try:
            self.presets = PresetCatalog.load(self.config.presets_file)
        except ScopeLightError as e:
            logger.error(f"Using built-in presets: {e.technical_message}")

        if self._restore_state:
            try:
                self.surface.load_state(self.state_service.load_or_default())
            except ScopeLightError as e:
                logger.error(f"Starting from defaults: {e.technical_message}")

        self.surface.attach_scheduler(self.scheduler)
        self.telemetry.start()
        self._initialized = True
        logger.info("ScopeLightSession initialized")

    def shutdown(self) -> None:
        """Stop both loops and save state if configured to."""
        if not self._initialized:
            return

        logger.info("Shutting down ScopeLightSession")
        self.scheduler.stop()
        self.telemetry.stop()
        self._initialized = False

        if self.config.auto_save:
            try:
                self.save_state()
            except (ScopeLightError, OSError) as e:
                logger.error(f"Auto-save failed: {e}")

    def save_state(self, path: Optional[Path] = None) -> Path:
        """Save the surface state (to the configured state file by default)."""
        return self.state_service.export_surface(self.surface, path)

    def load_state(self, path: Optional[Path] = None) -> None:
        """Import a state file into the surface, all or nothing."""
        self.state_service.import_into(self.surface, path)

    def apply_preset(self, name: str) -> None:
        """
        Apply a preset by name.

        Raises:
            KeyError: If the catalog has no such preset
        """
        self.surface.apply_preset(self.presets.get(name))

    def _handle_frame(self, now: float) -> None:
        frame = self.surface.render_frame(now)
        if self.on_frame:
            self.on_frame(frame)

    def _handle_telemetry(self, reading: TelemetryReading) -> None:
        if self.on_telemetry:
            self.on_telemetry(reading)

    def __enter__(self):
        """Context manager entry."""
        self.initialize()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.shutdown()
