"""Animation scheduler: decides when the whole grid must be re-rendered."""

import logging
import time
from collections.abc import Callable
from threading import Lock
from typing import Optional

from scopelight.models import LightingConfig, Pattern

from .periodic import PeriodicTask

logger = logging.getLogger(__name__)

DEFAULT_FRAME_INTERVAL = 1 / 60


class AnimationScheduler:
    """
    Drives periodic frame callbacks for time-varying patterns only.

    A frame loop runs exactly while the lighting is enabled and the pattern
    is pulse or strobe. For solid and rainbow (or when disabled) nothing is
    scheduled and rendering stays purely input-driven.

    Call ``sync(config)`` after every config mutation. Whenever ``enabled``
    or ``pattern`` changed since the last sync, the running loop is cancelled
    before a new one is scheduled, so render loops never pile up. Syncing
    with an unchanged ``enabled``/``pattern`` pair is a no-op.

    The frame callback receives the current time (seconds) and is expected
    to call ``ControlSurface.render_frame`` and hand the result to a display.
    It runs on the scheduler's own thread.
    """

    def __init__(
        self,
        on_frame: Callable[[float], None],
        frame_interval: float = DEFAULT_FRAME_INTERVAL,
        clock: Callable[[], float] = time.time,
    ):
        """
        Initialize the scheduler (nothing is scheduled until ``sync``).

        Args:
            on_frame: Called with the frame timestamp on every tick
            frame_interval: Seconds between frames (> 0)
            clock: Time source passed to ``on_frame``

        Raises:
            ValueError: If frame_interval is not positive
        """
        if frame_interval <= 0:
            raise ValueError(f"Frame interval must be positive, got {frame_interval}")

        self._on_frame = on_frame
        self._frame_interval = frame_interval
        self._clock = clock
        self._lock = Lock()
        self._task: Optional[PeriodicTask] = None
        self._last_key: Optional[tuple[bool, Pattern]] = None

    @staticmethod
    def should_animate(config: LightingConfig) -> bool:
        """Whether ``config`` needs periodic re-rendering."""
        return config.enabled and Pattern(config.pattern).is_animated

    @property
    def is_running(self) -> bool:
        """Whether a frame loop is currently scheduled."""
        task = self._task
        return task is not None and task.is_running

    @property
    def frame_interval(self) -> float:
        """Seconds between frames."""
        return self._frame_interval

    def sync(self, config: LightingConfig) -> bool:
        """
        Reconcile the frame loop with ``config``.

        Args:
            config: Current lighting configuration

        Returns:
            True if a frame loop is running after the call
        """
        key = (config.enabled, Pattern(config.pattern))

        with self._lock:
            if key == self._last_key:
                return self.is_running

            self._cancel_locked()
            self._last_key = key

            if self.should_animate(config):
                self._task = PeriodicTask(
                    self._frame_interval, self._tick, name=f"animation-{key[1].value}"
                )
                self._task.start()
                logger.info(f"Animation started for pattern '{key[1].value}'")
            else:
                logger.debug(f"No animation for pattern '{key[1].value}' (enabled={key[0]})")

            return self.is_running

    def stop(self) -> None:
        """Cancel any running frame loop and forget the last synced config."""
        with self._lock:
            self._cancel_locked()
            self._last_key = None

    def _cancel_locked(self) -> None:
        """Stop the current loop. Caller holds ``self._lock``."""
        if self._task is not None:
            self._task.stop()
            logger.info(f"Animation cancelled ({self._task.name})")
            self._task = None

    def _tick(self) -> None:
        self._on_frame(self._clock())
