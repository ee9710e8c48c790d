"""Simulated instrument telemetry (display-only status values)."""

import logging
import random
import time
from collections.abc import Callable
from datetime import timedelta
from typing import Optional

from scopelight.models import TelemetryReading, format_uptime

from .periodic import PeriodicTask

logger = logging.getLogger(__name__)

DEFAULT_TELEMETRY_INTERVAL = 2.0

# (baseline, half range) per channel
TEMPERATURE = (23.5, 1.0)   # degrees C
VOLTAGE = (5.0, 0.05)       # volts
CURRENT = (0.85, 0.1)       # amps


class TelemetrySimulator:
    """
    Generates jittered temperature/voltage/current readings on a timer.

    Every tick replaces each value with ``baseline + uniform(-1, 1) * half_range``,
    so readings stay within a fixed band around the baseline. The loop is
    scoped to a session: call ``start()`` when the control surface opens and
    ``stop()`` when it closes (or use the simulator as a context manager).
    """

    def __init__(
        self,
        on_update: Optional[Callable[[TelemetryReading], None]] = None,
        interval: float = DEFAULT_TELEMETRY_INTERVAL,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the simulator at baseline values.

        Args:
            on_update: Called with each new reading (from the timer thread)
            interval: Seconds between readings
            rng: Random source (inject a seeded instance for tests)
            clock: Monotonic time source for uptime
        """
        self._on_update = on_update
        self._rng = rng or random.Random()
        self._clock = clock
        self._started_at = clock()
        self._task = PeriodicTask(interval, self._tick, name="telemetry")
        self._reading = TelemetryReading(
            temperature=TEMPERATURE[0],
            voltage=VOLTAGE[0],
            current=CURRENT[0],
            uptime=format_uptime(timedelta(0)),
        )

    @property
    def reading(self) -> TelemetryReading:
        """Most recent reading."""
        return self._reading

    @property
    def is_running(self) -> bool:
        """Whether the telemetry timer is active."""
        return self._task.is_running

    def _jitter(self, channel: tuple[float, float]) -> float:
        baseline, half_range = channel
        return baseline + self._rng.uniform(-1.0, 1.0) * half_range

    def sample(self) -> TelemetryReading:
        """Produce (and remember) the next reading."""
        elapsed = timedelta(seconds=max(0.0, self._clock() - self._started_at))
        self._reading = TelemetryReading(
            connected=True,
            temperature=self._jitter(TEMPERATURE),
            voltage=self._jitter(VOLTAGE),
            current=self._jitter(CURRENT),
            uptime=format_uptime(elapsed),
        )
        return self._reading

    def start(self) -> None:
        """Start the telemetry timer and reset the uptime origin."""
        if self._task.is_running:
            logger.warning("TelemetrySimulator is already running")
            return
        self._started_at = self._clock()
        self._task.start()
        logger.info(f"Telemetry simulator started (every {self._task.interval:g}s)")

    def stop(self) -> None:
        """Stop the telemetry timer."""
        self._task.stop()
        logger.info("Telemetry simulator stopped")

    def _tick(self) -> None:
        reading = self.sample()
        if self._on_update:
            self._on_update(reading)

    def __enter__(self):
        """Context manager entry."""
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.stop()
