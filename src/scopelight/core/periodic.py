"""Cancellable periodic task running on a daemon thread."""

import logging
import threading
from collections.abc import Callable
from typing import Optional

logger = logging.getLogger(__name__)


class PeriodicTask:
    """
    Calls ``callback`` every ``interval`` seconds until stopped.

    Each ``start()`` spawns a fresh daemon thread with its own stop event,
    so a task can be stopped and started again. Starting a task that is
    already running is a no-op. ``stop()`` may be called from inside the
    callback; it then returns without joining its own thread.

    Exceptions raised by the callback are logged and the loop keeps going.
    """

    def __init__(self, interval: float, callback: Callable[[], None], name: str = "periodic-task"):
        """
        Initialize the task (does not start it).

        Args:
            interval: Seconds between callback invocations (> 0)
            callback: Function invoked on every tick
            name: Thread name, also used in log messages

        Raises:
            ValueError: If interval is not positive
        """
        if interval <= 0:
            raise ValueError(f"Interval must be positive, got {interval}")

        self._interval = interval
        self._callback = callback
        self._name = name
        self._lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None
        self._stop_event = threading.Event()
        self.tick_count = 0

    @property
    def interval(self) -> float:
        """Seconds between ticks."""
        return self._interval

    @property
    def name(self) -> str:
        """Task name."""
        return self._name

    @property
    def is_running(self) -> bool:
        """Whether the task thread is alive and not asked to stop."""
        thread = self._thread
        return thread is not None and thread.is_alive() and not self._stop_event.is_set()

    def start(self) -> None:
        """Start ticking. No-op if already running."""
        with self._lock:
            if self.is_running:
                logger.debug(f"{self._name} is already running")
                return

            self._stop_event = threading.Event()
            self._thread = threading.Thread(
                target=self._run, args=(self._stop_event,), name=self._name, daemon=True
            )
            self._thread.start()
        logger.debug(f"{self._name} started (interval={self._interval:.3f}s)")

    def stop(self, timeout: float = 1.0) -> None:
        """
        Stop ticking and wait for the thread to exit.

        Args:
            timeout: Maximum seconds to wait for the thread to finish
        """
        with self._lock:
            thread = self._thread
            self._thread = None
            self._stop_event.set()

        if thread is None:
            return

        if thread is not threading.current_thread() and thread.is_alive():
            thread.join(timeout=timeout)
            if thread.is_alive():
                logger.warning(f"{self._name} did not stop within {timeout}s")

        logger.debug(f"{self._name} stopped after {self.tick_count} ticks")

    def _run(self, stop_event: threading.Event) -> None:
        """Tick until ``stop_event`` is set."""
        while not stop_event.wait(self._interval):
            try:
                self._callback()
                self.tick_count += 1
            except Exception as e:
                logger.error(f"Error in {self._name} tick: {e}")

    def __enter__(self):
        """Context manager entry."""
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.stop()
