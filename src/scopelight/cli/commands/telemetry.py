"""Telemetry command: print simulated instrument readings."""

import random
import time
from typing import Optional

import click

from scopelight.core import TelemetrySimulator


@click.command(name="telemetry")
@click.option("--count", "-n", type=click.IntRange(min=1), default=5, help="Number of readings")
@click.option("--seed", type=int, default=None, help="Random seed for reproducible readings")
@click.option(
    "--interval",
    type=click.FloatRange(min=0.0),
    default=0.0,
    help="Seconds to wait between readings (default: 0)",
)
def telemetry(count: int, seed: Optional[int], interval: float):
    """
    Print simulated temperature, voltage and current readings.

    Every reading jitters around fixed baselines (23.5°C, 5.0V, 0.85A).
    """
    simulator = TelemetrySimulator(rng=random.Random(seed))

    for i in range(count):
        if i and interval:
            time.sleep(interval)
        reading = simulator.sample()
        click.echo(reading.summary())
