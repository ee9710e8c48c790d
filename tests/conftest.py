"""Pytest fixtures for tests."""

import random
from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from scopelight.core import ControlSurface
from scopelight.models import AppConfig, ControlSurfaceState, LightingConfig, PixelCell, PixelGrid


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def rng():
    """Seeded random source so override colors are reproducible."""
    return random.Random(1234)


@pytest.fixture
def surface(rng):
    """Control surface in the default state, no scheduler attached."""
    return ControlSurface(rng=rng, clock=lambda: 0.0)


@pytest.fixture
def default_config():
    """Default lighting config."""
    return LightingConfig()


@pytest.fixture
def inactive_cell():
    """Pixel cell without an override."""
    return PixelCell.inactive()


@pytest.fixture
def app_config(temp_dir):
    """App config with every file inside the temp directory."""
    return AppConfig(
        state_file=temp_dir / "state.json",
        presets_file=temp_dir / "presets.json",
        frame_interval=0.01,
        telemetry_interval=0.05,
        auto_save=False,
    )


@pytest.fixture
def painted_state():
    """State with two painted pixels and a non-default config."""
    grid = PixelGrid.create_empty()
    grid.cells[0] = PixelCell(active=True, override_color="#ff0000")
    grid.cells[63] = PixelCell(active=True, override_color="#00ff00")
    config = LightingConfig(brightness=40, color="#fbbf24", pattern="pulse", speed=10)
    return ControlSurfaceState(config=config, grid=grid)


@pytest.fixture
def home_dir(temp_dir, monkeypatch):
    """Point the home directory (and so ~/.scopelight) at the temp directory."""
    monkeypatch.setenv("HOME", str(temp_dir))
    return temp_dir
