"""Service for saving, exporting and importing lighting state."""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from scopelight.exceptions import ErrorContext, wrap_state_error
from scopelight.models import AppConfig, ControlSurfaceState
from scopelight.utils import PydanticPersistence

if TYPE_CHECKING:
    from scopelight.core import ControlSurface

logger = logging.getLogger(__name__)


class StateService:
    """
    Handles persistence of ``ControlSurfaceState`` as JSON.

    The service is stateless apart from the config it reads default paths
    from. Loading validates the whole document before anything is returned,
    so an invalid file never reaches a control surface.

    File layout::

        {"config": {...LightingConfig...}, "grid": {"cells": [...64 cells...]}}
    """

    def __init__(self, config: AppConfig):
        """
        Initialize the StateService.

        Args:
            config: Application configuration (provides the default state file)
        """
        self.config = config

    def _resolve(self, path: Optional[Path]) -> Path:
        return path if path is not None else self.config.state_file

    def save(self, state: ControlSurfaceState, path: Optional[Path] = None) -> Path:
        """
        Save state to JSON (atomic write, previous file kept as .bak).

        Returns:
            The path written
        """
        target = self._resolve(path)
        with ErrorContext(f"save lighting state to {target}", logger_instance=logger):
            PydanticPersistence.save_json(state, target)
        logger.info(f"Saved lighting state to {target}")
        return target

    def load(self, path: Optional[Path] = None) -> ControlSurfaceState:
        """
        Load and validate state from JSON.

        Raises:
            FileNotFoundError: If the file doesn't exist
            StateFileInvalidError: If the file is not valid JSON
            StateValidationError: If any value is invalid
        """
        target = self._resolve(path)
        state = PydanticPersistence.load_json(target, ControlSurfaceState, wrap_state_error)
        logger.info(f"Loaded lighting state from {target}")
        return state

    def load_or_default(self, path: Optional[Path] = None) -> ControlSurfaceState:
        """Load state, or return the default state if the file is missing."""
        return PydanticPersistence.load_json_or_default(
            self._resolve(path), ControlSurfaceState, error_wrapper=wrap_state_error
        )

    def validate(self, path: Optional[Path] = None) -> tuple[bool, Optional[str]]:
        """Check a state file without loading it into a surface."""
        return PydanticPersistence.validate_json(
            self._resolve(path), ControlSurfaceState, wrap_state_error
        )

    def export_surface(self, surface: "ControlSurface", path: Optional[Path] = None) -> Path:
        """Write a surface's current state to ``path``."""
        return self.save(surface.export_state(), path)

    def import_into(self, surface: "ControlSurface", path: Optional[Path] = None) -> ControlSurfaceState:
        """
        Load ``path`` into ``surface``, all or nothing.

        Raises:
            FileNotFoundError, StateFileInvalidError, StateValidationError:
                The surface is left unchanged
        """
        state = self.load(path)
        surface.load_state(state)
        return state
