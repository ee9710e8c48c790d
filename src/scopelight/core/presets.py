"""Preset catalog: named lighting bundles applied atomically."""

import logging
from collections.abc import Iterator
from pathlib import Path

from scopelight.colors import COLORS
from scopelight.models import LightingConfig, Pattern, Preset, PresetCollection
from scopelight.utils import PydanticPersistence

logger = logging.getLogger(__name__)


BUILTIN_PRESETS: tuple[Preset, ...] = (
    Preset(name="Bright", brightness=100, color=COLORS.WHITE, pattern=Pattern.SOLID),
    Preset(name="Soft Blue", brightness=60, color=COLORS.SKY, pattern=Pattern.PULSE),
    Preset(name="Warm", brightness=80, color=COLORS.AMBER, pattern=Pattern.SOLID),
    Preset(name="Rainbow", brightness=70, color=COLORS.RED, pattern=Pattern.RAINBOW),
)


class PresetCatalog:
    """
    Ordered collection of presets.

    Applying a preset is a partial merge: ``brightness``, ``color`` and
    ``pattern`` are replaced; ``enabled``, ``speed`` and every pixel override
    are left exactly as they were.
    """

    def __init__(self, presets: list[Preset] | None = None):
        """
        Initialize the catalog.

        Args:
            presets: Initial presets (defaults to the built-in set)
        """
        self._presets: list[Preset] = list(BUILTIN_PRESETS if presets is None else presets)

    @staticmethod
    def apply(config: LightingConfig, preset: Preset) -> LightingConfig:
        """
        Merge ``preset`` into ``config``.

        Returns:
            A new LightingConfig; the input is not modified
        """
        return config.model_copy(
            update={
                "brightness": preset.brightness,
                "color": preset.color,
                "pattern": preset.pattern,
            }
        )

    def __iter__(self) -> Iterator[Preset]:
        return iter(self._presets)

    def __len__(self) -> int:
        return len(self._presets)

    def __getitem__(self, position: int) -> Preset:
        return self._presets[position]

    @property
    def names(self) -> list[str]:
        """Preset names in display order."""
        return [preset.name for preset in self._presets]

    def get(self, name: str) -> Preset:
        """
        Find the first preset called ``name`` (case-insensitive).

        Raises:
            KeyError: If no preset has that name
        """
        wanted = name.casefold()
        for preset in self._presets:
            if preset.name.casefold() == wanted:
                return preset
        raise KeyError(f"No preset named '{name}'. Available: {', '.join(self.names)}")

    def add(self, preset: Preset) -> None:
        """Append a preset. Names are not checked for uniqueness."""
        self._presets.append(preset)
        logger.debug(f"Added preset '{preset.name}'")

    def capture(self, name: str, config: LightingConfig) -> Preset:
        """Create and append a preset from the current config."""
        preset = Preset(
            name=name, brightness=config.brightness, color=config.color, pattern=config.pattern
        )
        self.add(preset)
        return preset

    @classmethod
    def load(cls, path: Path) -> "PresetCatalog":
        """
        Load a catalog from JSON, falling back to the built-ins if missing.

        Raises:
            ConfigFileInvalidError: If the file has invalid JSON syntax
            ConfigValidationError: If a preset fails validation
        """
        collection = PydanticPersistence.load_json_or_default(
            path,
            PresetCollection,
            default_factory=lambda: PresetCollection(presets=list(BUILTIN_PRESETS)),
        )
        logger.info(f"Loaded {len(collection.presets)} presets")
        return cls(collection.presets)

    def save(self, path: Path) -> None:
        """Write the catalog to JSON."""
        PydanticPersistence.save_json(PresetCollection(presets=self._presets), path)
        logger.info(f"Saved {len(self._presets)} presets to {path}")
