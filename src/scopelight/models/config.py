"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_serializer

from scopelight.utils.persistence import PydanticPersistence


def default_config_dir() -> Path:
    """Directory holding config, saved state, presets and logs."""
    return Path.home() / ".scopelight"


class AppConfig(BaseModel):
    """Application configuration and settings."""

    # Paths
    state_file: Path = Field(
        default_factory=lambda: default_config_dir() / "state.json",
        description="Where the lighting state is saved and restored",
    )
    presets_file: Path = Field(
        default_factory=lambda: default_config_dir() / "presets.json",
        description="User preset catalog (built-in presets are used if missing)",
    )

    # Timing
    frame_interval: float = Field(
        default=1 / 60,
        gt=0,
        description="Seconds between animation frames for pulse/strobe patterns",
    )
    telemetry_interval: float = Field(
        default=2.0, gt=0, description="Seconds between simulated telemetry updates"
    )

    # Session settings
    auto_save: bool = Field(default=True, description="Save lighting state on exit")

    @field_serializer("state_file", "presets_file")
    def serialize_path(self, path: Path) -> str:
        """Serialize Path to string."""
        return str(path)

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses default location
                  (~/.scopelight/config.json).

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = default_config_dir() / "config.json"

        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = default_config_dir() / "config.json"

        PydanticPersistence.save_json(self, path)
