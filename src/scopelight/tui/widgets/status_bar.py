"""Status bar widgets showing lighting settings and instrument telemetry."""

from textual.widgets import Static

from scopelight.models import LightingConfig, TelemetryReading


class StatusBar(Static):
    """
    Status bar displaying the current lighting settings.

    Shows:
    - Power state
    - Pattern, brightness and base color
    - Number of painted pixels
    """

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        background: $panel;
        color: $text;
        padding: 0 1;
    }

    StatusBar.power_on {
        background: $success;
    }

    StatusBar.power_off {
        background: $error;
    }
    """

    def update_state(self, config: LightingConfig, overrides: int) -> None:
        """
        Update all lighting information.

        Args:
            config: Current lighting config
            overrides: Number of painted pixels
        """
        self.set_class(config.enabled, "power_on")
        self.set_class(not config.enabled, "power_off")

        parts = [
            "● ON" if config.enabled else "○ OFF",
            config.pattern.value.title(),
            f"{config.brightness}%",
            config.color.to_hex(),
            f"speed {config.speed}",
        ]
        if overrides:
            parts.append(f"✎ {overrides} painted")

        self.update(" | ".join(parts))


class TelemetryBar(Static):
    """One-line display of the latest simulated telemetry reading."""

    DEFAULT_CSS = """
    TelemetryBar {
        height: 1;
        background: $surface;
        color: $text-muted;
        padding: 0 1;
    }
    """

    def update_reading(self, reading: TelemetryReading) -> None:
        """Show ``reading``."""
        self.update(reading.summary())
