"""Instrument telemetry reading model."""

from datetime import timedelta

from pydantic import BaseModel, ConfigDict, Field


def format_uptime(elapsed: timedelta) -> str:
    """Format an uptime as '2h 34m'."""
    total_minutes = int(elapsed.total_seconds()) // 60
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours}h {minutes}m"


class TelemetryReading(BaseModel):
    """One display-only snapshot of instrument status."""

    model_config = ConfigDict(frozen=True)

    connected: bool = Field(default=True, description="Instrument link state")
    temperature: float = Field(description="Temperature in degrees Celsius")
    voltage: float = Field(description="Supply voltage in volts")
    current: float = Field(description="Supply current in amps")
    uptime: str = Field(default="0h 0m", description="Session uptime ('2h 34m')")

    def summary(self) -> str:
        """One-line human-readable summary."""
        link = "connected" if self.connected else "disconnected"
        return (
            f"{self.temperature:.1f}°C  {self.voltage:.2f}V  {self.current:.2f}A  "
            f"up {self.uptime}  ({link})"
        )
