"""Unit tests for Pydantic models."""

import json
import math

import pytest
from pydantic import ValidationError

from scopelight.models import (
    GRID_SIZE,
    TOTAL_PIXELS,
    AppConfig,
    Color,
    ControlSurfaceState,
    HSLColor,
    LightingConfig,
    Pattern,
    PixelCell,
    PixelGrid,
    Preset,
    RenderedPixel,
    TelemetryReading,
    clamp_percent,
)
from scopelight.models.telemetry import format_uptime


class TestColor:
    """Test Color model."""

    @pytest.mark.unit
    def test_create_color(self):
        """Test creating a color with RGB values."""
        color = Color(r=100, g=50, b=25)
        assert color.r == 100
        assert color.g == 50
        assert color.b == 25

    @pytest.mark.unit
    def test_rgb_range_validation(self):
        """Test that RGB values must be 0-255."""
        with pytest.raises(ValueError):
            Color(r=256, g=0, b=0)

        with pytest.raises(ValueError):
            Color(r=0, g=-1, b=0)

    @pytest.mark.unit
    def test_from_hex(self):
        """Test parsing '#rrggbb' strings."""
        assert Color.from_hex("#00d4ff") == Color(r=0, g=212, b=255)
        assert Color.from_hex("FBBF24") == Color(r=251, g=191, b=36)

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["#fff", "#gggggg", "00d4ff00", "", "blue"])
    def test_from_hex_rejects_malformed(self, value):
        """Test that malformed hex strings are rejected."""
        with pytest.raises(ValidationError):
            Color.from_hex(value)

    @pytest.mark.unit
    def test_to_hex_is_lowercase(self):
        """Test hex output format."""
        assert Color(r=0, g=212, b=255).to_hex() == "#00d4ff"
        assert Color.from_hex("#ABCDEF").to_hex() == "#abcdef"

    @pytest.mark.unit
    def test_color_is_frozen(self):
        """Test that colors cannot be modified."""
        color = Color(r=1, g=2, b=3)
        with pytest.raises(ValidationError):
            color.r = 5


class TestHSLColor:
    """Test HSLColor model."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "hue,expected",
        [(0, "#ff0000"), (120, "#00ff00"), (240, "#0000ff"), (180, "#00ffff")],
    )
    def test_primary_hues_to_rgb(self, hue, expected):
        """Test conversion of fully saturated mid-lightness hues."""
        assert HSLColor(hue=hue, saturation=100, lightness=50).to_hex() == expected

    @pytest.mark.unit
    def test_to_css(self):
        """Test CSS formatting."""
        assert HSLColor(hue=45, saturation=100, lightness=50).to_css() == "hsl(45, 100%, 50%)"

    @pytest.mark.unit
    def test_hue_range(self):
        """Test that hue must be in [0, 360)."""
        with pytest.raises(ValidationError):
            HSLColor(hue=360, saturation=100, lightness=50)


class TestLightingConfig:
    """Test LightingConfig model."""

    @pytest.mark.unit
    def test_defaults(self):
        """Test documented defaults."""
        config = LightingConfig()
        assert config.brightness == 75
        assert config.color.to_hex() == "#00d4ff"
        assert config.pattern == Pattern.SOLID
        assert config.speed == 50
        assert config.enabled is True
        assert LightingConfig.defaults() == config

    @pytest.mark.unit
    @pytest.mark.parametrize("field", ["brightness", "speed"])
    @pytest.mark.parametrize("value", [-1, 101])
    def test_out_of_range_rejected_on_validation(self, field, value):
        """Test that out-of-range values are rejected when validating input."""
        with pytest.raises(ValidationError):
            LightingConfig(**{field: value})

    @pytest.mark.unit
    def test_unknown_pattern_rejected(self):
        """Test that unknown pattern tags are rejected."""
        with pytest.raises(ValidationError):
            LightingConfig(pattern="sparkle")

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value,expected",
        [(-20, 0), (0, 0), (42.4, 42), (100, 100), (250, 100), (math.inf, 100), (-math.inf, 0), (math.nan, 75)],
    )
    def test_with_brightness_clamps(self, value, expected):
        """Test that brightness writes are clamped."""
        assert LightingConfig().with_brightness(value).brightness == expected

    @pytest.mark.unit
    def test_with_speed_clamps(self):
        """Test that speed writes are clamped."""
        assert LightingConfig().with_speed(500).speed == 100
        assert LightingConfig().with_speed(-5).speed == 0
        assert LightingConfig().with_speed(math.inf).speed == 100
        assert LightingConfig().with_speed(-math.inf).speed == 0
        assert LightingConfig().with_speed(math.nan).speed == 50

    @pytest.mark.unit
    def test_with_brightness_returns_copy(self):
        """Test that the original config is untouched."""
        config = LightingConfig()
        config.with_brightness(10)
        assert config.brightness == 75

    @pytest.mark.unit
    def test_intensity(self):
        """Test brightness as a fraction."""
        assert LightingConfig(brightness=60).intensity == pytest.approx(0.6)

    @pytest.mark.unit
    def test_is_animated(self):
        """Test which configs change over time."""
        assert LightingConfig(pattern="pulse").is_animated
        assert LightingConfig(pattern="strobe").is_animated
        assert not LightingConfig(pattern="rainbow").is_animated
        assert not LightingConfig(pattern="solid").is_animated
        assert not LightingConfig(pattern="pulse", enabled=False).is_animated

    @pytest.mark.unit
    def test_serializes_color_as_hex(self):
        """Test JSON layout of the config."""
        data = json.loads(LightingConfig().model_dump_json())
        assert data == {
            "brightness": 75,
            "color": "#00d4ff",
            "pattern": "solid",
            "speed": 50,
            "enabled": True,
        }

    @pytest.mark.unit
    def test_clamp_percent(self):
        """Test the clamp helper."""
        assert clamp_percent(-0.4, 50) == 0
        assert clamp_percent(99.6, 50) == 100
        assert clamp_percent(1e9, 50) == 100
        assert clamp_percent(math.inf, 50) == 100
        assert clamp_percent(-math.inf, 50) == 0
        assert clamp_percent(math.nan, 50) == 50


class TestPixelCell:
    """Test PixelCell model."""

    @pytest.mark.unit
    def test_inactive_has_no_color(self):
        """Test inactive cell factory."""
        cell = PixelCell.inactive()
        assert not cell.active
        assert cell.override_color is None

    @pytest.mark.unit
    def test_with_override(self):
        """Test active cell factory."""
        cell = PixelCell.with_override(Color.from_hex("#ff0000"))
        assert cell.active
        assert cell.override_color.to_hex() == "#ff0000"

    @pytest.mark.unit
    def test_orphaned_override_color_rejected(self):
        """Test that an inactive cell cannot carry a color."""
        with pytest.raises(ValidationError):
            PixelCell(active=False, override_color="#ff0000")

    @pytest.mark.unit
    def test_active_without_color_rejected(self):
        """Test that an active cell needs a color."""
        with pytest.raises(ValidationError):
            PixelCell(active=True)


class TestPixelGrid:
    """Test PixelGrid model and the click state machine."""

    @pytest.mark.unit
    def test_create_empty(self):
        """Test that all cells start inactive."""
        grid = PixelGrid.create_empty()
        assert len(grid.cells) == TOTAL_PIXELS
        assert grid.active_indices == []

    @pytest.mark.unit
    @pytest.mark.parametrize("count", [0, 63, 65])
    def test_wrong_cell_count_rejected(self, count):
        """Test that grids must have exactly 64 cells."""
        with pytest.raises(ValidationError):
            PixelGrid(cells=[PixelCell.inactive()] * count)

    @pytest.mark.unit
    @pytest.mark.parametrize("index,row_col", [(0, (0, 0)), (7, (0, 7)), (8, (1, 0)), (63, (7, 7))])
    def test_index_row_col_conversion(self, index, row_col):
        """Test row-major index conversion."""
        assert PixelGrid.index_to_row_col(index) == row_col
        assert PixelGrid.row_col_to_index(*row_col) == index

    @pytest.mark.unit
    def test_row_col_out_of_range(self):
        """Test invalid positions."""
        with pytest.raises(IndexError):
            PixelGrid.row_col_to_index(GRID_SIZE, 0)

    @pytest.mark.unit
    def test_click_activates(self, rng):
        """Test Inactive --click--> Active with a palette color."""
        palette = [Color.from_hex("#ff0000"), Color.from_hex("#0000ff")]
        grid = PixelGrid.create_empty()

        cell = grid.click(5, rng, palette)

        assert cell.active
        assert cell.override_color in palette
        assert grid.get_cell(5) == cell
        assert grid.active_indices == [5]

    @pytest.mark.unit
    def test_second_click_stays_active(self, rng):
        """Test Active --click--> Active."""
        palette = [Color.from_hex("#ff0000"), Color.from_hex("#0000ff")]
        grid = PixelGrid.create_empty()

        grid.click(5, rng, palette)
        cell = grid.click(5, rng, palette)

        assert cell.active
        assert cell.override_color in palette

    @pytest.mark.unit
    def test_single_color_palette_repeats(self, rng):
        """Test that a re-click may draw the same color again."""
        red = Color.from_hex("#ff0000")
        grid = PixelGrid.create_empty()
        first = grid.click(0, rng, [red])
        second = grid.click(0, rng, [red])
        assert first == second

    @pytest.mark.unit
    def test_clear_all(self, rng):
        """Test that clear_all deactivates every cell."""
        grid = PixelGrid.create_empty()
        for index in (0, 10, 63):
            grid.click(index, rng, [Color(r=0, g=0, b=0)])

        grid.clear_all()

        assert grid.active_indices == []
        assert all(cell.override_color is None for cell in grid.cells)

    @pytest.mark.unit
    @pytest.mark.parametrize("index", [-1, 64, 100])
    def test_out_of_range_index(self, index, rng):
        """Test that indices outside 0-63 raise IndexError."""
        grid = PixelGrid.create_empty()
        with pytest.raises(IndexError):
            grid.click(index, rng, [Color(r=0, g=0, b=0)])
        with pytest.raises(IndexError):
            grid.get_cell(index)


class TestControlSurfaceState:
    """Test the persisted state layout."""

    @pytest.mark.unit
    def test_json_layout(self, painted_state):
        """Test that state serializes as config + grid.cells with hex colors."""
        data = json.loads(painted_state.model_dump_json())

        assert data["config"]["color"] == "#fbbf24"
        assert data["config"]["pattern"] == "pulse"
        assert len(data["grid"]["cells"]) == TOTAL_PIXELS
        assert data["grid"]["cells"][0] == {"active": True, "override_color": "#ff0000"}
        assert data["grid"]["cells"][1] == {"active": False, "override_color": None}

    @pytest.mark.unit
    def test_json_reload(self, painted_state):
        """Test that a dumped state validates back to the same state."""
        reloaded = ControlSurfaceState.model_validate_json(painted_state.model_dump_json())
        assert reloaded == painted_state


class TestPreset:
    """Test Preset model."""

    @pytest.mark.unit
    def test_create_preset(self):
        """Test creating a preset from a hex color."""
        preset = Preset(name="Warm", brightness=80, color="#fbbf24", pattern="solid")
        assert preset.color == Color(r=251, g=191, b=36)
        assert preset.pattern == Pattern.SOLID

    @pytest.mark.unit
    def test_brightness_range(self):
        """Test that preset brightness must be 0-100."""
        with pytest.raises(ValidationError):
            Preset(name="Too bright", brightness=101, color="#ffffff", pattern="solid")


class TestRenderedPixel:
    """Test RenderedPixel output type."""

    @pytest.mark.unit
    def test_to_dict(self):
        """Test JSON-friendly output."""
        pixel = RenderedPixel(color=Color.from_hex("#00d4ff"), opacity=0.75)
        assert pixel.to_dict() == {"color": "#00d4ff", "opacity": 0.75}

    @pytest.mark.unit
    def test_hsl_converts_to_rgb(self):
        """Test that HSL pixels expose an RGB color."""
        pixel = RenderedPixel(color=HSLColor(hue=0, saturation=100, lightness=50), opacity=1.0)
        assert pixel.rgb == Color(r=255, g=0, b=0)
        assert pixel.to_hex() == "#ff0000"


class TestTelemetryReading:
    """Test TelemetryReading model."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "seconds,expected", [(0, "0h 0m"), (59, "0h 0m"), (60, "0h 1m"), (9240, "2h 34m")]
    )
    def test_format_uptime(self, seconds, expected):
        """Test uptime formatting."""
        from datetime import timedelta

        assert format_uptime(timedelta(seconds=seconds)) == expected

    @pytest.mark.unit
    def test_summary(self):
        """Test one-line summary."""
        reading = TelemetryReading(temperature=23.5, voltage=5.0, current=0.85, uptime="1h 2m")
        summary = reading.summary()
        assert "23.5°C" in summary
        assert "5.00V" in summary
        assert "0.85A" in summary
        assert "1h 2m" in summary
        assert "connected" in summary


class TestAppConfig:
    """Test AppConfig model."""

    @pytest.mark.unit
    def test_defaults(self):
        """Test default settings."""
        config = AppConfig()
        assert config.frame_interval == pytest.approx(1 / 60)
        assert config.telemetry_interval == 2.0
        assert config.auto_save is True
        assert config.state_file.name == "state.json"
        assert config.presets_file.name == "presets.json"

    @pytest.mark.unit
    @pytest.mark.parametrize("field", ["frame_interval", "telemetry_interval"])
    def test_intervals_must_be_positive(self, field):
        """Test interval validation."""
        with pytest.raises(ValidationError):
            AppConfig(**{field: 0})

    @pytest.mark.unit
    def test_save_and_load(self, temp_dir):
        """Test saving and loading config."""
        config_path = temp_dir / "config.json"
        config = AppConfig(state_file=temp_dir / "s.json", auto_save=False)

        config.save(config_path)
        loaded = AppConfig.load_or_default(config_path)

        assert loaded.state_file == temp_dir / "s.json"
        assert loaded.auto_save is False

    @pytest.mark.unit
    def test_load_missing_returns_default(self, temp_dir):
        """Test that a missing file yields defaults."""
        config = AppConfig.load_or_default(temp_dir / "missing.json")
        assert config == AppConfig()
