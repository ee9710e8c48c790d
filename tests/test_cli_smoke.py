"""Smoke tests for CLI commands.

Tests that CLI commands parse correctly and behave end to end against a
temporary home directory. Uses Click's CliRunner, so the TUI never starts.
"""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from scopelight.cli.main import cli
from scopelight.models import AppConfig, LightingConfig
from scopelight.services import StateService


@pytest.fixture
def runner(home_dir):
    """Create a Click CLI test runner with HOME pointed at a temp dir."""
    return CliRunner()


@pytest.fixture
def state_file(home_dir):
    return home_dir / ".scopelight" / "state.json"


def _render_json(runner, *args):
    result = runner.invoke(cli, ["render", "--format", "json", *args])
    assert result.exit_code == 0, result.output
    return json.loads(result.output)["pixels"]


@pytest.mark.integration
class TestCLIHelp:
    """Test that all commands have working help text."""

    def test_main_help(self, runner):
        """Test main CLI help displays."""
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "ScopeLight" in result.output
        assert "--no-restore" in result.output

    def test_version_flag(self, runner):
        """Test --version flag works."""
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    @pytest.mark.parametrize("command", ["render", "presets", "state", "telemetry", "config"])
    def test_command_help(self, runner, command):
        """Test subcommand help."""
        result = runner.invoke(cli, [command, "--help"])
        assert result.exit_code == 0


@pytest.mark.integration
class TestRunCommand:
    """Test the default (TUI) invocation without starting Textual."""

    def test_launches_tui_with_session(self, runner):
        """No subcommand builds a session and runs the app."""
        with patch("scopelight.tui.ScopeLightApp") as mock_app:
            result = runner.invoke(cli, ["--no-restore"])

        assert result.exit_code == 0, result.output
        session = mock_app.call_args.args[0]
        assert session.surface.config == LightingConfig.defaults()
        mock_app.return_value.run.assert_called_once()

    def test_startup_error_is_reported(self, runner):
        """Errors while running show a clean message and exit 1."""
        with patch("scopelight.tui.ScopeLightApp") as mock_app:
            mock_app.return_value.run.side_effect = RuntimeError("terminal exploded")
            result = runner.invoke(cli, [])

        assert result.exit_code == 1
        assert "terminal exploded" in result.output


@pytest.mark.integration
class TestRenderCommand:
    """Test one-frame rendering."""

    def test_default_frame(self, runner):
        """Defaults render #00d4ff at 0.75 everywhere."""
        pixels = _render_json(runner, "--at", "0")
        assert len(pixels) == 64
        assert pixels[5] == {"color": "#00d4ff", "opacity": 0.75}

    def test_strobe_timing(self, runner):
        """Strobe is on at 150 ms and dim at 250 ms."""
        on = _render_json(runner, "--pattern", "strobe", "--brightness", "100", "--at", "0.15")
        off = _render_json(runner, "--pattern", "strobe", "--brightness", "100", "--at", "0.25")
        assert {p["opacity"] for p in on} == {1.0}
        assert {p["opacity"] for p in off} == {0.1}

    def test_power_off(self, runner):
        """--no-power renders the baseline."""
        pixels = _render_json(runner, "--no-power", "--at", "0")
        assert {(p["color"], p["opacity"]) for p in pixels} == {("#374151", 0.3)}

    def test_brightness_clamped(self, runner):
        """Out-of-range brightness is clamped."""
        pixels = _render_json(runner, "--brightness", "400", "--at", "0")
        assert pixels[0]["opacity"] == 1.0

    def test_rainbow(self, runner):
        """Rainbow pixels cycle hue by index."""
        pixels = _render_json(runner, "--pattern", "rainbow", "--at", "0")
        assert pixels[0]["color"] == "#ff0000"
        assert pixels[8]["color"] == "#ff0000"

    def test_grid_format(self, runner):
        """Grid output has 8 rows of 8 cells."""
        result = runner.invoke(cli, ["render", "--at", "0"])
        assert result.exit_code == 0
        rows = result.output.strip().splitlines()
        assert len(rows) == 8
        assert all(len(row.split()) == 8 for row in rows)
        assert rows[0].split()[0] == "#00d4ff@0.75"

    def test_grid_is_row_major(self, runner):
        """Pixel 9 is printed in the second row, second column."""
        runner.invoke(cli, ["state", "click", "9", "--seed", "2"])
        result = runner.invoke(cli, ["render", "--at", "0"])
        rows = [row.split() for row in result.output.strip().splitlines()]
        painted = [(r, c) for r, row in enumerate(rows) for c, cell in enumerate(row) if cell != "#00d4ff@0.75"]
        assert painted == [(1, 1)]

    def test_invalid_color(self, runner):
        """Malformed colors are a usage error."""
        result = runner.invoke(cli, ["render", "--color", "blue"])
        assert result.exit_code == 2
        assert "#rrggbb" in result.output

    def test_invalid_pattern(self, runner):
        """Unknown patterns are rejected by the option parser."""
        result = runner.invoke(cli, ["render", "--pattern", "sparkle"])
        assert result.exit_code == 2


@pytest.mark.integration
class TestStateCommands:
    """Test editing the saved state."""

    def test_show_defaults(self, runner):
        """show works without a saved state."""
        result = runner.invoke(cli, ["state", "show"])
        assert result.exit_code == 0
        assert "Brightness: 75%" in result.output
        assert "Overrides:  0/64" in result.output

    def test_set_and_show(self, runner, state_file):
        """set persists lighting changes."""
        result = runner.invoke(
            cli, ["state", "set", "--brightness", "150", "--pattern", "pulse", "--speed", "7"]
        )
        assert result.exit_code == 0, result.output
        assert "brightness=100" in result.output

        saved = StateService(_config_for(state_file)).load(state_file)
        assert saved.config.brightness == 100
        assert saved.config.pattern.value == "pulse"
        assert saved.config.speed == 7

    def test_click_clear_reset(self, runner, state_file):
        """click paints pixels, clear removes them, reset restores defaults."""
        result = runner.invoke(cli, ["state", "click", "3", "9", "--seed", "1"])
        assert result.exit_code == 0, result.output
        assert _load(state_file).grid.active_indices == [3, 9]

        pixels = _render_json(runner, "--at", "0")
        assert pixels[3]["color"] != "#00d4ff"

        runner.invoke(cli, ["state", "set", "--brightness", "10"])
        result = runner.invoke(cli, ["state", "clear"])
        assert result.exit_code == 0
        state = _load(state_file)
        assert state.grid.active_indices == []
        assert state.config.brightness == 10

        runner.invoke(cli, ["state", "click", "0"])
        result = runner.invoke(cli, ["state", "reset", "--yes"])
        assert result.exit_code == 0
        state = _load(state_file)
        assert state.grid.active_indices == []
        assert state.config == LightingConfig.defaults()

    def test_click_out_of_range(self, runner):
        """Indices outside 0-63 are a usage error."""
        result = runner.invoke(cli, ["state", "click", "64"])
        assert result.exit_code == 2

    def test_power_toggle(self, runner, state_file):
        """power flips the master switch."""
        result = runner.invoke(cli, ["state", "power"])
        assert "Power off" in result.output
        result = runner.invoke(cli, ["state", "power"])
        assert "Power on" in result.output

    def test_export_import(self, runner, home_dir, state_file):
        """export writes a file that import accepts."""
        runner.invoke(cli, ["state", "set", "--color", "#123456"])
        export_path = home_dir / "export.json"

        result = runner.invoke(cli, ["state", "export", str(export_path)])
        assert result.exit_code == 0, result.output
        assert json.loads(export_path.read_text())["config"]["color"] == "#123456"

        runner.invoke(cli, ["state", "reset", "--yes"])
        result = runner.invoke(cli, ["state", "import", str(export_path)])
        assert result.exit_code == 0, result.output
        assert _load(state_file).config.color.to_hex() == "#123456"

    def test_import_rejects_invalid(self, runner, home_dir, state_file):
        """Invalid imports fail cleanly and leave the saved state alone."""
        runner.invoke(cli, ["state", "set", "--brightness", "33"])
        bad = home_dir / "bad.json"
        bad.write_text(json.dumps({"config": {"pattern": "disco"}}), encoding="utf-8")

        result = runner.invoke(cli, ["state", "import", str(bad)])

        assert result.exit_code == 1
        assert "config.pattern" in result.output
        assert _load(state_file).config.brightness == 33

    def test_corrupt_state_file(self, runner, state_file):
        """A corrupt saved state aborts with the error message."""
        state_file.parent.mkdir(parents=True, exist_ok=True)
        state_file.write_text("{", encoding="utf-8")
        result = runner.invoke(cli, ["state", "show"])
        assert result.exit_code == 1
        assert "not valid JSON" in result.output


@pytest.mark.integration
class TestPresetCommands:
    """Test preset listing and application."""

    def test_list(self, runner):
        """Built-in presets are listed."""
        result = runner.invoke(cli, ["presets", "list"])
        assert result.exit_code == 0
        for name in ("Bright", "Soft Blue", "Warm", "Rainbow"):
            assert name in result.output

    def test_apply_keeps_speed_and_pixels(self, runner, state_file):
        """apply merges brightness/color/pattern only."""
        runner.invoke(cli, ["state", "set", "--speed", "5"])
        runner.invoke(cli, ["state", "click", "1"])

        result = runner.invoke(cli, ["presets", "apply", "soft blue"])
        assert result.exit_code == 0, result.output

        state = _load(state_file)
        assert (state.config.brightness, state.config.pattern.value) == (60, "pulse")
        assert state.config.speed == 5
        assert state.grid.active_indices == [1]

    def test_apply_unknown(self, runner):
        """Unknown presets are a usage error."""
        result = runner.invoke(cli, ["presets", "apply", "Disco"])
        assert result.exit_code == 2

    def test_capture(self, runner, home_dir):
        """capture appends a preset to the user catalog."""
        runner.invoke(cli, ["state", "set", "--brightness", "12", "--color", "#abcdef"])
        result = runner.invoke(cli, ["presets", "capture", "Mine"])
        assert result.exit_code == 0, result.output

        result = runner.invoke(cli, ["presets", "list"])
        assert "Mine" in result.output
        assert "#abcdef" in result.output


@pytest.mark.integration
class TestTelemetryCommand:
    """Test simulated telemetry output."""

    def test_seeded_readings(self, runner):
        """Seeded runs are reproducible."""
        first = runner.invoke(cli, ["telemetry", "--count", "3", "--seed", "4"])
        second = runner.invoke(cli, ["telemetry", "--count", "3", "--seed", "4"])
        assert first.exit_code == 0
        assert first.output == second.output
        assert len(first.output.strip().splitlines()) == 3

    def test_count_must_be_positive(self, runner):
        """--count 0 is rejected."""
        result = runner.invoke(cli, ["telemetry", "--count", "0"])
        assert result.exit_code == 2


@pytest.mark.integration
class TestConfigCommands:
    """Test config show/set/reset."""

    def test_show(self, runner):
        """show lists every field."""
        result = runner.invoke(cli, ["config", "show"])
        assert result.exit_code == 0
        for field in ("state_file", "presets_file", "frame_interval", "telemetry_interval", "auto_save"):
            assert field in result.output

    def test_set_and_show_field(self, runner):
        """set persists values."""
        result = runner.invoke(cli, ["config", "set", "--telemetry-interval", "5", "--no-auto-save"])
        assert result.exit_code == 0, result.output

        result = runner.invoke(cli, ["config", "show", "--field", "telemetry_interval"])
        assert result.output.strip() == "5.0"
        result = runner.invoke(cli, ["config", "show", "--field", "auto_save"])
        assert result.output.strip() == "False"

    def test_set_rejects_invalid(self, runner):
        """Non-positive intervals are rejected with a hint."""
        result = runner.invoke(cli, ["config", "set", "--frame-interval", "0"])
        assert result.exit_code == 1
        assert "frame_interval" in result.output

    def test_set_requires_an_option(self, runner):
        """set with no options is a usage error."""
        result = runner.invoke(cli, ["config", "set"])
        assert result.exit_code == 2

    def test_validate_and_reset(self, runner, home_dir):
        """validate reports problems; reset restores defaults."""
        config_path = home_dir / ".scopelight" / "config.json"
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text('{"frame_interval": -1}', encoding="utf-8")

        result = runner.invoke(cli, ["config", "validate"])
        assert result.exit_code == 1
        assert "[FAIL]" in result.output

        result = runner.invoke(cli, ["config", "reset", "--yes"])
        assert result.exit_code == 0
        result = runner.invoke(cli, ["config", "validate"])
        assert result.exit_code == 0
        assert "[OK]" in result.output


def _config_for(state_file):
    return AppConfig(state_file=state_file)


def _load(state_file):
    return StateService(_config_for(state_file)).load()
