"""State command implementations: inspect, edit, export and import saved state."""

import logging
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError

from scopelight.cli.helpers import fail, format_grid, load_app_config, open_surface, save_surface
from scopelight.models import TOTAL_PIXELS, Pattern
from scopelight.services import StateService

logger = logging.getLogger(__name__)

state_file_option = click.option(
    "--state",
    "state_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="State file to use (default: ~/.scopelight/state.json)",
)


@click.group(name="state")
def state_group():
    """Inspect and edit the saved lighting state."""
    pass


@state_group.command(name="show")
@state_file_option
@click.option("--json", "as_json", is_flag=True, help="Print the raw JSON document")
@click.option("--at", type=float, default=0.0, help="Timestamp in seconds for the preview")
def show_state(state_file: Optional[Path], as_json: bool, at: float):
    """Show lighting settings, painted pixels and a frame preview."""
    surface = open_surface(StateService(load_app_config()), state_file)
    state = surface.export_state()

    if as_json:
        click.echo(state.model_dump_json(indent=2))
        return

    config = state.config
    click.echo(f"Power:      {'on' if config.enabled else 'off'}")
    click.echo(f"Brightness: {config.brightness}%")
    click.echo(f"Color:      {config.color.to_hex()}")
    click.echo(f"Pattern:    {config.pattern.value}")
    click.echo(f"Speed:      {config.speed}")

    active = state.grid.active_indices
    click.echo(f"Overrides:  {len(active)}/{TOTAL_PIXELS}")
    for index in active:
        row, col = state.grid.index_to_row_col(index)
        color = state.grid.cells[index].override_color
        click.echo(f"  [{index:2}] row {row} col {col}  {color.to_hex()}")

    click.echo()
    click.echo(format_grid(surface.render_frame(at)))


@state_group.command(name="set")
@state_file_option
@click.option("--brightness", "-b", type=int, default=None, help="Brightness percent (clamped)")
@click.option("--color", "-c", type=str, default=None, help="Base color as #rrggbb")
@click.option(
    "--pattern",
    "-p",
    type=click.Choice([pattern.value for pattern in Pattern], case_sensitive=False),
    default=None,
    help="Lighting pattern",
)
@click.option("--speed", "-s", type=int, default=None, help="Animation speed (clamped, reserved)")
@click.option("--power/--no-power", default=None, help="Master switch")
def set_state(
    state_file: Optional[Path],
    brightness: Optional[int],
    color: Optional[str],
    pattern: Optional[str],
    speed: Optional[int],
    power: Optional[bool],
):
    """Change lighting settings in the saved state."""
    service = StateService(load_app_config())
    surface = open_surface(service, state_file)

    if brightness is not None:
        surface.set_brightness(brightness)
    if color is not None:
        try:
            surface.set_color(color)
        except ValidationError as e:
            raise click.BadParameter(f"'{color}' is not a #rrggbb color", param_hint="--color") from e
    if pattern is not None:
        surface.set_pattern(pattern.lower())
    if speed is not None:
        surface.set_speed(speed)
    if power is not None:
        surface.set_enabled(power)

    save_surface(service, surface, state_file)
    config = surface.config
    click.echo(
        f"brightness={config.brightness} color={config.color.to_hex()} "
        f"pattern={config.pattern.value} speed={config.speed} "
        f"power={'on' if config.enabled else 'off'}"
    )


@state_group.command(name="power")
@state_file_option
def toggle_power(state_file: Optional[Path]):
    """Flip the master switch."""
    service = StateService(load_app_config())
    surface = open_surface(service, state_file)
    config = surface.toggle_power()
    save_surface(service, surface, state_file)
    click.echo(f"Power {'on' if config.enabled else 'off'}")


@state_group.command(name="click")
@state_file_option
@click.argument("indices", nargs=-1, required=True, type=int)
@click.option("--seed", type=int, default=None, help="Seed for the override color choice")
def click_pixels(state_file: Optional[Path], indices: tuple[int, ...], seed: Optional[int]):
    """Paint pixels INDICES (0-63) with random palette colors."""
    service = StateService(load_app_config())
    surface = open_surface(service, state_file, seed=seed)

    for index in indices:
        try:
            cell = surface.click_pixel(index)
        except IndexError as e:
            raise click.BadParameter(str(e), param_hint="INDICES") from e
        click.echo(f"Pixel {index}: {cell.override_color.to_hex()}")

    save_surface(service, surface, state_file)


@state_group.command(name="clear")
@state_file_option
def clear_state(state_file: Optional[Path]):
    """Remove every pixel override (lighting settings are kept)."""
    service = StateService(load_app_config())
    surface = open_surface(service, state_file)
    surface.clear_all_pixels()
    save_surface(service, surface, state_file)
    click.echo("Cleared all pixel overrides")


@state_group.command(name="reset")
@state_file_option
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt")
def reset_state(state_file: Optional[Path], yes: bool):
    """Clear all overrides and restore default lighting settings."""
    if not yes:
        click.confirm("Reset lighting state to defaults?", abort=True)

    service = StateService(load_app_config())
    surface = open_surface(service, state_file)
    surface.reset()
    save_surface(service, surface, state_file)
    click.echo("Lighting state reset to defaults")


@state_group.command(name="export")
@state_file_option
@click.argument("destination", type=click.Path(dir_okay=False, path_type=Path))
def export_state(state_file: Optional[Path], destination: Path):
    """Write the saved state to DESTINATION."""
    service = StateService(load_app_config())
    surface = open_surface(service, state_file)
    path = save_surface(service, surface, destination)
    click.echo(f"Exported lighting state to {path}")


@state_group.command(name="import")
@state_file_option
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def import_state(state_file: Optional[Path], source: Path):
    """
    Replace the saved state with SOURCE.

    SOURCE is validated as a whole; if anything in it is invalid, nothing
    is changed.
    """
    service = StateService(load_app_config())
    surface = open_surface(service, state_file)

    try:
        service.import_into(surface, source)
    except Exception as e:
        fail(e)

    path = save_surface(service, surface, state_file)
    logger.info(f"Imported {source} into {path}")
    click.echo(f"Imported lighting state from {source}")
