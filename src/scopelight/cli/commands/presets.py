"""Preset command implementations."""

from pathlib import Path
from typing import Optional

import click

from scopelight.cli.helpers import fail, load_app_config, open_surface, save_surface
from scopelight.core import PresetCatalog
from scopelight.models import AppConfig
from scopelight.services import StateService


def _load_catalog(config: AppConfig) -> PresetCatalog:
    try:
        return PresetCatalog.load(config.presets_file)
    except Exception as e:
        fail(e)


@click.group(name="presets")
def presets_group():
    """List, apply and capture lighting presets."""
    pass


@presets_group.command(name="list")
def list_presets():
    """List available presets."""
    catalog = _load_catalog(load_app_config())

    click.echo("Presets:\n")
    for i, preset in enumerate(catalog, start=1):
        click.echo(
            f"  [{i}] {preset.name:<12} {preset.brightness:>3}%  "
            f"{preset.color.to_hex()}  {preset.pattern.value}"
        )


@presets_group.command(name="apply")
@click.argument("name")
@click.option(
    "--state",
    "state_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="State file to update (default: saved state)",
)
def apply_preset(name: str, state_file: Optional[Path]):
    """
    Apply preset NAME to the saved state.

    Only brightness, color and pattern change; power, speed and painted
    pixels are kept.
    """
    config = load_app_config()
    catalog = _load_catalog(config)
    try:
        preset = catalog.get(name)
    except KeyError as e:
        raise click.BadParameter(e.args[0], param_hint="NAME") from e

    service = StateService(config)
    surface = open_surface(service, state_file)
    surface.apply_preset(preset)
    path = save_surface(service, surface, state_file)
    click.echo(f"Applied preset '{preset.name}' ({path})")


@presets_group.command(name="capture")
@click.argument("name")
@click.option(
    "--state",
    "state_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="State file to read (default: saved state)",
)
def capture_preset(name: str, state_file: Optional[Path]):
    """Save the current brightness, color and pattern as preset NAME."""
    config = load_app_config()
    catalog = _load_catalog(config)
    surface = open_surface(StateService(config), state_file)

    preset = catalog.capture(name, surface.config)
    try:
        catalog.save(config.presets_file)
    except Exception as e:
        fail(e)
    click.echo(f"Captured preset '{preset.name}' ({config.presets_file})")
