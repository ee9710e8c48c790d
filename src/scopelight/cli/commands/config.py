"""
Config command implementations.

Commands:
    - config show [--field FIELD]           # Display configuration
    - config set --option VALUE ...         # Update configuration
    - config validate                       # Validate config file
    - config reset [--yes]                  # Reset to defaults
"""

import logging
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError

from scopelight.cli.helpers import fail, load_app_config
from scopelight.exceptions import wrap_pydantic_error
from scopelight.models import AppConfig
from scopelight.models.config import default_config_dir
from scopelight.utils import PydanticPersistence

logger = logging.getLogger(__name__)


def _config_path() -> Path:
    return default_config_dir() / "config.json"


@click.group(name="config")
def config():
    """Configure ScopeLight settings."""
    pass


@config.command(name="show")
@click.option(
    "--field",
    "-f",
    type=click.Choice(list(AppConfig.model_fields)),
    default=None,
    help="Show a single field",
)
def show_config(field: Optional[str]):
    """Display the current configuration."""
    app_config = load_app_config()
    values = app_config.model_dump(mode="json")

    if field:
        click.echo(values[field])
        return

    click.echo(f"Configuration ({_config_path()}):\n")
    for name, value in values.items():
        click.echo(f"  {name:<20} {value}")


@config.command(name="set")
@click.option(
    "--state-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Where the lighting state is saved",
)
@click.option(
    "--presets-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="User preset catalog",
)
@click.option("--frame-interval", type=float, default=None, help="Seconds between animation frames")
@click.option(
    "--telemetry-interval", type=float, default=None, help="Seconds between telemetry readings"
)
@click.option("--auto-save/--no-auto-save", default=None, help="Save lighting state on exit")
def set_config(
    state_file: Optional[Path],
    presets_file: Optional[Path],
    frame_interval: Optional[float],
    telemetry_interval: Optional[float],
    auto_save: Optional[bool],
):
    """Update configuration values and save them."""
    updates = {
        "state_file": state_file,
        "presets_file": presets_file,
        "frame_interval": frame_interval,
        "telemetry_interval": telemetry_interval,
        "auto_save": auto_save,
    }
    updates = {name: value for name, value in updates.items() if value is not None}
    if not updates:
        raise click.UsageError("Nothing to set. See 'scopelight config set --help'.")

    current = load_app_config()
    try:
        # model_copy skips validation, so re-validate the merged values
        new_config = AppConfig.model_validate({**current.model_dump(), **updates})
    except ValidationError as e:
        fail(wrap_pydantic_error(e, str(_config_path())))

    try:
        new_config.save()
    except Exception as e:
        fail(e)

    for name in updates:
        click.echo(f"Set {name} = {getattr(new_config, name)}")
    logger.info(f"Updated config fields: {', '.join(updates)}")


@config.command(name="validate")
def validate_config():
    """Validate the config file without changing it."""
    path = _config_path()
    if not path.exists():
        click.echo(f"[OK] No config file at {path}; defaults are used")
        return

    is_valid, message = PydanticPersistence.validate_json(path, AppConfig)
    if is_valid:
        click.echo(f"[OK] {path}")
    else:
        click.echo(f"[FAIL] {path}: {message}", err=True)
        raise SystemExit(1)


@config.command(name="reset")
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt")
def reset_config(yes: bool):
    """Restore default configuration."""
    if not yes:
        click.confirm("Reset configuration to defaults?", abort=True)

    try:
        AppConfig().save()
    except Exception as e:
        fail(e)
    click.echo(f"Configuration reset ({_config_path()})")
