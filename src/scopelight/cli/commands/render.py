"""Render command: print one frame of the 8x8 grid."""

import json
import logging
import time
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError

from scopelight.cli.helpers import format_grid, load_app_config, open_surface
from scopelight.models import Pattern
from scopelight.services import StateService

logger = logging.getLogger(__name__)


@click.command(name="render")
@click.option(
    "--pattern",
    "-p",
    type=click.Choice([pattern.value for pattern in Pattern], case_sensitive=False),
    default=None,
    help="Pattern to render (default: from state)",
)
@click.option(
    "--brightness",
    "-b",
    type=int,
    default=None,
    help="Brightness percent, clamped to 0-100",
)
@click.option("--color", "-c", type=str, default=None, help="Base color as #rrggbb")
@click.option("--power/--no-power", default=None, help="Force the master switch on or off")
@click.option(
    "--at",
    "at",
    type=float,
    default=None,
    help="Timestamp in seconds (default: now)",
)
@click.option(
    "--state",
    "state_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="State file to start from (default: saved state)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["grid", "json"], case_sensitive=False),
    default="grid",
    help="Output format (default: grid)",
)
def render(
    pattern: Optional[str],
    brightness: Optional[int],
    color: Optional[str],
    power: Optional[bool],
    at: Optional[float],
    state_file: Optional[Path],
    output_format: str,
):
    """
    Render one frame and print it.

    Options override the saved state for this render only; nothing is saved.

    \b
    Examples:
      scopelight render --pattern strobe --brightness 100 --at 0.15
      scopelight render --pattern rainbow --format json
    """
    service = StateService(load_app_config())
    surface = open_surface(service, state_file)

    if pattern is not None:
        surface.set_pattern(pattern.lower())
    if brightness is not None:
        surface.set_brightness(brightness)
    if color is not None:
        try:
            surface.set_color(color)
        except ValidationError as e:
            raise click.BadParameter(f"'{color}' is not a #rrggbb color", param_hint="--color") from e
    if power is not None:
        surface.set_enabled(power)

    now = time.time() if at is None else at
    frame = surface.render_frame(now)
    logger.debug(f"Rendered frame at {now}")

    if output_format.lower() == "json":
        click.echo(json.dumps({"at": now, "pixels": [pixel.to_dict() for pixel in frame]}, indent=2))
    else:
        click.echo(format_grid(frame))
