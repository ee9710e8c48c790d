"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from scopelight import __version__

from .commands import config, presets_group, render, state_group, telemetry

logger = logging.getLogger(__name__)


def resolve_log_path(debug: bool, log_file: Optional[Path]) -> Path:
    """Where log output goes for the given flags."""
    if log_file:
        return log_file
    if debug:
        # Debug mode: log to current directory
        return Path.cwd() / "scopelight-debug.log"
    return Path.home() / ".scopelight" / "logs" / "scopelight.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)
    """
    # Determine log level based on flags
    if debug:
        level = logging.DEBUG
    elif verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Override with explicit log level if provided
    if log_file:
        level = getattr(logging, log_level.upper())

    log_path = resolve_log_path(debug, log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Keeps last 5 files, max 10MB each
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")


@click.group(invoke_without_command=True)
@click.pass_context
@click.version_option(version=__version__, prog_name="scopelight")
@click.option(
    '--no-restore',
    is_flag=True,
    help='Start from default lighting instead of the saved state'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./scopelight-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    no_restore: bool,
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    ScopeLight - control surface for a microscope's 8x8 LED ring.

    Without a subcommand, opens the interactive control surface. Click a
    pixel to paint it; press ctrl+p for the full list of shortcuts.

    \b
    Examples:
      # Open the control surface
      scopelight

      # Print one frame of the current lighting
      scopelight render --format json

      # Apply a preset to the saved state
      scopelight presets apply "Soft Blue"

      # Enable debug logging
      scopelight --debug
    """
    setup_logging(verbose, debug, log_file, log_level)

    # If a subcommand was invoked, don't run the app
    if ctx.invoked_subcommand is not None:
        return

    # Lazy imports to avoid loading Textual for plain commands
    from scopelight.app import ScopeLightSession
    from scopelight.exceptions import format_error_for_display
    from scopelight.models import AppConfig
    from scopelight.tui import ScopeLightApp

    logger.info("Starting ScopeLight control surface")
    log_path = resolve_log_path(debug, log_file)

    try:
        config_obj = AppConfig.load_or_default()
        session = ScopeLightSession(config_obj, restore_state=not no_restore)
        ScopeLightApp(session).run()

    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
        click.echo("\nShutting down...", err=True)
    except click.Abort:
        raise
    except Exception as e:
        logger.exception("Error running application")

        user_message, recovery_hint = format_error_for_display(e)

        click.echo("\n" + "="*70, err=True)
        click.echo(f"ERROR: {user_message}", err=True)
        click.echo("="*70, err=True)

        if recovery_hint:
            click.echo(f"\n{recovery_hint}", err=True)

        click.echo(f"\nFor details, check the log file: {log_path}", err=True)
        click.echo("For logging options, run: scopelight --help", err=True)
        sys.exit(1)
    finally:
        if 'session' in locals():
            session.shutdown()


cli.add_command(render)
cli.add_command(presets_group)
cli.add_command(state_group)
cli.add_command(telemetry)
cli.add_command(config)

if __name__ == "__main__":
    cli()
