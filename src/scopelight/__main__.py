"""Main entry point for ``python -m scopelight``."""

from scopelight.cli.main import cli

if __name__ == "__main__":
    cli()
