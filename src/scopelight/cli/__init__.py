"""Command-line interface for scopelight."""
