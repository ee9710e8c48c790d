"""Textual user interface for scopelight."""

from .app import ScopeLightApp

__all__ = ["ScopeLightApp"]
