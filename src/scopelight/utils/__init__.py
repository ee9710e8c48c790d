"""Generic utility modules for scopelight."""

from .persistence import PydanticPersistence

__all__ = ["PydanticPersistence"]
