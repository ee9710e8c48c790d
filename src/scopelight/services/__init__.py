"""Application services."""

from .state_service import StateService

__all__ = ["StateService"]
