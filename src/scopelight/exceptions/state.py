"""Exceptions raised when importing saved lighting state.

An import is all-or-nothing: whenever one of these is raised the
in-memory control surface state has not been touched.

- StateImportError: Base class for import failures
- StateFileInvalidError: Payload is not parseable JSON
- StateValidationError: Payload parsed but holds invalid values
"""

from typing import Any

from .base import ScopeLightError


class StateImportError(ScopeLightError):
    """Saved lighting state could not be imported."""
    pass


class StateFileInvalidError(StateImportError):
    """State payload is empty or is not valid JSON."""

    def __init__(self, source: str, parse_error: str):
        """
        Initialize state file invalid error.

        Args:
            source: File path or label of the rejected payload
            parse_error: The parsing error message
        """
        super().__init__(
            user_message=f"Lighting state in {source} is not valid JSON",
            technical_message=f"JSON parse error in {source}: {parse_error}",
            recoverable=True,
            recovery_hint=(
                "Re-export the state with 'scopelight state export' "
                "or fix the JSON by hand"
            ),
        )
        self.source = source
        self.parse_error = parse_error


class StateValidationError(StateImportError):
    """State payload contains unknown patterns, bad colors or out-of-range values."""

    def __init__(self, field: str, value: Any, error_msg: str, source: str | None = None):
        """
        Initialize state validation error.

        Args:
            field: Dotted location of the offending field (e.g. "config.pattern")
            value: The rejected value
            error_msg: Why the value was rejected
            source: File path or label of the rejected payload (optional)
        """
        recovery = f"Fix '{field}' and import again"
        if source:
            recovery += f"\nState file: {source}"
        if "pattern" in field:
            recovery += "\nValid patterns: solid, pulse, rainbow, strobe"
        elif "color" in field:
            recovery += "\nColors are written as '#rrggbb'"
        elif "brightness" in field or "speed" in field:
            recovery += "\nBrightness and speed must be between 0 and 100"

        super().__init__(
            user_message=f"Invalid lighting state value for '{field}': {error_msg}",
            technical_message=f"State validation failed for {field}={value!r}: {error_msg}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.field = field
        self.value = value
        self.source = source
