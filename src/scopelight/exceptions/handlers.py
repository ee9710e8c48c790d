"""
Centralized error handling utilities.

This module provides a layered approach to error handling:

1. **Custom Exceptions** - Typed, user-friendly error classes (see base, config, state modules)
2. **Error Context** - Preserve technical details for logging, show friendly messages to users
3. **Recovery Hints** - Tell users what to do when things fail

## Quick Reference

| Scenario | Use This |
|----------|----------|
| Config file syntax error | `ConfigFileInvalidError(path, "trailing comma")` |
| Config value invalid | `ConfigValidationError("frame_interval", 0, "must be > 0")` |
| Imported state unparseable | `StateFileInvalidError(path, "Expecting value")` |
| Imported state invalid | `StateValidationError("config.pattern", "disco", "unknown pattern")` |

| Pattern | Code |
|---------|------|
| Show error to user, continue | `@handle_errors(operation_name="save", user_notification=self.notify, re_raise=False)` |
| Log and re-raise | `@handle_errors(operation_name="load", re_raise=True)` |
| Critical section with auto-logging | `with ErrorContext("save state"): ...` |

## Example: Converting Pydantic Errors

```python
from scopelight.exceptions import wrap_state_error

try:
    state = ControlSurfaceState.model_validate_json(payload)
except ValidationError as e:
    raise wrap_state_error(e, str(path)) from e
```
"""

import logging
from functools import wraps
from typing import Any, Callable, Optional, TypeVar

from pydantic import ValidationError

from .base import ScopeLightError
from .config import ConfigFileInvalidError, ConfigValidationError
from .state import StateFileInvalidError, StateValidationError

logger = logging.getLogger(__name__)

T = TypeVar('T')


def handle_errors(
    *,
    operation_name: str,
    user_notification: Optional[Callable[[str], None]] = None,
    fallback_value: Optional[T] = None,
    re_raise: bool = True,
    log_level: int = logging.ERROR
) -> Callable:
    """
    Decorator for consistent error handling.

    Args:
        operation_name: Name of the operation for logging (e.g., "save state")
        user_notification: Optional callback to notify user (e.g., self.notify)
        fallback_value: Value to return if error occurs and re_raise=False
        re_raise: Whether to re-raise the exception after handling
        log_level: Logging level for the error (default: ERROR)

    Returns:
        Decorated function
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)

            except ScopeLightError as e:
                logger.log(log_level, f"Failed to {operation_name}: {e.technical_message}")

                if user_notification:
                    user_notification(e.get_full_message())

                if re_raise:
                    raise
                return fallback_value

            except Exception as e:
                logger.log(
                    log_level,
                    f"Unexpected error during {operation_name}: {e}",
                    exc_info=True
                )

                if user_notification:
                    user_notification(f"Error: {e}")

                if re_raise:
                    raise
                return fallback_value

        return wrapper
    return decorator


class ErrorContext:
    """
    Context manager for error handling with automatic logging.

    Example:
        ```python
        with ErrorContext("save lighting state"):
            PydanticPersistence.save_json(state, path)
        ```
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
        re_raise: bool = True
    ):
        """
        Initialize error context.

        Args:
            operation: Description of the operation
            logger_instance: Logger to use (defaults to module logger)
            re_raise: Whether to re-raise exceptions
        """
        self.operation = operation
        self.logger = logger_instance or logger
        self.re_raise = re_raise
        self.error: Optional[Exception] = None

    def __enter__(self):
        """Enter the context."""
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """
        Exit the context and handle any exceptions.

        Returns:
            True if exception should be suppressed, False otherwise
        """
        if exc_type is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        self.error = exc_val

        if isinstance(exc_val, ScopeLightError):
            self.logger.error(
                f"Failed to {self.operation}: {exc_val.technical_message}"
            )
        else:
            self.logger.error(
                f"Failed to {self.operation}: {exc_val}",
                exc_info=True
            )

        return not self.re_raise


def _extract_json_error(error: Exception) -> Optional[str]:
    """Return the parse error text if a Pydantic error wraps invalid JSON."""
    error_msg = str(error)
    if "Invalid JSON" not in error_msg and "json_invalid" not in error_msg:
        return None
    # Format: "Invalid JSON: <actual error> [type=json_invalid, ..."
    if "Invalid JSON:" in error_msg:
        return error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
    return error_msg


def _summarize_validation_error(error: ValidationError) -> tuple[str, Any, str]:
    """
    Collapse a Pydantic ValidationError into (field, value, message).

    A single error keeps its dotted location and input value; several
    errors are combined into one multi-line message.
    """
    errors = error.errors()
    if len(errors) == 1:
        first_error = errors[0]
        field = ".".join(str(loc) for loc in first_error.get('loc', ('unknown',))) or "root"
        return field, first_error.get('input'), first_error.get('msg', 'validation failed')

    error_lines = []
    for err in errors:
        field = ".".join(str(loc) for loc in err.get('loc', ('unknown',))) or "root"
        error_lines.append(f"  - {field}: {err.get('msg', 'validation failed')}")
    combined_msg = f"{len(errors)} validation errors:\n" + "\n".join(error_lines)
    return "multiple fields", None, combined_msg


def wrap_pydantic_error(error: Exception, file_path: str) -> ScopeLightError:
    """
    Convert Pydantic validation errors on config files to ScopeLight exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the config file that failed validation

    Returns:
        A ConfigurationError with appropriate type and message
    """
    parse_error = _extract_json_error(error)
    if parse_error is not None:
        return ConfigFileInvalidError(file_path, parse_error)

    if isinstance(error, ValidationError) and error.errors():
        field, value, reason = _summarize_validation_error(error)
        return ConfigValidationError(
            field=field,
            value=value,
            error_msg=reason,
            file_path=file_path
        )

    return ConfigValidationError(
        field="unknown",
        value=None,
        error_msg=str(error),
        file_path=file_path
    )


def wrap_state_error(error: Exception, source: str) -> ScopeLightError:
    """
    Convert Pydantic validation errors on imported state to ScopeLight exceptions.

    Args:
        error: The Pydantic ValidationError raised while parsing the state
        source: File path or label of the payload

    Returns:
        A StateImportError with appropriate type and message
    """
    parse_error = _extract_json_error(error)
    if parse_error is not None:
        return StateFileInvalidError(source, parse_error)

    if isinstance(error, ValidationError) and error.errors():
        field, value, reason = _summarize_validation_error(error)
        return StateValidationError(field=field, value=value, error_msg=reason, source=source)

    return StateValidationError(field="unknown", value=None, error_msg=str(error), source=source)


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, ScopeLightError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None
