"""
Custom exception hierarchy for ScopeLight.

## Exception Hierarchy

```
ScopeLightError (base)
├── ConfigurationError
│   ├── ConfigFileInvalidError
│   └── ConfigValidationError
└── StateImportError
    ├── StateFileInvalidError
    └── StateValidationError
```

All custom exceptions inherit from `ScopeLightError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: Whether the error can be recovered from
- `recovery_hint`: Optional suggestion for how to fix the issue

### Example: Rejected State Import

```python
from scopelight.exceptions import StateValidationError

raise StateValidationError(
    field="config.pattern",
    value="disco",
    error_msg="Input should be 'solid', 'pulse', 'rainbow' or 'strobe'",
    source="/path/to/state.json",
)
```

Out-of-range pixel indices are programming errors and raise the builtin
`IndexError` and are not part of this hierarchy.
"""

from .base import ScopeLightError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import (
    ErrorContext,
    format_error_for_display,
    handle_errors,
    wrap_pydantic_error,
    wrap_state_error,
)
from .state import StateFileInvalidError, StateImportError, StateValidationError

__all__ = [
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    "ErrorContext",
    # Base
    "ScopeLightError",
    # State
    "StateFileInvalidError",
    "StateImportError",
    "StateValidationError",
    "format_error_for_display",
    # Handlers
    "handle_errors",
    "wrap_pydantic_error",
    "wrap_state_error",
]
