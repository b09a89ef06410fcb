"""
Custom exception hierarchy for g13profile.

## Exception Hierarchy

```
G13ProfileError (base, exit 1)
├── ConfigurationError (exit 2)
│   ├── ConfigDirectoryError
│   ├── ProfileNotFoundError
│   ├── ConfigFileInvalidError
│   └── ConfigSemanticError (exit 3)
│       ├── ConfigValidationError
│       ├── NoModesDefinedError
│       └── StartingModeUndefinedError
└── DaemonError (exit 4)
    ├── StartupTimeoutError
    └── DaemonLaunchError
```

All custom exceptions inherit from `G13ProfileError`, which provides
`user_message`, `technical_message`, `recovery_hint` and the class
attribute `exit_code` the CLI exits with.

### Example: Undefined Starting Mode

```python
from g13profile.exceptions import StartingModeUndefinedError

raise StartingModeUndefinedError("gaming", ["base", "nav"])

# User sees: "startingMode 'gaming' is undefined!"
# Recovery hint: "Set startingMode to one of: base, nav"
```
"""

from .base import G13ProfileError
from .config import (
    ConfigDirectoryError,
    ConfigFileInvalidError,
    ConfigSemanticError,
    ConfigurationError,
    ConfigValidationError,
    NoModesDefinedError,
    ProfileNotFoundError,
    StartingModeUndefinedError,
)
from .daemon import DaemonError, DaemonLaunchError, StartupTimeoutError
from .handlers import ErrorContext, format_error_for_display, wrap_pydantic_error

__all__ = [
    # Config
    "ConfigDirectoryError",
    "ConfigFileInvalidError",
    "ConfigSemanticError",
    "ConfigValidationError",
    "ConfigurationError",
    # Daemon
    "DaemonError",
    "DaemonLaunchError",
    "ErrorContext",
    # Base
    "G13ProfileError",
    "NoModesDefinedError",
    "ProfileNotFoundError",
    "StartingModeUndefinedError",
    "StartupTimeoutError",
    # Handlers
    "format_error_for_display",
    "wrap_pydantic_error",
]
