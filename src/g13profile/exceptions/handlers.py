"""
Helpers that turn low-level failures into G13ProfileError.

Files, pipes and processes raise OSError, TOMLDecodeError or pydantic's
ValidationError. The loaders and the daemon layer convert those into the
exceptions in this package, and the CLI only ever prints
``error.user_message`` and exits with ``error.exit_code``.

### Example: Profile Validation

```python
try:
    profile = Profile.model_validate(data)
except ValidationError as e:
    raise wrap_pydantic_error(e, str(path)) from e
```
"""

import logging
from typing import Any, Optional

from .base import G13ProfileError
from .config import ConfigValidationError

logger = logging.getLogger(__name__)


class ErrorContext:
    """
    Log the outcome of a critical section.

    Failures are logged once, with a traceback unless they are already a
    G13ProfileError, and re-raised by default.

    Example:
        ```python
        with ErrorContext("launch g13d", logger_instance=logger):
            process = subprocess.Popen(command)
        ```
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
        re_raise: bool = True
    ):
        """
        Args:
            operation: What is being attempted, phrased to follow "Failed to"
            logger_instance: Logger to report to (defaults to this module's)
            re_raise: Propagate the exception after logging it
        """
        self.operation = operation
        self.logger = logger_instance or logger
        self.re_raise = re_raise
        self.error: Optional[BaseException] = None

    def __enter__(self):
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_val is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        self.error = exc_val
        if isinstance(exc_val, G13ProfileError):
            self.logger.error(f"Failed to {self.operation}: {exc_val.technical_message}")
        else:
            self.logger.error(f"Failed to {self.operation}: {exc_val}", exc_info=True)
        return not self.re_raise


def _field_path(loc: tuple[Any, ...]) -> str:
    """Dotted path as written in the file, e.g. ``mode.base.keys.g1``."""
    return ".".join(str(part) for part in loc) or "unknown"


def wrap_pydantic_error(error: Exception, file_path: str) -> G13ProfileError:
    """
    Convert a pydantic ValidationError into a ConfigValidationError.

    A single failure names its field and offending value; several failures
    are listed one per line under the field name "multiple fields".

    Args:
        error: The exception raised while validating
        file_path: File the data came from

    Returns:
        ConfigValidationError (exit status 3)
    """
    from pydantic import ValidationError

    if not isinstance(error, ValidationError) or not error.errors():
        return ConfigValidationError("unknown", None, str(error), file_path)

    errors = error.errors()
    if len(errors) == 1:
        (only,) = errors
        return ConfigValidationError(
            field=_field_path(only.get("loc", ())),
            value=only.get("input"),
            error_msg=only.get("msg", "validation failed"),
            file_path=file_path,
        )

    lines = [f"  - {_field_path(e.get('loc', ()))}: {e.get('msg', 'validation failed')}" for e in errors]
    return ConfigValidationError(
        field="multiple fields",
        value=None,
        error_msg=f"{len(errors)} validation errors:\n" + "\n".join(lines),
        file_path=file_path,
    )


def format_error_for_display(error: Exception, with_hint: bool = False) -> str:
    """
    Get the text shown to the operator for an error.

    Errors from outside this package are shown as ``TypeName: message``.

    Args:
        error: The exception to describe
        with_hint: Append the recovery hint of g13profile errors
    """
    if isinstance(error, G13ProfileError):
        return error.get_full_message() if with_hint else error.user_message
    return f"{type(error).__name__}: {error}"
